# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio-level aggregation over the unit and lease derivations.
"""

from .portfolio import (
    UNASSIGNED_PROPERTY,
    PortfolioSnapshot,
    TenantSnapshot,
    UnitSnapshot,
    evaluate_portfolio,
    evaluate_unit,
    occupancy_by_property,
)

__all__ = [
    "UNASSIGNED_PROPERTY",
    "PortfolioSnapshot",
    "TenantSnapshot",
    "UnitSnapshot",
    "evaluate_portfolio",
    "evaluate_unit",
    "occupancy_by_property",
]
