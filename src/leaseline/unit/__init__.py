# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit-level derivations: effective occupancy status and rent figures.
"""

from .maintenance import apply_maintenance_flags, units_with_active_maintenance
from .model import Unit
from .revenue import RevenueResult, compute_revenue
from .status import (
    has_active_override,
    has_incoming_lease_started,
    has_tenancy,
    is_current_lease_active,
    is_stale,
    resolve_status,
)

__all__ = [
    "RevenueResult",
    "Unit",
    "apply_maintenance_flags",
    "compute_revenue",
    "has_active_override",
    "has_incoming_lease_started",
    "has_tenancy",
    "is_current_lease_active",
    "is_stale",
    "resolve_status",
    "units_with_active_maintenance",
]
