# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease window model and tenant lease classification.
"""

from .classifier import (
    DEFAULT_RENEWAL_WINDOW_DAYS,
    badge_variant_for,
    classify_lease,
    classify_tenant_lease,
)
from .tenant import TenantLease
from .window import LeaseWindow

__all__ = [
    "DEFAULT_RENEWAL_WINDOW_DAYS",
    "LeaseWindow",
    "TenantLease",
    "badge_variant_for",
    "classify_lease",
    "classify_tenant_lease",
]
