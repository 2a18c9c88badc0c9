# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
leaseline Core Framework

Primitives (calendar days, enums, settings) and the lease window model
shared by the unit resolver, revenue calculator and lease classifier.
"""

from . import lease, primitives
from .lease import (
    LeaseWindow,
    TenantLease,
    badge_variant_for,
    classify_lease,
    classify_tenant_lease,
)
from .primitives import (
    BadgeVariantEnum,
    Clock,
    EffectiveStatus,
    EngineSettings,
    FixedClock,
    LeaseStatusEnum,
    MaintenanceStatusEnum,
    SystemClock,
    UnitStatusEnum,
    calendar_date,
    today,
)

__all__ = [
    "lease",
    "primitives",
    "BadgeVariantEnum",
    "Clock",
    "EffectiveStatus",
    "EngineSettings",
    "FixedClock",
    "LeaseStatusEnum",
    "LeaseWindow",
    "MaintenanceStatusEnum",
    "SystemClock",
    "TenantLease",
    "UnitStatusEnum",
    "badge_variant_for",
    "calendar_date",
    "classify_lease",
    "classify_tenant_lease",
    "today",
]
