# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant-level lease classification.

Rules, evaluated in order against the property's calendar day:

1. today < lease_start                       -> UPCOMING
2. today > lease_end                         -> EXPIRED
3. lease_end - today <= renewal_window_days  -> EXPIRING
4. otherwise                                 -> ACTIVE

A missing date skips the rules that need it, so a lease with no start is
never upcoming and a started lease with no end stays active.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Any, Optional

from ..primitives import (
    DEFAULT_RENEWAL_WINDOW_DAYS,
    BadgeVariantEnum,
    EngineSettings,
    LeaseStatusEnum,
    coerce_date,
)
from .tenant import TenantLease

# Single source of truth for badge rendering
_BADGE_VARIANTS = MappingProxyType(
    {
        LeaseStatusEnum.ACTIVE: BadgeVariantEnum.DEFAULT,
        LeaseStatusEnum.UPCOMING: BadgeVariantEnum.SECONDARY,
        LeaseStatusEnum.EXPIRING: BadgeVariantEnum.OUTLINE,
        LeaseStatusEnum.EXPIRED: BadgeVariantEnum.DESTRUCTIVE,
    }
)


def classify_lease(
    lease_start: Any,
    lease_end: Any,
    today: date,
    renewal_window_days: int = DEFAULT_RENEWAL_WINDOW_DAYS,
) -> LeaseStatusEnum:
    """
    Classify a tenant lease on a given calendar day.

    Args:
        lease_start: First lease day (date or raw value; unparseable means missing)
        lease_end: Last lease day (date or raw value; unparseable means missing)
        today: Calendar day in the property's timezone
        renewal_window_days: Days before the end at which the lease is expiring

    Returns:
        LeaseStatusEnum for the lease on ``today``
    """
    start: Optional[date] = coerce_date(lease_start)
    end: Optional[date] = coerce_date(lease_end)

    if start is not None and today < start:
        return LeaseStatusEnum.UPCOMING
    if end is not None and today > end:
        return LeaseStatusEnum.EXPIRED
    if end is not None and (end - today).days <= renewal_window_days:
        return LeaseStatusEnum.EXPIRING
    return LeaseStatusEnum.ACTIVE


def classify_tenant_lease(
    lease: TenantLease,
    today: date,
    settings: Optional[EngineSettings] = None,
) -> LeaseStatusEnum:
    """Classify a ``TenantLease`` using the settings' renewal window."""
    settings = settings or EngineSettings()
    return classify_lease(
        lease.lease_start,
        lease.lease_end,
        today,
        renewal_window_days=settings.renewal_window_days,
    )


def badge_variant_for(status: LeaseStatusEnum) -> BadgeVariantEnum:
    """Badge variant token for a lease status."""
    return _BADGE_VARIANTS[LeaseStatusEnum(status)]
