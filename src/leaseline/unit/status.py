# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Effective status resolution for units.

The persisted status column goes stale: leases start and end without anyone
rewriting the row. The effective status is derived on every call from the
lease windows, the maintenance signal and the manual override, using an
ordered rule chain where the first match wins:

1. Active maintenance                            -> REPAIRS
2. Current window active today                   -> OCCUPIED
3. Valid incoming window, start has passed      -> OCCUPIED
4. Stored REPAIRS with status_until >= today     -> REPAIRS
5. Anything else                                 -> VACANT

Rule 3 promotes an incoming lease without writing anything back; no batch
job is assumed to rewrite the current-tenant fields. Rule 5 overrides the
stored column, so a row that still says "occupied" from an old tenancy is
reported vacant.

All functions here are total: missing or malformed data fails the relevant
test and falls through to the next rule.
"""

from __future__ import annotations

from datetime import date

from ..core.primitives import EffectiveStatus, UnitStatusEnum
from .model import Unit


def is_current_lease_active(unit: Unit, today: date) -> bool:
    """True when the unit's current window exists and contains ``today``."""
    window = unit.current_window()
    return window is not None and window.is_active_on(today)


def has_incoming_lease_started(unit: Unit, today: date) -> bool:
    """
    True when the incoming window is valid and its start date has passed.

    The end date bounds validity only; a started window is not retired here.
    """
    window = unit.incoming_window()
    return window is not None and window.has_started_by(today)


def has_tenancy(unit: Unit, today: date) -> bool:
    """Shared temporal test for occupancy and recognized revenue (rules 2 and 3)."""
    return is_current_lease_active(unit, today) or has_incoming_lease_started(unit, today)


def has_active_override(unit: Unit, today: date) -> bool:
    """True while a manual repairs override has not yet reached its expiry."""
    return (
        unit.stored_status is UnitStatusEnum.REPAIRS
        and unit.status_until is not None
        and today <= unit.status_until
    )


def resolve_status(unit: Unit, today: date) -> EffectiveStatus:
    """
    Derive the authoritative occupancy state of a unit on a calendar day.

    Args:
        unit: Unit record (never mutated)
        today: Calendar day in the owning property's timezone

    Returns:
        UnitStatusEnum.VACANT, OCCUPIED or REPAIRS
    """
    if unit.has_active_maintenance:
        return UnitStatusEnum.REPAIRS
    if has_tenancy(unit, today):
        return UnitStatusEnum.OCCUPIED
    if has_active_override(unit, today):
        return UnitStatusEnum.REPAIRS
    return UnitStatusEnum.VACANT


def is_stale(unit: Unit, today: date) -> bool:
    """
    True when the stored status disagrees with the derived one.

    Reported for visibility only; the engine never rewrites the row. A unit
    with no stored status is not considered stale.
    """
    if unit.stored_status is None:
        return False
    return unit.stored_status is not resolve_status(unit, today)
