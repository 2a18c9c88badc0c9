# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class UnitStatusEnum(str, Enum):
    """
    Occupancy state of a unit.

    The same closed set is used for the persisted hint (``Unit.stored_status``)
    and for the derived effective status, but the two are never the same field.

    Options:
        VACANT: No current evidence of tenancy
        OCCUPIED: A lease is active, or an incoming lease has started
        REPAIRS: Active maintenance, or a time-boxed manual override
    """

    VACANT = "vacant"
    OCCUPIED = "occupied"
    REPAIRS = "repairs"

    @classmethod
    def from_value(cls, value: object) -> Optional["UnitStatusEnum"]:
        """Lenient lookup for raw column values; unknown values map to None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


# Derived, never-persisted occupancy state of a unit on a given calendar day.
EffectiveStatus = UnitStatusEnum


class LeaseStatusEnum(str, Enum):
    """
    Tenant-level lease classification shown as a badge.

    Options:
        UPCOMING: Lease has not started yet
        ACTIVE: Lease is running with more than the renewal window remaining
        EXPIRING: Lease is running and ends within the renewal window
        EXPIRED: Lease end date has passed
    """

    UPCOMING = "upcoming"
    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"


class BadgeVariantEnum(str, Enum):
    """Visual badge variant tokens understood by the UI layer."""

    DEFAULT = "default"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"
    OUTLINE = "outline"


class MaintenanceStatusEnum(str, Enum):
    """
    Workflow state of a maintenance request.

    Only PENDING and IN_PROGRESS count as active maintenance for a unit.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_active(self) -> bool:
        return self in (MaintenanceStatusEnum.PENDING, MaintenanceStatusEnum.IN_PROGRESS)

    @classmethod
    def from_value(cls, value: object) -> Optional["MaintenanceStatusEnum"]:
        """Lenient lookup; accepts 'in progress' and 'in-progress' spellings."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        for member in cls:
            if member.value == normalized:
                return member
        return None
