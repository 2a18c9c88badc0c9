# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
leaseline Core Primitives

Essential building blocks shared by every lease and unit calculation.
Handles calendar days and clocks, enums, settings and lenient input coercion.
"""

from .calendar import (
    Clock,
    FixedClock,
    SystemClock,
    calendar_date,
    resolve_timezone,
    today,
)
from .enums import (
    BadgeVariantEnum,
    EffectiveStatus,
    LeaseStatusEnum,
    MaintenanceStatusEnum,
    UnitStatusEnum,
)
from .model import Model, RecordModel
from .settings import DEFAULT_RENEWAL_WINDOW_DAYS, EngineSettings
from .types import PositiveFloat, PositiveInt
from .validation import coerce_date, coerce_flag, coerce_money, coerce_text

__all__ = [
    # Core models
    "Model",
    "RecordModel",
    # Settings
    "DEFAULT_RENEWAL_WINDOW_DAYS",
    "EngineSettings",
    # Calendar
    "Clock",
    "FixedClock",
    "SystemClock",
    "calendar_date",
    "resolve_timezone",
    "today",
    # Enums
    "BadgeVariantEnum",
    "EffectiveStatus",
    "LeaseStatusEnum",
    "MaintenanceStatusEnum",
    "UnitStatusEnum",
    # Types
    "PositiveFloat",
    "PositiveInt",
    # Validation
    "coerce_date",
    "coerce_flag",
    "coerce_money",
    "coerce_text",
]
