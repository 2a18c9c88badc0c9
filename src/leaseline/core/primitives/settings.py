# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, field_validator

from .calendar import resolve_timezone
from .model import Model
from .types import PositiveInt

DEFAULT_RENEWAL_WINDOW_DAYS = 90


class EngineSettings(Model):
    """
    Configuration for lease lifecycle and revenue derivation.

    Settings are passed explicitly to every call that needs them; there is no
    global or environment-driven configuration.

    Usage Examples:
        # Dashboard defaults
        settings = EngineSettings()

        # Portfolio where owners review renewals four months out
        settings = EngineSettings(renewal_window_days=120)

        # Conservative planning: a unit under repair is not expected to pay
        settings = EngineSettings(maintenance_suppresses_expected_revenue=True)
    """

    renewal_window_days: PositiveInt = Field(
        default=DEFAULT_RENEWAL_WINDOW_DAYS,
        description="Days before lease end at which a tenant lease is classified as expiring.",
    )
    default_timezone: str = Field(
        default="UTC",
        description="IANA timezone used for properties that do not declare one.",
    )
    maintenance_suppresses_expected_revenue: bool = Field(
        default=False,
        description=(
            "If True, expected revenue is zero while a unit has active maintenance. "
            "Recognized monthly revenue is never affected by maintenance."
        ),
    )
    occupancy_counts_repairs: bool = Field(
        default=True,
        description=(
            "If True, units resolved as repairs count toward occupied units in "
            "occupancy rates (only vacant units reduce occupancy)."
        ),
    )

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        resolve_timezone(v)
        return v
