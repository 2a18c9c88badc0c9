# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, Field, field_validator

from ..core.lease import LeaseWindow
from ..core.primitives import (
    RecordModel,
    UnitStatusEnum,
    coerce_date,
    coerce_flag,
    coerce_money,
    coerce_text,
)


class Unit(RecordModel):
    """
    A leasable unit as read from the units table.

    The engine only reads units; it never writes a derived status back.
    ``stored_status`` is the persisted column and is treated as a hint: once a
    lease window or maintenance signal is present, the resolver ignores it.

    Construction is lenient so that a raw row can be passed straight in:

    - unknown ``status`` strings become None
    - blank tenant names become None
    - unparseable dates become None (the window is simply absent)
    - negative or unparseable rent becomes None
    - an unreadable maintenance flag becomes False

    Attributes:
        unit_id: Identifier of the unit row
        property_id: Owning property; selects the timezone for day boundaries
        stored_status: Persisted status column (alias ``status``)
        status_until: Expiry of a manual repairs override
        required_rent: Monthly rent asked for the unit
        current_tenant / current_lease_start / current_lease_end: Current window
        incoming_tenant / incoming_lease_start / incoming_lease_end: Incoming window
        has_active_maintenance: True when a pending or in-progress request exists
    """

    unit_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("unit_id", "id")
    )
    property_id: Optional[str] = None
    stored_status: Optional[UnitStatusEnum] = Field(
        default=None, validation_alias=AliasChoices("stored_status", "status")
    )
    status_until: Optional[date] = None
    required_rent: Optional[float] = None

    current_tenant: Optional[str] = None
    current_lease_start: Optional[date] = None
    current_lease_end: Optional[date] = None

    incoming_tenant: Optional[str] = None
    incoming_lease_start: Optional[date] = None
    incoming_lease_end: Optional[date] = None

    has_active_maintenance: bool = False

    @field_validator("unit_id", "property_id", "current_tenant", "incoming_tenant", mode="before")
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("stored_status", mode="before")
    @classmethod
    def _status(cls, v: Any) -> Optional[UnitStatusEnum]:
        return UnitStatusEnum.from_value(v)

    @field_validator(
        "status_until",
        "current_lease_start",
        "current_lease_end",
        "incoming_lease_start",
        "incoming_lease_end",
        mode="before",
    )
    @classmethod
    def _dates(cls, v: Any) -> Optional[date]:
        return coerce_date(v)

    @field_validator("required_rent", mode="before")
    @classmethod
    def _rent(cls, v: Any) -> Optional[float]:
        return coerce_money(v)

    @field_validator("has_active_maintenance", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return coerce_flag(v)

    @classmethod
    def from_record(
        cls, record: Mapping[str, Any], has_active_maintenance: Optional[bool] = None
    ) -> "Unit":
        """
        Build a unit from a raw database row.

        Args:
            record: Row mapping; extra columns are ignored
            has_active_maintenance: Overrides any flag present in the row
        """
        data = dict(record)
        if has_active_maintenance is not None:
            data["has_active_maintenance"] = has_active_maintenance
        return cls.model_validate(data)

    def current_window(self) -> Optional[LeaseWindow]:
        return LeaseWindow.from_fields(
            self.current_tenant, self.current_lease_start, self.current_lease_end
        )

    def incoming_window(self) -> Optional[LeaseWindow]:
        return LeaseWindow.from_fields(
            self.incoming_tenant, self.incoming_lease_start, self.incoming_lease_end
        )

    @property
    def has_configured_lease(self) -> bool:
        """True when either the current or the incoming window is fully configured."""
        return self.current_window() is not None or self.incoming_window() is not None
