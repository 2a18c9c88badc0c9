# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from pydantic import field_validator

from ..primitives import RecordModel, coerce_date, coerce_money, coerce_text


class TenantLease(RecordModel):
    """
    A tenant's own lease record, as stored on the tenant row.

    Independent of the unit's current/incoming windows. Used for lease badges
    and, for properties without unit records (single-family), for revenue.

    Attributes:
        tenant_id: Identifier of the tenant row
        property_id: Owning property, used for grouping and timezone lookup
        name: Tenant display name
        lease_start: First lease day, None when missing or unparseable
        lease_end: Last lease day, None when missing or unparseable
        monthly_rent: Rent on the tenant row, None when missing
    """

    tenant_id: Optional[str] = None
    property_id: Optional[str] = None
    name: Optional[str] = None
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    monthly_rent: Optional[float] = None

    @field_validator("tenant_id", "property_id", "name", mode="before")
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("lease_start", "lease_end", mode="before")
    @classmethod
    def _dates(cls, v: Any) -> Optional[date]:
        return coerce_date(v)

    @field_validator("monthly_rent", mode="before")
    @classmethod
    def _rent(cls, v: Any) -> Optional[float]:
        return coerce_money(v)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "TenantLease":
        """Build from a raw tenant row; the row's ``id`` becomes ``tenant_id``."""
        data = dict(record)
        if "tenant_id" not in data and "id" in data:
            data["tenant_id"] = data["id"]
        return cls.model_validate(data)
