# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from dateutil.relativedelta import relativedelta
from pydantic import computed_field, model_validator

from ..primitives import Model, coerce_date, coerce_text


class LeaseWindow(Model):
    """
    A tenancy's date range on a unit.

    A window only exists when a tenant, a start and an end are all known and
    the start is not after the end. Use ``from_fields`` to build one from raw
    row values; it returns None instead of raising when the window is absent
    or malformed.

    Attributes:
        tenant: Display name of the tenant
        start: First day of the lease (inclusive)
        end: Last day of the lease (inclusive)

    Examples:
        >>> window = LeaseWindow(tenant="Alice", start=date(2024, 1, 1), end=date(2024, 12, 31))
        >>> window.is_active_on(date(2024, 6, 1))
        True
        >>> LeaseWindow.from_fields("Alice", "2024-12-31", "2024-01-01") is None
        True
    """

    tenant: str
    start: date
    end: date

    @model_validator(mode="after")
    def _check_date_ordering(self) -> "LeaseWindow":
        if self.start > self.end:
            raise ValueError(
                f"Lease window for {self.tenant!r} ends ({self.end}) before it starts ({self.start})"
            )
        return self

    @classmethod
    def from_fields(cls, tenant: Any, start: Any, end: Any) -> Optional["LeaseWindow"]:
        """Build a window from raw values, or None if any part is missing or out of order."""
        tenant_name = coerce_text(tenant)
        start_date = coerce_date(start)
        end_date = coerce_date(end)
        if tenant_name is None or start_date is None or end_date is None:
            return None
        if start_date > end_date:
            return None
        return cls(tenant=tenant_name, start=start_date, end=end_date)

    def is_active_on(self, day: date) -> bool:
        """True when ``start <= day <= end``."""
        return self.start <= day <= self.end

    def has_started_by(self, day: date) -> bool:
        return self.start <= day

    def has_ended_before(self, day: date) -> bool:
        return self.end < day

    def days_remaining(self, day: date) -> int:
        """Days from ``day`` to the last lease day; negative once the lease has ended."""
        return (self.end - day).days

    @computed_field
    @property
    def term_months(self) -> int:
        """Whole calendar months covered by the lease (a Jan 1 - Dec 31 lease is 12)."""
        delta = relativedelta(self.end + relativedelta(days=1), self.start)
        return delta.years * 12 + delta.months
