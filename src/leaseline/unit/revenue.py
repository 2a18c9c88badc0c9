# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recognized and expected rent per unit.

Revenue does not reuse the resolved effective status: a unit in repairs can
still have a paying tenant mid-lease, and rent continues during maintenance.
Both figures are per unit; summing across a portfolio is the caller's job.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import computed_field

from ..core.primitives import EngineSettings, Model, PositiveFloat
from .model import Unit
from .status import has_tenancy


class RevenueResult(Model):
    """
    Rent figures for one unit on one calendar day.

    Attributes:
        monthly_revenue: Rent recognized from an active or started tenancy
        expected_revenue: Planning figure for any unit with a configured lease
    """

    monthly_revenue: PositiveFloat = 0.0
    expected_revenue: PositiveFloat = 0.0

    @computed_field
    @property
    def pending_revenue(self) -> float:
        """Expected rent not yet recognized (e.g. an incoming lease before its start)."""
        return max(self.expected_revenue - self.monthly_revenue, 0.0)


def compute_revenue(
    unit: Unit,
    today: date,
    settings: Optional[EngineSettings] = None,
) -> RevenueResult:
    """
    Compute recognized and expected rent for a unit.

    - ``monthly_revenue`` is the required rent when the current window is
      active or the incoming lease has started, whatever the maintenance
      signal says; otherwise 0.
    - ``expected_revenue`` is the required rent when the unit has any
      configured lease window (current or incoming, active or not), so it
      does not drop to 0 between booking an incoming lease and its start.
      Recognized rent implies a configured window, so expected revenue
      never falls below monthly revenue unless the settings suppress it
      during maintenance.

    Missing rent contributes 0 to both figures.

    Args:
        unit: Unit record (never mutated)
        today: Calendar day in the owning property's timezone
        settings: Engine settings; only the maintenance/expected policy is read

    Returns:
        RevenueResult with both figures
    """
    settings = settings or EngineSettings()
    rent = unit.required_rent or 0.0

    recognized = has_tenancy(unit, today)
    monthly = rent if recognized else 0.0

    expected = rent if unit.has_configured_lease else 0.0
    if settings.maintenance_suppresses_expected_revenue and unit.has_active_maintenance:
        expected = 0.0

    return RevenueResult(monthly_revenue=monthly, expected_revenue=expected)
