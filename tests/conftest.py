# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for leaseline testing.

Factories for unit rows and pinned clocks, so tests never depend on the
wall clock.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

import pytest

from leaseline.core.primitives import EngineSettings, FixedClock
from leaseline.unit import Unit


def _build_unit(defaults: dict, overrides: dict) -> Unit:
    data = {"unit_id": "unit-1", "property_id": "prop-1", "status": "vacant"}
    data.update(defaults)
    data.update(overrides)
    return Unit.from_record(data)


@pytest.fixture
def make_unit():
    """
    Factory for a unit with no lease windows, no rent and no maintenance.

    Example:
        unit = make_unit(current_tenant="Alice", required_rent=1500)
    """

    def _make(**overrides: Any) -> Unit:
        return _build_unit({}, overrides)

    return _make


@pytest.fixture
def current_lease_unit():
    """Factory for a unit with Alice's 2024 lease as the current window and $1,500 rent."""

    def _make(**overrides: Any) -> Unit:
        return _build_unit(
            {
                "current_tenant": "Alice",
                "current_lease_start": date(2024, 1, 1),
                "current_lease_end": date(2024, 12, 31),
                "required_rent": 1500.0,
                "status": "occupied",
            },
            overrides,
        )

    return _make


@pytest.fixture
def incoming_lease_unit():
    """Factory for a unit with Bob's lease starting 2024-06-01 as the incoming window."""

    def _make(**overrides: Any) -> Unit:
        return _build_unit(
            {
                "incoming_tenant": "Bob",
                "incoming_lease_start": date(2024, 6, 1),
                "incoming_lease_end": date(2025, 5, 31),
                "required_rent": 1800.0,
            },
            overrides,
        )

    return _make


@pytest.fixture
def clock_at():
    """Factory for a clock pinned to ``datetime(*args)`` in UTC."""

    def _make(*args: int) -> FixedClock:
        return FixedClock(instant=datetime(*args, tzinfo=timezone.utc))

    return _make


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings()


@pytest.fixture
def mid_year() -> date:
    return date(2024, 6, 1)
