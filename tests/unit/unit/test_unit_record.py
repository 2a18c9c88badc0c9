# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from leaseline.core.lease import LeaseWindow
from leaseline.core.primitives import UnitStatusEnum
from leaseline.unit import Unit


def test_from_raw_database_row():
    """A units table row can be passed straight in; unused columns are dropped."""
    row = {
        "id": "u-101",
        "property_id": "p-1",
        "unit_number": "101",
        "status": "occupied",
        "status_until": None,
        "required_rent": "1500.00",
        "current_tenant": "Alice",
        "current_lease_start": "2024-01-01",
        "current_lease_end": "2024-12-31",
        "incoming_tenant": "",
        "incoming_lease_start": None,
        "incoming_lease_end": None,
        "created_at": "2023-11-02T10:00:00Z",
    }
    unit = Unit.from_record(row, has_active_maintenance=False)

    assert unit.unit_id == "u-101"
    assert unit.stored_status is UnitStatusEnum.OCCUPIED
    assert unit.required_rent == 1500.0
    assert unit.current_lease_start == date(2024, 1, 1)
    assert unit.incoming_tenant is None
    assert unit.has_active_maintenance is False


def test_malformed_values_become_absent():
    unit = Unit.from_record(
        {
            "status": "being painted",
            "status_until": "someday",
            "required_rent": "-50",
            "current_tenant": "   ",
            "current_lease_start": "2024-02-30",
            "current_lease_end": 12,
        }
    )
    assert unit.stored_status is None
    assert unit.status_until is None
    assert unit.required_rent is None
    assert unit.current_tenant is None
    assert unit.current_lease_start is None
    assert unit.current_lease_end is None
    assert unit.current_window() is None


def test_maintenance_flag_argument_overrides_row():
    unit = Unit.from_record({"has_active_maintenance": False}, has_active_maintenance=True)
    assert unit.has_active_maintenance is True


def test_missing_maintenance_flag_defaults_false():
    assert Unit.from_record({"has_active_maintenance": None}).has_active_maintenance is False


@pytest.mark.parametrize(
    "raw, expected",
    [("maybe", False), ("true", True), ("FALSE", False), (1, True), (0, False), ([], False)],
)
def test_maintenance_flag_is_read_leniently(raw, expected):
    unit = Unit.from_record({"has_active_maintenance": raw})
    assert unit.has_active_maintenance is expected


def test_keyword_construction_by_field_name():
    unit = Unit(stored_status="repairs", unit_id="u-1")
    assert unit.stored_status is UnitStatusEnum.REPAIRS
    assert unit.unit_id == "u-1"


def test_unit_is_frozen():
    unit = Unit()
    with pytest.raises(ValidationError):
        unit.stored_status = UnitStatusEnum.OCCUPIED


def test_windows(current_lease_unit, incoming_lease_unit):
    assert current_lease_unit().current_window() == LeaseWindow(
        tenant="Alice", start=date(2024, 1, 1), end=date(2024, 12, 31)
    )
    assert current_lease_unit().incoming_window() is None
    assert incoming_lease_unit().incoming_window().tenant == "Bob"


def test_has_configured_lease(make_unit, current_lease_unit, incoming_lease_unit):
    assert current_lease_unit().has_configured_lease
    assert incoming_lease_unit().has_configured_lease
    assert not make_unit().has_configured_lease
    # a tenant name alone is not a window
    assert not make_unit(current_tenant="Alice").has_configured_lease
