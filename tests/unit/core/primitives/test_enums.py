# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from leaseline.core.primitives import (
    BadgeVariantEnum,
    EffectiveStatus,
    LeaseStatusEnum,
    MaintenanceStatusEnum,
    UnitStatusEnum,
)


def test_enum_member_values():
    """Test that key enum members have the correct string value."""
    assert UnitStatusEnum.VACANT == "vacant"
    assert UnitStatusEnum.REPAIRS == "repairs"
    assert LeaseStatusEnum.EXPIRING == "expiring"
    assert BadgeVariantEnum.DESTRUCTIVE == "destructive"
    assert MaintenanceStatusEnum.IN_PROGRESS == "in_progress"


def test_effective_status_is_closed_unit_status_set():
    assert EffectiveStatus is UnitStatusEnum
    assert {s.value for s in EffectiveStatus} == {"vacant", "occupied", "repairs"}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("occupied", UnitStatusEnum.OCCUPIED),
        ("  Repairs ", UnitStatusEnum.REPAIRS),
        (UnitStatusEnum.VACANT, UnitStatusEnum.VACANT),
        ("renovating", None),
        ("", None),
        (None, None),
        (3, None),
    ],
)
def test_unit_status_from_value(raw, expected):
    assert UnitStatusEnum.from_value(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("pending", MaintenanceStatusEnum.PENDING),
        ("in_progress", MaintenanceStatusEnum.IN_PROGRESS),
        ("In Progress", MaintenanceStatusEnum.IN_PROGRESS),
        ("in-progress", MaintenanceStatusEnum.IN_PROGRESS),
        ("completed", MaintenanceStatusEnum.COMPLETED),
        ("on_hold", None),
        (None, None),
    ],
)
def test_maintenance_status_from_value(raw, expected):
    assert MaintenanceStatusEnum.from_value(raw) is expected


def test_only_pending_and_in_progress_are_active():
    active = {s for s in MaintenanceStatusEnum if s.is_active}
    assert active == {MaintenanceStatusEnum.PENDING, MaintenanceStatusEnum.IN_PROGRESS}
