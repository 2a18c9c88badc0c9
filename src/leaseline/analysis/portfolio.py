# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio roll-up of unit occupancy, rent and tenant lease badges.

Every dashboard, analytics and financial view performs the same pass:

1. Flag units that have active maintenance
2. Sample the clock once and derive each property's local calendar day
3. Resolve every unit's effective status and rent figures on that day
4. Classify tenant leases, adding rent for properties without unit records
5. Sum the results into occupancy and revenue totals

The clock is read exactly once per pass, so a long pass cannot see midnight
arrive halfway through and evaluate some units on a different day.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd
from pydantic import Field, computed_field

from ..core.lease import TenantLease, badge_variant_for, classify_tenant_lease
from ..core.primitives import (
    BadgeVariantEnum,
    Clock,
    EngineSettings,
    LeaseStatusEnum,
    Model,
    PositiveFloat,
    PositiveInt,
    UnitStatusEnum,
    calendar_date,
)
from ..unit import (
    Unit,
    apply_maintenance_flags,
    compute_revenue,
    is_stale,
    resolve_status,
    units_with_active_maintenance,
)

logger = logging.getLogger(__name__)

UNASSIGNED_PROPERTY = "unassigned"

UNIT_FRAME_COLUMNS = [
    "unit_id",
    "property_id",
    "day",
    "stored_status",
    "effective_status",
    "counts_as_occupied",
    "is_stale",
    "monthly_revenue",
    "expected_revenue",
]


class UnitSnapshot(Model):
    """Derived state of one unit on its property's calendar day."""

    unit_id: Optional[str] = None
    property_id: Optional[str] = None
    day: date
    stored_status: Optional[UnitStatusEnum] = None
    effective_status: UnitStatusEnum
    counts_as_occupied: bool
    is_stale: bool
    monthly_revenue: PositiveFloat = 0.0
    expected_revenue: PositiveFloat = 0.0


class TenantSnapshot(Model):
    """Lease badge and revenue contribution of one tenant."""

    tenant_id: Optional[str] = None
    property_id: Optional[str] = None
    name: Optional[str] = None
    day: date
    lease_status: LeaseStatusEnum
    badge_variant: BadgeVariantEnum
    monthly_revenue: PositiveFloat = 0.0


class PortfolioSnapshot(Model):
    """
    Occupancy and revenue totals for a set of units and tenants at one instant.

    Attributes:
        as_of: The single instant every unit was evaluated against
        total_units: Number of unit records evaluated
        occupied_units: Units counted toward occupancy (see EngineSettings)
        vacant_units / repairs_units: Units by effective status
        stale_units: Units whose stored status disagrees with the derived one
        monthly_revenue: Recognized rent, including single-family tenants
        expected_revenue: Planning rent, including single-family tenants
        expiring_leases: Tenant leases inside the renewal window
        units / tenants: Per-record snapshots
    """

    as_of: datetime
    total_units: PositiveInt = 0
    occupied_units: PositiveInt = 0
    vacant_units: PositiveInt = 0
    repairs_units: PositiveInt = 0
    stale_units: PositiveInt = 0
    monthly_revenue: PositiveFloat = 0.0
    expected_revenue: PositiveFloat = 0.0
    expiring_leases: PositiveInt = 0
    units: List[UnitSnapshot] = Field(default_factory=list)
    tenants: List[TenantSnapshot] = Field(default_factory=list)

    @computed_field
    @property
    def occupancy_rate(self) -> float:
        """Occupied units over total units; 0.0 for an empty portfolio."""
        if self.total_units == 0:
            return 0.0
        return self.occupied_units / self.total_units

    def to_dataframe(self) -> pd.DataFrame:
        """One row per unit, with enum columns as their string values."""
        rows = [
            {
                "unit_id": u.unit_id,
                "property_id": u.property_id,
                "day": u.day,
                "stored_status": u.stored_status.value if u.stored_status else None,
                "effective_status": u.effective_status.value,
                "counts_as_occupied": u.counts_as_occupied,
                "is_stale": u.is_stale,
                "monthly_revenue": u.monthly_revenue,
                "expected_revenue": u.expected_revenue,
            }
            for u in self.units
        ]
        return pd.DataFrame(rows, columns=UNIT_FRAME_COLUMNS)


def evaluate_unit(
    unit: Unit, today: date, settings: Optional[EngineSettings] = None
) -> UnitSnapshot:
    """Resolve status and revenue for one unit on one calendar day."""
    settings = settings or EngineSettings()
    status = resolve_status(unit, today)
    revenue = compute_revenue(unit, today, settings)

    if settings.occupancy_counts_repairs:
        counts = status is not UnitStatusEnum.VACANT
    else:
        counts = status is UnitStatusEnum.OCCUPIED

    return UnitSnapshot(
        unit_id=unit.unit_id,
        property_id=unit.property_id,
        day=today,
        stored_status=unit.stored_status,
        effective_status=status,
        counts_as_occupied=counts,
        is_stale=is_stale(unit, today),
        monthly_revenue=revenue.monthly_revenue,
        expected_revenue=revenue.expected_revenue,
    )


def _as_unit(record: Any) -> Unit:
    if isinstance(record, Unit):
        return record
    return Unit.from_record(record)


def _as_tenant(record: Any) -> TenantLease:
    if isinstance(record, TenantLease):
        return record
    return TenantLease.from_record(record)


def evaluate_portfolio(
    units: Iterable[Any],
    *,
    clock: Clock,
    tenants: Iterable[Any] = (),
    maintenance_records: Optional[Iterable[Any]] = None,
    property_timezones: Optional[Mapping[str, str]] = None,
    settings: Optional[EngineSettings] = None,
) -> PortfolioSnapshot:
    """
    Evaluate a portfolio of units and tenants against a single instant.

    Args:
        units: ``Unit`` models or raw unit rows
        clock: Source of the instant; read exactly once
        tenants: ``TenantLease`` models or raw tenant rows
        maintenance_records: Loaded maintenance requests; pending and
            in-progress ones flag their unit as under active maintenance
        property_timezones: IANA timezone per property id; properties not
            listed use ``settings.default_timezone``
        settings: Engine settings

    Returns:
        PortfolioSnapshot with totals and per-record snapshots

    Raises:
        ValueError: If a property timezone is not a known IANA zone
    """
    settings = settings or EngineSettings()
    zones = dict(property_timezones or {})
    as_of = clock.now()

    days: Dict[str, date] = {}

    def day_for(property_id: Optional[str]) -> date:
        zone = zones.get(property_id) or settings.default_timezone
        if zone not in days:
            days[zone] = calendar_date(as_of, zone)
        return days[zone]

    unit_models = [_as_unit(u) for u in units]
    if maintenance_records is not None:
        active_ids = units_with_active_maintenance(maintenance_records)
        unit_models = apply_maintenance_flags(unit_models, active_ids)

    logger.debug(f"Evaluating {len(unit_models)} units as of {as_of.isoformat()}")

    unit_snapshots = [evaluate_unit(u, day_for(u.property_id), settings) for u in unit_models]

    properties_with_units = {u.property_id for u in unit_models if u.property_id is not None}
    tenant_snapshots: List[TenantSnapshot] = []
    for lease in (_as_tenant(t) for t in tenants):
        day = day_for(lease.property_id)
        status = classify_tenant_lease(lease, day, settings)

        # Tenants only carry revenue for properties without unit records
        rent = 0.0
        if (
            lease.property_id is not None
            and lease.property_id not in properties_with_units
            and lease.lease_start is not None
            and lease.lease_end is not None
            and status in (LeaseStatusEnum.ACTIVE, LeaseStatusEnum.EXPIRING)
        ):
            rent = lease.monthly_rent or 0.0

        tenant_snapshots.append(
            TenantSnapshot(
                tenant_id=lease.tenant_id,
                property_id=lease.property_id,
                name=lease.name,
                day=day,
                lease_status=status,
                badge_variant=badge_variant_for(status),
                monthly_revenue=rent,
            )
        )

    stale = sum(1 for s in unit_snapshots if s.is_stale)
    if stale:
        logger.debug(f"{stale} units have a stored status that disagrees with their lease data")

    tenant_rent = sum(t.monthly_revenue for t in tenant_snapshots)
    return PortfolioSnapshot(
        as_of=as_of,
        total_units=len(unit_snapshots),
        occupied_units=sum(1 for s in unit_snapshots if s.counts_as_occupied),
        vacant_units=sum(1 for s in unit_snapshots if s.effective_status is UnitStatusEnum.VACANT),
        repairs_units=sum(1 for s in unit_snapshots if s.effective_status is UnitStatusEnum.REPAIRS),
        stale_units=stale,
        monthly_revenue=sum(s.monthly_revenue for s in unit_snapshots) + tenant_rent,
        expected_revenue=sum(s.expected_revenue for s in unit_snapshots) + tenant_rent,
        expiring_leases=sum(
            1 for t in tenant_snapshots if t.lease_status is LeaseStatusEnum.EXPIRING
        ),
        units=unit_snapshots,
        tenants=tenant_snapshots,
    )


def occupancy_by_property(snapshot: PortfolioSnapshot) -> pd.DataFrame:
    """
    Per-property occupancy and revenue from a portfolio snapshot.

    Units without a property id are grouped under ``"unassigned"``.

    Returns:
        DataFrame indexed by property_id with columns total_units,
        occupied_units, occupancy_rate, monthly_revenue, expected_revenue
    """
    frame = snapshot.to_dataframe()
    frame["property_id"] = frame["property_id"].fillna(UNASSIGNED_PROPERTY)

    grouped = frame.groupby("property_id").agg(
        total_units=("effective_status", "size"),
        occupied_units=("counts_as_occupied", "sum"),
        monthly_revenue=("monthly_revenue", "sum"),
        expected_revenue=("expected_revenue", "sum"),
    )
    grouped["occupied_units"] = grouped["occupied_units"].astype(int)
    grouped["occupancy_rate"] = grouped["occupied_units"] / grouped["total_units"]
    return grouped[
        ["total_units", "occupied_units", "occupancy_rate", "monthly_revenue", "expected_revenue"]
    ]
