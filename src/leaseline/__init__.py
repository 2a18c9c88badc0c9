# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
leaseline - Lease Lifecycle & Revenue Derivation Engine

Reconciles a unit's stored status, its current and incoming lease windows,
a live maintenance signal and a manual status override into a single
effective occupancy state and recognized vs. expected rent figures. A sibling
classifier turns tenant leases into upcoming / active / expiring / expired
badges.

Key Entry Points:
- leaseline.resolve_status() - Effective occupancy status of a unit
- leaseline.compute_revenue() - Recognized and expected rent of a unit
- leaseline.classify_lease() - Tenant lease badge classification
- leaseline.evaluate_portfolio() - Occupancy and revenue roll-up at one instant

Example Usage:
    ```python
    from datetime import datetime, timezone
    from leaseline import FixedClock, Unit, compute_revenue, resolve_status, today

    clock = FixedClock(instant=datetime(2024, 6, 1, 12, tzinfo=timezone.utc))
    day = today(clock, "America/New_York")

    unit = Unit.from_record(row)
    print(resolve_status(unit, day), compute_revenue(unit, day).monthly_revenue)
    ```
"""

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "unit",
    # Frequently used names
    "EngineSettings",
    "FixedClock",
    "LeaseStatusEnum",
    "LeaseWindow",
    "SystemClock",
    "TenantLease",
    "Unit",
    "UnitStatusEnum",
    "badge_variant_for",
    "calendar_date",
    "classify_lease",
    "compute_revenue",
    "evaluate_portfolio",
    "resolve_status",
    "today",
]


_LAZY_MODULES = {
    "analysis": "leaseline.analysis",
    "core": "leaseline.core",
    "unit": "leaseline.unit",
}

_LAZY_ATTRIBUTES = {
    "EngineSettings": "leaseline.core.primitives",
    "FixedClock": "leaseline.core.primitives",
    "LeaseStatusEnum": "leaseline.core.primitives",
    "SystemClock": "leaseline.core.primitives",
    "UnitStatusEnum": "leaseline.core.primitives",
    "calendar_date": "leaseline.core.primitives",
    "today": "leaseline.core.primitives",
    "LeaseWindow": "leaseline.core.lease",
    "TenantLease": "leaseline.core.lease",
    "badge_variant_for": "leaseline.core.lease",
    "classify_lease": "leaseline.core.lease",
    "Unit": "leaseline.unit",
    "compute_revenue": "leaseline.unit",
    "resolve_status": "leaseline.unit",
    "evaluate_portfolio": "leaseline.analysis",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is not None:
        module = importlib.import_module(module_path)
        globals()[name] = module
        return module

    module_path = _LAZY_ATTRIBUTES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'leaseline' has no attribute '{name}'")
    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value
