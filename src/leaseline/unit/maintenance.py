# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional

from ..core.primitives import MaintenanceStatusEnum, coerce_text
from .model import Unit

logger = logging.getLogger(__name__)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def units_with_active_maintenance(records: Iterable[Any]) -> FrozenSet[str]:
    """
    Collect the unit ids that have at least one active maintenance request.

    A request is active when its status is ``pending`` or ``in_progress``.
    Records are already-loaded rows (mappings or objects with ``unit_id`` and
    ``status``); records without a unit id or with an unknown status are
    skipped.
    """
    active = set()
    skipped = 0
    for record in records:
        unit_id = coerce_text(_field(record, "unit_id"))
        status = MaintenanceStatusEnum.from_value(_field(record, "status"))
        if unit_id is None or status is None:
            skipped += 1
            continue
        if status.is_active:
            active.add(unit_id)

    if skipped:
        logger.debug(f"Skipped {skipped} maintenance records without unit id or known status")
    return frozenset(active)


def apply_maintenance_flags(
    units: Iterable[Unit], active_unit_ids: Optional[Iterable[str]]
) -> List[Unit]:
    """
    Return copies of ``units`` with ``has_active_maintenance`` set from the id set.

    Units already flagged stay flagged. Inputs are never mutated.
    """
    active = frozenset(active_unit_ids or ())
    flagged = []
    for unit in units:
        is_active = unit.has_active_maintenance or (
            unit.unit_id is not None and unit.unit_id in active
        )
        if is_active != unit.has_active_maintenance:
            unit = unit.model_copy(update={"has_active_maintenance": is_active})
        flagged.append(unit)
    return flagged
