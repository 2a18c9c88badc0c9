# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable value objects for derived results and validated configuration.
    Every engine output is rebuilt on each call, never mutated in place.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Derived results are never written back
        extra="forbid",  # Catches typos in settings and result construction
    )


class RecordModel(Model):
    """Base model for raw input rows read from the property database.

    Rows carry many columns this engine never looks at (timestamps, owner ids,
    notes), so unknown keys are dropped instead of rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
