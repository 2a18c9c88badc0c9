# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lenient coercion utilities for raw database values.

Rows arrive from an external reader with ISO date strings, empty strings,
timestamps or nothing at all. The engine treats anything it cannot read as
absent rather than failing, so these helpers never raise:

- Dates: ``coerce_date`` returns a ``date`` or ``None``
- Money: ``coerce_money`` returns a non-negative ``float`` or ``None``
- Names: ``coerce_text`` returns a stripped, non-empty ``str`` or ``None``
- Flags: ``coerce_flag`` returns a ``bool``, False when unreadable

They are used from ``field_validator(mode="before")`` hooks on the record
models, mirroring how reusable validators are shared across models.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def coerce_date(value: Any) -> Optional[date]:
    """
    Read a calendar date from a raw value.

    Args:
        value: ``date``, ``datetime``, ``pandas.Timestamp``, ISO string or None

    Returns:
        The calendar date as written (no timezone shifting), or None when the
        value is missing or cannot be parsed.
    """
    if value is None or value is pd.NaT:
        return None

    # datetime (and pd.Timestamp) subclass date, so check them first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        # pandas resolves these against the wall clock
        if not text or text.lower() in ("now", "today"):
            return None
        try:
            parsed = pd.Timestamp(text)
        except (ValueError, TypeError, OverflowError):
            logger.debug(f"Ignoring unparseable date value {value!r}")
            return None
        if parsed is pd.NaT:
            return None
        return parsed.date()

    logger.debug(f"Ignoring date value of unsupported type {type(value).__name__}")
    return None


def coerce_money(value: Any) -> Optional[float]:
    """
    Read a money amount from a raw value.

    Negative, non-finite and unparseable amounts are treated as missing.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip().replace(",", "").lstrip("$")
        if not text:
            return None
        value = text

    try:
        amount = float(value)
    except (ValueError, TypeError):
        logger.debug(f"Ignoring unparseable money value {value!r}")
        return None

    if not math.isfinite(amount) or amount < 0:
        return None
    return amount


def coerce_text(value: Any) -> Optional[str]:
    """Return a stripped string, or None for missing/blank values."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


_TRUE_FLAGS = frozenset({"true", "t", "yes", "y", "1"})


def coerce_flag(value: Any) -> bool:
    """
    Read a boolean flag from a raw value.

    Real booleans pass through. Strings and numbers are read the way database
    drivers commonly render booleans; anything else is treated as unset.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_FLAGS
    if isinstance(value, (int, float)) and not (isinstance(value, float) and math.isnan(value)):
        return value == 1
    if value is not None:
        logger.debug(f"Treating flag value {value!r} as unset")
    return False
