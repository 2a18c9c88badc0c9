# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar day helper and injectable clocks.

Lease transitions happen at local midnight of the property, so every date
comparison in the engine runs on the calendar date produced here rather than
on raw instants. "Now" is always passed in through a ``Clock`` so a whole
aggregation pass sees one instant, and tests can pin it.

Examples:
    >>> from datetime import datetime, timezone
    >>> clock = FixedClock(instant=datetime(2024, 6, 1, 3, 30, tzinfo=timezone.utc))
    >>> today(clock, "UTC")
    datetime.date(2024, 6, 1)
    >>> today(clock, "America/Los_Angeles")
    datetime.date(2024, 5, 31)
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from functools import lru_cache
from typing import Protocol, Union, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd
from pydantic import field_validator

from .model import Model

TimestampLike = Union[datetime, date, pd.Timestamp, str]


@lru_cache(maxsize=256)
def resolve_timezone(name: str) -> ZoneInfo:
    """
    Look up an IANA timezone by name.

    Raises:
        ValueError: If the name is empty or not a known IANA zone
    """
    if not name or not isinstance(name, str):
        raise ValueError("Timezone name must be a non-empty IANA zone name")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone {name!r}") from e


def calendar_date(timestamp: TimestampLike, time_zone: str) -> date:
    """
    Convert an instant to the calendar date in a property's local timezone.

    Args:
        timestamp: The instant. Naive values are interpreted as UTC. A plain
            ``date`` is already a calendar day and is returned unchanged.
        time_zone: IANA name of the property's timezone

    Returns:
        The local calendar date at that instant

    Raises:
        ValueError: If the timezone is unknown or the timestamp is unreadable
    """
    zone = resolve_timezone(time_zone)
    if isinstance(timestamp, date) and not isinstance(timestamp, datetime):
        return timestamp
    ts = pd.Timestamp(timestamp)
    if ts is pd.NaT:
        raise ValueError("Cannot take the calendar date of a missing timestamp")
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.tz_convert(zone).date()


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, timezone-aware in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Model):
    """
    Clock pinned to a single instant.

    Used by tests and by batch callers that want to replay a pass as of a
    specific moment. Naive instants are interpreted as UTC.
    """

    instant: datetime

    @field_validator("instant")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def now(self) -> datetime:
        return self.instant


def today(clock: Clock, time_zone: str) -> date:
    """Calendar date of ``clock.now()`` in the given property timezone."""
    return calendar_date(clock.now(), time_zone)
