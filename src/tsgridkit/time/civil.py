"""Civil (wall-clock) time helpers.

Grid arithmetic on days and calendar units happens on naive wall-clock
values; results are then reattached to the governing zone. Nonexistent
wall times (spring forward) move to the next valid instant and ambiguous
ones (fall back) resolve to their first occurrence.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any

import numpy as np
import pandas as pd

from tsgridkit.time.taxonomy import Granularity

TZ = str | tzinfo

# Elapsed-time units, in nanoseconds.
UNIT_NANOS: dict[Granularity, int] = {
    Granularity.SECOND: 1_000_000_000,
    Granularity.MINUTE: 60_000_000_000,
    Granularity.HOUR: 3_600_000_000_000,
}

# Civil-day units, in days.
UNIT_DAYS: dict[Granularity, int] = {
    Granularity.DAY: 1,
    Granularity.WEEK: 7,
}

# Calendar units, in months.
UNIT_MONTHS: dict[Granularity, int] = {
    Granularity.MONTH: 1,
    Granularity.QUARTER: 3,
    Granularity.YEAR: 12,
}

_FLOOR_FREQ: dict[Granularity, str] = {
    Granularity.SECOND: "s",
    Granularity.MINUTE: "min",
    Granularity.HOUR: "h",
}


def to_timestamp(value: Any, tz: TZ) -> pd.Timestamp:
    """Coerce a value to a Timestamp in ``tz``; naive values are wall-clock in ``tz``."""
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError(f"Cannot place a missing timestamp: {value!r}")
    if ts.tzinfo is None:
        return from_wall(ts, tz)
    return ts.tz_convert(tz)


def to_wall(ts: pd.Timestamp, tz: TZ) -> pd.Timestamp:
    """Naive wall-clock reading of ``ts`` in ``tz``."""
    return ts.tz_convert(tz).tz_localize(None)


def from_wall(wall: pd.Timestamp, tz: TZ) -> pd.Timestamp:
    """Attach a naive wall-clock value to ``tz``."""
    return wall.tz_localize(tz, ambiguous=True, nonexistent="shift_forward")


def localize_values(values: pd.Series, tz: TZ) -> pd.Series:
    """Express a datetime column in ``tz``; naive values are wall-clock in ``tz``."""
    if values.dt.tz is None:
        return values.dt.tz_localize(
            tz, ambiguous=np.ones(len(values), dtype=bool), nonexistent="shift_forward"
        )
    return values.dt.tz_convert(tz)


def restore_values(values: pd.Series, like: pd.Series) -> pd.Series:
    """Bring a localized column back to the representation of ``like``."""
    if like.dt.tz is None:
        values = values.dt.tz_localize(None)
    return values.astype(like.dtype)


def month_index(wall: pd.Timestamp) -> int:
    """Months since year 0 of a wall-clock value."""
    return wall.year * 12 + wall.month - 1


def natural_boundary(
    ts: pd.Timestamp,
    granularity: Granularity,
    tz: TZ,
    week_start: int = 6,
) -> pd.Timestamp:
    """Boundary of ``granularity`` (multiplier 1) at or before ``ts``.

    Seconds, minutes and hours truncate the wall clock but keep the instant's
    own UTC offset, so an hour inside a repeated fall-back hour floors to the
    start of that same hour.
    """
    wall = to_wall(ts, tz)
    if granularity in _FLOOR_FREQ:
        return ts - (wall - wall.floor(_FLOOR_FREQ[granularity]))

    day = wall.normalize()
    if granularity is Granularity.DAY:
        boundary = day
    elif granularity is Granularity.WEEK:
        boundary = day - pd.Timedelta(days=(day.weekday() - week_start) % 7)
    elif granularity is Granularity.MONTH:
        boundary = day.replace(day=1)
    elif granularity is Granularity.QUARTER:
        boundary = day.replace(month=3 * ((day.month - 1) // 3) + 1, day=1)
    else:
        boundary = day.replace(month=1, day=1)
    return from_wall(boundary, tz)


__all__ = [
    "TZ",
    "UNIT_DAYS",
    "UNIT_MONTHS",
    "UNIT_NANOS",
    "from_wall",
    "localize_values",
    "month_index",
    "natural_boundary",
    "restore_values",
    "to_timestamp",
    "to_wall",
]
