"""Interval inference for an unordered set of timestamps.

For every candidate granularity the earliest timestamp is snapped down to the
granularity's natural boundary, and each timestamp's offset from it is
measured in whole units. A candidate is consistent when every offset is an
exact integer. Candidates are tried from coarsest to finest; the first
consistent one names the unit and the GCD of the offsets becomes the
multiplier, so ``08:00, 08:15, 08:45`` is reported as ``15 minute``. A set
that is consistent at both day and week, such as Sunday-aligned 7-day data,
therefore resolves to ``week``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
import pandas as pd

from tsgridkit.core.config import DEFAULT_CONFIG, GridConfig
from tsgridkit.core.errors import InsufficientDataError, NonAlignedTimestampError
from tsgridkit.time.civil import TZ, UNIT_NANOS, natural_boundary
from tsgridkit.time.taxonomy import GRANULARITIES, Granularity, Interval

logger = logging.getLogger(__name__)


def observed_index(
    timestamps: Iterable[Any] | pd.Series | pd.DatetimeIndex,
    tz: TZ | None = None,
    default_tz: TZ = "UTC",
) -> pd.DatetimeIndex:
    """Distinct, sorted, non-missing timestamps at nanosecond resolution.

    Naive values are read as wall-clock time in ``tz`` (or ``default_tz``);
    aware values are converted to ``tz`` when it is given and otherwise keep
    their own zone.
    """
    if not isinstance(timestamps, (pd.Series, pd.Index, np.ndarray)):
        timestamps = list(timestamps)
    index = pd.DatetimeIndex(pd.to_datetime(timestamps, format="mixed"))
    index = index[~index.isna()]
    if index.tz is None:
        index = index.tz_localize(
            tz or default_tz, ambiguous=np.ones(len(index), dtype=bool), nonexistent="shift_forward"
        )
    elif tz is not None:
        index = index.tz_convert(tz)
    return index.unique().sort_values().as_unit("ns")


def _offsets(index: pd.DatetimeIndex, granularity: Granularity, week_start: int) -> np.ndarray | None:
    """Whole-unit offsets from the natural anchor, or None if any is fractional."""
    anchor = natural_boundary(index[0], granularity, index.tz, week_start)

    if granularity in UNIT_NANOS:
        elapsed = index.asi8 - anchor.value
        unit = UNIT_NANOS[granularity]
        if np.any(elapsed % unit):
            return None
        return elapsed // unit

    wall = index.tz_localize(None)
    days = wall.normalize()
    if np.any(wall != days):
        return None

    anchor_wall = anchor.tz_localize(None)
    if granularity is Granularity.DAY:
        return np.asarray((days - anchor_wall).days, dtype=np.int64)
    if granularity is Granularity.WEEK:
        elapsed_days = np.asarray((days - anchor_wall).days, dtype=np.int64)
        if np.any(elapsed_days % 7):
            return None
        return elapsed_days // 7

    if np.any(wall.day != 1):
        return None
    months = np.asarray(wall.year * 12 + wall.month - 1, dtype=np.int64) - (
        anchor_wall.year * 12 + anchor_wall.month - 1
    )
    if granularity is Granularity.MONTH:
        return months
    if granularity is Granularity.QUARTER:
        if np.any(months % 3):
            return None
        return months // 3
    if np.any(months % 12):
        return None
    return months // 12


def infer_interval(
    timestamps: Iterable[Any] | pd.Series | pd.DatetimeIndex,
    tz: TZ | None = None,
    config: GridConfig | None = None,
) -> Interval:
    """Infer the interval that places every timestamp on a common grid.

    Args:
        timestamps: Timestamps in any order; duplicates and NaT are ignored
        tz: Zone for naive timestamps (default: ``config.tz``). Aware
            timestamps are converted to it.
        config: Grid configuration (week start)

    Returns:
        Inferred Interval. A single distinct timestamp gives ``second``.

    Raises:
        InsufficientDataError: If there is no non-missing timestamp.
        NonAlignedTimestampError: If a timestamp has a sub-second component.
    """
    config = config or DEFAULT_CONFIG
    index = observed_index(timestamps, tz, default_tz=config.tz)

    if len(index) == 0:
        raise InsufficientDataError(
            "Cannot infer an interval without any timestamp",
            context={"non_missing": 0},
        )
    if len(index) == 1:
        logger.debug("Single distinct timestamp %s, reporting interval 'second'", index[0])
        return Interval(Granularity.SECOND)

    for granularity in reversed(GRANULARITIES):
        offsets = _offsets(index, granularity, config.week_start)
        if offsets is None:
            continue
        multiplier = int(np.gcd.reduce(offsets - offsets.min())) or 1
        interval = Interval(granularity, multiplier)
        logger.debug("Inferred interval %s from %d distinct timestamps", interval, len(index))
        return interval

    fractional = index[index.asi8 % UNIT_NANOS[Granularity.SECOND] != 0]
    raise NonAlignedTimestampError(
        f"Timestamp {fractional[0]} has a sub-second component",
        context={"timestamp": str(fractional[0]), "count": len(fractional)},
        fix_hint="Sub-second intervals are not supported; floor the column to seconds first",
    )


__all__ = [
    "infer_interval",
    "observed_index",
]
