"""Boundary arithmetic on interval grids.

A grid is an interval plus an anchor: its points are ``point(n)`` for every
integer ``n`` with ``point(0) == anchor``. Three kinds of unit arithmetic are
used:

* second/minute/hour: elapsed time, ``anchor + n * span``.
* day/week: civil days, so a daily grid has exactly one point per calendar
  day and a nominal day may last 23 or 25 hours across a DST change.
* month/quarter/year: calendar months added to the anchor's wall clock,
  with the day clamped to the end of shorter months.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pandas as pd

from tsgridkit.core.errors import InvalidCalendarDateError
from tsgridkit.time.civil import (
    TZ,
    UNIT_DAYS,
    UNIT_MONTHS,
    UNIT_NANOS,
    from_wall,
    month_index,
    natural_boundary,
    to_timestamp,
    to_wall,
)
from tsgridkit.time.taxonomy import Interval, parse_interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    """Boundary-aligned timestamp grid.

    Attributes:
        interval: Granularity and multiplier of one step
        anchor: The grid point with index 0
        tz: Zone the civil arithmetic is done in
        clamp_days: Clamp month-based points to the end of short months;
            when False such points raise InvalidCalendarDateError
    """

    interval: Interval
    anchor: pd.Timestamp
    tz: TZ = "UTC"
    clamp_days: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", parse_interval(self.interval))
        object.__setattr__(self, "anchor", to_timestamp(self.anchor, self.tz))

    @classmethod
    def natural(
        cls,
        interval: Interval | str,
        ts: Any,
        tz: TZ = "UTC",
        week_start: int = 6,
        clamp_days: bool = True,
    ) -> Grid:
        """Grid anchored on the natural unit boundary at or before ``ts``."""
        interval = parse_interval(interval)
        anchor = natural_boundary(to_timestamp(ts, tz), interval.granularity, tz, week_start)
        logger.debug("Built %s grid anchored at %s", interval, anchor)
        return cls(interval, anchor, tz, clamp_days)

    @property
    def _anchor_wall(self) -> pd.Timestamp:
        return to_wall(self.anchor, self.tz)

    def point(self, n: int) -> pd.Timestamp:
        """The ``n``-th grid point."""
        granularity = self.interval.granularity
        mult = self.interval.multiplier

        if granularity in UNIT_NANOS:
            value = self.anchor.value + n * mult * UNIT_NANOS[granularity]
            return pd.Timestamp(value, unit="ns", tz="UTC").tz_convert(self.tz)

        wall = self._anchor_wall
        if granularity in UNIT_DAYS:
            return from_wall(wall + pd.Timedelta(days=n * mult * UNIT_DAYS[granularity]), self.tz)

        months = n * mult * UNIT_MONTHS[granularity]
        target = wall + pd.DateOffset(months=months)
        if target.day != wall.day and not self.clamp_days:
            raise InvalidCalendarDateError(
                f"Day {wall.day} does not exist in {target.year}-{target.month:02d}",
                context={"anchor": str(self.anchor), "index": n, "interval": str(self.interval)},
            )
        return from_wall(target, self.tz)

    def index_of(self, ts: Any) -> int:
        """Index of the last grid point at or before ``ts``."""
        ts = to_timestamp(ts, self.tz)
        granularity = self.interval.granularity
        mult = self.interval.multiplier

        if granularity in UNIT_NANOS:
            # Exact integer floor division; no further correction needed.
            return (ts.value - self.anchor.value) // (mult * UNIT_NANOS[granularity])

        wall = to_wall(ts, self.tz)
        if granularity in UNIT_DAYS:
            span = pd.Timedelta(days=mult * UNIT_DAYS[granularity])
            n = (wall - self._anchor_wall) // span
        else:
            step = mult * UNIT_MONTHS[granularity]
            n = (month_index(wall) - month_index(self._anchor_wall)) // step

        # Wall-clock estimates can overshoot by one step around month ends
        # and zone transitions.
        while self.point(n) > ts:
            n -= 1
        if granularity in UNIT_DAYS:
            # A repeated hour can put ts at an earlier wall time than the
            # next point even though it is the later instant.
            while self.point(n + 1) <= ts:
                n += 1
        return n

    def contains(self, ts: Any) -> bool:
        """Whether ``ts`` is a grid point."""
        ts = to_timestamp(ts, self.tz)
        return self.snap_down(ts) == ts

    def snap_down(self, ts: Any) -> pd.Timestamp:
        """Last grid point at or before ``ts``."""
        return self.point(self.index_of(ts))

    def snap_up(self, ts: Any) -> pd.Timestamp:
        """First grid point at or after ``ts``."""
        ts = to_timestamp(ts, self.tz)
        n = self.index_of(ts)
        down = self.point(n)
        return down if down == ts else self.point(n + 1)

    def step(self, ts: Any, n: int = 1) -> pd.Timestamp:
        """Move ``ts`` by ``n`` grid steps.

        Grid points move along the grid. Other timestamps move by ``n``
        times the interval using the same unit arithmetic.
        """
        ts = to_timestamp(ts, self.tz)
        idx = self.index_of(ts)
        if self.point(idx) == ts:
            return self.point(idx + n)

        granularity = self.interval.granularity
        units = n * self.interval.multiplier
        if granularity in UNIT_NANOS:
            return ts + pd.Timedelta(units * UNIT_NANOS[granularity], unit="ns")
        wall = to_wall(ts, self.tz)
        if granularity in UNIT_DAYS:
            return from_wall(wall + pd.Timedelta(days=units * UNIT_DAYS[granularity]), self.tz)
        return from_wall(wall + pd.DateOffset(months=units * UNIT_MONTHS[granularity]), self.tz)


def snap_down(ts: Any, grid: Grid) -> pd.Timestamp:
    """Snap ``ts`` down onto ``grid``."""
    return grid.snap_down(ts)


def snap_up(ts: Any, grid: Grid) -> pd.Timestamp:
    """Snap ``ts`` up onto ``grid``."""
    return grid.snap_up(ts)


def step(ts: Any, grid: Grid, n: int = 1) -> pd.Timestamp:
    """Move ``ts`` by ``n`` steps of ``grid``."""
    return grid.step(ts, n)


__all__ = [
    "Grid",
    "snap_down",
    "snap_up",
    "step",
]
