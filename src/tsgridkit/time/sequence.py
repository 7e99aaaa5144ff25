"""Gap-free grid sequences between two boundaries."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pandas as pd

from tsgridkit.core.errors import EmptyRangeError, NonAlignedTimestampError
from tsgridkit.time.arithmetic import Grid
from tsgridkit.time.civil import to_timestamp


def _bounds(grid: Grid, start: Any, end: Any) -> tuple[int, int]:
    start_ts = to_timestamp(start, grid.tz)
    end_ts = to_timestamp(end, grid.tz)
    if start_ts > end_ts:
        raise EmptyRangeError(
            f"Start {start_ts} lies after end {end_ts}",
            context={"start": str(start_ts), "end": str(end_ts), "interval": str(grid.interval)},
        )
    first = grid.index_of(start_ts)
    if grid.point(first) != start_ts:
        raise NonAlignedTimestampError(
            f"Sequence start {start_ts} is not a {grid.interval} boundary",
            context={
                "start": str(start_ts),
                "previous_boundary": str(grid.point(first)),
                "interval": str(grid.interval),
            },
        )
    return first, grid.index_of(end_ts)


def count_points(grid: Grid, start: Any, end: Any) -> int:
    """Number of points ``generate_sequence`` would yield."""
    first, last = _bounds(grid, start, end)
    return last - first + 1


def generate_sequence(grid: Grid, start: Any, end: Any) -> Iterator[pd.Timestamp]:
    """Yield every grid point from ``start`` up to the last point not after ``end``.

    The range is validated eagerly, so errors surface at the call rather than
    on first iteration.

    Raises:
        EmptyRangeError: If ``start`` lies after ``end``.
        NonAlignedTimestampError: If ``start`` is not a grid point.
    """
    first, last = _bounds(grid, start, end)
    return (grid.point(n) for n in range(first, last + 1))


def sequence_index(grid: Grid, start: Any, end: Any, name: str | None = None) -> pd.DatetimeIndex:
    """Materialize ``generate_sequence`` as a DatetimeIndex."""
    return pd.DatetimeIndex(list(generate_sequence(grid, start, end)), name=name)


__all__ = [
    "count_points",
    "generate_sequence",
    "sequence_index",
]
