"""Padding: materialize every grid point between the observed boundaries.

The grid is generated per partition (one partition without grouping) and
left-merged with the source rows on the timestamp plus the grouping columns.
Grid points without a source row become rows whose other columns hold the
missing marker of their dtype, for a fill step downstream.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from tsgridkit.contracts.specs import PadSpec
from tsgridkit.core.config import DEFAULT_CONFIG, GridConfig
from tsgridkit.core.errors import (
    InsufficientDataError,
    MissingTimestampError,
    NonAlignedTimestampError,
    RangeTooLargeError,
)
from tsgridkit.series.columns import as_frame, resolve_datetime_column, resolve_group_columns
from tsgridkit.time.arithmetic import Grid
from tsgridkit.time.civil import localize_values, restore_values, to_timestamp
from tsgridkit.time.inference import infer_interval
from tsgridkit.time.sequence import count_points, sequence_index
from tsgridkit.time.taxonomy import Interval

logger = logging.getLogger(__name__)


def _nullable_dtype(dtype: Any) -> str | None:
    """Nullable counterpart of a numpy integer or boolean dtype, if any."""
    if isinstance(dtype, pd.api.extensions.ExtensionDtype):
        return None
    if pd.api.types.is_bool_dtype(dtype):
        return "boolean"
    if pd.api.types.is_integer_dtype(dtype):
        name = dtype.name
        return "UInt" + name[4:] if name.startswith("uint") else "Int" + name[3:]
    return None


def _partitions(local: pd.Series, df: pd.DataFrame, groups: list[str]) -> list[tuple[tuple, pd.Series]]:
    """Timestamps per partition, in first-seen order of the grouping key."""
    if not groups:
        return [((), local)]
    grouped = local.groupby([df[g] for g in groups], sort=False, dropna=False, observed=True)
    return [(key if isinstance(key, tuple) else (key,), part) for key, part in grouped]


def pad(
    data: Any,
    interval: Interval | str | tuple[str, int] | None = None,
    by: str | None = None,
    group: str | list[str] | None = None,
    start_val: Any = None,
    end_val: Any = None,
    break_above: int | None = None,
    config: GridConfig | None = None,
    spec: PadSpec | None = None,
) -> pd.DataFrame:
    """Insert rows for every grid point missing from the data.

    Args:
        data: DataFrame (or convertible) with a datetime column
        interval: Grid interval (default: inferred over all rows)
        by: Datetime column (default: the only datetime column)
        group: Column(s) whose partitions are padded independently, each over
            its own observed range
        start_val: First grid point and grid anchor for every partition
            (default: each partition's earliest value snapped down)
        end_val: Upper bound for every partition (default: each partition's
            latest value)
        break_above: Maximum rows to generate (default: ``config.break_above``)
        config: Grid configuration
        spec: Complete request; overrides the keyword arguments

    Returns:
        Padded DataFrame ordered by partition, then timestamp, with the
        column order of the input and a fresh RangeIndex. Integer and
        boolean columns become pandas nullable dtypes so that inserted rows
        hold ``pd.NA``.

    Raises:
        MissingTimestampError: If the datetime column has missing values.
        EmptyRangeError: If a partition's start lies after its end.
        RangeTooLargeError: If more than ``break_above`` rows would be
            generated.
        NonAlignedTimestampError: If a row inside the range is not a grid
            point (only possible with an explicit interval or start_val).
    """
    if spec is None:
        spec = PadSpec(
            interval=interval,
            by=by,
            group=group,
            start_val=start_val,
            end_val=end_val,
            break_above=break_above,
        )
    config = config or DEFAULT_CONFIG

    df = as_frame(data)
    col = resolve_datetime_column(df, spec.by)
    groups = resolve_group_columns(df, spec.group, exclude=col)

    missing = int(df[col].isna().sum())
    if missing:
        raise MissingTimestampError(
            f"Column '{col}' has {missing} missing timestamps",
            context={"column": col, "count": missing},
        )
    if df.empty:
        raise InsufficientDataError(
            "Cannot pad a table without rows",
            context={"column": col, "rows": 0},
        )

    tz = config.grid_tz(df[col])
    local = localize_values(df[col], tz)
    grid_interval = spec.interval or infer_interval(local, config=config)

    if spec.start_val is not None:
        grid = Grid(grid_interval, spec.start_val, tz, config.clamp_month_end)
        start_override = grid.anchor
    else:
        grid = Grid.natural(grid_interval, local.min(), tz, config.week_start, config.clamp_month_end)
        start_override = None
    end_override = to_timestamp(spec.end_val, tz) if spec.end_val is not None else None

    ranges: list[tuple[tuple, pd.Timestamp, pd.Timestamp]] = []
    total = 0
    dropped = 0
    for key, part in _partitions(local, df, groups):
        start = start_override if start_override is not None else grid.snap_down(part.min())
        end = grid.snap_down(end_override if end_override is not None else part.max())
        total += count_points(grid, start, end)

        inside = part[(part >= start) & (part <= end)]
        dropped += len(part) - len(inside)
        for ts in inside.unique():
            if not grid.contains(ts):
                raise NonAlignedTimestampError(
                    f"Value {ts} of column '{col}' is not a {grid.interval} boundary",
                    context={
                        "column": col,
                        "value": str(ts),
                        "previous_boundary": str(grid.snap_down(ts)),
                        "interval": str(grid.interval),
                        "group": dict(zip(groups, key)),
                    },
                )
        ranges.append((key, start, end))

    limit = spec.break_above or config.break_above
    if total > limit:
        raise RangeTooLargeError(
            f"Padding would generate {total} rows, more than break_above={limit}",
            context={"rows": total, "break_above": limit, "interval": str(grid.interval)},
        )
    if dropped:
        logger.warning("Dropped %d rows of column '%s' outside the padding range", dropped, col)

    frames = []
    for key, start, end in ranges:
        frame = pd.DataFrame({col: sequence_index(grid, start, end)})
        for name, value in zip(groups, key):
            frame[name] = value
        frames.append(frame)
    skeleton = pd.concat(frames, ignore_index=True)
    skeleton[col] = skeleton[col].astype(local.dtype)
    for name in groups:
        skeleton[name] = skeleton[name].astype(df[name].dtype)

    source = df.copy()
    source[col] = local
    for name in source.columns:
        if name == col or name in groups:
            continue
        nullable = _nullable_dtype(source[name].dtype)
        if nullable is not None:
            source[name] = source[name].astype(nullable)

    result = skeleton.merge(source, on=[col, *groups], how="left", sort=False)
    result[col] = restore_values(result[col], df[col])
    logger.debug(
        "Padded column '%s' at %s: %d rows in, %d rows out",
        col,
        grid.interval,
        len(df),
        len(result),
    )
    return result[list(df.columns)]


__all__ = ["pad"]
