"""Thickening: add a coarser, grid-aligned copy of a datetime column.

Every row keeps its place; the new column holds each timestamp snapped down
(or up) onto a grid coarser than the column's own interval, ready for a
grouped aggregation by the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from tsgridkit.contracts.specs import ThickenSpec
from tsgridkit.core.config import DEFAULT_CONFIG, GridConfig
from tsgridkit.core.errors import ColumnError, IntervalNotCoarserError
from tsgridkit.series.columns import as_frame, resolve_datetime_column, resolve_group_columns
from tsgridkit.time.arithmetic import Grid
from tsgridkit.time.civil import localize_values, restore_values
from tsgridkit.time.inference import infer_interval
from tsgridkit.time.taxonomy import Interval

logger = logging.getLogger(__name__)


def thicken(
    data: Any,
    interval: Interval | str | tuple[str, int] | None = None,
    by: str | None = None,
    group: str | list[str] | None = None,
    colname: str | None = None,
    rounding: str | None = None,
    start_val: Any = None,
    drop: bool = False,
    config: GridConfig | None = None,
    spec: ThickenSpec | None = None,
) -> pd.DataFrame:
    """Add a column with each timestamp rounded to a coarser interval.

    Args:
        data: DataFrame (or convertible) with a datetime column
        interval: Target interval, e.g. ``"week"`` or ``"15 min"``
        by: Datetime column (default: the only datetime column)
        group: Accepted for symmetry with pad() and ignored; rounding a
            timestamp does not depend on its group
        colname: Name of the new column (default: ``<by>_<granularity>``)
        rounding: ``"down"`` or ``"up"`` (default: ``config.default_rounding``)
        start_val: Grid anchor (default: natural boundary of the earliest value)
        drop: Remove the original datetime column
        config: Grid configuration
        spec: Complete request; overrides the keyword arguments

    Returns:
        Copy of the data with the thickened column appended; rows are not
        reordered, filtered or deduplicated.

    Raises:
        IntervalNotCoarserError: If the target is not coarser than the
            column's inferred interval.
        ColumnError: If ``colname`` already exists.
    """
    if spec is None:
        spec = ThickenSpec(
            interval=interval,
            by=by,
            group=group,
            colname=colname,
            rounding=rounding,
            start_val=start_val,
            drop=drop,
        )
    config = config or DEFAULT_CONFIG

    df = as_frame(data)
    col = resolve_datetime_column(df, spec.by)
    if spec.group:
        resolve_group_columns(df, spec.group, exclude=col)
        logger.debug("thicken() ignores grouping columns %s", spec.group)

    tz = config.grid_tz(df[col])
    local = localize_values(df[col], tz)
    observed = infer_interval(local, config=config)

    target = spec.interval
    if not target > observed:
        raise IntervalNotCoarserError(
            f"Interval '{target}' is not coarser than the interval '{observed}' of column '{col}'",
            context={"column": col, "target": str(target), "observed": str(observed)},
        )

    name = spec.colname or f"{col}_{target.granularity.value}"
    if name in df.columns:
        raise ColumnError(
            f"Column '{name}' already exists",
            context={"column": name},
            fix_hint="Pass another colname",
        )

    if spec.start_val is not None:
        grid = Grid(target, spec.start_val, tz, config.clamp_month_end)
    else:
        grid = Grid.natural(target, local.min(), tz, config.week_start, config.clamp_month_end)

    snap = grid.snap_up if (spec.rounding or config.default_rounding) == "up" else grid.snap_down
    snapped: dict[pd.Timestamp, pd.Timestamp] = {ts: snap(ts) for ts in local.dropna().unique()}
    thick = pd.Series(
        [snapped[ts] if not pd.isna(ts) else pd.NaT for ts in local],
        index=df.index,
        dtype=local.dtype,
    )

    df[name] = restore_values(thick, df[col])
    if spec.drop:
        df = df.drop(columns=[col])
    return df


__all__ = ["thicken"]
