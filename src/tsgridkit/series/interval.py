"""Interval of a table's datetime column."""

from __future__ import annotations

from typing import Any

from tsgridkit.core.config import DEFAULT_CONFIG, GridConfig
from tsgridkit.series.columns import as_frame, resolve_datetime_column
from tsgridkit.time.civil import localize_values
from tsgridkit.time.inference import infer_interval


def get_interval(data: Any, by: str | None = None, config: GridConfig | None = None) -> str:
    """Return the inferred interval of a datetime column, e.g. ``"15 minute"``."""
    config = config or DEFAULT_CONFIG
    df = as_frame(data)
    col = resolve_datetime_column(df, by)
    local = localize_values(df[col], config.grid_tz(df[col]))
    return str(infer_interval(local, config=config))


__all__ = ["get_interval"]
