"""Configuration for grid construction.

The zone used for naive timestamps and the few policy knobs of the grid
arithmetic live in one immutable object that is passed explicitly into
every call producing timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import tzinfo
from typing import Literal

import pandas as pd


@dataclass(frozen=True)
class GridConfig:
    """Settings shared by inference, thickening and padding.

    Args:
        tz: IANA zone governing naive timestamps. Timezone-aware columns
            always use their own zone.
        week_start: Weekday that week boundaries fall on (Monday=0 ...
            Sunday=6).
        break_above: Maximum number of rows pad() may generate.
        clamp_month_end: Clamp month-based grid points to the last valid day
            of the target month. When False such points raise
            InvalidCalendarDateError instead.
        default_rounding: Rounding used by thicken() when none is given.
    """

    tz: str = "UTC"
    week_start: int = 6
    break_above: int = 1_000_000
    clamp_month_end: bool = True
    default_rounding: Literal["down", "up"] = "down"

    def __post_init__(self) -> None:
        if not 0 <= self.week_start <= 6:
            raise ValueError(f"week_start must be in 0..6, got {self.week_start}")
        if self.break_above < 1:
            raise ValueError(f"break_above must be positive, got {self.break_above}")
        if self.default_rounding not in ("down", "up"):
            raise ValueError(f"default_rounding must be 'down' or 'up', got {self.default_rounding!r}")
        try:
            pd.Timestamp(0, tz=self.tz)
        except Exception as e:
            raise ValueError(f"Unknown time zone {self.tz!r}") from e

    def with_tz(self, tz: str) -> GridConfig:
        """Return a copy governed by another zone."""
        return replace(self, tz=tz)

    def grid_tz(self, values: pd.Series | pd.DatetimeIndex) -> str | tzinfo:
        """Zone governing a datetime column: its own, else the configured one."""
        tz = values.dt.tz if isinstance(values, pd.Series) else values.tz
        return tz if tz is not None else self.tz


DEFAULT_CONFIG = GridConfig()
