"""tsgridkit - Interval inference, thickening and padding for time series.

Infers the recurrence interval of a datetime column and derives two views
from it: a coarser rounding of every timestamp (thicken) and a gap-free
grid with the other columns merged onto it (pad).

Basic usage:
    >>> from tsgridkit import get_interval, pad, thicken
    >>> get_interval(df)
    '15 minute'
    >>> weekly = thicken(df, "week")
    >>> complete = pad(df, group="store")

Grid arithmetic:
    >>> from tsgridkit import Grid
    >>> grid = Grid.natural("month", "2024-01-31")
    >>> grid.step(grid.anchor, 1)
    Timestamp('2024-02-01 00:00:00+0000', tz='UTC')
"""

__version__ = "0.1.0"

from tsgridkit.contracts.specs import PadSpec, ThickenSpec
from tsgridkit.core.config import DEFAULT_CONFIG, GridConfig
from tsgridkit.core.errors import (
    AmbiguousColumnError,
    ColumnError,
    ColumnNotFoundError,
    EmptyRangeError,
    InsufficientDataError,
    IntervalNotCoarserError,
    InvalidCalendarDateError,
    MissingTimestampError,
    NoDatetimeColumnError,
    NonAlignedTimestampError,
    RangeTooLargeError,
    TSGridKitError,
    UnrecognizedIntervalError,
)
from tsgridkit.series import get_interval, pad, thicken
from tsgridkit.time import (
    GRANULARITIES,
    Granularity,
    Grid,
    Interval,
    count_points,
    generate_sequence,
    infer_interval,
    parse_interval,
    sequence_index,
    snap_down,
    snap_up,
    step,
)

__all__ = [
    "__version__",
    # Orchestrators
    "get_interval",
    "pad",
    "thicken",
    # Time
    "GRANULARITIES",
    "Granularity",
    "Grid",
    "Interval",
    "count_points",
    "generate_sequence",
    "infer_interval",
    "parse_interval",
    "sequence_index",
    "snap_down",
    "snap_up",
    "step",
    # Config and contracts
    "DEFAULT_CONFIG",
    "GridConfig",
    "PadSpec",
    "ThickenSpec",
    # Errors
    "TSGridKitError",
    "AmbiguousColumnError",
    "ColumnError",
    "ColumnNotFoundError",
    "EmptyRangeError",
    "InsufficientDataError",
    "IntervalNotCoarserError",
    "InvalidCalendarDateError",
    "MissingTimestampError",
    "NoDatetimeColumnError",
    "NonAlignedTimestampError",
    "RangeTooLargeError",
    "UnrecognizedIntervalError",
]
