"""Core module - configuration and error types."""

from tsgridkit.core.config import DEFAULT_CONFIG, GridConfig
from tsgridkit.core.errors import (
    ERROR_REGISTRY,
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
    get_error_class,
)

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "GridConfig",
    # Errors
    "ERROR_REGISTRY",
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
    "get_error_class",
]
