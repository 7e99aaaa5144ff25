"""Core error types with rich context.

Every failure in tsgridkit names the offending column or value and the rule
that was violated, since a silently wrong grid is the main correctness risk
of interval handling.
"""

from __future__ import annotations

from typing import Any


class TSGridKitError(Exception):
    """Base exception with rich context.

    Subclasses only set ``error_code`` and a default ``fix_hint``; the
    details of a particular failure travel in ``context``.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class UnrecognizedIntervalError(TSGridKitError):
    """Interval token does not name one of the eight granularities."""

    error_code = "E_INTERVAL_UNRECOGNIZED"
    fix_hint = "Use '[N] <unit>' with unit in second, minute, hour, day, week, month, quarter, year"


class InsufficientDataError(TSGridKitError):
    """Not enough timestamps to work with."""

    error_code = "E_INSUFFICIENT_DATA"
    fix_hint = "Provide at least one non-missing timestamp or pass an explicit interval"


class ColumnError(TSGridKitError):
    """A column required by the operation is unusable."""

    error_code = "E_COLUMN"
    fix_hint = "Check the column names passed as 'by', 'group' or 'colname'"


class AmbiguousColumnError(ColumnError):
    """More than one datetime column and none was named."""

    error_code = "E_COLUMN_AMBIGUOUS"
    fix_hint = "Name the datetime column explicitly with 'by'"


class NoDatetimeColumnError(ColumnError):
    """The table has no datetime-typed column."""

    error_code = "E_COLUMN_NO_DATETIME"
    fix_hint = "Convert the timestamp column with pandas.to_datetime first"


class ColumnNotFoundError(ColumnError):
    """A named column does not exist."""

    error_code = "E_COLUMN_NOT_FOUND"


class EmptyRangeError(TSGridKitError):
    """Start boundary lies after end boundary."""

    error_code = "E_RANGE_EMPTY"
    fix_hint = "Check start_val and end_val against the observed range"


class RangeTooLargeError(TSGridKitError):
    """Generated sequence would exceed the configured row limit."""

    error_code = "E_RANGE_TOO_LARGE"
    fix_hint = "Check the interval and end_val, or raise break_above"


class NonAlignedTimestampError(TSGridKitError):
    """A timestamp does not lie on the grid it is required to lie on."""

    error_code = "E_TIMESTAMP_NOT_ALIGNED"
    fix_hint = "Use a coarser interval via thicken() or drop the explicit interval"


class MissingTimestampError(TSGridKitError):
    """The datetime column contains missing values where they cannot be placed."""

    error_code = "E_TIMESTAMP_MISSING"
    fix_hint = "Drop or impute rows with a missing timestamp before padding"


class IntervalNotCoarserError(TSGridKitError):
    """Thickening target is not coarser than the data's own interval."""

    error_code = "E_INTERVAL_NOT_COARSER"
    fix_hint = "Thicken to a coarser interval, or use pad() for a finer one"


class InvalidCalendarDateError(TSGridKitError):
    """Strict day preservation asked for a day the target month lacks."""

    error_code = "E_CALENDAR_DATE_INVALID"
    fix_hint = "Enable clamp_month_end or anchor the grid on a day every month has"


# Error registry for lookup
ERROR_REGISTRY: dict[str, type[TSGridKitError]] = {
    cls.error_code: cls
    for cls in (
        UnrecognizedIntervalError,
        InsufficientDataError,
        ColumnError,
        AmbiguousColumnError,
        NoDatetimeColumnError,
        ColumnNotFoundError,
        EmptyRangeError,
        RangeTooLargeError,
        NonAlignedTimestampError,
        MissingTimestampError,
        IntervalNotCoarserError,
        InvalidCalendarDateError,
    )
}


def get_error_class(error_code: str) -> type[TSGridKitError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TSGridKitError)
