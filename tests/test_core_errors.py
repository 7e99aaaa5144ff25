"""Tests for core error types.

Tests the error hierarchy and rich context functionality.
"""

from __future__ import annotations

import pytest

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


class TestTSGridKitError:
    """Test base error class."""

    def test_basic_error(self):
        """Basic error creation."""
        err = TSGridKitError("Something went wrong")
        assert err.message == "Something went wrong"
        assert err.error_code == "E_UNKNOWN"
        assert err.context == {}

    def test_error_with_context(self):
        """Error with context."""
        context = {"column": "ds", "value": "2024-01-01 08:07"}
        err = TSGridKitError("Test error", context=context)
        assert err.context == context
        assert "column" in str(err)

    def test_error_with_fix_hint(self):
        """Explicit hint overrides the class default."""
        err = NonAlignedTimestampError("Test error", fix_hint="Try thicken()")
        assert err.fix_hint == "Try thicken()"
        assert "Try thicken()" in str(err)

    def test_error_str_format(self):
        """Error string formatting."""
        err = TSGridKitError("Test message", context={"key": "value"}, fix_hint="Do this")
        err_str = str(err)
        assert "[E_UNKNOWN]" in err_str
        assert "Test message" in err_str
        assert "key" in err_str
        assert "Do this" in err_str


class TestErrorHierarchy:
    """Test subclass relationships and codes."""

    @pytest.mark.parametrize(
        "cls, code",
        [
            (UnrecognizedIntervalError, "E_INTERVAL_UNRECOGNIZED"),
            (InsufficientDataError, "E_INSUFFICIENT_DATA"),
            (AmbiguousColumnError, "E_COLUMN_AMBIGUOUS"),
            (NoDatetimeColumnError, "E_COLUMN_NO_DATETIME"),
            (ColumnNotFoundError, "E_COLUMN_NOT_FOUND"),
            (EmptyRangeError, "E_RANGE_EMPTY"),
            (RangeTooLargeError, "E_RANGE_TOO_LARGE"),
            (NonAlignedTimestampError, "E_TIMESTAMP_NOT_ALIGNED"),
            (MissingTimestampError, "E_TIMESTAMP_MISSING"),
            (IntervalNotCoarserError, "E_INTERVAL_NOT_COARSER"),
            (InvalidCalendarDateError, "E_CALENDAR_DATE_INVALID"),
        ],
    )
    def test_error_code(self, cls, code):
        err = cls("boom")
        assert err.error_code == code
        assert isinstance(err, TSGridKitError)
        assert err.fix_hint

    def test_column_errors_share_base(self):
        for cls in (AmbiguousColumnError, NoDatetimeColumnError, ColumnNotFoundError):
            assert issubclass(cls, ColumnError)

    def test_catchable_as_base(self):
        with pytest.raises(TSGridKitError):
            raise EmptyRangeError("start after end")


class TestErrorRegistry:
    """Test error registry lookup."""

    def test_registry_contents(self):
        assert ERROR_REGISTRY["E_RANGE_EMPTY"] is EmptyRangeError
        assert ERROR_REGISTRY["E_COLUMN"] is ColumnError
        assert len(ERROR_REGISTRY) == 12

    def test_get_error_class(self):
        assert get_error_class("E_TIMESTAMP_NOT_ALIGNED") is NonAlignedTimestampError

    def test_get_unknown_error_class(self):
        assert get_error_class("E_DOES_NOT_EXIST") is TSGridKitError
