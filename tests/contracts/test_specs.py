"""Tests for contracts/specs.py."""

import pandas as pd
import pytest
from pydantic import ValidationError

from tsgridkit.contracts import PadSpec, ThickenSpec
from tsgridkit.core.errors import UnrecognizedIntervalError
from tsgridkit.time import Granularity, Interval


class TestThickenSpec:
    """Tests for ThickenSpec."""

    def test_minimal_spec(self) -> None:
        spec = ThickenSpec(interval="week")
        assert spec.interval == Interval(Granularity.WEEK)
        assert spec.rounding is None
        assert spec.drop is False

    def test_group_string_becomes_list(self) -> None:
        spec = ThickenSpec(interval="day", group="store")
        assert spec.group == ["store"]

    def test_start_val_parsed(self) -> None:
        spec = ThickenSpec(interval="2 days", start_val="2016-08-11")
        assert spec.start_val == pd.Timestamp("2016-08-11")
        assert spec.interval == Interval(Granularity.DAY, 2)

    def test_interval_required(self) -> None:
        with pytest.raises(ValidationError):
            ThickenSpec()  # type: ignore[call-arg]

    def test_bad_rounding(self) -> None:
        with pytest.raises(ValidationError):
            ThickenSpec(interval="day", rounding="nearest")  # type: ignore[arg-type]

    def test_extra_field_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ThickenSpec(interval="day", fill="zero")  # type: ignore[call-arg]

    def test_unknown_interval(self) -> None:
        with pytest.raises(UnrecognizedIntervalError):
            ThickenSpec(interval="fortnight")

    def test_frozen(self) -> None:
        spec = ThickenSpec(interval="day")
        with pytest.raises(ValidationError):
            spec.drop = True  # type: ignore[misc]


class TestPadSpec:
    """Tests for PadSpec."""

    def test_defaults(self) -> None:
        spec = PadSpec()
        assert spec.interval is None
        assert spec.break_above is None

    def test_from_json(self) -> None:
        spec = PadSpec.model_validate_json(
            '{"interval": "15 min", "group": ["store"], "end_val": "2024-01-02 00:00"}'
        )
        assert spec.interval == Interval(Granularity.MINUTE, 15)
        assert spec.group == ["store"]
        assert spec.end_val == pd.Timestamp("2024-01-02")

    def test_interval_mapping(self) -> None:
        spec = PadSpec(interval={"granularity": "quarter", "multiplier": 2})
        assert spec.interval == Interval(Granularity.MONTH, 6)

    def test_break_above_positive(self) -> None:
        with pytest.raises(ValidationError):
            PadSpec(break_above=0)

    def test_missing_end_val(self) -> None:
        with pytest.raises(ValidationError):
            PadSpec(end_val=pd.NaT)
