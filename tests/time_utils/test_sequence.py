"""Tests for tsgridkit.time.sequence – generate_sequence, count_points, sequence_index."""

from __future__ import annotations

import types

import pandas as pd
import pytest

from tsgridkit.core.errors import EmptyRangeError, NonAlignedTimestampError
from tsgridkit.time import Grid, count_points, generate_sequence, sequence_index

NY = "America/New_York"


class TestGenerateSequence:
    def test_daily_inclusive(self) -> None:
        grid = Grid("day", "2016-10-21")
        seq = list(generate_sequence(grid, "2016-10-21", "2016-10-26"))
        assert seq == list(pd.date_range("2016-10-21", "2016-10-26", freq="D", tz="UTC"))

    def test_end_need_not_be_aligned(self) -> None:
        grid = Grid("day", "2016-10-21")
        seq = list(generate_sequence(grid, "2016-10-21", "2016-10-23 18:00"))
        assert seq[-1] == pd.Timestamp("2016-10-23", tz="UTC")
        assert len(seq) == 3

    def test_single_point(self) -> None:
        grid = Grid("hour", "2024-01-01")
        assert list(generate_sequence(grid, "2024-01-01 05:00", "2024-01-01 05:59")) == [
            pd.Timestamp("2024-01-01 05:00", tz="UTC")
        ]

    def test_is_lazy_and_restartable(self) -> None:
        grid = Grid("15 min", "2024-01-01")
        seq = generate_sequence(grid, "2024-01-01", "2024-01-02")
        assert isinstance(seq, types.GeneratorType)
        first = list(seq)
        again = list(generate_sequence(grid, "2024-01-01", "2024-01-02"))
        assert first == again
        assert len(first) == 97

    def test_consecutive_points_are_one_step_apart(self) -> None:
        grid = Grid("month", "2024-01-31", tz=NY)
        seq = list(generate_sequence(grid, "2024-01-31", "2025-01-31"))
        assert all(a < b for a, b in zip(seq, seq[1:]))
        assert all(grid.step(a, 1) == b for a, b in zip(seq, seq[1:]))

    def test_month_end_sequence(self) -> None:
        grid = Grid("month", "2024-01-31")
        days = [ts.strftime("%Y-%m-%d") for ts in generate_sequence(grid, "2024-01-31", "2024-06-30")]
        assert days == ["2024-01-31", "2024-02-29", "2024-03-31", "2024-04-30", "2024-05-31", "2024-06-30"]

    def test_start_after_end_raises(self) -> None:
        grid = Grid("day", "2024-01-01")
        with pytest.raises(EmptyRangeError):
            generate_sequence(grid, "2024-01-05", "2024-01-01")

    def test_unaligned_start_raises(self) -> None:
        grid = Grid("day", "2016-10-21")
        with pytest.raises(NonAlignedTimestampError) as exc_info:
            generate_sequence(grid, "2016-10-21 06:00", "2016-10-26")
        assert "2016-10-21 00:00:00" in exc_info.value.context["previous_boundary"]


class TestCountPoints:
    def test_matches_generated_length(self) -> None:
        grid = Grid("3 hours", "2024-01-01")
        start, end = "2024-01-01", "2024-01-08 07:00"
        assert count_points(grid, start, end) == len(list(generate_sequence(grid, start, end)))

    def test_year_count(self) -> None:
        grid = Grid.natural("year", "2000-01-01")
        assert count_points(grid, "2000-01-01", "2024-12-31") == 25


class TestSequenceIndex:
    def test_one_point_per_civil_day_across_spring_forward(self) -> None:
        grid = Grid("day", "2024-03-08", tz=NY)
        index = sequence_index(grid, "2024-03-08", "2024-03-12", name="ds")
        assert index.name == "ds"
        assert list(index.tz_localize(None)) == list(pd.date_range("2024-03-08", periods=5, freq="D"))
        spans = list(index.to_series().diff().dropna())
        assert spans == [pd.Timedelta(hours=h) for h in (24, 24, 23, 24)]

    def test_hours_across_fall_back_cover_every_instant(self) -> None:
        grid = Grid("hour", "2024-11-03", tz=NY)
        index = sequence_index(grid, "2024-11-03", "2024-11-03 03:00")
        assert len(index) == 5
        assert list(index.hour) == [0, 1, 1, 2, 3]
