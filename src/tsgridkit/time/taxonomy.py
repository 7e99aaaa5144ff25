"""Interval taxonomy: granularities, intervals and interval tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from tsgridkit.core.errors import UnrecognizedIntervalError


class Granularity(StrEnum):
    """Canonical recurrence granularities, ordered finer to coarser."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def rank(self) -> int:
        return GRANULARITIES.index(self)

    @property
    def is_calendar(self) -> bool:
        """Whether the span of one unit varies with where it starts."""
        return self in (Granularity.MONTH, Granularity.QUARTER, Granularity.YEAR)

    @property
    def nominal_seconds(self) -> float:
        """Average length of one unit, used only to compare intervals."""
        return _NOMINAL_SECONDS[self]

    # StrEnum would otherwise compare alphabetically.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Granularity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Granularity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Granularity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Granularity):
            return NotImplemented
        return self.rank >= other.rank


GRANULARITIES: tuple[Granularity, ...] = tuple(Granularity)

_DAY = 86_400.0
_MONTH = 365.2425 * _DAY / 12

_NOMINAL_SECONDS: dict[Granularity, float] = {
    Granularity.SECOND: 1.0,
    Granularity.MINUTE: 60.0,
    Granularity.HOUR: 3_600.0,
    Granularity.DAY: _DAY,
    Granularity.WEEK: 7 * _DAY,
    Granularity.MONTH: _MONTH,
    Granularity.QUARTER: 3 * _MONTH,
    Granularity.YEAR: 12 * _MONTH,
}

# Derived granularities and the base unit they are a fixed multiple of.
_DERIVED: dict[Granularity, tuple[Granularity, int]] = {
    Granularity.WEEK: (Granularity.DAY, 7),
    Granularity.QUARTER: (Granularity.MONTH, 3),
}

_ALIASES: dict[str, Granularity] = {
    "s": Granularity.SECOND,
    "sec": Granularity.SECOND,
    "second": Granularity.SECOND,
    "min": Granularity.MINUTE,
    "minute": Granularity.MINUTE,
    "h": Granularity.HOUR,
    "hr": Granularity.HOUR,
    "hour": Granularity.HOUR,
    "d": Granularity.DAY,
    "day": Granularity.DAY,
    "wk": Granularity.WEEK,
    "week": Granularity.WEEK,
    "mon": Granularity.MONTH,
    "month": Granularity.MONTH,
    "qtr": Granularity.QUARTER,
    "quarter": Granularity.QUARTER,
    "yr": Granularity.YEAR,
    "year": Granularity.YEAR,
}

_TOKEN_RE = re.compile(r"^\s*(\d+)?\s*([A-Za-z]+)\s*$")


@dataclass(frozen=True)
class Interval:
    """A granularity with a positive integer multiplier.

    ``Interval(WEEK, n)`` and ``Interval(QUARTER, n)`` with ``n > 1`` are
    stored as ``(DAY, 7n)`` and ``(MONTH, 3n)``: only base granularities
    carry a step.
    """

    granularity: Granularity
    multiplier: int = 1

    def __post_init__(self) -> None:
        granularity = Granularity(self.granularity)
        multiplier = int(self.multiplier)
        if multiplier < 1:
            raise ValueError(f"multiplier must be at least 1, got {self.multiplier}")
        if multiplier > 1 and granularity in _DERIVED:
            granularity, factor = _DERIVED[granularity]
            multiplier *= factor
        object.__setattr__(self, "granularity", granularity)
        object.__setattr__(self, "multiplier", multiplier)

    @property
    def is_calendar(self) -> bool:
        return self.granularity.is_calendar

    @property
    def nominal_seconds(self) -> float:
        return self.multiplier * self.granularity.nominal_seconds

    def _key(self) -> tuple[float, int]:
        return (self.nominal_seconds, self.granularity.rank)

    def __lt__(self, other: Interval) -> bool:
        return self._key() < other._key()

    def __le__(self, other: Interval) -> bool:
        return self._key() <= other._key()

    def __gt__(self, other: Interval) -> bool:
        return self._key() > other._key()

    def __ge__(self, other: Interval) -> bool:
        return self._key() >= other._key()

    def __str__(self) -> str:
        if self.multiplier == 1:
            return self.granularity.value
        return f"{self.multiplier} {self.granularity.value}"


def _lookup_unit(name: str) -> Granularity | None:
    name = name.lower()
    if name in _ALIASES:
        return _ALIASES[name]
    if name.endswith("s") and name[:-1] in _ALIASES:
        return _ALIASES[name[:-1]]
    return None


def parse_interval(token: Any) -> Interval:
    """Parse an interval token.

    Accepts an ``Interval``, a ``(granularity, multiplier)`` pair or a string
    such as ``"15 min"``, ``"2 days"`` or ``"Month"``.

    Raises:
        UnrecognizedIntervalError: If the unit names no granularity or the
            multiplier is zero.
    """
    if isinstance(token, Interval):
        return token

    if isinstance(token, Granularity):
        return Interval(token)

    if isinstance(token, tuple) and len(token) == 2:
        name, multiplier = token
        granularity = name if isinstance(name, Granularity) else _lookup_unit(str(name))
        if granularity is None or not isinstance(multiplier, int) or multiplier < 1:
            raise UnrecognizedIntervalError(
                f"Invalid interval pair {token!r}",
                context={"token": repr(token)},
            )
        return Interval(granularity, multiplier)

    if not isinstance(token, str):
        raise UnrecognizedIntervalError(
            f"Interval must be a string or (granularity, multiplier) pair, got {type(token).__name__}",
            context={"token": repr(token)},
        )

    match = _TOKEN_RE.match(token)
    granularity = _lookup_unit(match.group(2)) if match else None
    if match is None or granularity is None:
        raise UnrecognizedIntervalError(
            f"Unrecognized interval {token!r}",
            context={"token": token, "valid_units": [g.value for g in GRANULARITIES]},
        )

    multiplier = int(match.group(1)) if match.group(1) else 1
    if multiplier < 1:
        raise UnrecognizedIntervalError(
            f"Interval multiplier must be at least 1 in {token!r}",
            context={"token": token, "multiplier": multiplier},
        )
    return Interval(granularity, multiplier)


__all__ = [
    "GRANULARITIES",
    "Granularity",
    "Interval",
    "parse_interval",
]
