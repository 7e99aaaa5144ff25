"""Pydantic specs for thicken and pad requests.

These models validate orchestrator arguments and make requests
JSON-constructible, e.g. ``PadSpec.model_validate_json(payload)``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

import pandas as pd
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainValidator

from tsgridkit.time.taxonomy import Interval, parse_interval

# ---------------------------
# Common
# ---------------------------


def _coerce_timestamp(value: Any) -> pd.Timestamp:
    if value is None:
        raise ValueError("timestamp must not be None")
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError("timestamp must not be missing")
    return ts


def _coerce_interval(value: Any) -> Interval:
    if value is None:
        raise ValueError("interval must not be None")
    if isinstance(value, dict):
        return parse_interval((value.get("granularity"), value.get("multiplier", 1)))
    return parse_interval(value)


def _coerce_group(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    if isinstance(value, tuple):
        return list(value)
    return value


IntervalField = Annotated[Interval, PlainValidator(_coerce_interval)]
TimestampField = Annotated[pd.Timestamp, PlainValidator(_coerce_timestamp)]
GroupField = Annotated[list[str], BeforeValidator(_coerce_group)]
Rounding = Literal["down", "up"]


class BaseSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


# ---------------------------
# Requests
# ---------------------------


class ThickenSpec(BaseSpec):
    """Arguments of :func:`tsgridkit.thicken`."""

    interval: IntervalField
    by: str | None = None
    group: GroupField | None = None
    colname: str | None = None
    rounding: Rounding | None = None
    start_val: TimestampField | None = None
    drop: bool = False


class PadSpec(BaseSpec):
    """Arguments of :func:`tsgridkit.pad`."""

    interval: IntervalField | None = None
    by: str | None = None
    group: GroupField | None = None
    start_val: TimestampField | None = None
    end_val: TimestampField | None = None
    break_above: int | None = Field(default=None, ge=1)


__all__ = [
    "BaseSpec",
    "PadSpec",
    "Rounding",
    "ThickenSpec",
]
