"""Column discovery on the input table.

The datetime and grouping columns are resolved once, at the orchestrator
boundary; the time functions below it only ever see values.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from tsgridkit.core.errors import (
    AmbiguousColumnError,
    ColumnError,
    ColumnNotFoundError,
    NoDatetimeColumnError,
)


def as_frame(data: Any) -> pd.DataFrame:
    """Convert supported inputs to a DataFrame without mutating the original."""
    if isinstance(data, pd.DataFrame):
        return data.copy()
    if hasattr(data, "to_pandas"):
        return data.to_pandas()
    if isinstance(data, (dict, list)):
        return pd.DataFrame(data)
    raise ColumnError(
        "Data must be a DataFrame or convertible to DataFrame",
        context={"type": type(data).__name__},
    )


def datetime_columns(df: pd.DataFrame) -> list[str]:
    """Names of all datetime-typed columns, in column order."""
    return [col for col in df.columns if pd.api.types.is_datetime64_any_dtype(df[col])]


def resolve_datetime_column(df: pd.DataFrame, by: str | None = None) -> str:
    """Return the datetime column to work on.

    Args:
        df: Input table
        by: Explicit column name, or None to use the only datetime column

    Raises:
        ColumnNotFoundError: If ``by`` is not a column.
        ColumnError: If ``by`` is not datetime-typed.
        NoDatetimeColumnError: If ``by`` is None and there is no datetime column.
        AmbiguousColumnError: If ``by`` is None and there are several.
    """
    if by is not None:
        if by not in df.columns:
            raise ColumnNotFoundError(
                f"Column '{by}' not found",
                context={"column": by, "available": [str(c) for c in df.columns]},
            )
        if not pd.api.types.is_datetime64_any_dtype(df[by]):
            raise ColumnError(
                f"Column '{by}' must be datetime type",
                context={"column": by, "actual_type": str(df[by].dtype)},
                fix_hint="Convert the column with pandas.to_datetime first",
            )
        return by

    candidates = datetime_columns(df)
    if not candidates:
        raise NoDatetimeColumnError(
            "No datetime column found",
            context={"dtypes": {str(c): str(t) for c, t in df.dtypes.items()}},
        )
    if len(candidates) > 1:
        raise AmbiguousColumnError(
            f"Found {len(candidates)} datetime columns and none was named",
            context={"candidates": candidates},
        )
    return candidates[0]


def resolve_group_columns(
    df: pd.DataFrame,
    group: str | list[str] | tuple[str, ...] | None,
    exclude: str | None = None,
) -> list[str]:
    """Normalize a grouping argument to a list of existing column names."""
    if group is None:
        return []
    columns = [group] if isinstance(group, str) else list(group)

    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ColumnNotFoundError(
            f"Grouping columns not found: {missing}",
            context={"missing": missing, "available": [str(c) for c in df.columns]},
        )
    if exclude is not None and exclude in columns:
        raise ColumnError(
            f"Column '{exclude}' cannot be both the datetime and a grouping column",
            context={"column": exclude, "group": columns},
        )
    return columns


__all__ = [
    "as_frame",
    "datetime_columns",
    "resolve_datetime_column",
    "resolve_group_columns",
]
