"""Series module for tsgridkit.

Binds the time utilities to tables: column discovery, thickening, padding.
"""

from .columns import as_frame, datetime_columns, resolve_datetime_column, resolve_group_columns
from .interval import get_interval
from .pad import pad
from .thicken import thicken

__all__ = [
    # Columns
    "as_frame",
    "datetime_columns",
    "resolve_datetime_column",
    "resolve_group_columns",
    # Orchestrators
    "get_interval",
    "pad",
    "thicken",
]
