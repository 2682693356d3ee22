"""Column registry and the projector turning entries into rows."""

from __future__ import annotations

from .projector import STAT_FAILED_PLACEHOLDER, ColumnProjector
from .specs import (
    COLUMN_ACCESS_TIME,
    COLUMN_EXT,
    COLUMN_GROUP,
    COLUMN_IDS,
    COLUMN_MODES,
    COLUMN_MODIFICATION_TIME,
    COLUMN_NAME,
    COLUMN_SIZE,
    COLUMN_SPECS,
    COLUMN_STATUS_CHANGE_TIME,
    COLUMN_USER,
    DEFAULT_COLUMNS,
    Cell,
    ColumnSpec,
    ColumnValue,
    HeaderSpec,
    Row,
)

__all__ = [
    "ColumnProjector",
    "STAT_FAILED_PLACEHOLDER",
    "COLUMN_SIZE",
    "COLUMN_NAME",
    "COLUMN_USER",
    "COLUMN_GROUP",
    "COLUMN_MODES",
    "COLUMN_ACCESS_TIME",
    "COLUMN_MODIFICATION_TIME",
    "COLUMN_STATUS_CHANGE_TIME",
    "COLUMN_EXT",
    "COLUMN_IDS",
    "COLUMN_SPECS",
    "DEFAULT_COLUMNS",
    "Cell",
    "ColumnSpec",
    "ColumnValue",
    "HeaderSpec",
    "Row",
]
