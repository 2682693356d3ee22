"""Static column registry: value function, header descriptor, and style tag."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

from ..attributes import EntryAttributes, keys
from ..entries import Entry, display_name

ColumnValue = Callable[[Entry, EntryAttributes], str]

COLUMN_SIZE = "size"
COLUMN_NAME = "name"
COLUMN_USER = "user"
COLUMN_GROUP = "group"
COLUMN_MODES = "modes"
COLUMN_ACCESS_TIME = "access-time"
COLUMN_MODIFICATION_TIME = "modification-time"
COLUMN_STATUS_CHANGE_TIME = "status-change-time"
COLUMN_EXT = "ext"

DEFAULT_COLUMNS = (COLUMN_SIZE, COLUMN_NAME)


class HeaderSpec(NamedTuple):
    """Header descriptor for one column."""

    title: str
    width: int
    sortable: bool = True
    right_align: bool = False


class Cell(NamedTuple):
    """One rendered cell: text plus the style tag the UI maps to a color."""

    text: str
    style: str | None


Row = tuple[Cell, ...]


@dataclass(frozen=True)
class ColumnSpec:
    column_id: str
    value: ColumnValue
    header: HeaderSpec
    style: str


def _attribute_value(key: str) -> ColumnValue:
    def value(entry: Entry, attributes: EntryAttributes) -> str:
        return attributes.formatted(key)

    value.__name__ = f"{key.replace('-', '_')}_value"
    return value


def _name_value(entry: Entry, attributes: EntryAttributes) -> str:
    return display_name(entry)


def _ext_value(entry: Entry, attributes: EntryAttributes) -> str:
    if attributes.get(keys.TYPE) is True:
        return ""
    return entry.path.suffix[1:]


def _spec(column_id: str, value: ColumnValue, header: HeaderSpec) -> ColumnSpec:
    return ColumnSpec(column_id, value, header, style=f"dirnav-{column_id}")


COLUMN_SPECS: dict[str, ColumnSpec] = {
    spec.column_id: spec
    for spec in (
        _spec(COLUMN_SIZE, _attribute_value(keys.SIZE), HeaderSpec("Size", 7, True, True)),
        _spec(COLUMN_NAME, _name_value, HeaderSpec("Name", 40)),
        _spec(COLUMN_USER, _attribute_value(keys.UID), HeaderSpec("User", 10)),
        _spec(COLUMN_GROUP, _attribute_value(keys.GID), HeaderSpec("Group", 10)),
        _spec(COLUMN_MODES, _attribute_value(keys.MODES), HeaderSpec("Modes", 10, False)),
        _spec(COLUMN_ACCESS_TIME, _attribute_value(keys.ACCESS_TIME), HeaderSpec("Accessed", 16)),
        _spec(COLUMN_MODIFICATION_TIME, _attribute_value(keys.MODIFICATION_TIME), HeaderSpec("Modified", 16)),
        _spec(COLUMN_STATUS_CHANGE_TIME, _attribute_value(keys.STATUS_CHANGE_TIME), HeaderSpec("Changed", 16)),
        _spec(COLUMN_EXT, _ext_value, HeaderSpec("Ext", 6)),
    )
}

COLUMN_IDS = tuple(COLUMN_SPECS)


__all__ = [
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
