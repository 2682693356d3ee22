"""Entry metadata retrieval and attribute formatting."""

from __future__ import annotations

from . import keys
from .formatting import (
    DEFAULT_TIME_FORMAT,
    SIZE_FLAVOR_BINARY,
    SIZE_FLAVOR_DECIMAL,
    SIZE_FLAVOR_IEC,
    SIZE_FLAVORS,
    AttributeFormatter,
    AttributeHandler,
    EntryAttributes,
    default_stringify,
    format_file_type,
    format_integer,
    format_timestamp,
    human_readable_size,
)
from .raw import ID_FORMAT_INTEGER, ID_FORMAT_STRING, ID_FORMATS, AttributeSet, raw_attributes

__all__ = [
    "keys",
    "AttributeSet",
    "AttributeFormatter",
    "AttributeHandler",
    "EntryAttributes",
    "DEFAULT_TIME_FORMAT",
    "SIZE_FLAVOR_BINARY",
    "SIZE_FLAVOR_DECIMAL",
    "SIZE_FLAVOR_IEC",
    "SIZE_FLAVORS",
    "ID_FORMAT_INTEGER",
    "ID_FORMAT_STRING",
    "ID_FORMATS",
    "default_stringify",
    "format_file_type",
    "format_integer",
    "format_timestamp",
    "human_readable_size",
    "raw_attributes",
]
