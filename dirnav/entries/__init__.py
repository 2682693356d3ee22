"""Entry resolution: directory listings, parents, names, and entry kinds.

Leaf layer of the core; nothing here formats or renders.
"""

from __future__ import annotations

from .resolver import (
    SORT_BY_NAME,
    SORT_DIRS_FIRST,
    SORT_NONE,
    SORT_ORDERS,
    display_name,
    entry_kind,
    list_children,
    parent_of,
)
from .types import (
    ENTRY_KIND_DIRECTORY,
    ENTRY_KIND_FILE,
    ENTRY_KIND_OTHER,
    ENTRY_KIND_SYMLINK,
    Entry,
)

__all__ = [
    "Entry",
    "ENTRY_KIND_DIRECTORY",
    "ENTRY_KIND_FILE",
    "ENTRY_KIND_SYMLINK",
    "ENTRY_KIND_OTHER",
    "SORT_BY_NAME",
    "SORT_DIRS_FIRST",
    "SORT_NONE",
    "SORT_ORDERS",
    "list_children",
    "parent_of",
    "display_name",
    "entry_kind",
]
