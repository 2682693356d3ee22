"""Directory enumeration plus parent/name helpers for entries.

Listings are never partial: a directory that cannot be scanned raises instead
of returning whatever was read before the failure.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import ListingFailed, NotFound, PermissionDenied
from .types import (
    ENTRY_KIND_DIRECTORY,
    ENTRY_KIND_FILE,
    ENTRY_KIND_OTHER,
    ENTRY_KIND_SYMLINK,
    Entry,
)

logger = logging.getLogger(__name__)

SORT_BY_NAME = "name"
SORT_DIRS_FIRST = "dirs-first"
SORT_NONE = "none"
SORT_ORDERS = (SORT_BY_NAME, SORT_DIRS_FIRST, SORT_NONE)


def _as_entry(value: Entry | str | os.PathLike[str]) -> Entry:
    return value if isinstance(value, Entry) else Entry.of(value)


def _listing_error(path: Path, exc: OSError, verb: str = "list") -> ListingFailed:
    """Map an ``OSError`` onto the listing error taxonomy."""
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return NotFound(path, exc, verb=verb)
    if isinstance(exc, PermissionError):
        return PermissionDenied(path, exc, verb=verb)
    return ListingFailed(path, exc, verb=verb)


def list_children(
    directory: Entry | str | os.PathLike[str],
    *,
    show_hidden: bool = True,
    sort_order: str = SORT_BY_NAME,
) -> list[Entry]:
    """Return direct children of ``directory`` as fresh entries.

    ``sort_order`` is ``"name"`` (lexicographic), ``"dirs-first"`` (directories
    first, then case-insensitive name) or ``"none"`` (whatever the filesystem
    enumeration yields). Raises ``NotFound``, ``PermissionDenied`` or
    ``ListingFailed``; an empty directory returns ``[]``.
    """
    if sort_order not in SORT_ORDERS:
        raise ValueError(f"unknown sort order: {sort_order!r}")

    parent = _as_entry(directory)
    children: list[tuple[Entry, bool]] = []
    try:
        with os.scandir(parent.path) as scanned:
            for child in scanned:
                if not show_hidden and child.name.startswith("."):
                    continue
                is_dir = False
                if sort_order == SORT_DIRS_FIRST:
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                children.append((Entry(parent.path / child.name), is_dir))
    except OSError as exc:
        raise _listing_error(parent.path, exc) from exc

    if sort_order == SORT_BY_NAME:
        children.sort(key=lambda item: item[0].path.name)
    elif sort_order == SORT_DIRS_FIRST:
        children.sort(key=lambda item: (not item[1], item[0].path.name.lower()))

    logger.debug("listed %d children of %s", len(children), parent.path)
    return [entry for entry, _is_dir in children]


def parent_of(entry: Entry | str | os.PathLike[str]) -> Entry:
    """Return the directory containing ``entry``; the root is its own parent."""
    entry = _as_entry(entry)
    return Entry(entry.path.parent)


def display_name(entry: Entry | str | os.PathLike[str]) -> str:
    """Return the final path component, or the full path for the root."""
    entry = _as_entry(entry)
    return entry.path.name or str(entry.path)


def entry_kind(entry: Entry | str | os.PathLike[str]) -> str:
    """Classify ``entry`` without following symlinks.

    Raises ``NotFound`` when the path has vanished (or a parent component is
    not a directory), ``PermissionDenied`` when it cannot be reached, and
    ``ListingFailed`` for any other ``lstat`` failure such as an overlong name.
    """
    entry = _as_entry(entry)
    try:
        mode = os.lstat(entry.path).st_mode
    except OSError as exc:
        raise _listing_error(entry.path, exc, verb="access") from exc
    if stat.S_ISDIR(mode):
        return ENTRY_KIND_DIRECTORY
    if stat.S_ISLNK(mode):
        return ENTRY_KIND_SYMLINK
    if stat.S_ISREG(mode):
        return ENTRY_KIND_FILE
    return ENTRY_KIND_OTHER


__all__ = [
    "SORT_BY_NAME",
    "SORT_DIRS_FIRST",
    "SORT_NONE",
    "SORT_ORDERS",
    "list_children",
    "parent_of",
    "display_name",
    "entry_kind",
]
