"""Application interface and its filesystem implementation.

An application bundles everything a listing UI needs for one kind of
navigable data. Hosts pick an implementation at construction time and talk to
it only through ``Application``; the host side of ``open`` is a
``NavigationTarget``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from .attributes import AttributeFormatter
from .columns import ColumnProjector, HeaderSpec, Row
from .entries import (
    ENTRY_KIND_DIRECTORY,
    ENTRY_KIND_FILE,
    ENTRY_KIND_SYMLINK,
    Entry,
    display_name,
    entry_kind,
    list_children,
    parent_of,
)
from .errors import NotFound, UnsupportedEntry
from .mutation import DeleteCallback, DeleteResult, delete_entries
from .settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


class NavigationTarget(Protocol):
    """Host collaborator receiving the outcome of ``Application.open``."""

    def open_file(self, path: Path) -> None: ...

    def navigate(self, path: Path) -> None: ...


class Application(Protocol):
    def list_children(self, directory: Entry) -> list[Entry]: ...

    def display_name(self, entry: Entry) -> str: ...

    def parent_of(self, entry: Entry) -> Entry: ...

    def open(self, entry: Entry, target: NavigationTarget) -> None: ...

    def entity_to_columns(self, entry: Entry) -> Row: ...

    def header_spec(self) -> tuple[HeaderSpec, ...]: ...

    def active_columns(self) -> tuple[str, ...]: ...

    def set_active_columns(self, column_ids: Iterable[str]) -> None: ...

    def delete(
        self,
        entries: Iterable[Entry],
        on_complete: DeleteCallback | None = None,
        *,
        recursive: bool = False,
    ) -> DeleteResult: ...


class FilesystemApplication:
    """Local-filesystem listings configured by ``Settings``."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self.formatter = AttributeFormatter(
            time_format=settings.time_format,
            size_flavor=settings.size_flavor,
            id_format=settings.id_format,
        )
        self.projector = ColumnProjector(self.formatter, settings.active_columns)

    def list_children(self, directory: Entry) -> list[Entry]:
        return list_children(
            directory,
            show_hidden=self.settings.show_hidden,
            sort_order=self.settings.sort_order,
        )

    def display_name(self, entry: Entry) -> str:
        return display_name(entry)

    def parent_of(self, entry: Entry) -> Entry:
        return parent_of(entry)

    def open(self, entry: Entry, target: NavigationTarget) -> None:
        """Dispatch on entry kind: directories navigate, regular files open.

        Symlinks dispatch on what they point at; a dangling link raises
        ``NotFound``. Any other kind raises ``UnsupportedEntry``.
        """
        kind = entry_kind(entry)
        if kind == ENTRY_KIND_SYMLINK:
            resolved = Entry.of(os.path.realpath(entry.path))
            if not os.path.exists(resolved.path):
                raise NotFound(entry.path, verb="follow link")
            logger.debug("following symlink %s -> %s", entry, resolved)
            kind = entry_kind(resolved)
        if kind == ENTRY_KIND_DIRECTORY:
            target.navigate(entry.path)
        elif kind == ENTRY_KIND_FILE:
            target.open_file(entry.path)
        else:
            raise UnsupportedEntry(entry, kind)

    def entity_to_columns(self, entry: Entry) -> Row:
        return self.projector.row_for(entry)

    def header_spec(self) -> tuple[HeaderSpec, ...]:
        return self.projector.header_spec()

    def active_columns(self) -> tuple[str, ...]:
        return self.projector.active_columns()

    def set_active_columns(self, column_ids: Iterable[str]) -> None:
        self.projector.set_active_columns(column_ids)

    def delete(
        self,
        entries: Iterable[Entry],
        on_complete: DeleteCallback | None = None,
        *,
        recursive: bool = False,
    ) -> DeleteResult:
        """Delete ``entries``; ``recursive`` applies to this call only."""
        return delete_entries(entries, on_complete, recursive=recursive)


__all__ = ["Application", "FilesystemApplication", "NavigationTarget"]
