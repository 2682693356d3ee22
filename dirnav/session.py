"""Navigation session: current directory, listing, and directory history.

The session is the ``NavigationTarget`` handed to ``Application.open``.
A directory switch lists the target first, so a listing error leaves the
session exactly where it was.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from .application import Application
from .columns import HeaderSpec, Row
from .entries import Entry
from .mutation import DeleteResult

logger = logging.getLogger(__name__)

MAX_DIRECTORY_HISTORY = 256

OpenFileHandler = Callable[[Path], None]


class DirectoryHistory:
    """Bounded back/forward stacks of visited directories.

    Adjacent duplicate directories are suppressed to avoid no-op navigation steps.
    """

    def __init__(self, max_entries: int = MAX_DIRECTORY_HISTORY) -> None:
        self.max_entries = max(1, max_entries)
        self.back: list[Entry] = []
        self.forward: list[Entry] = []

    def _append_unique(self, stack: list[Entry], directory: Entry) -> None:
        if stack and stack[-1] == directory:
            return
        stack.append(directory)
        overflow = len(stack) - self.max_entries
        if overflow > 0:
            del stack[:overflow]

    def record(self, origin: Entry) -> None:
        """Push ``origin`` onto the back stack and clear forward history."""
        self._append_unique(self.back, origin)
        self.forward.clear()

    def go_back(self, current: Entry) -> Entry | None:
        while self.back and self.back[-1] == current:
            self.back.pop()
        if not self.back:
            return None
        target = self.back.pop()
        self._append_unique(self.forward, current)
        return target

    def go_forward(self, current: Entry) -> Entry | None:
        while self.forward and self.forward[-1] == current:
            self.forward.pop()
        if not self.forward:
            return None
        target = self.forward.pop()
        self._append_unique(self.back, current)
        return target


class NavigationSession:
    def __init__(
        self,
        application: Application,
        directory: Entry | str | os.PathLike[str],
        open_file: OpenFileHandler | None = None,
    ) -> None:
        self.application = application
        self.history = DirectoryHistory()
        self._open_file = open_file
        self.last_opened_file: Path | None = None
        start = directory if isinstance(directory, Entry) else Entry.of(directory)
        self.entries: list[Entry] = application.list_children(start)
        self.directory = start

    def _show(self, directory: Entry) -> None:
        entries = self.application.list_children(directory)
        self.directory = directory
        self.entries = entries
        logger.debug("showing %s (%d entries)", directory, len(entries))

    def navigate(self, path: Path) -> None:
        target = Entry.of(path)
        if target == self.directory:
            self.refresh()
            return
        self._show_recorded(target)

    def _show_recorded(self, target: Entry) -> None:
        origin = self.directory
        self._show(target)
        self.history.record(origin)

    def open_file(self, path: Path) -> None:
        self.last_opened_file = path
        if self._open_file is None:
            logger.info("no file handler configured, not opening %s", path)
            return
        self._open_file(path)

    def open(self, entry: Entry) -> None:
        self.application.open(entry, self)

    def refresh(self) -> None:
        self._show(self.directory)

    def go_up(self) -> Entry:
        """Show the parent directory and return the directory just left.

        At the root the session stays put and the root itself is returned.
        """
        left = self.directory
        parent = self.application.parent_of(left)
        if parent != left:
            self._show_recorded(parent)
        return left

    def _go(self, step: Callable[[Entry], Entry | None]) -> bool:
        saved_back = list(self.history.back)
        saved_forward = list(self.history.forward)
        target = step(self.directory)
        if target is None:
            return False
        try:
            self._show(target)
        except Exception:
            self.history.back = saved_back
            self.history.forward = saved_forward
            raise
        return True

    def back(self) -> bool:
        return self._go(self.history.go_back)

    def forward(self) -> bool:
        return self._go(self.history.go_forward)

    def header(self) -> tuple[HeaderSpec, ...]:
        return self.application.header_spec()

    def rows(self) -> list[tuple[Entry, Row]]:
        return [(entry, self.application.entity_to_columns(entry)) for entry in self.entries]

    def delete(self, entries: Iterable[Entry], *, recursive: bool = False) -> DeleteResult:
        """Delete through the application, then re-list the current directory."""
        result = self.application.delete(list(entries), recursive=recursive)
        self.refresh()
        return result


__all__ = ["DirectoryHistory", "NavigationSession", "OpenFileHandler", "MAX_DIRECTORY_HISTORY"]
