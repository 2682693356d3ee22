"""Entry datatype shared by resolver, formatter, projector, and mutation code."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENTRY_KIND_DIRECTORY = "directory"
ENTRY_KIND_FILE = "file"
ENTRY_KIND_SYMLINK = "symlink"
ENTRY_KIND_OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One filesystem path; identity is the absolute path alone."""

    path: Path

    @classmethod
    def of(cls, path: str | os.PathLike[str]) -> Entry:
        """Build an entry from any path, made absolute without resolving symlinks."""
        return cls(Path(os.path.abspath(os.fspath(path))))

    def __str__(self) -> str:
        return str(self.path)


__all__ = [
    "Entry",
    "ENTRY_KIND_DIRECTORY",
    "ENTRY_KIND_FILE",
    "ENTRY_KIND_SYMLINK",
    "ENTRY_KIND_OTHER",
]
