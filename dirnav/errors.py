"""Error taxonomy for listing, metadata, open dispatch, and deletion.

Every error wraps the originating ``OSError`` (when there is one) as ``cause``
and is raised with ``from`` so tracebacks keep the syscall failure.
"""

from __future__ import annotations

from pathlib import Path


class DirnavError(Exception):
    """Base class for all dirnav errors."""


class ListingFailed(DirnavError):
    """A path could not be listed or inspected.

    ``verb`` names the attempted operation in the message: ``"list"`` for
    directory enumeration, ``"access"`` for entry-kind lookups.
    """

    def __init__(self, path: Path, cause: BaseException | None = None, *, verb: str = "list") -> None:
        self.path = path
        self.cause = cause
        self.verb = verb
        detail = f": {cause.strerror or cause}" if isinstance(cause, OSError) else ""
        super().__init__(f"cannot {verb} {path}{detail}")


class NotFound(ListingFailed):
    """The path does not exist or is not a directory."""


class PermissionDenied(ListingFailed):
    """Access to the path was refused."""


class StatFailed(DirnavError):
    """Metadata for an entry is unavailable (usually removed mid-render)."""

    def __init__(self, entry: object, cause: BaseException | None = None) -> None:
        self.entry = entry
        self.cause = cause
        super().__init__(f"cannot stat {entry}: {cause}")


class DeleteFailed(DirnavError):
    """One entry could not be removed."""

    def __init__(self, entry: object, cause: BaseException) -> None:
        self.entry = entry
        self.cause = cause
        super().__init__(f"cannot delete {entry}: {cause}")


class UnsupportedEntry(DirnavError):
    """Open was requested for an entry kind with no dispatch branch."""

    def __init__(self, entry: object, kind: str) -> None:
        self.entry = entry
        self.kind = kind
        super().__init__(f"cannot open {entry}: unsupported entry kind {kind!r}")


__all__ = [
    "DirnavError",
    "ListingFailed",
    "NotFound",
    "PermissionDenied",
    "StatFailed",
    "DeleteFailed",
    "UnsupportedEntry",
]
