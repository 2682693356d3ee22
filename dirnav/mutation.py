"""Entry deletion with a single completion callback.

Deletion is best-effort: every entry is attempted, failures are collected as
``DeleteFailed`` values, and ``on_complete`` fires exactly once afterwards.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .entries import Entry
from .errors import DeleteFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteResult:
    deleted: tuple[Entry, ...] = ()
    failed: tuple[DeleteFailed, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed


DeleteCallback = Callable[[DeleteResult], None]


def _delete_one(entry: Entry, recursive: bool) -> None:
    mode = os.lstat(entry.path).st_mode
    if not stat.S_ISDIR(mode):
        os.unlink(entry.path)
    elif recursive:
        shutil.rmtree(entry.path)
    else:
        os.rmdir(entry.path)


def delete_entries(
    entries: Iterable[Entry],
    on_complete: DeleteCallback | None = None,
    *,
    recursive: bool = False,
) -> DeleteResult:
    """Delete ``entries`` and report the aggregate result.

    Files and symlinks are unlinked; directories must be empty unless
    ``recursive`` is set.
    """
    deleted: list[Entry] = []
    failed: list[DeleteFailed] = []
    for entry in entries:
        try:
            _delete_one(entry, recursive)
        except OSError as exc:
            logger.warning("delete failed for %s: %s", entry, exc)
            failed.append(DeleteFailed(entry, exc))
            continue
        logger.debug("deleted %s", entry)
        deleted.append(entry)

    result = DeleteResult(deleted=tuple(deleted), failed=tuple(failed))
    if on_complete is not None:
        on_complete(result)
    return result


__all__ = ["DeleteCallback", "DeleteResult", "delete_entries"]
