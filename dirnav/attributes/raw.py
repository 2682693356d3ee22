"""Raw OS-level metadata snapshot for one entry.

One ``lstat`` call per snapshot; symlinks describe the link itself and expose
their target string as ``type``.
"""

from __future__ import annotations

import grp
import os
import pwd
import stat
from dataclasses import dataclass

from ..entries import Entry
from ..errors import StatFailed
from . import keys

ID_FORMAT_INTEGER = "integer"
ID_FORMAT_STRING = "string"
ID_FORMATS = (ID_FORMAT_INTEGER, ID_FORMAT_STRING)


@dataclass(frozen=True)
class AttributeSet:
    """Raw values keyed by attribute key (see ``keys.ATTRIBUTE_KEYS``)."""

    type: bool | str | None
    link_count: int
    uid: int | str
    gid: int | str
    access_time: float
    modification_time: float
    status_change_time: float
    size: int
    modes: str
    inode_number: int
    device_number: int

    def get(self, key: str) -> object:
        """Return the raw value for an attribute key such as ``"link-count"``."""
        if not keys.is_attribute_key(key):
            raise KeyError(key)
        return getattr(self, key.replace("-", "_"))


def _user_name(uid: int) -> int | str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return uid


def _group_name(gid: int) -> int | str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return gid


def raw_attributes(entry: Entry, *, id_format: str = ID_FORMAT_INTEGER) -> AttributeSet:
    """Stat ``entry`` and return its attribute snapshot.

    ``id_format="string"`` resolves owner/group ids to names, keeping the
    numeric id when no name is registered. Raises ``StatFailed`` when the
    entry cannot be stat'ed.
    """
    if id_format not in ID_FORMATS:
        raise ValueError(f"unknown id format: {id_format!r}")
    try:
        st = os.lstat(entry.path)
        file_type: bool | str | None = None
        if stat.S_ISDIR(st.st_mode):
            file_type = True
        elif stat.S_ISLNK(st.st_mode):
            file_type = os.readlink(entry.path)
    except OSError as exc:
        raise StatFailed(entry, exc) from exc

    uid: int | str = st.st_uid
    gid: int | str = st.st_gid
    if id_format == ID_FORMAT_STRING:
        uid = _user_name(st.st_uid)
        gid = _group_name(st.st_gid)

    return AttributeSet(
        type=file_type,
        link_count=st.st_nlink,
        uid=uid,
        gid=gid,
        access_time=st.st_atime,
        modification_time=st.st_mtime,
        status_change_time=st.st_ctime,
        size=st.st_size,
        modes=stat.filemode(st.st_mode),
        inode_number=st.st_ino,
        device_number=st.st_dev,
    )


__all__ = [
    "AttributeSet",
    "ID_FORMAT_INTEGER",
    "ID_FORMAT_STRING",
    "ID_FORMATS",
    "raw_attributes",
]
