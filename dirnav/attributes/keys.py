"""Closed set of attribute keys retrievable for one entry."""

from __future__ import annotations

TYPE = "type"
LINK_COUNT = "link-count"
UID = "uid"
GID = "gid"
ACCESS_TIME = "access-time"
MODIFICATION_TIME = "modification-time"
STATUS_CHANGE_TIME = "status-change-time"
SIZE = "size"
MODES = "modes"
INODE_NUMBER = "inode-number"
DEVICE_NUMBER = "device-number"

ATTRIBUTE_KEYS = (
    TYPE,
    LINK_COUNT,
    UID,
    GID,
    ACCESS_TIME,
    MODIFICATION_TIME,
    STATUS_CHANGE_TIME,
    SIZE,
    MODES,
    INODE_NUMBER,
    DEVICE_NUMBER,
)

TIME_KEYS = (ACCESS_TIME, MODIFICATION_TIME, STATUS_CHANGE_TIME)


def is_attribute_key(value: object) -> bool:
    return isinstance(value, str) and value in ATTRIBUTE_KEYS
