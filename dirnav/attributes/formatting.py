"""Attribute-to-text formatting with a per-key handler registry.

``AttributeFormatter.format`` applies the handler registered for a key, falling
back to ``default_stringify``. ``AttributeFormatter.scoped`` hands out a
per-entry attribute view that stats the entry at most once and is released on
every exit path, so one row render never sees another entry's metadata.
"""

from __future__ import annotations

import contextlib
import logging
import numbers
import time
from collections.abc import Callable, Iterator, Mapping

from ..entries import Entry
from ..errors import StatFailed
from . import keys
from .raw import ID_FORMAT_INTEGER, ID_FORMATS, AttributeSet, raw_attributes

logger = logging.getLogger(__name__)

AttributeHandler = Callable[[object], str]

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M"

SIZE_FLAVOR_BINARY = "binary"
SIZE_FLAVOR_DECIMAL = "decimal"
SIZE_FLAVOR_IEC = "iec"
SIZE_FLAVORS = (SIZE_FLAVOR_BINARY, SIZE_FLAVOR_DECIMAL, SIZE_FLAVOR_IEC)

_BINARY_PREFIXES = ("", "K", "M", "G", "T", "P", "E", "Z", "Y")
_DECIMAL_PREFIXES = ("", "k", "M", "G", "T", "P", "E", "Z", "Y")


def default_stringify(value: object) -> str:
    """Strings pass through, ``None`` is empty, everything else uses ``str``."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return str(value)


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def human_readable_size(size: object, flavor: str = SIZE_FLAVOR_BINARY) -> str:
    """Render a byte count as ``10B``, ``1.5K``, ``12M``, ``1KiB`` and so on.

    ``binary`` and ``iec`` scale by 1024, ``decimal`` by 1000. One decimal is
    kept only below 10 units and only when the fraction would be visible.
    Non-numeric input is returned through ``default_stringify``.
    """
    if flavor not in SIZE_FLAVORS:
        raise ValueError(f"unknown size flavor: {flavor!r}")
    if not _is_number(size):
        return default_stringify(size)

    base = 1000.0 if flavor == SIZE_FLAVOR_DECIMAL else 1024.0
    prefixes = _DECIMAL_PREFIXES if flavor == SIZE_FLAVOR_DECIMAL else _BINARY_PREFIXES
    value = float(size)
    idx = 0
    while abs(value) >= base and idx < len(prefixes) - 1:
        value /= base
        idx += 1

    prefix = prefixes[idx]
    if not prefix:
        unit = "B"
    elif flavor == SIZE_FLAVOR_IEC:
        unit = f"{prefix}iB"
    else:
        unit = prefix

    fraction = abs(value) % 1.0
    if abs(value) < 10 and 0.05 <= fraction < 0.95:
        return f"{value:.1f}{unit}"
    return f"{value:.0f}{unit}"


def format_timestamp(value: object, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """Format epoch seconds in local time; non-numbers use ``default_stringify``."""
    if not _is_number(value):
        return default_stringify(value)
    return time.strftime(time_format, time.localtime(float(value)))


def format_file_type(value: object) -> str:
    """``True`` means directory, a string is a symlink target, anything else is a file."""
    if isinstance(value, str):
        return value
    if value is True:
        return "DIR"
    return "FILE"


def format_integer(value: object) -> str:
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return str(int(value))
    return default_stringify(value)


class EntryAttributes:
    """Attribute view for exactly one entry during one render.

    The first lookup stats the entry; later lookups reuse that snapshot. A
    stat failure is remembered too, so a vanished entry is stat'ed once and
    every dependent lookup raises ``StatFailed``.
    """

    def __init__(self, entry: Entry, formatter: AttributeFormatter) -> None:
        self.entry = entry
        self._formatter = formatter
        self._snapshot: AttributeSet | None = None
        self._failure: StatFailed | None = None
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def snapshot(self) -> AttributeSet:
        if self._released:
            raise RuntimeError(f"attributes for {self.entry} were already released")
        if self._snapshot is None and self._failure is None:
            try:
                self._snapshot = raw_attributes(self.entry, id_format=self._formatter.id_format)
            except StatFailed as exc:
                logger.debug("stat failed for %s: %s", self.entry, exc.cause)
                self._failure = exc
        if self._failure is not None:
            raise StatFailed(self.entry, self._failure.cause) from self._failure.cause
        assert self._snapshot is not None
        return self._snapshot

    def get(self, key: str) -> object:
        return self.snapshot().get(key)

    def formatted(self, key: str) -> str:
        return self._formatter.format(key, self.get(key))

    def release(self) -> None:
        self._snapshot = None
        self._failure = None
        self._released = True


class AttributeFormatter:
    """Formats raw attribute values using per-key handlers."""

    def __init__(
        self,
        time_format: str = DEFAULT_TIME_FORMAT,
        size_flavor: str = SIZE_FLAVOR_BINARY,
        id_format: str = ID_FORMAT_INTEGER,
        handlers: Mapping[str, AttributeHandler] | None = None,
    ) -> None:
        if size_flavor not in SIZE_FLAVORS:
            raise ValueError(f"unknown size flavor: {size_flavor!r}")
        if id_format not in ID_FORMATS:
            raise ValueError(f"unknown id format: {id_format!r}")
        self.time_format = time_format
        self.size_flavor = size_flavor
        self.id_format = id_format
        self._handlers: dict[str, AttributeHandler] = self._default_handlers()
        for key, handler in (handlers or {}).items():
            self.register(key, handler)

    def _default_handlers(self) -> dict[str, AttributeHandler]:
        def format_size(value: object) -> str:
            return human_readable_size(value, self.size_flavor)

        def format_time(value: object) -> str:
            return format_timestamp(value, self.time_format)

        handlers: dict[str, AttributeHandler] = {
            keys.TYPE: format_file_type,
            keys.SIZE: format_size,
            keys.LINK_COUNT: format_integer,
            keys.INODE_NUMBER: format_integer,
            keys.DEVICE_NUMBER: format_integer,
            # Registered so every key is accounted for; output is the default text.
            keys.UID: default_stringify,
            keys.GID: default_stringify,
            keys.MODES: default_stringify,
        }
        for key in keys.TIME_KEYS:
            handlers[key] = format_time
        return handlers

    def register(self, key: str, handler: AttributeHandler) -> None:
        """Install ``handler`` for ``key``, replacing any previous one."""
        if not keys.is_attribute_key(key):
            raise ValueError(f"unknown attribute key: {key!r}")
        self._handlers[key] = handler

    def unregister(self, key: str) -> None:
        """Drop the handler for ``key`` so it formats with ``default_stringify``."""
        self._handlers.pop(key, None)

    def handler_for(self, key: str) -> AttributeHandler | None:
        return self._handlers.get(key)

    def format(self, key: str, raw_value: object) -> str:
        handler = self._handlers.get(key)
        if handler is None:
            return default_stringify(raw_value)
        return handler(raw_value)

    @contextlib.contextmanager
    def scoped(self, entry: Entry) -> Iterator[EntryAttributes]:
        """Yield a one-entry attribute view, released when the block exits."""
        attributes = EntryAttributes(entry, self)
        try:
            yield attributes
        finally:
            attributes.release()


__all__ = [
    "AttributeHandler",
    "AttributeFormatter",
    "EntryAttributes",
    "DEFAULT_TIME_FORMAT",
    "SIZE_FLAVOR_BINARY",
    "SIZE_FLAVOR_DECIMAL",
    "SIZE_FLAVOR_IEC",
    "SIZE_FLAVORS",
    "default_stringify",
    "format_file_type",
    "format_integer",
    "format_timestamp",
    "human_readable_size",
]
