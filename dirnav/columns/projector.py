"""Project entries onto the active column selection.

Rows and headers are always built from the same ``active_columns`` tuple, so
their lengths and order match. A row never raises: a vanished entry shows
``"?"`` in the cells that need metadata, a missing or failing column shows an
empty cell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..attributes import AttributeFormatter, EntryAttributes
from ..entries import Entry
from ..errors import StatFailed
from .specs import COLUMN_SPECS, DEFAULT_COLUMNS, Cell, ColumnSpec, HeaderSpec, Row

logger = logging.getLogger(__name__)

STAT_FAILED_PLACEHOLDER = "?"


class ColumnProjector:
    def __init__(
        self,
        formatter: AttributeFormatter,
        active_columns: Iterable[str] = DEFAULT_COLUMNS,
        specs: Mapping[str, ColumnSpec] = COLUMN_SPECS,
    ) -> None:
        self.formatter = formatter
        self.specs = specs
        self._active: tuple[str, ...] = ()
        self.set_active_columns(active_columns)

    def active_columns(self) -> tuple[str, ...]:
        return self._active

    def set_active_columns(self, column_ids: Iterable[str]) -> None:
        """Replace the column selection.

        Unknown ids are kept (they render empty with a fallback header);
        an empty selection is rejected.
        """
        selection = tuple(str(column_id) for column_id in column_ids)
        if not selection:
            raise ValueError("at least one column must be active")
        for column_id in selection:
            if column_id not in self.specs:
                logger.warning("no column spec registered for %r", column_id)
        self._active = selection

    def _cell(self, column_id: str, entry: Entry, attributes: EntryAttributes) -> Cell:
        spec = self.specs.get(column_id)
        if spec is None:
            return Cell("", None)
        try:
            text = spec.value(entry, attributes)
        except StatFailed:
            text = STAT_FAILED_PLACEHOLDER
        except Exception:
            logger.exception("column %r failed for %s", column_id, entry)
            text = ""
        return Cell(text if isinstance(text, str) else str(text), spec.style)

    def row_for(self, entry: Entry) -> Row:
        """Format one entry; all cells share a single metadata snapshot."""
        with self.formatter.scoped(entry) as attributes:
            return tuple(self._cell(column_id, entry, attributes) for column_id in self._active)

    def header_spec(self) -> tuple[HeaderSpec, ...]:
        headers: list[HeaderSpec] = []
        for column_id in self._active:
            spec = self.specs.get(column_id)
            headers.append(spec.header if spec is not None else HeaderSpec(column_id, 0, True, False))
        return tuple(headers)


__all__ = ["ColumnProjector", "STAT_FAILED_PLACEHOLDER"]
