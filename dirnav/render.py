"""Plain-text table rendering for listings.

Cells are padded to their header width, widened to the longest sanitized cell
so later columns stay aligned. Headers can ask for right alignment; cells are
colored through the theme by style tag. The last column is never padded on
the right.
"""

from __future__ import annotations

from collections.abc import Sequence

from .columns import Cell, HeaderSpec, Row
from .theme import PLAIN_THEME, ListingTheme
from .viewer import sanitize_terminal_text

COLUMN_GAP = " "


def column_widths(header: Sequence[HeaderSpec], rows: Sequence[Row]) -> list[int]:
    widths: list[int] = []
    for idx, spec in enumerate(header):
        width = max(spec.width, len(spec.title))
        for row in rows:
            if idx < len(row):
                width = max(width, len(sanitize_terminal_text(row[idx].text)))
        widths.append(width)
    return widths


def _pad(text: str, width: int, right_align: bool, last: bool) -> str:
    if right_align:
        return text.rjust(width)
    return text if last else text.ljust(width)


def _render_line(
    cells: Sequence[Cell],
    header: Sequence[HeaderSpec],
    widths: Sequence[int],
    theme: ListingTheme,
    color_override: str | None = None,
) -> str:
    parts: list[str] = []
    last_idx = len(cells) - 1
    for idx, cell in enumerate(cells):
        text = _pad(sanitize_terminal_text(cell.text), widths[idx], header[idx].right_align, idx == last_idx)
        color = color_override if color_override is not None else theme.color_for(cell.style)
        parts.append(f"{color}{text}{theme.reset}" if color else text)
    return COLUMN_GAP.join(parts).rstrip()


def render_table(
    header: Sequence[HeaderSpec],
    rows: Sequence[Row],
    theme: ListingTheme = PLAIN_THEME,
) -> list[str]:
    """Return header, divider, and one line per row."""
    widths = column_widths(header, rows)
    title_cells = [Cell(spec.title, None) for spec in header]
    lines = [_render_line(title_cells, header, widths, theme, color_override=theme.header)]
    divider = COLUMN_GAP.join("-" * width for width in widths)
    lines.append(f"{theme.divider}{divider}{theme.reset}" if theme.divider else divider)
    for row in rows:
        lines.append(_render_line(row, header, widths, theme))
    return lines


__all__ = ["COLUMN_GAP", "column_widths", "render_table"]
