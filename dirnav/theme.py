"""ANSI palettes for listing tables, keyed by column style tag.

Themes only affect the CLI table printer; the core hands out style tags and
never emits escape codes itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the table renderer."""

    name: str
    reset: str
    header: str
    divider: str
    error: str
    size: str
    name_cell: str
    owner: str
    modes: str
    time: str
    ext: str

    def color_for(self, style: str | None) -> str:
        """Return the ANSI prefix for a cell style tag, empty when unknown."""
        if not style:
            return ""
        field = _STYLE_FIELDS.get(style)
        return getattr(self, field) if field else ""


_STYLE_FIELDS = {
    "dirnav-size": "size",
    "dirnav-name": "name_cell",
    "dirnav-user": "owner",
    "dirnav-group": "owner",
    "dirnav-modes": "modes",
    "dirnav-access-time": "time",
    "dirnav-modification-time": "time",
    "dirnav-status-change-time": "time",
    "dirnav-ext": "ext",
}

DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;5;81m",
    divider="\033[2m",
    error="\033[38;5;203m",
    size="\033[38;5;109m",
    name_cell="\033[38;5;252m",
    owner="\033[38;5;180m",
    modes="\033[2;38;5;250m",
    time="\033[38;5;110m",
    ext="\033[38;5;214m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    divider="\033[2;38;5;31m",
    error="\033[38;5;209m",
    size="\033[38;5;73m",
    name_cell="\033[38;5;153m",
    owner="\033[38;5;117m",
    modes="\033[2;38;5;110m",
    time="\033[38;5;39m",
    ext="\033[38;5;84m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    header="",
    divider="",
    error="",
    size="",
    name_cell="",
    owner="",
    modes="",
    time="",
    ext="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    candidate = str(name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
