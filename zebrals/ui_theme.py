"""Listing theme definitions and selection helpers.

Themes are semantic ANSI palettes for the report (header, zebra stripes,
size units, date ages, executables). Suffix colors come from the user and
are only emitted when the theme is colored.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    colored: bool
    reset: str
    header: str
    zebra_even: str
    zebra_odd: str
    executable: str
    size_ok: str
    size_warning: str
    size_danger: str
    date_today: str
    date_days: str
    date_months: str


DEFAULT_THEME = ListingTheme(
    name="default",
    colored=True,
    reset="\033[0m",
    header="\033[4m\033[47m\033[30m",
    zebra_even="\033[48;5;236m",
    zebra_odd="\033[48;5;235m",
    executable="\033[32m",
    size_ok="\033[32m",
    size_warning="\033[33m",
    size_danger="\033[31m",
    date_today="\033[37m",
    date_days="\033[38;5;39m",
    date_months="\033[38;5;33m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    colored=True,
    reset="\033[0m",
    header="\033[7m",
    zebra_even="\033[48;5;17m",
    zebra_odd="\033[48;5;18m",
    executable="\033[38;5;84m",
    size_ok="\033[38;5;73m",
    size_warning="\033[38;5;215m",
    size_danger="\033[38;5;203m",
    date_today="\033[38;5;153m",
    date_days="\033[38;5;45m",
    date_months="\033[38;5;31m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    colored=False,
    reset="",
    header="",
    zebra_even="",
    zebra_odd="",
    executable="",
    size_ok="",
    size_warning="",
    size_danger="",
    date_today="",
    date_days="",
    date_months="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
