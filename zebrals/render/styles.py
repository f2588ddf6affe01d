"""Pure escape-sequence helpers for striped rows.

Nothing here keeps state: each escape is recomputed from the row index, the
theme, and the logical color being requested.
"""

from __future__ import annotations

from ..ui_theme import ListingTheme

SIZE_UNIT_COLORS = {
    "B": "size_ok",
    "K": "size_ok",
    "M": "size_warning",
    "G": "size_danger",
}


def zebra_background(row_index: int, theme: ListingTheme) -> str:
    """Return the background shade for ``row_index`` (0-indexed parity)."""
    return theme.zebra_even if row_index % 2 == 0 else theme.zebra_odd


def row_reset(row_index: int, theme: ListingTheme) -> str:
    """Reset foreground styling while keeping the row's stripe."""
    return f"{theme.reset}{zebra_background(row_index, theme)}"


def logical_color(theme: ListingTheme, color: str) -> str:
    """Return the theme escape named by ``color`` (e.g. ``"date_today"``)."""
    return str(getattr(theme, color))


def size_unit_color(unit: str, theme: ListingTheme) -> str:
    """Map a size unit letter to its foreground escape."""
    return logical_color(theme, SIZE_UNIT_COLORS.get(unit, "size_danger"))


def suffix_escape(code: str, theme: ListingTheme) -> str:
    """Turn a user color code such as ``38;5;1m`` into an escape."""
    if not theme.colored or not code:
        return ""
    return f"\033[{code}"


def paint(text: str, color: str, row_index: int, theme: ListingTheme) -> str:
    """Wrap ``text`` in ``color`` and restore the row stripe afterwards."""
    if not color:
        return text
    return f"{color}{text}{row_reset(row_index, theme)}"


__all__ = [
    "SIZE_UNIT_COLORS",
    "zebra_background",
    "row_reset",
    "logical_color",
    "size_unit_color",
    "suffix_escape",
    "paint",
]
