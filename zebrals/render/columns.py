"""Per-column formatting for one processed entry.

Each column is a fully escaped string; ``build_render_row`` assembles the
five of them into a ``RenderRow``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from ..listing.types import ProcessedEntry, RenderRow
from ..ui_theme import ListingTheme
from .styles import logical_color, paint, row_reset, size_unit_color, suffix_escape

PERMISSION_WIDTH = 4
SIZE_WIDTH = 6
DATE_WIDTH = 10
EMPTY_SIZE = f"{'-':>{SIZE_WIDTH + 1}}"
LINK_ARROW = " -> "

OLD_AGE_DAYS = 364
RECENT_AGE_DAYS = 30
DATE_FORMAT_WITH_YEAR = "%d/%m/%Y"
DATE_FORMAT_DAY_MONTH = "%d/%m"
DATE_FORMAT_TIME = "%H:%M"


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.astimezone()


def age_in_days(modified_at: datetime, now: datetime) -> int:
    """Whole days between ``modified_at`` and ``now`` (23 hours is 0)."""
    return (_aware(now) - _aware(modified_at)).days


def date_style(age_days: int) -> tuple[str, str]:
    """Return ``(theme color name, strftime format)`` for an age in days."""
    if age_days > OLD_AGE_DAYS:
        return "date_months", DATE_FORMAT_WITH_YEAR
    if age_days > RECENT_AGE_DAYS:
        return "date_months", DATE_FORMAT_DAY_MONTH
    if age_days > 0:
        return "date_days", DATE_FORMAT_DAY_MONTH
    return "date_today", DATE_FORMAT_TIME


def match_suffix_color(name: str, file_colors: Mapping[str, str]) -> str | None:
    """Return the color of the longest suffix matching ``name``."""
    best: str | None = None
    best_length = -1
    for suffix, color in file_colors.items():
        if name.endswith(suffix) and len(suffix) > best_length:
            best = color
            best_length = len(suffix)
    return best


def format_permission(entry: ProcessedEntry, row_index: int, theme: ListingTheme) -> str:
    return f"{row_reset(row_index, theme)}{entry.permission_text:>{PERMISSION_WIDTH}}"


def format_size(entry: ProcessedEntry, row_index: int, theme: ListingTheme) -> str:
    """Right-aligned magnitude followed by the colored unit letter."""
    if not entry.size_text:
        return EMPTY_SIZE
    unit = paint(entry.size_unit, size_unit_color(entry.size_unit, theme), row_index, theme)
    return f"{entry.size_text:>{SIZE_WIDTH}}{unit}"


def format_owner(entry: ProcessedEntry, width: int) -> str:
    return f"{entry.owner_text}:{entry.group_text}".ljust(width)


def format_modified(
    entry: ProcessedEntry,
    row_index: int,
    theme: ListingTheme,
    now: datetime,
) -> str:
    """Date column whose format and color depend on the entry's age."""
    modified_at = _aware(entry.raw.modified_at)
    color_name, fmt = date_style(age_in_days(modified_at, now))
    text = f"{modified_at.strftime(fmt):>{DATE_WIDTH}}"
    return paint(text, logical_color(theme, color_name), row_index, theme)


def format_name(
    entry: ProcessedEntry,
    row_index: int,
    theme: ListingTheme,
    file_colors: Mapping[str, str],
) -> str:
    """Name column: executable color beats suffix color; link target unstyled."""
    name = entry.display_name
    if entry.effective_executable:
        name = paint(name, theme.executable, row_index, theme)
    elif file_colors:
        code = match_suffix_color(entry.original_name, file_colors)
        if code is not None:
            name = paint(name, suffix_escape(code, theme), row_index, theme)

    if entry.link_target_name:
        name = f"{name}{LINK_ARROW}{entry.link_target_name}"
    return f"{name}{theme.reset}"


def build_render_row(
    row_index: int,
    entry: ProcessedEntry,
    owner_width: int,
    file_colors: Mapping[str, str],
    theme: ListingTheme,
    now: datetime,
) -> RenderRow:
    return RenderRow(
        permission=format_permission(entry, row_index, theme),
        size=format_size(entry, row_index, theme),
        owner=format_owner(entry, owner_width),
        date=format_modified(entry, row_index, theme, now),
        name=format_name(entry, row_index, theme, file_colors),
        is_primary=entry.is_primary,
    )


__all__ = [
    "EMPTY_SIZE",
    "LINK_ARROW",
    "age_in_days",
    "date_style",
    "match_suffix_color",
    "format_permission",
    "format_size",
    "format_owner",
    "format_modified",
    "format_name",
    "build_render_row",
]
