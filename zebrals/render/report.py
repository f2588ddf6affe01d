"""Assemble the final listing report.

The report is a header row, an optional primary-directory row followed by a
dashed separator, and one striped row per remaining entry.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TextIO

from ..listing.types import ProcessedEntry, RenderRow
from ..ui_theme import DEFAULT_THEME, ListingTheme
from .columns import DATE_WIDTH, PERMISSION_WIDTH, SIZE_WIDTH, build_render_row

SEPARATOR = "-" * 60


def owner_column_width(entries: Sequence[ProcessedEntry]) -> int:
    """Widest ``owner:group`` pair over all entries (primary included)."""
    widest = max((len(entry.owner_text) + len(entry.group_text) for entry in entries), default=0)
    return widest + 1


def format_header(owner_width: int, theme: ListingTheme) -> str:
    labels = (
        f"{'PERM':>{PERMISSION_WIDTH}} {'SIZE':>{SIZE_WIDTH + 1}} "
        f"{'OWNER':>{owner_width}} {'MODIFIED':>{DATE_WIDTH}} NAME"
    )
    return f"{theme.header}{labels}{theme.reset}"


def build_render_rows(
    entries: Sequence[ProcessedEntry],
    file_colors: Mapping[str, str] | None = None,
    theme: ListingTheme = DEFAULT_THEME,
    now: datetime | None = None,
) -> list[RenderRow]:
    """Render every sorted entry; the list index drives the zebra stripe."""
    if now is None:
        now = datetime.now().astimezone()
    colors = file_colors or {}
    owner_width = owner_column_width(entries)
    return [build_render_row(index, entry, owner_width, colors, theme, now) for index, entry in enumerate(entries)]


def render_report(
    entries: Sequence[ProcessedEntry],
    file_colors: Mapping[str, str] | None = None,
    theme: ListingTheme = DEFAULT_THEME,
    now: datetime | None = None,
) -> list[str]:
    """Return report lines (without newlines) for sorted ``entries``."""
    rows = build_render_rows(entries, file_colors, theme, now)
    lines = [format_header(owner_column_width(entries), theme)]

    if rows and rows[0].is_primary:
        lines.append(rows[0].line)
        rows = rows[1:]
        if rows:
            lines.append(SEPARATOR)

    lines.extend(row.line for row in rows)
    return lines


def write_report(lines: Sequence[str], out: TextIO | None = None) -> None:
    """Write report lines to ``out`` (stdout by default)."""
    stream = out if out is not None else sys.stdout
    for line in lines:
        stream.write(line)
        stream.write("\n")
    stream.flush()


__all__ = [
    "SEPARATOR",
    "owner_column_width",
    "format_header",
    "build_render_rows",
    "render_report",
    "write_report",
]
