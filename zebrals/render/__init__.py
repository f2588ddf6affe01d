"""Rendering of processed entries into a striped, colorized report."""

from __future__ import annotations

from .columns import build_render_row, match_suffix_color
from .report import SEPARATOR, build_render_rows, format_header, owner_column_width, render_report, write_report
from .styles import row_reset, zebra_background

__all__ = [
    "build_render_row",
    "match_suffix_color",
    "SEPARATOR",
    "build_render_rows",
    "format_header",
    "owner_column_width",
    "render_report",
    "write_report",
    "row_reset",
    "zebra_background",
]
