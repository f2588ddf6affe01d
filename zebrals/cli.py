"""Command-line front door for zebrals.

Parses CLI options, merges them over persisted config, and runs the
collect -> process -> sort -> render pipeline once.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from . import __version__
from . import config
from .diagnostics import configure_logging
from .listing import (
    IdentityResolver,
    MissingPathError,
    collect_targets,
    normalize_targets,
    process_entries,
    sort_entries,
)
from .render import render_report, write_report
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger("zebrals.cli")


def parse_file_colors(value: str) -> dict[str, str]:
    """argparse type for ``suffix=color`` pairs separated by commas."""
    colors: dict[str, str] = {}
    for pair in value.split(","):
        parts = pair.split("=")
        if len(parts) != 2:
            raise argparse.ArgumentTypeError(f"Invalid format: {pair}")
        colors[parts[0]] = parts[1]
    return colors


def _non_negative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zebrals",
        description="ls -l alternative with zebra striping, colored sizes and dates, and folder icons.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to list (default: current directory).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show hidden files (starting with .) when listing a directory.",
    )
    parser.add_argument(
        "--max-name-length",
        type=_non_negative_int,
        default=None,
        help="Maximum length of displayed names. 0 (default) means no limit.",
    )
    parser.add_argument(
        "--file-colors",
        type=parse_file_colors,
        default=None,
        help='Color files by suffix, e.g. ".py=38;5;220m,.html=38;5;208m".',
    )
    parser.add_argument("-i", "--icons", action="store_true", help="Show folder icons.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Listing theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable all color output.")
    parser.add_argument("--no-config", action="store_true", help="Ignore the persisted config file.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")
    parser.add_argument("-v", "--version", action="store_true", help="Display the version number.")
    return parser


@dataclass(frozen=True)
class ListingOptions:
    """Effective options after merging CLI flags over persisted config."""

    paths: tuple[str, ...] = (".",)
    show_hidden: bool = False
    show_icons: bool = False
    max_name_length: int = 0
    file_colors: dict[str, str] = field(default_factory=dict)
    theme_name: str | None = None
    no_color: bool = False


def resolve_options(args: argparse.Namespace) -> ListingOptions:
    """Merge parsed arguments with config defaults (CLI wins)."""
    use_config = not args.no_config
    file_colors = config.load_file_colors() if use_config else {}
    if args.file_colors:
        file_colors.update(args.file_colors)

    if args.max_name_length is not None:
        max_name_length = args.max_name_length
    else:
        max_name_length = config.load_max_name_length() if use_config else 0

    return ListingOptions(
        paths=tuple(args.paths) or (".",),
        show_hidden=args.all or (use_config and config.load_show_hidden()),
        show_icons=args.icons or (use_config and config.load_icons()),
        max_name_length=max_name_length,
        file_colors=file_colors,
        theme_name=args.theme if args.theme is not None else (config.load_theme_name() if use_config else None),
        no_color=args.no_color,
    )


def run_listing(
    options: ListingOptions,
    out: TextIO | None = None,
    identity: IdentityResolver | None = None,
    now: datetime | None = None,
) -> int:
    """Run one listing and write the report; return the exit code."""
    targets = normalize_targets(options.paths)
    try:
        raw_entries = collect_targets(targets, options.show_hidden)
    except MissingPathError as exc:
        logger.error("%s", exc)
        return 1

    processed = process_entries(raw_entries, options.show_icons, options.max_name_length, identity)
    ordered = sort_entries(processed)
    theme = resolve_theme(options.theme_name, no_color=options.no_color)
    write_report(render_report(ordered, options.file_colors, theme, now), out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, list the requested paths, and return the exit code."""
    args = build_parser().parse_args(argv)

    if args.version:
        sys.stdout.write(f"zebrals {__version__}\n")
        return 0

    configure_logging(args.debug)
    options = resolve_options(args)
    logger.debug("Listing options: %s", options)
    return run_listing(options)
