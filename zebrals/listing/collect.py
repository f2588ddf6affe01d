"""Filesystem collection of raw listing entries.

Every path is ``lstat``-ed without following symlinks. Failures on single
entries are logged and skipped; an unreadable directory yields no children.
"""

from __future__ import annotations

import logging
import math
import os
import stat as stat_mod
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from .types import RawEntry, display_text

logger = logging.getLogger("zebrals.listing.collect")

HIDDEN_PREFIX = "."
PERMISSION_MASK = 0o777
OWNER_EXECUTE_BIT = 0o100


class MissingPathError(Exception):
    """Raised when a path named on the command line does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Error: {display_text(str(path))} does not exist")
        self.path = path


def _modified_at(st: os.stat_result) -> datetime:
    """Return the mtime floored to whole seconds as a local-timezone-aware datetime."""
    try:
        return datetime.fromtimestamp(math.floor(st.st_mtime)).astimezone()
    except (OverflowError, OSError, ValueError):
        return datetime.now().astimezone()


def raw_entry_from_stat(path: Path, st: os.stat_result, *, is_primary: bool = False) -> RawEntry:
    """Build a ``RawEntry`` from an already-taken ``lstat`` result."""
    mode = st.st_mode
    return RawEntry(
        path=path,
        permission_bits=mode & PERMISSION_MASK,
        size_bytes=int(st.st_size),
        owner_id=int(st.st_uid),
        group_id=int(st.st_gid),
        modified_at=_modified_at(st),
        is_directory=stat_mod.S_ISDIR(mode),
        is_symlink=stat_mod.S_ISLNK(mode),
        is_executable=bool(mode & OWNER_EXECUTE_BIT),
        is_primary=is_primary,
    )


def collect_one(path: Path, *, is_primary: bool = False) -> RawEntry | None:
    """Stat one path without following symlinks; ``None`` on failure."""
    try:
        st = os.lstat(path)
    except OSError as exc:
        logger.warning("Error accessing %s: %s", path, exc)
        return None
    return raw_entry_from_stat(path, st, is_primary=is_primary)


def collect_directory(directory: Path, include_hidden: bool) -> list[RawEntry]:
    """Return raw entries for the immediate children of ``directory``.

    Hidden names are skipped unless ``include_hidden``. Children that cannot
    be stat-ed are logged and omitted. A read error partway through the scan
    is logged and the children read so far are kept.
    """
    try:
        scanned = os.scandir(directory)
    except OSError as exc:
        logger.warning("Permission denied: %s: %s", directory, exc)
        return []

    entries: list[RawEntry] = []
    with scanned:
        while True:
            try:
                child = next(scanned)
            except StopIteration:
                break
            except OSError as exc:
                # The scan cannot resume after a read error; keep what was read.
                logger.warning("Error reading directory entry in %s: %s", directory, exc)
                break
            if not include_hidden and child.name.startswith(HIDDEN_PREFIX):
                continue
            raw = collect_one(Path(child.path))
            if raw is not None:
                entries.append(raw)
    logger.debug("Collected %d entries from %s", len(entries), directory)
    return entries


def normalize_targets(paths: Sequence[str]) -> list[Path]:
    """Map CLI path strings to ``Path`` objects.

    A lone ``.`` becomes the absolute working directory so the primary row
    carries the directory's real name.
    """
    if list(paths) == ["."]:
        try:
            return [Path.cwd()]
        except OSError:
            return [Path(".")]
    return [Path(path) for path in paths]


def ensure_targets_exist(targets: Sequence[Path]) -> None:
    """Raise ``MissingPathError`` for the first target that does not exist."""
    for target in targets:
        if not os.path.lexists(target):
            raise MissingPathError(target)


def collect_targets(targets: Sequence[Path], include_hidden: bool) -> list[RawEntry]:
    """Collect raw entries for the requested targets.

    A single directory target is expanded: its own entry (marked primary)
    comes first, followed by its children. Several targets are listed as
    given and never expanded.
    """
    ensure_targets_exist(targets)

    if len(targets) == 1 and targets[0].is_dir():
        directory = targets[0]
        entries: list[RawEntry] = []
        primary = collect_one(directory, is_primary=True)
        if primary is not None:
            entries.append(primary)
        entries.extend(collect_directory(directory, include_hidden))
        return entries

    entries = []
    for target in targets:
        raw = collect_one(target)
        if raw is not None:
            entries.append(raw)
    return entries


__all__ = [
    "HIDDEN_PREFIX",
    "MissingPathError",
    "raw_entry_from_stat",
    "collect_one",
    "collect_directory",
    "normalize_targets",
    "ensure_targets_exist",
    "collect_targets",
]
