"""Turn raw entries into display-ready processed entries.

Covers permission text, size units, owner/group names, name truncation,
folder glyphs, symlink target resolution, executable suppression, and the
sort key. Output depends only on the raw entry, the two display options,
the identity resolver, and the current state of symlink targets.
"""

from __future__ import annotations

import os
from pathlib import Path

from .identity import IdentityResolver, SystemIdentityResolver
from .types import ProcessedEntry, RawEntry, SortKey, SortTier, display_text, entry_name

KB = 1024
MB = KB * 1024
GB = MB * 1024

TRUNCATION_MARKER = "(...)"
TRUNCATION_SLACK = 5

NEUTRAL_FOLDER_GLYPH = "■"
PRIMARY_FOLDER_GLYPH = "📂"
FOLDER_GLYPH = "📁"


def size_and_unit(size_bytes: int) -> tuple[str, str]:
    """Return ``(magnitude, unit)`` for a byte count.

    Bytes and kilobytes are whole numbers (kilobytes truncate); megabytes
    and gigabytes carry one decimal.
    """
    if size_bytes < KB:
        return str(size_bytes), "B"
    if size_bytes < MB:
        return str(size_bytes // KB), "K"
    if size_bytes < GB:
        return f"{size_bytes / MB:.1f}", "M"
    return f"{size_bytes / GB:.1f}", "G"


def entry_size_and_unit(raw: RawEntry) -> tuple[str, str]:
    """Directories and symlinks have no displayed size."""
    if raw.is_directory or raw.is_symlink:
        return "", ""
    return size_and_unit(raw.size_bytes)


def truncate_name(name: str, max_length: int) -> str:
    """Replace the middle of ``name`` with a marker when it is too long.

    Names up to ``max_length + 5`` characters are kept; longer ones keep
    ``max_length // 2`` characters from each end. ``0`` disables truncation.
    """
    if max_length <= 0 or len(name) <= max_length + TRUNCATION_SLACK:
        return name
    half = max_length // 2
    return f"{name[:half]}{TRUNCATION_MARKER}{name[len(name) - half:]}"


def folder_glyph(show_icons: bool, is_primary: bool) -> str:
    """Return the glyph prefixed to directory names."""
    if not show_icons:
        return NEUTRAL_FOLDER_GLYPH
    return PRIMARY_FOLDER_GLYPH if is_primary else FOLDER_GLYPH


def read_link_target(path: Path) -> str | None:
    """Return the raw symlink text, or ``None`` when it cannot be read."""
    try:
        return os.readlink(path)
    except OSError:
        return None


def link_targets_folder(link_path: Path, target: str) -> bool:
    """Return whether ``target`` (relative to the link's directory) is a directory."""
    target_path = Path(target)
    if not target_path.is_absolute():
        target_path = link_path.parent / target_path
    try:
        return target_path.is_dir()
    except OSError:
        return False


def owner_and_group(raw: RawEntry, identity: IdentityResolver) -> tuple[str, str]:
    """Resolve owner/group names, falling back to the numeric ids."""
    user = identity.user_name(raw.owner_id)
    group = identity.group_name(raw.group_id)
    return (
        user if user is not None else str(raw.owner_id),
        group if group is not None else str(raw.group_id),
    )


def sort_key_for(raw: RawEntry, targets_folder: bool) -> SortKey:
    """Primary directory first, then directory-like entries, then the rest."""
    name = entry_name(raw.path).lower()
    if raw.is_primary:
        return SortKey(SortTier.PRIMARY, name)
    if raw.is_directory or targets_folder:
        return SortKey(SortTier.DIRECTORY_LIKE, name)
    return SortKey(SortTier.OTHER, name)


def process_entry(
    raw: RawEntry,
    show_icons: bool = False,
    max_name_length: int = 0,
    identity: IdentityResolver | None = None,
) -> ProcessedEntry:
    """Build the ``ProcessedEntry`` for ``raw``."""
    if identity is None:
        identity = SystemIdentityResolver()

    size_text, size_unit = entry_size_and_unit(raw)
    owner_text, group_text = owner_and_group(raw, identity)

    target = read_link_target(raw.path) if raw.is_symlink else None
    targets_folder = target is not None and link_targets_folder(raw.path, target)

    glyph = folder_glyph(show_icons, raw.is_primary)
    display_name = truncate_name(entry_name(raw.path), max_name_length)
    if raw.is_directory:
        display_name = f"{glyph} {display_name}"

    link_target_name = truncate_name(display_text(target), max_name_length) if target else ""
    if link_target_name and targets_folder:
        link_target_name = f"{glyph} {link_target_name}"

    # Execute bits on directories (and links to them) mean traversal.
    effective_executable = raw.is_executable and not raw.is_directory and not (raw.is_symlink and targets_folder)

    return ProcessedEntry(
        raw=raw,
        permission_text=f"{raw.permission_bits:03o}",
        size_text=size_text,
        size_unit=size_unit,
        owner_text=owner_text,
        group_text=group_text,
        display_name=display_name,
        link_target_name=link_target_name,
        effective_executable=effective_executable,
        targets_folder=targets_folder,
        sort_key=sort_key_for(raw, targets_folder),
    )


def process_entries(
    raws: list[RawEntry],
    show_icons: bool = False,
    max_name_length: int = 0,
    identity: IdentityResolver | None = None,
) -> list[ProcessedEntry]:
    """Process every raw entry, sharing one identity resolver."""
    if identity is None:
        identity = SystemIdentityResolver()
    return [process_entry(raw, show_icons, max_name_length, identity) for raw in raws]


__all__ = [
    "KB",
    "MB",
    "GB",
    "TRUNCATION_MARKER",
    "NEUTRAL_FOLDER_GLYPH",
    "PRIMARY_FOLDER_GLYPH",
    "FOLDER_GLYPH",
    "size_and_unit",
    "entry_size_and_unit",
    "truncate_name",
    "folder_glyph",
    "read_link_target",
    "link_targets_folder",
    "owner_and_group",
    "sort_key_for",
    "process_entry",
    "process_entries",
]
