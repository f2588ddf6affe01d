"""Listing domain: collection, processing, and ordering of entries.

This package contains the non-rendering half of the pipeline:
- raw/processed entry datatypes and the explicit sort key
- ``lstat``-based collection of named paths and directory children
- owner/group name resolution
- per-entry processing into display-ready text
"""

from __future__ import annotations

from .types import ProcessedEntry, RawEntry, RenderRow, SortKey, SortTier, display_text, entry_name
from .collect import (
    MissingPathError,
    collect_directory,
    collect_one,
    collect_targets,
    ensure_targets_exist,
    normalize_targets,
)
from .identity import IdentityResolver, SystemIdentityResolver
from .process import process_entries, process_entry, size_and_unit, truncate_name
from .sort import sort_entries

__all__ = [
    "ProcessedEntry",
    "RawEntry",
    "RenderRow",
    "SortKey",
    "SortTier",
    "display_text",
    "entry_name",
    "MissingPathError",
    "collect_directory",
    "collect_one",
    "collect_targets",
    "ensure_targets_exist",
    "normalize_targets",
    "IdentityResolver",
    "SystemIdentityResolver",
    "process_entries",
    "process_entry",
    "size_and_unit",
    "truncate_name",
    "sort_entries",
]
