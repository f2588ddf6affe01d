"""Fixed ordering for processed entries."""

from __future__ import annotations

from collections.abc import Iterable

from .types import ProcessedEntry


def sort_entries(entries: Iterable[ProcessedEntry]) -> list[ProcessedEntry]:
    """Stable sort by ``sort_key``; equal keys keep collection order."""
    return sorted(entries, key=lambda entry: entry.sort_key)


__all__ = ["sort_entries"]
