"""Domain datatypes for one listing invocation.

Raw entries mirror what ``lstat`` reported, processed entries hold the
display-ready fields, and render rows hold the final escaped columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path


class SortTier(IntEnum):
    """Coarse ordering bucket; lower tiers print first."""

    PRIMARY = 0
    DIRECTORY_LIKE = 1
    OTHER = 2


@dataclass(frozen=True, eq=False)
class SortKey:
    """Total order over ``(tier, case-folded name)``.

    Tier dominates; names only break ties inside the same tier.
    """

    tier: SortTier
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self.tier == other.tier and self.name == other.name

    def __hash__(self) -> int:
        return hash((int(self.tier), self.name))

    def __lt__(self, other: SortKey) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        if self.tier != other.tier:
            return int(self.tier) < int(other.tier)
        return self.name < other.name

    def __le__(self, other: SortKey) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other: SortKey) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return other < self

    def __ge__(self, other: SortKey) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self == other or other < self


def display_text(text: str) -> str:
    """Replace undecodable filename bytes with U+FFFD so the text is printable."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def entry_name(path: Path) -> str:
    """Return the base name of ``path``, or the whole path when it has none."""
    return display_text(path.name or str(path))


@dataclass(frozen=True)
class RawEntry:
    """Attributes observed from one ``lstat`` call."""

    path: Path
    permission_bits: int
    size_bytes: int
    owner_id: int
    group_id: int
    modified_at: datetime
    is_directory: bool = False
    is_symlink: bool = False
    is_executable: bool = False
    is_primary: bool = False


@dataclass(frozen=True)
class ProcessedEntry:
    """Display-ready fields derived from exactly one ``RawEntry``."""

    raw: RawEntry
    permission_text: str
    size_text: str
    size_unit: str
    owner_text: str
    group_text: str
    display_name: str
    link_target_name: str
    effective_executable: bool
    targets_folder: bool
    sort_key: SortKey

    @property
    def original_name(self) -> str:
        return entry_name(self.raw.path)

    @property
    def is_primary(self) -> bool:
        return self.raw.is_primary


@dataclass(frozen=True)
class RenderRow:
    """Five escaped columns for one output line."""

    permission: str
    size: str
    owner: str
    date: str
    name: str
    is_primary: bool = False

    @property
    def line(self) -> str:
        return f"{self.permission} {self.size} {self.owner} {self.date} {self.name}"


__all__ = [
    "SortTier",
    "SortKey",
    "display_text",
    "entry_name",
    "RawEntry",
    "ProcessedEntry",
    "RenderRow",
]
