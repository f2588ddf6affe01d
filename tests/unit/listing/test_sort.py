"""Ordering tests for sort keys and the entry sorter."""

from __future__ import annotations

import unittest
from datetime import datetime, timezone
from pathlib import Path

from zebrals.listing import SortKey, SortTier, process_entry, sort_entries
from zebrals.listing.types import RawEntry


class _NoIdentity:
    def user_name(self, uid: int) -> str | None:
        return None

    def group_name(self, gid: int) -> str | None:
        return None


def _entry(path: str, *, is_directory: bool = False, is_primary: bool = False):
    raw = RawEntry(
        path=Path(path),
        permission_bits=0o644,
        size_bytes=1,
        owner_id=0,
        group_id=0,
        modified_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        is_directory=is_directory,
        is_primary=is_primary,
    )
    return process_entry(raw, identity=_NoIdentity())


class SortKeyTests(unittest.TestCase):
    def test_tier_dominates_name(self) -> None:
        self.assertLess(SortKey(SortTier.PRIMARY, "zzz"), SortKey(SortTier.DIRECTORY_LIKE, "aaa"))
        self.assertLess(SortKey(SortTier.DIRECTORY_LIKE, "zzz"), SortKey(SortTier.OTHER, "aaa"))

    def test_name_breaks_ties_within_tier(self) -> None:
        self.assertLess(SortKey(SortTier.OTHER, "alpha"), SortKey(SortTier.OTHER, "beta"))
        self.assertGreater(SortKey(SortTier.OTHER, "beta"), SortKey(SortTier.OTHER, "alpha"))
        self.assertFalse(SortKey(SortTier.OTHER, "same") < SortKey(SortTier.OTHER, "same"))
        self.assertEqual(SortKey(SortTier.OTHER, "same"), SortKey(SortTier.OTHER, "same"))
        self.assertLessEqual(SortKey(SortTier.OTHER, "same"), SortKey(SortTier.OTHER, "same"))


class SortEntriesTests(unittest.TestCase):
    def test_directories_come_before_files_case_insensitively(self) -> None:
        entries = [
            _entry("/r/a.txt"),
            _entry("/r/Zeta", is_directory=True),
            _entry("/r/B.txt"),
            _entry("/r/beta", is_directory=True),
            _entry("/r", is_directory=True, is_primary=True),
        ]
        ordered = [entry.original_name for entry in sort_entries(entries)]
        self.assertEqual(ordered, ["r", "beta", "Zeta", "a.txt", "B.txt"])

    def test_sorting_is_idempotent(self) -> None:
        entries = [_entry("/r/c"), _entry("/r/A", is_directory=True), _entry("/r/b")]
        once = sort_entries(entries)
        self.assertEqual(sort_entries(once), once)

    def test_equal_keys_keep_collection_order(self) -> None:
        first = _entry("/one/same.txt")
        second = _entry("/two/same.txt")
        third = _entry("/three/SAME.txt")
        ordered = sort_entries([first, second, third])
        self.assertEqual([entry.raw.path for entry in ordered], [first.raw.path, second.raw.path, third.raw.path])


if __name__ == "__main__":
    unittest.main()
