"""Owner and group name lookups.

Lookups return ``None`` when an id has no name; callers decide the fallback.
"""

from __future__ import annotations

import grp
import pwd
from functools import lru_cache
from typing import Protocol


class IdentityResolver(Protocol):
    """Capability that maps numeric user/group ids to names."""

    def user_name(self, uid: int) -> str | None: ...

    def group_name(self, gid: int) -> str | None: ...


@lru_cache(maxsize=256)
def _lookup_user(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return None


@lru_cache(maxsize=256)
def _lookup_group(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return None


class SystemIdentityResolver:
    """Resolve ids through the local passwd/group databases."""

    def user_name(self, uid: int) -> str | None:
        return _lookup_user(uid)

    def group_name(self, gid: int) -> str | None:
        return _lookup_group(gid)


__all__ = [
    "IdentityResolver",
    "SystemIdentityResolver",
]
