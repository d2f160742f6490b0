from __future__ import annotations

"""
force_remove: forced recursive removal of filesystem entries.

Behaves like ``rm -rf`` but also removes directories lacking read/execute
permission on POSIX and read-only entries on Windows.
"""

from force_remove.core.eraser import RemovalStats, erase_tree
from force_remove.core.permissions import normalize_permissions
from force_remove.core.resolver import resolve_target
from force_remove.domain.errors import (
    ForceRemoveError,
    InvalidTargetError,
    RemovalIOError,
    TargetNotFoundError,
)
from force_remove.service import ensure_removed, remove

__version__ = "0.1.0"

__all__ = [
    "ForceRemoveError",
    "InvalidTargetError",
    "RemovalIOError",
    "RemovalStats",
    "TargetNotFoundError",
    "ensure_removed",
    "erase_tree",
    "normalize_permissions",
    "remove",
    "resolve_target",
]
