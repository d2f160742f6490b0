from __future__ import annotations

"""
Removal Error Taxonomy.

All failures raised by the package inherit from :class:`ForceRemoveError`
so callers can catch the whole family with a single ``except`` clause.
Each subclass also derives from the builtin exception a caller would
naturally expect, so generic handlers keep working.
"""

from typing import Optional


class ForceRemoveError(Exception):
    """Base exception for all force_remove errors."""


class TargetNotFoundError(ForceRemoveError, FileNotFoundError):
    """The resolved target does not exist at call time."""

    def __init__(self, path: str) -> None:
        super().__init__(f"path not found: '{path}'")
        self.path = path


class InvalidTargetError(ForceRemoveError, ValueError):
    """
    The path is structurally unsuitable for removal.

    Raised for empty paths, paths without a final segment (a bare root),
    final segments of '.' or '..', and values that cannot be represented as a
    filesystem path. This is a caller error and is never retried.
    """

    def __init__(self, reason: str, path: Optional[object] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.path = path


class RemovalIOError(ForceRemoveError, OSError):
    """
    An underlying filesystem operation failed during removal.

    Attributes:
        path: Entry the failing operation targeted.
        operation: Name of the failing operation (lstat, listdir, unlink,
            rmdir, chmod).
        errno: Error number of the original OSError.
        strerror: Error message of the original OSError.
    """

    def __init__(self, path: str, operation: str, error: OSError) -> None:
        super().__init__(error.errno, error.strerror or str(error), path)
        self.path = path
        self.operation = operation

    def __str__(self) -> str:
        return f"{self.operation} failed for '{self.path}': {self.strerror}"
