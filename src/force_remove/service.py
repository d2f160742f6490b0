from __future__ import annotations

"""
Removal Entry Points.

Public operations built on the resolver and the eraser. Both share the same
pipeline and differ only in how an absent target is reported:

- ``remove`` raises TargetNotFoundError.
- ``ensure_removed`` treats absence as success, like ``rm -f``.
"""

import logging
import os

from force_remove.core.eraser import erase_tree
from force_remove.core.resolver import PathInput, resolve_target
from force_remove.domain.errors import RemovalIOError, TargetNotFoundError

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def remove(path: PathInput) -> None:
    """
    Force-remove a file or directory tree, failing if it does not exist.

    Unlike shutil.rmtree, directories lacking read or execute permission
    (POSIX) and read-only entries (Windows) are removed too. Symlinks are
    removed as links and never followed.

    Args:
        path: Target to remove.

    Raises:
        InvalidTargetError: If the final segment is '.', '..' or missing.
        TargetNotFoundError: If the resolved target does not exist.
        RemovalIOError: If any underlying filesystem operation fails.
    """
    target = resolve_target(path)

    if not _target_exists(target):
        raise TargetNotFoundError(target)

    erase_tree(target)


def ensure_removed(path: PathInput) -> None:
    """
    Force-remove a file or directory tree; an absent target is a success.

    Only absence is forgiven: a target whose metadata cannot be read
    (permission denied, a file used as a directory...) still fails. A target
    that disappears between the existence check and its removal is reported
    as success.

    Args:
        path: Target to remove.

    Raises:
        InvalidTargetError: If the final segment is '.', '..' or missing.
        RemovalIOError: If any underlying filesystem operation fails.
    """
    target = resolve_target(path)

    if not _target_exists(target):
        logger.debug(f"Nothing to remove at '{target}'")
        return

    try:
        remove(target)
    except TargetNotFoundError:
        logger.debug(f"'{target}' vanished before removal")


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _target_exists(target: str) -> bool:
    """
    Symlink-aware existence check.

    Unlike os.path.lexists, only FileNotFoundError means absent; every other
    metadata failure is raised as RemovalIOError.
    """
    try:
        os.lstat(target)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise RemovalIOError(target, "lstat", e) from e
    return True
