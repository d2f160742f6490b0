from __future__ import annotations

"""
Permission Normalization.

Clears whatever platform attribute would block the deletion of a single
filesystem entry, without ever following symlinks. The implementation is
chosen once at import time and exposed through ``normalize_permissions``:

- Windows: the read-only file attribute is cleared.
- POSIX: unlinking is gated by the parent directory's bits, so only
  directories owned by the caller are touched, receiving owner rwx so their
  children can be listed and removed.

Both accept an optional ``dir_fd``; ``path`` is then resolved relative to
that open directory, which keeps entries of very deep trees reachable.
"""

import logging
import os
import stat
from typing import Callable, Optional

from force_remove.domain.constants import (
    FILE_ATTRIBUTE_READONLY,
    OWNER_RWX,
    ROOT_UID,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# PLATFORM IMPLEMENTATIONS
# ==============================================================================

def clear_readonly_attribute(path: str, dir_fd: Optional[int] = None) -> None:
    """
    Clear the Windows read-only attribute of an entry.

    Idempotent: an entry without the attribute is left untouched.

    Args:
        path: Entry known to exist.
        dir_fd: Optional directory descriptor ``path`` is relative to.

    Raises:
        OSError: If the attribute cannot be read or written.
    """
    st = os.lstat(path, dir_fd=dir_fd)
    attributes = getattr(st, "st_file_attributes", 0)
    if not attributes & FILE_ATTRIBUTE_READONLY:
        return

    logger.debug(f"Clearing read-only attribute on '{path}'")
    mode = stat.S_IMODE(st.st_mode) | stat.S_IWRITE
    if os.chmod in os.supports_follow_symlinks:
        os.chmod(path, mode, dir_fd=dir_fd, follow_symlinks=False)
    elif not stat.S_ISLNK(st.st_mode):
        os.chmod(path, mode, dir_fd=dir_fd)


def grant_owner_access(path: str, dir_fd: Optional[int] = None) -> None:
    """
    Give the owner rwx on a directory so its contents can be removed.

    Files, symlinks and other non-directories are left as they are: their
    own mode never prevents them from being unlinked. Directories owned by
    another user are skipped unless running as root, since chmod would fail.

    Args:
        path: Entry known to exist.
        dir_fd: Optional directory descriptor ``path`` is relative to.

    Raises:
        OSError: If the metadata query or the chmod fails.
    """
    st = os.lstat(path, dir_fd=dir_fd)
    if not stat.S_ISDIR(st.st_mode):
        return

    mode = stat.S_IMODE(st.st_mode)
    if mode & OWNER_RWX == OWNER_RWX:
        return

    euid = os.geteuid()
    if euid != ROOT_UID and st.st_uid != euid:
        return

    logger.debug(f"Granting owner access on '{path}' (mode {mode:o})")
    os.chmod(path, mode | OWNER_RWX, dir_fd=dir_fd)


# ==============================================================================
# PUBLIC API
# ==============================================================================

normalize_permissions: Callable[..., None] = (
    clear_readonly_attribute if os.name == "nt" else grant_owner_access
)
