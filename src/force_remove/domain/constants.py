from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed values the removal engine relies on: reserved path
segments, POSIX permission masks and the Windows file attribute flags.
"""

import stat
from typing import FrozenSet

# -----------------------------------------------------------------------------
# PATH VALIDATION
# -----------------------------------------------------------------------------

CURRENT_DIR = "."
PARENT_DIR = ".."

# Final segments that never name a removable entry on any platform
RESERVED_SEGMENTS: FrozenSet[str] = frozenset({CURRENT_DIR, PARENT_DIR})

NUL_CHAR = "\x00"

# -----------------------------------------------------------------------------
# PERMISSION NORMALIZATION
# -----------------------------------------------------------------------------

# Owner bits required to list a directory and unlink its children
OWNER_RWX: int = stat.S_IRWXU

ROOT_UID = 0

# Windows attribute flags (values from winnt.h, mirrored by the stat module)
FILE_ATTRIBUTE_READONLY: int = getattr(stat, "FILE_ATTRIBUTE_READONLY", 0x1)
FILE_ATTRIBUTE_DIRECTORY: int = getattr(stat, "FILE_ATTRIBUTE_DIRECTORY", 0x10)
