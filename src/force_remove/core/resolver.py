from __future__ import annotations

"""
Target Path Resolution.

Validates a caller-supplied target and rewrites it into the canonical
``parent / final_segment`` form used by every later operation. Only the
final segment is guarded: '..' segments earlier in the path and symlinks in
the parent chain are left for the operating system to interpret.
"""

import logging
import os
from pathlib import PurePath
from typing import Union

from force_remove.domain.constants import CURRENT_DIR, NUL_CHAR, RESERVED_SEGMENTS
from force_remove.domain.errors import InvalidTargetError

logger = logging.getLogger(__name__)

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def resolve_target(path: PathInput) -> str:
    """
    Validate a removal target and return its canonical form.

    A trailing '.' collapses into the directory it refers to ('x/.' becomes
    'x'), while a bare '.', a final '..' or a path with no final segment
    (a filesystem root) is rejected on every platform.

    Args:
        path: Target path as str, bytes or os.PathLike.

    Returns:
        str: The resolved path, rebuilt from its parent and final segment.

    Raises:
        InvalidTargetError: If the path cannot anchor a removal.
    """
    raw = _to_text(path)

    if not raw:
        raise InvalidTargetError("path is empty", path)
    if NUL_CHAR in raw:
        raise InvalidTargetError("path contains a NUL character", path)

    pure = PurePath(raw)
    name = pure.name

    # '.', './.' and roots all fold into a path without a final segment
    if not name:
        if str(pure) == CURRENT_DIR:
            raise InvalidTargetError(f"refusing to remove '{CURRENT_DIR}'", path)
        raise InvalidTargetError("path has no final segment", path)
    if name in RESERVED_SEGMENTS:
        raise InvalidTargetError(f"refusing to remove '{name}'", path)

    resolved = str(pure.parent / name)
    if resolved != raw:
        logger.debug(f"Resolved removal target '{raw}' -> '{resolved}'")
    return resolved


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _to_text(path: PathInput) -> str:
    """Convert any accepted path type to str, rejecting everything else."""
    try:
        return os.fsdecode(os.fspath(path))
    except TypeError as e:
        raise InvalidTargetError(f"not a filesystem path: {e}", path) from e
