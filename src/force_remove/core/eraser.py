from __future__ import annotations

"""
Recursive Eraser.

Removes a filesystem entry and everything beneath it. Every visited entry is
normalized first, classified with symlink-aware metadata, and then either
unlinked or, for directories, removed once empty.

Traversal keeps pending directories on a heap-allocated work-list instead of
the Python call stack, so nesting depth is limited by memory rather than by
the interpreter recursion limit. Where the platform supports ``dir_fd``,
entries are addressed relative to an open descriptor of their parent
directory, so paths longer than PATH_MAX are never handed to the kernel.
Only one descriptor is held at a time: the walk moves down with
``open(name, dir_fd=...)`` and back up with ``open('..', dir_fd=...)``.
"""

import logging
import os
import stat
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from force_remove.core.permissions import normalize_permissions
from force_remove.domain.constants import FILE_ATTRIBUTE_DIRECTORY
from force_remove.domain.errors import RemovalIOError, TargetNotFoundError

logger = logging.getLogger(__name__)

_DIR_OPEN_FLAGS: int = (
    os.O_RDONLY | getattr(os, "O_DIRECTORY", 0) | getattr(os, "O_NOFOLLOW", 0)
)

# Descriptor-relative traversal needs every primitive to accept dir_fd
_USE_FD_FUNCTIONS: bool = (
    {os.open, os.stat, os.unlink, os.rmdir, os.chmod} <= os.supports_dir_fd
    and os.listdir in os.supports_fd
)


# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RemovalStats:
    """
    Summary of a completed removal.

    Attributes:
        files: Non-directory entries unlinked (files, symlinks, devices...).
        directories: Directories removed, the root included.
    """
    files: int = 0
    directories: int = 0

    @property
    def total(self) -> int:
        return self.files + self.directories


@dataclass
class _Frame:
    """
    A directory being emptied.

    Attributes:
        path: Display path, used in errors and logs.
        name: Name inside the parent directory; None for the root and when
            entries are addressed by full path.
        pending: Child names still to visit.
    """
    path: str
    name: Optional[str]
    pending: List[str]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def erase_tree(path: str) -> RemovalStats:
    """
    Remove the entry at an already-resolved path and all of its descendants.

    Symlinks are always removed as links, never traversed. The first failure
    aborts the traversal; entries removed before it stay removed.

    Args:
        path: Resolved path of an entry expected to exist.

    Returns:
        RemovalStats: Counts of removed entries.

    Raises:
        TargetNotFoundError: If the root entry vanished before it was removed.
        RemovalIOError: If any stat, chmod, open, listing, unlink or rmdir
            fails.
    """
    logger.debug(f"Erasing '{path}'")
    stats = _TreeEraser(path).run()
    logger.debug(
        f"Erased '{path}': {stats.files} file(s), {stats.directories} directory(ies)"
    )
    return stats


# ==============================================================================
# TRAVERSAL ENGINE
# ==============================================================================

class _TreeEraser:
    """Work-list driven traversal state for a single erase_tree call."""

    def __init__(self, root: str) -> None:
        self.root = root
        self.files = 0
        self.directories = 0

    def run(self) -> RemovalStats:
        if self._visit(self.root, self.root):
            if _USE_FD_FUNCTIONS:
                self._drain_with_fds()
            else:
                self._drain_with_paths()
        return RemovalStats(files=self.files, directories=self.directories)

    def _drain_with_paths(self) -> None:
        """Empty the root directory addressing every entry by its full path."""
        root_names = self._call("listdir", self.root, os.listdir, self.root)
        frames: List[_Frame] = [_Frame(self.root, None, root_names)]

        while frames:
            frame = frames[-1]

            if frame.pending:
                child = os.path.join(frame.path, frame.pending.pop())
                if self._visit(child, child):
                    names = self._call("listdir", child, os.listdir, child)
                    frames.append(_Frame(child, None, names))
                continue

            # All children gone: retry the directory itself
            frames.pop()
            self._call("rmdir", frame.path, os.rmdir, frame.path)
            self.directories += 1

    def _drain_with_fds(self) -> None:
        """Empty the root directory addressing entries relative to their parent."""
        fd: Optional[int] = self._open_dir(self.root, self.root)
        try:
            root_names = self._call("listdir", self.root, os.listdir, fd)
            frames: List[_Frame] = [_Frame(self.root, None, root_names)]

            while frames:
                frame = frames[-1]

                if frame.pending:
                    name = frame.pending.pop()
                    child = os.path.join(frame.path, name)
                    if self._visit(child, name, dir_fd=fd):
                        child_fd = self._open_dir(child, name, dir_fd=fd)
                        fd, stale = child_fd, fd
                        os.close(stale)
                        names = self._call("listdir", child, os.listdir, fd)
                        frames.append(_Frame(child, name, names))
                    continue

                frames.pop()
                if frames:
                    parent_fd = self._open_dir(frames[-1].path, os.pardir, dir_fd=fd)
                    fd, stale = parent_fd, fd
                    os.close(stale)
                    self._call("rmdir", frame.path, os.rmdir, frame.name, dir_fd=fd)
                else:
                    fd, stale = None, fd
                    os.close(stale)
                    self._call("rmdir", frame.path, os.rmdir, frame.path)
                self.directories += 1
        finally:
            if fd is not None:
                os.close(fd)

    def _visit(self, path: str, ref: str, dir_fd: Optional[int] = None) -> bool:
        """
        Remove a single entry if possible.

        Args:
            path: Display path of the entry, used in errors and logs.
            ref: Value handed to the OS: the full path, or the entry name
                when ``dir_fd`` is given.
            dir_fd: Optional descriptor of the parent directory.

        Returns:
            bool: True when the entry is a directory that must be emptied
            first, False when it is gone.
        """
        self._call("chmod", path, normalize_permissions, ref, dir_fd=dir_fd)
        st = self._call("lstat", path, os.lstat, ref, dir_fd=dir_fd)

        if not stat.S_ISDIR(st.st_mode):
            self._call("unlink", path, _remove_leaf, ref, st, dir_fd)
            self.files += 1
            return False

        # Fast path for empty directories; the real error resurfaces on retry
        try:
            os.rmdir(ref, dir_fd=dir_fd)
        except OSError as e:
            logger.debug(f"'{path}' not removed directly ({e.strerror}), listing children")
            return True

        self.directories += 1
        return False

    def _open_dir(self, path: str, ref: str, dir_fd: Optional[int] = None) -> int:
        return self._call("open", path, os.open, ref, _DIR_OPEN_FLAGS, dir_fd=dir_fd)

    def _call(self, operation: str, path: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run one filesystem operation, translating OSError into domain errors."""
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            if path == self.root:
                raise TargetNotFoundError(path) from e
            logger.debug(f"Removal aborted: {operation} failed for '{path}': {e}")
            raise RemovalIOError(path, operation, e) from e
        except OSError as e:
            logger.debug(f"Removal aborted: {operation} failed for '{path}': {e}")
            raise RemovalIOError(path, operation, e) from e


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_leaf(ref: str, st: os.stat_result, dir_fd: Optional[int] = None) -> None:
    """
    Unlink a non-directory entry.

    Windows directory symlinks and junctions carry the directory attribute
    without being S_ISDIR; rmdir removes the link itself there.
    """
    if os.name == "nt" and getattr(st, "st_file_attributes", 0) & FILE_ATTRIBUTE_DIRECTORY:
        os.rmdir(ref, dir_fd=dir_fd)
    else:
        os.unlink(ref, dir_fd=dir_fd)
