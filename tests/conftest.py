from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   an installation step.
2. Provides shared filesystem fixtures for the removal tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small tree with files at several levels.

    Layout:
        tree/
            top.txt
            sub/
                a.txt
                nested/
                    b.txt
            empty/
    """
    root = tmp_path / "tree"
    (root / "sub" / "nested").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.txt").write_text("top", encoding="utf-8")
    (root / "sub" / "a.txt").write_text("a", encoding="utf-8")
    (root / "sub" / "nested" / "b.txt").write_text("b", encoding="utf-8")
    return root


@pytest.fixture
def make_symlink():
    """Create a symlink or skip the test where the platform refuses it."""

    def _make(link: Path, target: str, target_is_directory: bool = False) -> Path:
        try:
            os.symlink(target, str(link), target_is_directory=target_is_directory)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")
        return link

    return _make
