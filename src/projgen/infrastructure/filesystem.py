"""Filesystem helpers for generated projects.

Paths handed back to callers are POSIX and relative to the project root,
so results and tests read the same on every platform.
"""

from __future__ import annotations

from pathlib import Path


def list_files(root: Path) -> list[str]:
    """Sorted relative paths of every file under *root*.

    A missing root yields an empty list.
    """
    root = Path(root)
    if not root.is_dir():
        return []
    return sorted(path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file())


def is_non_empty_dir(path: Path) -> bool:
    """True when *path* is an existing directory with at least one entry."""
    path = Path(path)
    return path.is_dir() and any(path.iterdir())
