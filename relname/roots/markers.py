"""Project roots recognized by marker files.

Walks up from a file's directory and stops at the first directory holding one
of the marker entries. Only ``exists`` checks are made.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..paths import as_directory, expand_home

DEFAULT_ROOT_MARKERS = (".git", ".hg", ".svn", ".projectile", "pyproject.toml")


def find_marked_directory(start: Path, markers: Iterable[str]) -> Path | None:
    """Return ``start`` or its nearest ancestor containing any of ``markers``."""
    names = tuple(markers)
    for candidate in (start, *start.parents):
        if any((candidate / name).exists() for name in names):
            return candidate
    return None


class MarkerRoot:
    """Root capability keyed on marker entries such as ``.git``."""

    def __init__(self, markers: Iterable[str] = DEFAULT_ROOT_MARKERS) -> None:
        self.markers = tuple(markers)
        self.name = f"markers({', '.join(self.markers)})"

    def __call__(self, filepath: str) -> str | None:
        start = Path(expand_home(filepath)).parent
        found = find_marked_directory(start, self.markers)
        if found is None:
            return None
        return as_directory(found.as_posix())


def marker_root(markers: Iterable[str] = DEFAULT_ROOT_MARKERS) -> MarkerRoot:
    """Build a marker-based root capability."""
    return MarkerRoot(markers)
