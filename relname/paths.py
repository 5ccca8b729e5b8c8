"""String-level path helpers shared by the resolver and the composer.

Paths are plain ``/``-separated strings. A directory path ends in ``/`` and
``~/`` is the home shorthand. Nothing here touches the filesystem.
"""

from __future__ import annotations

import os
import posixpath

SEPARATOR = "/"
HOME_PREFIX = "~/"
PARENT_PREFIX = "../"


def as_directory(path: str) -> str:
    """Return ``path`` with exactly the trailing separator a directory needs."""
    if not path or path.endswith(SEPARATOR):
        return path
    return path + SEPARATOR


def strip_directory(path: str) -> str:
    """Drop trailing separators, keeping a bare ``/`` intact."""
    stripped = path.rstrip(SEPARATOR)
    if not stripped and path.startswith(SEPARATOR):
        return SEPARATOR
    return stripped


def directory_of(filepath: str) -> str:
    """Return the directory portion of ``filepath`` as a directory path."""
    head = posixpath.dirname(filepath)
    if not head:
        return ""
    return as_directory(head)


def expand_home(path: str) -> str:
    """Expand a leading ``~`` so relative arithmetic sees real directories."""
    if path == "~" or path.startswith(HOME_PREFIX):
        return posixpath.expanduser(path)
    return path


def home_directory() -> str:
    """Return the user's home directory as a directory path."""
    return as_directory(posixpath.expanduser("~"))


def abbreviate_home(path: str) -> str:
    """Rewrite an absolute path under the home directory to ``~/`` form."""
    home = home_directory()
    if home != SEPARATOR and path.startswith(home):
        return HOME_PREFIX + path[len(home) :]
    return path


def current_directory() -> str:
    """Return the process working directory as a directory path."""
    return as_directory(os.getcwd().replace(os.sep, SEPARATOR))


def relative_path(filepath: str, root: str) -> str:
    """Return the shortest relative form of ``filepath`` seen from ``root``.

    Both sides get their home shorthand expanded first; the result ascends with
    ``../`` segments when ``filepath`` lies outside ``root``.
    """
    return posixpath.relpath(expand_home(filepath), expand_home(root))


def split_first_segment(filepath: str) -> tuple[str, str]:
    """Split after the separator closing the first real segment.

    Leading separators belong to the head: ``"/a/b/c.txt"`` gives
    ``("/a/", "b/c.txt")``. Without such a separator the head holds only the
    leading separators.
    """
    beg = 0
    while beg < len(filepath) and filepath[beg] == SEPARATOR:
        beg += 1
    end = filepath.find(SEPARATOR, beg)
    if end == -1:
        return filepath[:beg], filepath[beg:]
    return filepath[: end + 1], filepath[end + 1 :]
