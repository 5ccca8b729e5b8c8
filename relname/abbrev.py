"""Directory abbreviation to an exact character budget.

Segments are shortened left to right. A segment that must give up everything
it can is cut to its first character; the segment that absorbs the remaining
overflow keeps a prefix followed by ``ABBREV_MARKER``. Separators are kept, so
a leading ``/`` survives and every segment keeps at least one character.
"""

from __future__ import annotations

from .paths import SEPARATOR

ABBREV_MARKER = "~"


def _first_non_separator(path: str, start: int) -> int:
    """Return index of the first non-separator at or after ``start`` or ``-1``."""
    for idx in range(start, len(path)):
        if path[idx] != SEPARATOR:
            return idx
    return -1


def abbreviate_directory(path: str, goal_length: int) -> str:
    """Shorten directory segments of ``path`` so it fits ``goal_length``.

    ``path`` is a run of directory segments ending in ``/``. When it already
    fits it is returned as-is. Otherwise segments are truncated from the left
    until the overflow is absorbed or no segment is left to shrink, so the
    result may still exceed ``goal_length`` when the budget is below the
    one-character-per-segment floor (``goal_length <= 0`` abbreviates
    maximally). A path without any separator is returned unchanged.
    """
    if len(path) <= goal_length:
        return path

    overflow = len(path) - goal_length
    out: list[str] = []
    pos = 0
    while overflow > 0:
        beg = _first_non_separator(path, pos)
        if beg == -1:
            break
        end = path.find(SEPARATOR, beg)
        if end == -1:
            break

        # A segment can shrink down to its first character.
        available = (end - beg) - 1
        if available <= 0:
            out.append(path[pos:end])
        elif overflow >= available:
            out.append(path[pos : beg + 1])
            overflow -= available
        else:
            keep = available - overflow
            out.append(path[pos : beg + keep] + ABBREV_MARKER)
            overflow = 0
        pos = end

    out.append(path[pos:])
    return "".join(out)


def split_directory(body: str) -> tuple[str, str]:
    """Split ``body`` into ``(directory, filename)``; directory keeps its ``/``."""
    cut = body.rfind(SEPARATOR) + 1
    return body[:cut], body[cut:]


def abbreviate_body(body: str, limit: int) -> str:
    """Abbreviate the directory part of ``body`` when it exceeds ``limit``.

    ``limit <= 0`` disables abbreviation. The filename is never touched.
    """
    if limit <= 0:
        return body
    directory, filename = split_directory(body)
    if len(directory) <= limit:
        return body
    return abbreviate_directory(directory, limit) + filename
