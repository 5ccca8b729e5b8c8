"""Numeric suffixes that make a display name unique."""

from __future__ import annotations

from collections.abc import Callable
import logging

logger = logging.getLogger(__name__)

MAX_SUFFIX_ATTEMPTS = 10_000


def numbered_name(candidate: str, number: int) -> str:
    """Return ``candidate`` with the ``" <N>"`` suffix."""
    return f"{candidate} <{number}>"


def unique_name(
    candidate: str,
    exists: Callable[[str], bool],
    max_attempts: int = MAX_SUFFIX_ATTEMPTS,
) -> str:
    """Return ``candidate`` or the first free ``"candidate <N>"``, from ``N=0``.

    Gives up after ``max_attempts`` numbered tries, logs it, and returns
    ``candidate`` unchanged.
    """
    if not exists(candidate):
        return candidate
    for number in range(max(0, max_attempts)):
        name = numbered_name(candidate, number)
        if not exists(name):
            return name
    logger.error("no free name for %r after %d numbered attempts", candidate, max_attempts)
    return candidate
