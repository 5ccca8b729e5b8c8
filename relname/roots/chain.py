"""Ordered root lookup over fallible capabilities.

Each capability maps a file path to a root directory or ``None``. The first
non-empty answer wins. A capability that raises, or answers with something
that is not a path, is logged and skipped, so a broken backend never blocks
naming.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import logging
import os

from ..errors import ConfigurationError, ResolverFailure
from ..paths import SEPARATOR, as_directory, current_directory, directory_of

logger = logging.getLogger(__name__)

FALLBACK_DEFAULT = "default"
FALLBACK_ABSOLUTE = "absolute"
FALLBACK_NONE = "none"
FALLBACKS = (FALLBACK_DEFAULT, FALLBACK_ABSOLUTE, FALLBACK_NONE)

NO_ROOT = ""

RootFunction = Callable[[str], "str | os.PathLike[str] | None"]


@dataclass(frozen=True)
class RootCapability:
    """Named root lookup; ``name`` is what diagnostics report."""

    name: str
    lookup: RootFunction

    def __call__(self, filepath: str) -> str | os.PathLike[str] | None:
        return self.lookup(filepath)


def resolver_name(resolver: RootFunction) -> str:
    """Return a readable identifier for ``resolver``."""
    name = getattr(resolver, "name", None)
    if isinstance(name, str) and name:
        return name
    return getattr(resolver, "__qualname__", None) or repr(resolver)


def _normalize_root(found: object) -> str | None:
    """Return ``found`` as a directory path; ``None`` for an empty answer.

    Strings and ``os.PathLike`` objects are accepted; anything else raises
    ``TypeError``.
    """
    if found is None:
        return None
    root = os.fspath(found)
    if not isinstance(root, str):
        raise TypeError(f"root must be a str or path, got {type(found).__name__}")
    if not root:
        return None
    return as_directory(root.replace(os.sep, SEPARATOR))


def _call_resolver(resolver: RootFunction, filepath: str) -> str | None:
    """Invoke one capability behind a fault barrier.

    A raise or an unusable result is logged and reported as no answer.
    """
    try:
        return _normalize_root(resolver(filepath))
    except Exception as exc:
        failure = ResolverFailure(resolver_name(resolver), exc)
        logger.warning("%s", failure)
        return None


def _fallback_root(filepath: str, fallback: str, default_directory: str | None) -> str:
    if fallback == FALLBACK_ABSOLUTE:
        # A bare filename lives in the working directory.
        return directory_of(filepath) or current_directory()
    if fallback == FALLBACK_NONE:
        return NO_ROOT
    if fallback != FALLBACK_DEFAULT:
        logger.warning(
            "%s",
            ConfigurationError(
                f"unknown root fallback {fallback!r}",
                f"expected one of {', '.join(FALLBACKS)}",
            ),
        )
    if default_directory:
        return as_directory(default_directory)
    return current_directory()


def resolve_root(
    filepath: str,
    resolvers: Iterable[RootFunction],
    fallback: str = FALLBACK_DEFAULT,
    default_directory: str | None = None,
) -> str:
    """Return the root directory used to name ``filepath``.

    ``NO_ROOT`` (the empty string) means the name should not be customized;
    it is only produced by the ``"none"`` fallback.
    """
    for resolver in resolvers:
        root = _call_resolver(resolver, filepath)
        if root:
            logger.debug("root for %s from %s: %s", filepath, resolver_name(resolver), root)
            return root
    return _fallback_root(filepath, fallback, default_directory)
