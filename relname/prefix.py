"""Prefix shown in front of a root-relative path.

A prefix spec is either a literal string (``"./"``) or an ``(open, close)``
pair that wraps the root's label, e.g. ``("[", "]/")`` gives ``[proj]/``.
Labels come from an optional map keyed by root path, else the root basename.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import posixpath

from .errors import ConfigurationError
from .paths import strip_directory

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "./"
INVALID_PREFIX = "?/"

PrefixSpec = str | tuple[str, str]


def is_prefix_pair(spec: object) -> bool:
    """Return whether ``spec`` is an ``(open, close)`` pair of strings."""
    return (
        isinstance(spec, (tuple, list))
        and len(spec) == 2
        and all(isinstance(part, str) for part in spec)
    )


def root_label(root: str, prefix_map: Mapping[str, str] | None = None) -> str:
    """Return the mapped label for ``root`` or its final path segment."""
    stripped = strip_directory(root)
    if prefix_map is not None and not isinstance(prefix_map, Mapping):
        logger.warning(
            "%s",
            ConfigurationError(f"prefix map must be a mapping, got {type(prefix_map).__name__}"),
        )
        prefix_map = None
    if prefix_map:
        label = prefix_map.get(stripped)
        if isinstance(label, str):
            return label
    return posixpath.basename(stripped) or stripped


def format_prefix(root: str, spec: object, prefix_map: Mapping[str, str] | None = None) -> str:
    """Render the prefix for ``root`` according to ``spec``.

    A malformed ``spec`` is reported and rendered as ``INVALID_PREFIX``.
    """
    if isinstance(spec, str):
        return spec
    if is_prefix_pair(spec):
        open_marker, close_marker = spec
        return f"{open_marker}{root_label(root, prefix_map)}{close_marker}"
    logger.warning(
        "%s",
        ConfigurationError(
            f"invalid prefix {spec!r}",
            "use a string or an (open, close) pair of strings",
        ),
    )
    return INVALID_PREFIX
