"""Compose the display name for one file path.

Resolution order:
1. find the root through the configured capabilities and fallback
2. express the file relative to that root
3. when the relative form climbs out of the root (``../``), prefer the home
   shorthand or the absolute path instead
4. prepend the formatted prefix and abbreviate long directory runs
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .abbrev import abbreviate_body
from .config import NamingConfig
from .errors import CompositionFailure
from .paths import HOME_PREFIX, PARENT_PREFIX, relative_path, split_first_segment
from .prefix import format_prefix
from .roots import NO_ROOT, resolve_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposedName:
    """Display name split into its prefix and its (possibly abbreviated) body."""

    prefix: str
    body: str
    root: str

    @property
    def text(self) -> str:
        return self.prefix + self.body


def _corrected_parts(filepath: str, root: str, rel: str) -> tuple[str, str] | None:
    """Return ``(prefix, body)`` when the naive relative form is replaced."""
    if rel.startswith(PARENT_PREFIX):
        if filepath.startswith(HOME_PREFIX):
            return HOME_PREFIX, filepath[len(HOME_PREFIX) :]
        # The ascent went all the way up and back down the absolute path.
        if rel.endswith(filepath):
            return split_first_segment(filepath)
        return None
    if root == HOME_PREFIX:
        return HOME_PREFIX, rel
    return None


def compose_parts(filepath: str, config: NamingConfig) -> ComposedName | None:
    """Build the name for ``filepath``; ``None`` keeps the raw path.

    Faults propagate; ``compose_name`` is the contained entry point.
    """
    root = resolve_root(
        filepath,
        config.root_functions,
        config.fallback,
        config.default_directory,
    )
    if root == NO_ROOT:
        return None

    rel = relative_path(filepath, root)
    corrected = _corrected_parts(filepath, root, rel)
    if corrected is None:
        prefix, body = format_prefix(root, config.prefix, config.prefix_map), rel
    else:
        prefix, body = corrected

    body = abbreviate_body(body, config.abbrev_limit)
    return ComposedName(prefix=prefix, body=body, root=root)


def compose_name(filepath: str, config: NamingConfig | None = None) -> str | None:
    """Return the display name for ``filepath`` or ``None`` for the raw path.

    Never raises: unexpected faults are logged and reported as ``None``.
    """
    if config is None:
        config = NamingConfig()
    try:
        composed = compose_parts(filepath, config)
    except Exception as exc:
        logger.error("%s", CompositionFailure(filepath, exc), exc_info=True)
        return None
    if composed is None:
        return None
    return composed.text


class NameComposer:
    """Composer bound to one configuration."""

    def __init__(self, config: NamingConfig | None = None) -> None:
        self.config = config if config is not None else NamingConfig()

    def compose(self, filepath: str) -> str | None:
        return compose_name(filepath, self.config)

    def __call__(self, filepath: str) -> str | None:
        return self.compose(filepath)
