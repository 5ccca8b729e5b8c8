"""Root discovery: the resolver chain and the built-in capabilities.

Capabilities are looked up by name so configuration files can list them.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from ..errors import ConfigurationError
from .chain import (
    FALLBACK_ABSOLUTE,
    FALLBACK_DEFAULT,
    FALLBACK_NONE,
    FALLBACKS,
    NO_ROOT,
    RootCapability,
    RootFunction,
    resolve_root,
    resolver_name,
)
from .git import git_root
from .home import home_root
from .markers import DEFAULT_ROOT_MARKERS, MarkerRoot, marker_root

logger = logging.getLogger(__name__)

ROOT_CAPABILITIES: dict[str, RootFunction] = {
    "git": RootCapability("git", git_root),
    "markers": marker_root(),
    "home": RootCapability("home", home_root),
}


def capabilities_from_names(names: Iterable[str]) -> tuple[RootFunction, ...]:
    """Map capability names to capabilities, skipping unknown names."""
    resolved: list[RootFunction] = []
    for name in names:
        capability = ROOT_CAPABILITIES.get(name)
        if capability is None:
            logger.warning(
                "%s",
                ConfigurationError(
                    f"unknown root function {name!r}",
                    f"expected one of {', '.join(sorted(ROOT_CAPABILITIES))}",
                ),
            )
            continue
        resolved.append(capability)
    return tuple(resolved)


__all__ = [
    "DEFAULT_ROOT_MARKERS",
    "FALLBACKS",
    "FALLBACK_ABSOLUTE",
    "FALLBACK_DEFAULT",
    "FALLBACK_NONE",
    "MarkerRoot",
    "NO_ROOT",
    "ROOT_CAPABILITIES",
    "RootCapability",
    "RootFunction",
    "capabilities_from_names",
    "git_root",
    "home_root",
    "marker_root",
    "resolve_root",
    "resolver_name",
]
