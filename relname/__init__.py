"""Public package surface for relname.

Exports the naming entry points. ``main`` is imported lazily to keep package
imports lightweight.
"""

from __future__ import annotations

from .abbrev import abbreviate_directory
from .compose import NameComposer, compose_name
from .config import NamingConfig
from .prefix import format_prefix
from .registry import NameRegistry
from .roots import RootCapability, resolve_root
from .unique import unique_name


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "NameComposer",
    "NameRegistry",
    "NamingConfig",
    "RootCapability",
    "abbreviate_directory",
    "compose_name",
    "format_prefix",
    "main",
    "resolve_root",
    "unique_name",
]
