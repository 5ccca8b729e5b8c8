"""In-process registry applying display names to file-backed entries.

This is the host side of naming: it composes a name when an entry is added,
makes it unique among the names in use, and renames everything when the
naming is switched on or off or the configuration changes. Entries are always
registered, with the raw path as their name when composition gives up.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import logging

from .compose import NameComposer
from .config import NamingConfig
from .errors import CompositionFailure
from .unique import MAX_SUFFIX_ATTEMPTS, unique_name

logger = logging.getLogger(__name__)

Composer = Callable[[str], str | None]


class NameRegistry:
    """Unique display names for a set of file paths, in insertion order.

    While disabled every entry is named by its raw path.
    """

    def __init__(
        self,
        config: NamingConfig | None = None,
        composer: Composer | None = None,
        *,
        enabled: bool = True,
        max_suffix_attempts: int = MAX_SUFFIX_ATTEMPTS,
    ) -> None:
        self.composer: Composer = composer if composer is not None else NameComposer(config)
        self.enabled = enabled
        self.max_suffix_attempts = max_suffix_attempts
        self._names: dict[str, str] = {}
        # A name has several owners only when disambiguation gave up.
        self._owners: dict[str, list[str]] = {}

    def __contains__(self, filepath: object) -> bool:
        return filepath in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def is_taken(self, name: str) -> bool:
        """Return whether ``name`` is already used by an entry."""
        return name in self._owners

    def name_for(self, filepath: str) -> str | None:
        return self._names.get(filepath)

    def path_for(self, name: str) -> str | None:
        owners = self._owners.get(name)
        return owners[0] if owners else None

    def names(self) -> list[str]:
        return list(self._names.values())

    def _candidate(self, filepath: str) -> str:
        if not self.enabled:
            return filepath
        try:
            candidate = self.composer(filepath)
        except Exception as exc:
            logger.error("%s", CompositionFailure(filepath, exc), exc_info=True)
            return filepath
        return candidate if candidate else filepath

    def _assign(self, filepath: str) -> str:
        name = unique_name(self._candidate(filepath), self.is_taken, self.max_suffix_attempts)
        self._names[filepath] = name
        self._owners.setdefault(name, []).append(filepath)
        return name

    def add(self, filepath: str) -> str:
        """Register ``filepath`` and return its display name.

        Adding a path twice returns the name it already has.
        """
        existing = self._names.get(filepath)
        if existing is not None:
            return existing
        return self._assign(filepath)

    def remove(self, filepath: str) -> str | None:
        """Forget ``filepath``; returns the name it had, freeing it for reuse."""
        name = self._names.pop(filepath, None)
        if name is not None:
            owners = self._owners.get(name, [])
            if filepath in owners:
                owners.remove(filepath)
            if not owners:
                self._owners.pop(name, None)
        return name

    def rename_all(self) -> dict[str, str]:
        """Recompute every name in insertion order; returns ``{path: name}``."""
        filepaths = list(self._names)
        self._names.clear()
        self._owners.clear()
        for filepath in filepaths:
            self._assign(filepath)
        return dict(self._names)

    def enable(self) -> dict[str, str]:
        """Switch to composed names and rename existing entries."""
        self.enabled = True
        return self.rename_all()

    def disable(self) -> dict[str, str]:
        """Restore raw paths as names for all entries."""
        self.enabled = False
        return self.rename_all()

    def refresh(self, config: NamingConfig) -> dict[str, str]:
        """Adopt ``config`` and rename existing entries."""
        self.composer = NameComposer(config)
        return self.rename_all()
