"""Home directory as a naming root."""

from __future__ import annotations

from ..paths import HOME_PREFIX, expand_home, home_directory


def home_root(filepath: str) -> str | None:
    """Root capability: ``~/`` for anything inside the user's home directory."""
    if filepath.startswith(HOME_PREFIX):
        return HOME_PREFIX
    home = home_directory()
    if home != "/" and expand_home(filepath).startswith(home):
        return HOME_PREFIX
    return None
