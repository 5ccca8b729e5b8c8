"""Git work-tree root lookup."""

from __future__ import annotations

import subprocess

from ..paths import as_directory, directory_of, expand_home

GIT_TIMEOUT_SECONDS = 1.0


def git_toplevel(directory: str, timeout_seconds: float = GIT_TIMEOUT_SECONDS) -> str | None:
    """Return the work-tree top level containing ``directory``.

    Uses ``git rev-parse --show-toplevel`` and returns ``None`` when
    ``directory`` is outside a repository. Failing to run git at all (missing
    binary, timeout) raises so the caller can report it.
    """
    proc = subprocess.run(
        ["git", "-C", directory, "rev-parse", "--show-toplevel"],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
        timeout=timeout_seconds,
    )
    if proc.returncode != 0:
        return None

    lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
    if not lines:
        return None
    return as_directory(lines[0])


def git_root(filepath: str) -> str | None:
    """Root capability: the git work tree holding ``filepath``."""
    directory = directory_of(expand_home(filepath)) or "."
    return git_toplevel(directory)
