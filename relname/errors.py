"""Exception types for naming diagnostics.

These are raised inside the package and caught at module boundaries, where
they are logged. Naming is best-effort: callers never see them.
"""

from __future__ import annotations


class RelnameError(Exception):
    """Base class for relname failures."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        full_message = message
        if suggestion:
            full_message += f" ({suggestion})"
        super().__init__(full_message)


class ConfigurationError(RelnameError):
    """A configured value has the wrong shape; a default is used instead."""


class ResolverFailure(RelnameError):
    """A root capability raised while looking up a root."""

    def __init__(self, resolver_name: str, cause: BaseException) -> None:
        self.resolver_name = resolver_name
        self.cause = cause
        super().__init__(f"root function {resolver_name!r} failed: {cause}")


class CompositionFailure(RelnameError):
    """Unexpected fault while composing a display name."""

    def __init__(self, filepath: str, cause: BaseException) -> None:
        self.filepath = filepath
        self.cause = cause
        super().__init__(f"could not compose a name for {filepath!r}: {cause}")
