"""Naming configuration and its persisted JSON form.

``NamingConfig`` is the immutable bundle handed to the composer. The JSON
file mirrors its fields by name; every key is validated on its own, and a bad
value is reported and replaced by its default rather than rejecting the file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
import json
import logging
from pathlib import Path
from types import MappingProxyType

from platformdirs import user_config_dir

from .errors import ConfigurationError
from .prefix import DEFAULT_PREFIX, PrefixSpec, is_prefix_pair
from .roots import (
    FALLBACK_DEFAULT,
    FALLBACKS,
    ROOT_CAPABILITIES,
    RootFunction,
    capabilities_from_names,
)

logger = logging.getLogger(__name__)

APP_NAME = "relname"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_ROOT_FUNCTION_NAMES = ("git",)


def _default_root_functions() -> tuple[RootFunction, ...]:
    return tuple(ROOT_CAPABILITIES[name] for name in DEFAULT_ROOT_FUNCTION_NAMES)


@dataclass(frozen=True)
class NamingConfig:
    """Inputs that shape every display name.

    ``abbrev_limit`` of ``0`` disables directory abbreviation.
    ``default_directory`` is the root used by the ``"default"`` fallback;
    ``None`` means the process working directory at call time.
    """

    prefix: PrefixSpec = DEFAULT_PREFIX
    prefix_map: Mapping[str, str] = field(default_factory=dict)
    root_functions: tuple[RootFunction, ...] = field(default_factory=_default_root_functions)
    fallback: str = FALLBACK_DEFAULT
    abbrev_limit: int = 0
    default_directory: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix_map", MappingProxyType(dict(self.prefix_map)))
        object.__setattr__(self, "root_functions", tuple(self.root_functions))
        if isinstance(self.prefix, list):
            object.__setattr__(self, "prefix", tuple(self.prefix))

    def with_changes(self, **changes: object) -> NamingConfig:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write config data as pretty-printed JSON.

    A failed write is logged; naming keeps working from in-memory settings.
    """
    try:
        text = json.dumps(data, indent=2) + "\n"
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(text, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def update_config(changes: Mapping[str, object]) -> dict[str, object]:
    """Merge JSON-shaped ``changes`` over the stored config and write it back."""
    data = load_config()
    data.update(changes)
    save_config(data)
    return data


def _report(key: str, value: object, expected: str) -> None:
    logger.warning("%s", ConfigurationError(f"invalid {key!r} value {value!r}", f"expected {expected}"))


def _coerce_prefix(value: object) -> PrefixSpec:
    if isinstance(value, str):
        return value
    if is_prefix_pair(value):
        return (value[0], value[1])
    _report("prefix", value, "a string or a two-item list of strings")
    return DEFAULT_PREFIX


def _coerce_prefix_map(value: object) -> dict[str, str]:
    if not isinstance(value, dict):
        _report("prefix_map", value, "an object mapping root paths to labels")
        return {}
    cleaned: dict[str, str] = {}
    for root, label in value.items():
        if not isinstance(root, str) or not isinstance(label, str):
            _report("prefix_map", {root: label}, "string keys and values")
            continue
        cleaned[root.rstrip("/") or root] = label
    return cleaned


def _coerce_root_functions(value: object) -> tuple[RootFunction, ...]:
    if not isinstance(value, list) or not all(isinstance(name, str) for name in value):
        _report("root_functions", value, "a list of root function names")
        return _default_root_functions()
    return capabilities_from_names(value)


def _coerce_fallback(value: object) -> str:
    if isinstance(value, str) and value in FALLBACKS:
        return value
    _report("fallback", value, f"one of {', '.join(FALLBACKS)}")
    return FALLBACK_DEFAULT


def _coerce_abbrev_limit(value: object) -> int:
    # bool is an int subclass; JSON true/false is never a length.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        _report("abbrev_limit", value, "a non-negative integer")
        return 0
    return value


_COERCERS = {
    "prefix": _coerce_prefix,
    "prefix_map": _coerce_prefix_map,
    "root_functions": _coerce_root_functions,
    "fallback": _coerce_fallback,
    "abbrev_limit": _coerce_abbrev_limit,
}


def naming_config_from_dict(data: Mapping[str, object]) -> NamingConfig:
    """Build a ``NamingConfig`` from JSON-shaped ``data``.

    Missing keys take their defaults. Unknown keys are ignored.
    """
    values: dict[str, object] = {}
    for key, coerce in _COERCERS.items():
        if key in data:
            values[key] = coerce(data[key])
    return NamingConfig(**values)


def load_naming_config() -> NamingConfig:
    """Load the persisted naming configuration."""
    return naming_config_from_dict(load_config())
