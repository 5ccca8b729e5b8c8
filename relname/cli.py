"""Command-line front door for relname.

Loads persisted configuration, applies option overrides, and prints one
unique display name per input path.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .config import load_naming_config, naming_config_from_dict, update_config
from .paths import HOME_PREFIX, abbreviate_home
from .registry import NameRegistry
from .roots import FALLBACKS, ROOT_CAPABILITIES

LOG_FORMAT = "relname: %(levelname)s: %(message)s"


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _normalize_input_path(raw: str, abbreviate: bool) -> str:
    """Return an absolute ``/``-separated path, optionally in ``~/`` form."""
    if raw.startswith(HOME_PREFIX):
        return raw
    path = os.path.abspath(raw).replace(os.sep, "/")
    return abbreviate_home(path) if abbreviate else path


def _stored_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Return naming options in the JSON shape of the config file."""
    stored: dict[str, object] = {}
    if args.prefix is not None:
        stored["prefix"] = args.prefix
    if args.bracket is not None:
        stored["prefix"] = [args.bracket[0], args.bracket[1]]
    if args.abbrev_limit is not None:
        stored["abbrev_limit"] = args.abbrev_limit
    if args.fallback is not None:
        stored["fallback"] = args.fallback
    if args.roots is not None:
        stored["root_functions"] = list(args.roots)
    return stored


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relname",
        description="Print short, root-relative display names for file paths.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="File paths to name (need not exist).")
    parser.add_argument("--prefix", default=None, help='Literal prefix shown before the relative path (e.g. "./").')
    parser.add_argument(
        "--bracket",
        nargs=2,
        metavar=("OPEN", "CLOSE"),
        default=None,
        help="Wrap the root name in OPEN/CLOSE instead of a literal prefix.",
    )
    parser.add_argument(
        "--abbrev-limit",
        type=_nonnegative_int,
        default=None,
        help="Abbreviate directories longer than this many characters (0 disables).",
    )
    parser.add_argument("--fallback", choices=FALLBACKS, default=None, help="Root used when no root function answers.")
    parser.add_argument(
        "--root",
        action="append",
        choices=sorted(ROOT_CAPABILITIES),
        default=None,
        dest="roots",
        help="Root function to try, in order (repeatable).",
    )
    parser.add_argument("--default-directory", default=None, help="Root for the 'default' fallback.")
    parser.add_argument(
        "--abbreviate-home",
        action="store_true",
        help="Rewrite paths under the home directory to ~/ form before naming.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store --prefix/--bracket/--abbrev-limit/--fallback/--root in the config file.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log root lookups and diagnostics to stderr.")
    return parser


def main() -> None:
    """Parse CLI arguments and print a display name for each path."""
    parser = build_parser()
    args = parser.parse_args()
    if args.prefix is not None and args.bracket is not None:
        parser.error("--prefix and --bracket are mutually exclusive")
    if not args.paths and not args.save:
        parser.error("at least one PATH is required unless --save is given")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    stored = _stored_overrides(args)
    if args.save:
        update_config(stored)

    overrides = naming_config_from_dict(stored)
    changes: dict[str, object] = {key: getattr(overrides, key) for key in stored}
    if args.default_directory is not None:
        changes["default_directory"] = _normalize_input_path(args.default_directory, False)
    config = load_naming_config().with_changes(**changes)

    registry = NameRegistry(config)
    out: list[str] = []
    for raw in args.paths:
        out.append(registry.add(_normalize_input_path(raw, args.abbreviate_home)) + "\n")
    sys.stdout.write("".join(out))


if __name__ == "__main__":
    main()
