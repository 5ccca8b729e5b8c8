"""Display-name composition tests.

Exercises root-relative naming, the ascent corrections, prefix selection, and
containment of unexpected faults.
"""

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from relname.compose import NameComposer, compose_name, compose_parts
from relname.config import NamingConfig
from relname.roots import FALLBACK_ABSOLUTE, FALLBACK_NONE


def _config(root: object, **changes: object) -> NamingConfig:
    root_functions = () if root is None else (lambda _path: root,)
    values: dict[str, object] = {"root_functions": root_functions, "fallback": FALLBACK_NONE}
    values.update(changes)
    return NamingConfig(**values)


class ComposeNameTests(unittest.TestCase):
    def test_abbreviated_project_relative_name(self) -> None:
        config = _config("/home/u/proj", abbrev_limit=16)
        filepath = "/home/u/proj/scripts/presets/keyconfig/keymap_data/keymap_default.py"

        self.assertEqual(compose_name(filepath, config), "./s/p/k/keymap_d~/keymap_default.py")

    def test_plain_relative_name_without_limit(self) -> None:
        config = _config("/home/u/proj/")
        self.assertEqual(compose_name("/home/u/proj/src/app.py", config), "./src/app.py")

    def test_bracketed_prefix_uses_prefix_map(self) -> None:
        config = _config("/home/u/proj/", prefix=("[", "]/"), prefix_map={"/home/u/proj": "P"})
        self.assertEqual(compose_name("/home/u/proj/src/app.py", config), "[P]/src/app.py")

    def test_unrelated_root_shows_absolute_path_instead_of_ascent(self) -> None:
        config = _config("/x/y/")

        composed = compose_parts("/a/b/c.txt", config)

        self.assertIsNotNone(composed)
        self.assertEqual((composed.prefix, composed.body), ("/a/", "b/c.txt"))
        self.assertEqual(composed.text, "/a/b/c.txt")
        self.assertFalse(composed.text.startswith("../"))

    def test_unrelated_root_keeps_home_shorthand(self) -> None:
        config = _config("/srv/data/")
        with mock.patch.dict(os.environ, {"HOME": "/home/u"}):
            composed = compose_parts("~/notes/todo.txt", config)

        self.assertEqual((composed.prefix, composed.body), ("~/", "notes/todo.txt"))

    def test_partial_ascent_without_correction_is_kept_literally(self) -> None:
        config = _config("/a/x/")
        self.assertEqual(compose_name("/a/b/c.txt", config), "./../b/c.txt")

    def test_home_root_is_its_own_prefix(self) -> None:
        config = _config("~/", prefix=("[", "]/"))
        with mock.patch.dict(os.environ, {"HOME": "/home/u"}):
            self.assertEqual(compose_name("~/src/app.py", config), "~/src/app.py")
            self.assertEqual(compose_name("/home/u/src/app.py", config), "~/src/app.py")

    def test_corrected_body_is_abbreviated_too(self) -> None:
        config = _config("/x/y/", abbrev_limit=4)
        self.assertEqual(compose_name("/usr/share/doc/readme.md", config), "/usr/s/d/readme.md")

    def test_no_root_keeps_raw_path(self) -> None:
        self.assertIsNone(compose_name("/a/b/c.txt", _config(None)))

    def test_absolute_fallback_names_file_by_itself(self) -> None:
        config = _config(None, fallback=FALLBACK_ABSOLUTE)
        self.assertEqual(compose_name("/a/b/c.txt", config), "./c.txt")

    def test_failing_resolver_falls_through_to_next(self) -> None:
        def broken(_path: str) -> str | None:
            raise OSError("no vcs")

        config = NamingConfig(root_functions=(broken, lambda _path: "/proj"), fallback=FALLBACK_NONE)
        with self.assertLogs("relname", level="WARNING"):
            self.assertEqual(compose_name("/proj/lib/x.py", config), "./lib/x.py")

    def test_unexpected_fault_is_contained_and_logged(self) -> None:
        config = _config("/a/")
        with mock.patch("relname.compose.relative_path", side_effect=ValueError("empty path")):
            with self.assertLogs("relname", level="ERROR") as logs:
                self.assertIsNone(compose_name("/a/b/c.txt", config))
        self.assertIn("could not compose a name for '/a/b/c.txt'", logs.output[0])

    def test_path_object_from_resolver_is_accepted(self) -> None:
        config = _config(Path("/proj"))
        self.assertEqual(compose_name("/proj/a.py", config), "./a.py")

    def test_bare_filename_with_absolute_fallback_uses_working_directory(self) -> None:
        config = _config(None, fallback=FALLBACK_ABSOLUTE)
        with mock.patch("relname.paths.os.getcwd", return_value="/work"):
            self.assertEqual(compose_name("c.txt", config), "./c.txt")

    def test_name_composer_binds_config(self) -> None:
        composer = NameComposer(_config("/proj/"))
        self.assertEqual(composer("/proj/a.txt"), "./a.txt")
        self.assertEqual(composer.compose("/proj/b/a.txt"), "./b/a.txt")


if __name__ == "__main__":
    unittest.main()
