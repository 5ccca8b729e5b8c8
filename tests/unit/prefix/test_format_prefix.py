"""Prefix formatting tests for literal and bracketed root labels."""

from __future__ import annotations

import unittest

from relname.prefix import INVALID_PREFIX, format_prefix, root_label


class FormatPrefixTests(unittest.TestCase):
    def test_literal_prefix_is_returned_unchanged(self) -> None:
        self.assertEqual(format_prefix("/home/u/proj/", "./"), "./")
        self.assertEqual(format_prefix("/home/u/proj/", ""), "")

    def test_pair_wraps_root_basename(self) -> None:
        self.assertEqual(format_prefix("/home/u/proj/", ("[", "]/")), "[proj]/")

    def test_pair_may_be_a_list(self) -> None:
        self.assertEqual(format_prefix("/home/u/proj", ["<", ">:"]), "<proj>:")

    def test_mapped_label_replaces_basename(self) -> None:
        prefix_map = {"/home/u/blender-git/blender": "B"}
        self.assertEqual(
            format_prefix("/home/u/blender-git/blender/", ("[", "]/"), prefix_map),
            "[B]/",
        )

    def test_unmapped_root_falls_back_to_basename(self) -> None:
        self.assertEqual(format_prefix("/srv/site/", ("(", ") "), {"/srv/other": "O"}), "(site) ")

    def test_malformed_spec_is_reported_and_replaced(self) -> None:
        for spec in (None, 42, ("[",), ("[", 1), ("a", "b", "c")):
            with self.subTest(spec=spec):
                with self.assertLogs("relname", level="WARNING") as logs:
                    self.assertEqual(format_prefix("/proj/", spec), INVALID_PREFIX)
                self.assertIn("invalid prefix", logs.output[0])

    def test_non_mapping_prefix_map_is_reported_and_ignored(self) -> None:
        with self.assertLogs("relname", level="WARNING") as logs:
            label = root_label("/home/u/proj/", [("/home/u/proj", "P")])
        self.assertEqual(label, "proj")
        self.assertIn("prefix map must be a mapping", logs.output[0])

    def test_filesystem_root_label(self) -> None:
        self.assertEqual(root_label("/"), "/")


if __name__ == "__main__":
    unittest.main()
