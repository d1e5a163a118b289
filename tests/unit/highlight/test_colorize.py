"""Terminal colorizing tests for rendered documents."""

from __future__ import annotations

import re
import unittest

from listfiles.highlight import colorize_document, colorize_json, colorize_tree, escape_control_chars
from listfiles.options import OutputFormat

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class ColorizeTests(unittest.TestCase):
    def test_tree_colors_strip_back_to_original(self) -> None:
        document = "/root\n\n├── [DIR]  src\n│   ├── [FILE] main.py\n"
        colored = colorize_tree(document)
        self.assertNotEqual(colored, document)
        self.assertEqual(ANSI_RE.sub("", colored), document)

    def test_json_colors_strip_back_to_original(self) -> None:
        document = '{\n  "root": "/r",\n  "files": [\n  ]\n}\n'
        colored = colorize_json(document)
        self.assertIn("\x1b[", colored)
        self.assertEqual(ANSI_RE.sub("", colored), document)

    def test_list_documents_are_left_plain(self) -> None:
        self.assertEqual(colorize_document("a\nb\n", OutputFormat.LIST), "a\nb\n")

    def test_control_characters_are_escaped(self) -> None:
        self.assertEqual(escape_control_chars("bad\x1bname\tok\n"), "bad\\x1bname\tok\n")
        self.assertEqual(colorize_document("x\x07\n", OutputFormat.LIST), "x\\x07\n")
        self.assertEqual(escape_control_chars("del\x7f c1\x9b é"), "del\\x7f c1\\x9b é")


if __name__ == "__main__":
    unittest.main()
