"""Tests for include/exclude name matching."""

from __future__ import annotations

import unittest

from listfiles.patterns import NameFilter, excluded, matches, split_wildcards, wildcard_match


class WildcardMatchTests(unittest.TestCase):
    def test_star_and_question_mark(self) -> None:
        self.assertTrue(wildcard_match("file.txt", "*.txt"))
        self.assertFalse(wildcard_match("file.txt", "*.lua"))
        self.assertTrue(wildcard_match("a", "?"))
        self.assertFalse(wildcard_match("ab", "?"))
        self.assertFalse(wildcard_match("", "?"))

    def test_star_backtracks_over_repeated_literals(self) -> None:
        self.assertTrue(wildcard_match("backup.tar.gz", "*.tar.*"))
        self.assertTrue(wildcard_match("a.tar.b.tar.c", "*.tar.c"))
        self.assertFalse(wildcard_match("archive.zip", "*.tar.*"))
        self.assertTrue(wildcard_match("abcabd", "*abd"))

    def test_trailing_stars_match_empty_remainder(self) -> None:
        self.assertTrue(wildcard_match("abc", "abc**"))
        self.assertTrue(wildcard_match("", "*"))
        self.assertFalse(wildcard_match("", "a*"))

    def test_literal_pattern_is_case_sensitive(self) -> None:
        self.assertTrue(wildcard_match("README", "README"))
        self.assertFalse(wildcard_match("readme", "README"))
        self.assertFalse(wildcard_match("File.TXT", "*.txt"))


class MatchesTests(unittest.TestCase):
    def test_empty_spec_matches_everything(self) -> None:
        for name in ("", "a", "file.txt", ".hidden", "名前.md"):
            self.assertTrue(matches(name, ""))

    def test_comma_separated_patterns_are_ored_and_trimmed(self) -> None:
        self.assertTrue(matches("x.go", "*.txt, *.go"))
        self.assertTrue(matches("notes.txt", " *.txt\t,*.go "))
        self.assertFalse(matches("x.rs", "*.txt, *.go"))
        self.assertEqual(split_wildcards(" *.txt\t, *.go"), ("*.txt", "*.go"))

    def test_regex_prefix_requires_full_match(self) -> None:
        self.assertTrue(matches("init.lua", r"regex:.*\.lua"))
        self.assertFalse(matches("init.lua.bak", r"regex:.*\.lua"))
        self.assertFalse(matches("xinit.lua", "regex:init"))

    def test_regex_prefix_does_not_split_on_commas(self) -> None:
        self.assertTrue(matches("aa", "regex:a{1,2}"))

    def test_malformed_regex_matches_nothing(self) -> None:
        for name in ("", "a", "[", "file.txt"):
            self.assertFalse(matches(name, "regex:["))
            self.assertFalse(matches(name, "regex:(unclosed"))

    def test_excluded_requires_non_empty_spec(self) -> None:
        self.assertFalse(excluded("anything", ""))
        self.assertTrue(excluded("build", "build, dist"))
        self.assertFalse(excluded("src", "build, dist"))


class NameFilterTests(unittest.TestCase):
    def test_include_then_exclude(self) -> None:
        name_filter = NameFilter(include="*.py", exclude="test_*")
        self.assertTrue(name_filter.accepts("module.py"))
        self.assertFalse(name_filter.accepts("test_module.py"))
        self.assertFalse(name_filter.accepts("module.txt"))

    def test_default_filter_accepts_all(self) -> None:
        self.assertTrue(NameFilter().accepts("whatever"))


if __name__ == "__main__":
    unittest.main()
