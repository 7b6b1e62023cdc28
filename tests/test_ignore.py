"""Tests for file_sync.sync.ignore module.

Validates glob translation, full-path anchoring, case-insensitivity and
separator handling.
"""

import pytest

from file_sync.sync.ignore import IgnoreMatcher, compile_pattern, matches


class TestMatches:
    """Module-level matches() helper."""

    def test_tmp_segment_in_windows_path(self):
        assert matches("C:\\x\\tmp\\y.txt", ["*/tmp/*"]) is True

    def test_no_tmp_segment(self):
        assert matches("C:\\x\\y.txt", ["*/tmp/*"]) is False

    def test_case_insensitive(self):
        assert matches("/data/TMP/Y.TXT", ["*/tmp/*"]) is True
        assert matches("/data/setup.EXE", ["*.exe"]) is True

    def test_extension_anywhere(self):
        assert matches("/a/b/c/tool.exe", ["*.exe"]) is True
        assert matches("/a/b/c/tool.exe.txt", ["*.exe"]) is False

    def test_question_mark_is_single_char(self):
        assert matches("/a/log1.txt", ["*/log?.txt"]) is True
        assert matches("/a/log12.txt", ["*/log?.txt"]) is False
        assert matches("/a/log.txt", ["*/log?.txt"]) is False

    def test_anchored_to_whole_path(self):
        # Without a leading "*" the pattern must match from the start
        assert matches("/a/b.txt", ["b.txt"]) is False
        assert matches("/a/b.txt", ["*b.txt"]) is True

    def test_regex_metacharacters_are_literal(self):
        assert matches("/a/file[1].txt", ["*file[1].txt"]) is True
        assert matches("/a/file1.txt", ["*file[1].txt"]) is False
        assert matches("/a/a+b.txt", ["*/a+b.txt"]) is True
        assert matches("/a/aab.txt", ["*/a+b.txt"]) is False

    def test_no_patterns(self):
        assert matches("/anything", []) is False

    def test_any_pattern_wins(self):
        assert matches("/a/b.log", ["*.txt", "*.log", "*/tmp/*"]) is True

    def test_backslash_pattern_matches_forward_slash_path(self):
        assert matches("/x/tmp/y.txt", ["*\\tmp\\*"]) is True


class TestCompilePattern:

    def test_is_cached(self):
        assert compile_pattern("*.exe") is compile_pattern("*.exe")

    def test_star_spans_separators(self):
        assert compile_pattern("*.txt").fullmatch("/a/b/c.txt")


class TestIgnoreMatcher:
    """IgnoreMatcher with a fixed pattern list."""

    def test_matches(self):
        matcher = IgnoreMatcher(["*/tmp/*", "*.exe"])
        assert matcher.matches("/src/tmp/a.txt")
        assert matcher.matches("/src/bin/app.exe")
        assert not matcher.matches("/src/bin/app.dll")

    def test_matches_any(self):
        matcher = IgnoreMatcher(["*.part"])
        assert matcher.matches_any("/src/a.txt", "/src/a.part")
        assert not matcher.matches_any("/src/a.txt", "/src/b.txt")

    def test_empty_patterns_are_dropped(self):
        matcher = IgnoreMatcher(["", "*.exe"])
        assert matcher.patterns == ["*.exe"]

    def test_bool(self):
        assert not IgnoreMatcher()
        assert IgnoreMatcher(["*.exe"])

    @pytest.mark.parametrize("order", [["*.exe", "*/tmp/*"], ["*/tmp/*", "*.exe"]])
    def test_order_does_not_matter(self, order):
        matcher = IgnoreMatcher(order)
        assert matcher.matches("/a/tmp/x.exe")
        assert matcher.matches("/a/x.exe")
