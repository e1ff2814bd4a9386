"""Tests for the shared text helpers."""

from xan_docs.docs.formatter import escape_markdown_argument, indent, wrap


class TestWrap:
    def test_lines_fill_greedily(self):
        assert wrap("aaa bb cc ddddd", 6) == "aaa bb\ncc\nddddd"

    def test_lines_stay_within_width(self):
        text = " ".join(["lorem", "ipsum", "dolor", "sit", "amet"] * 30)
        lines = wrap(text).split("\n")
        assert len(lines) > 1
        assert all(len(line) <= 81 for line in lines)
        assert " ".join(lines) == text

    def test_existing_line_breaks_are_kept(self):
        assert wrap("First.\n\nSecond\nthird.") == "First.\n\nSecond\nthird."


def test_indent_skips_blank_lines():
    assert indent("a\n\nb") == "    a\n\n    b"


def test_escape_markdown_argument():
    assert escape_markdown_argument("*args") == "\\*args"
    assert escape_markdown_argument("<string>") == "\\<string\\>"
