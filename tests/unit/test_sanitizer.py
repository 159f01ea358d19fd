"""Tests for podcraft.core.sanitizer - markup removal from generated text."""

from __future__ import annotations

import pytest

from podcraft.core.sanitizer import sanitize

LINE_BREAKS = ["\n", "\r", "\v", "\f", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"]
STRIPPED = ["#", "*", "\\", *LINE_BREAKS]

SAMPLES = [
    "",
    "plain text stays as it is",
    "## Heading\nBody with **bold** and *italic*.",
    "Escaped \\\"quotes\\\" and a \\n literal",
    "Windows\r\nline\r\nbreaks",
    "###***\\\\\n\n",
    "Unicode survives: café, naïve, 日本語, and émojis 🎙️",
    "Form\ffeed and vertical\vtab",
    "Line\u2028separator and paragraph\u2029separator",
    "Next\x85line and file\x1cgroup\x1drecord\x1eseparators",
]


class TestSanitize:
    """Behaviour of sanitize() on representative inputs."""

    def test_empty_string(self):
        assert sanitize("") == ""

    def test_plain_text_unchanged(self):
        assert sanitize("Hello, listeners! 100% fun.") == "Hello, listeners! 100% fun."

    def test_markdown_removed(self):
        assert sanitize("## Episode One\n**Welcome** to *the* show") == " Episode OneWelcome to the show"

    def test_backslashes_removed(self):
        assert sanitize('She said \\"hi\\"') == 'She said "hi"'

    def test_line_breaks_removed(self):
        assert sanitize("one\ntwo\r\nthree") == "onetwothree"

    @pytest.mark.parametrize("brk", LINE_BREAKS)
    def test_every_line_break_removed(self, brk):
        assert sanitize(f"a{brk}b") == "ab"

    def test_only_stripped_characters(self):
        assert sanitize("".join(STRIPPED)) == ""

    def test_order_preserved(self):
        assert sanitize("a#b*c\\d\ne") == "abcde"


class TestSanitizeProperties:
    """Properties that must hold for every input."""

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_no_stripped_characters_remain(self, raw):
        cleaned = sanitize(raw)
        for char in STRIPPED:
            assert char not in cleaned

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_single_line(self, raw):
        assert len(sanitize(raw).splitlines()) <= 1

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_idempotent(self, raw):
        once = sanitize(raw)
        assert sanitize(once) == once

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_other_characters_kept_in_order(self, raw):
        expected = "".join(ch for ch in raw if ch not in STRIPPED)
        assert sanitize(raw) == expected
