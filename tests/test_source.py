"""Test the character source: reading, pushback and position tracking."""

import io

import pytest

from shelltok.source import CharSource
from shelltok.tokens import Position


class TestRead:
    def test_reads_characters_in_order(self):
        source = CharSource("ab")
        assert [source.read(), source.read()] == ["a", "b"]

    def test_end_of_input_repeats(self):
        source = CharSource("a")
        source.read()
        assert source.read() == ""
        assert source.read() == ""

    def test_reads_from_stream(self):
        source = CharSource(io.StringIO("xy"))
        assert source.read() == "x"

    def test_position_advances(self):
        source = CharSource("ab\ncd")
        assert source.position == Position(1, 1, 0)
        source.read()
        source.read()
        assert source.position == Position(1, 3, 2)
        source.read()
        assert source.position == Position(2, 1, 3)

    def test_end_of_input_does_not_advance(self):
        source = CharSource("a")
        source.read()
        source.read()
        assert source.position == Position(1, 2, 1)

    def test_line_text(self):
        source = CharSource("ab\ncd")
        for _ in range(4):
            source.read()
        assert source.line_text == "c"


class TestUnread:
    def test_unread_returns_same_character(self):
        source = CharSource("ab")
        source.read()
        source.read()
        source.unread()
        assert source.read() == "b"

    def test_unread_restores_position(self):
        source = CharSource("ab")
        source.read()
        source.read()
        source.unread()
        assert source.position == Position(1, 2, 1)
        assert source.line_text == "a"

    def test_unread_newline_restores_previous_line(self):
        source = CharSource("ab\ncd")
        for _ in range(3):
            source.read()
        source.unread()
        assert source.position == Position(1, 3, 2)
        assert source.line_text == "ab"
        assert source.read() == "\n"

    def test_unread_end_of_input(self):
        source = CharSource("")
        assert source.read() == ""
        source.unread()
        assert source.read() == ""
        assert source.position == Position(1, 1, 0)

    def test_only_one_character(self):
        source = CharSource("ab")
        source.read()
        source.read()
        source.unread()
        with pytest.raises(RuntimeError):
            source.unread()

    def test_nothing_to_unread(self):
        with pytest.raises(RuntimeError):
            CharSource("ab").unread()
