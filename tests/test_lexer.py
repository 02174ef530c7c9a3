"""Test the word-level lexer and split()."""

import io

import pytest

from shelltok.classifier import Classifier
from shelltok.errors import UnterminatedQuoteError
from shelltok.lexer import Lexer, split


class TestLexer:
    def test_next_word(self):
        lexer = Lexer("one")
        assert lexer.next_word() == "one"
        assert lexer.next_word() is None

    def test_skips_comments(self):
        assert list(Lexer("# header\nls # trailing\n# footer")) == ["ls"]

    def test_operators_are_words(self):
        assert list(Lexer("a|b>>c")) == ["a", "|", "b", ">>", "c"]

    def test_reads_from_stream(self):
        assert list(Lexer(io.StringIO("cat 'my file'"))) == ["cat", "my file"]

    def test_error_propagates(self):
        lexer = Lexer('ok "broken')
        assert lexer.next_word() == "ok"
        with pytest.raises(UnterminatedQuoteError):
            lexer.next_word()


class TestSplit:
    def test_simple(self):
        assert split("one two three") == ["one", "two", "three"]

    def test_escaping_quotes(self):
        assert split('one "two three" four') == ["one", "two three", "four"]

    def test_non_escaping_quotes(self):
        assert split("one 'two three' four") == ["one", "two three", "four"]

    def test_piped(self):
        assert split("one two|three four") == ["one", "two", "|", "three", "four"]

    def test_redirect_out(self):
        assert split("one two > three.txt") == ["one", "two", ">", "three.txt"]

    def test_redirect_in(self):
        assert split("one < two.txt") == ["one", "<", "two.txt"]

    def test_complex(self):
        assert split("ls -l /|grep 'foo.txt' >> saved.txt") == [
            "ls",
            "-l",
            "/",
            "|",
            "grep",
            "foo.txt",
            ">>",
            "saved.txt",
        ]

    def test_empty(self):
        assert split("") == []

    def test_only_comment(self):
        assert split("# nothing here") == []

    def test_empty_quoted_argument(self):
        assert split('echo ""') == ["echo", ""]

    def test_custom_classifier(self):
        assert split("a #b", Classifier.build(comments=False)) == ["a", "#b"]

    def test_error_raises(self):
        with pytest.raises(UnterminatedQuoteError):
            split("echo 'unfinished")
