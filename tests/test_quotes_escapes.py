"""Test double quotes, single quotes and backslash escapes."""

from shelltok.tokens import TokenKind

from .conftest import assert_kinds, word


class TestDoubleQuotes:
    def test_spaces_kept(self, lex):
        assert lex('"two three"') == [word("two three")]

    def test_escaped_quote(self, lex):
        assert lex('"a\\"b"') == [word('a"b')]

    def test_escaped_backslash(self, lex):
        assert lex('"a\\\\b"') == [word("a\\b")]

    def test_single_quote_inside(self, lex):
        assert lex('"it\'s"') == [word("it's")]

    def test_operators_inside(self, lex):
        assert lex('"a|b>c<d#e"') == [word("a|b>c<d#e")]

    def test_empty(self, lex):
        assert lex('""') == [word("")]

    def test_newline_inside(self, lex):
        assert lex('"a\nb"') == [word("a\nb")]


class TestSingleQuotes:
    def test_spaces_kept(self, lex):
        assert lex("'two three'") == [word("two three")]

    def test_backslash_is_literal(self, lex):
        assert lex("'a\\b'") == [word("a\\b")]

    def test_trailing_backslash_is_literal(self, lex):
        assert lex("'a\\'") == [word("a\\")]

    def test_double_quote_inside(self, lex):
        assert lex("'say \"hi\"'") == [word('say "hi"')]

    def test_empty(self, lex):
        assert lex("''") == [word("")]


class TestConcatenation:
    def test_quoted_middle(self, lex):
        assert lex('a"b"c') == [word("abc")]

    def test_adjacent_quotes(self, lex):
        assert lex("'foo'\"bar\"baz") == [word("foobarbaz")]

    def test_flag_with_quoted_value(self, lex):
        assert lex('--name="John Smith" next') == [word("--name=John Smith"), word("next")]


class TestEscapes:
    def test_escaped_ordinary(self, lex):
        assert lex("\\a") == [word("a")]

    def test_escaped_space(self, lex):
        assert lex("hello\\ world") == [word("hello world")]

    def test_escaped_backslash(self, lex):
        assert lex("\\\\") == [word("\\")]

    def test_escaped_quotes(self, lex):
        assert lex("\\\"\\'") == [word("\"'")]

    def test_escaped_operators_are_words(self, lex):
        tokens = lex("\\| \\> \\<")
        assert_kinds(tokens, [TokenKind.WORD] * 3)
        assert tokens == [word("|"), word(">"), word("<")]

    def test_escaped_hash_starts_word(self, lex):
        assert lex("\\#not-a-comment") == [word("#not-a-comment")]

    def test_escaped_newline(self, lex):
        assert lex("a\\\nb") == [word("a\nb")]
