"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from shelltok.lexer import split
from shelltok.tokenizer import tokenize
from shelltok.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns all tokens."""

    def _lex(source: str, classifier=None) -> list[Token]:
        return tokenize(source, classifier)

    return _lex


@pytest.fixture
def words():
    """Return a helper that splits source into words."""

    def _words(source: str, classifier=None) -> list[str]:
        return split(source, classifier)

    return _words


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def word(value: str) -> Token:
    return Token(TokenKind.WORD, value)


def pipe() -> Token:
    return Token(TokenKind.PIPE, "|")


def redirect(value: str) -> Token:
    return Token(TokenKind.REDIRECT, value)


def comment(value: str) -> Token:
    return Token(TokenKind.COMMENT, value)
