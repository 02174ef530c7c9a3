"""Shell-style tokenizer: quoting, escaping, comments, pipes and redirects."""

from __future__ import annotations

from shelltok.classifier import DEFAULT_CLASSIFIER, LENIENT_CLASSIFIER, CharClass, Classifier
from shelltok.errors import (
    SourceReadError,
    TokenizeError,
    UnclassifiableCharacterError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from shelltok.lexer import Lexer, split
from shelltok.source import CharSource
from shelltok.tokenizer import Tokenizer, tokenize
from shelltok.tokens import Position, Span, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CLASSIFIER",
    "LENIENT_CLASSIFIER",
    "CharClass",
    "CharSource",
    "Classifier",
    "Lexer",
    "Position",
    "SourceReadError",
    "Span",
    "Token",
    "TokenKind",
    "TokenizeError",
    "Tokenizer",
    "UnclassifiableCharacterError",
    "UnterminatedEscapeError",
    "UnterminatedQuoteError",
    "split",
    "tokenize",
]
