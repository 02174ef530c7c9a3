"""Word-level lexing and one-shot splitting on top of the tokenizer."""

from __future__ import annotations

from collections.abc import Iterator

from shelltok.classifier import Classifier
from shelltok.logger import get_logger
from shelltok.source import CharSource, TextReader
from shelltok.tokenizer import Tokenizer
from shelltok.tokens import TokenKind

logger = get_logger(__name__)


class Lexer:
    """Turn an input stream into a sequence of words, skipping comments.

    Pipes and redirects come through as words of their own (``"|"``,
    ``">>"``). Tokenizer errors propagate unchanged.
    """

    def __init__(
        self,
        source: CharSource | TextReader | str,
        classifier: Classifier | None = None,
    ) -> None:
        self._tokenizer = Tokenizer(source, classifier)

    def __iter__(self) -> Iterator[str]:
        while (word := self.next_word()) is not None:
            yield word

    def next_word(self) -> str | None:
        """Return the next word, or None when there are no more."""
        while (token := self._tokenizer.next_token()) is not None:
            if token.kind is TokenKind.COMMENT:
                logger.debug("skipping comment %r", token.value)
                continue
            return token.value
        return None


def split(s: str, classifier: Classifier | None = None) -> list[str]:
    """Split a string into words using shell-style quoting, escaping and spaces.

    >>> split('ls -l "my file" | wc')
    ['ls', '-l', 'my file', '|', 'wc']
    """
    return list(Lexer(s, classifier))
