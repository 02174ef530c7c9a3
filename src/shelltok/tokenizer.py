"""Shell-style tokenizer: a state machine over classified characters."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum, auto

from shelltok.classifier import DEFAULT_CLASSIFIER, CharClass, Classifier
from shelltok.errors import (
    TokenizeError,
    UnclassifiableCharacterError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from shelltok.logger import get_logger
from shelltok.source import CharSource, TextReader
from shelltok.tokens import Position, Span, Token, TokenKind

logger = get_logger(__name__)


class _State(Enum):
    START = auto()
    IN_WORD = auto()
    AFTER_ESCAPE = auto()
    AFTER_ESCAPE_IN_DOUBLE_QUOTE = auto()
    IN_DOUBLE_QUOTE = auto()
    IN_SINGLE_QUOTE = auto()
    IN_COMMENT = auto()
    EMIT = auto()


_QUOTES = frozenset({_State.IN_DOUBLE_QUOTE, _State.IN_SINGLE_QUOTE})
_ESCAPES = frozenset({_State.AFTER_ESCAPE, _State.AFTER_ESCAPE_IN_DOUBLE_QUOTE})
# End of input is an error in these states
_UNTERMINATED = _QUOTES | _ESCAPES

_Step = Callable[[str, CharClass, list[str]], _State]


class Tokenizer:
    """Turn a character stream into a sequence of typed tokens.

    Each call to ``next_token()`` runs the state machine afresh from the
    start state and returns one token, or None once the input is
    exhausted. Whitespace between tokens is skipped; a word ends at
    whitespace, a pipe or a redirect, which is pushed back for the next
    call.

    A tokenizer must not be shared between callers without external
    locking, since every call moves the read position of its source. The
    classifier is never modified and may be shared freely.

    Errors abort the call. Resuming after an error is not supported: the
    read position may be anywhere inside the broken construct, so later
    calls raise RuntimeError.
    """

    def __init__(
        self,
        source: CharSource | TextReader | str,
        classifier: Classifier | None = None,
    ) -> None:
        self._source = source if isinstance(source, CharSource) else CharSource(source)
        self._classifier = classifier if classifier is not None else DEFAULT_CLASSIFIER
        self._failed = False
        self._steps: dict[_State, _Step] = {
            _State.IN_WORD: self._in_word,
            _State.AFTER_ESCAPE: self._after_escape,
            _State.AFTER_ESCAPE_IN_DOUBLE_QUOTE: self._after_escape_in_double_quote,
            _State.IN_DOUBLE_QUOTE: self._in_double_quote,
            _State.IN_SINGLE_QUOTE: self._in_single_quote,
            _State.IN_COMMENT: self._in_comment,
        }

    @property
    def classifier(self) -> Classifier:
        return self._classifier

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Token | None:
        """Return the next token, or None at end of input."""
        if self._failed:
            raise RuntimeError("tokenizer cannot be resumed after an error")
        try:
            return self._scan()
        except TokenizeError as exc:
            self._failed = True
            logger.debug(
                "tokenizing aborted at %d:%d: %s",
                exc.position.line,
                exc.position.column,
                exc.message,
            )
            raise

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _scan(self) -> Token | None:
        state = _State.START
        kind: TokenKind | None = None
        buf: list[str] = []
        start = self._source.position
        # Where the innermost open quote and escape started, with their line text
        quote_at = escape_at = (start, "")

        while True:
            here = self._source.position
            ch = self._source.read()
            char_class = self._classify(ch, here)

            if state is _State.START:
                if char_class is CharClass.END_OF_STREAM:
                    return None
                if char_class is CharClass.WHITESPACE:
                    continue
                start = here
                kind, new_state = self._start(ch, char_class, buf)
            elif char_class is CharClass.END_OF_STREAM and state in _UNTERMINATED:
                raise self._unterminated(state, quote_at, escape_at)
            else:
                step = self._steps.get(state)
                if step is None:
                    raise AssertionError(f"unexpected tokenizer state: {state}")
                new_state = step(ch, char_class, buf)

            if new_state is _State.EMIT:
                assert kind is not None
                return Token(kind, "".join(buf), Span(start, self._source.position))

            if new_state in _ESCAPES:
                escape_at = (here, self._source.line_text)
            elif new_state in _QUOTES and state in (_State.START, _State.IN_WORD):
                quote_at = (here, self._source.line_text)
            state = new_state

    def _classify(self, ch: str, here: Position) -> CharClass:
        char_class = self._classifier.classify(ch)
        if char_class is None:
            raise UnclassifiableCharacterError(ch, here, self._source.line_text)
        return char_class

    def _unterminated(
        self,
        state: _State,
        quote_at: tuple[Position, str],
        escape_at: tuple[Position, str],
    ) -> TokenizeError:
        if state in _ESCAPES:
            position, line_text = escape_at
            return UnterminatedEscapeError(
                "unterminated escape: end of input after '\\'", position, line_text
            )
        position, line_text = quote_at
        # Prefer the whole line when the quote opened on the line we stopped on
        if position.line == self._source.position.line:
            line_text = self._source.line_text
        quote = "'" if state is _State.IN_SINGLE_QUOTE else '"'
        return UnterminatedQuoteError(quote, position, line_text)

    def _start(self, ch: str, char_class: CharClass, buf: list[str]) -> tuple[TokenKind, _State]:
        if char_class is CharClass.ORDINARY:
            buf.append(ch)
            return TokenKind.WORD, _State.IN_WORD
        if char_class is CharClass.ESCAPING_QUOTE:
            return TokenKind.WORD, _State.IN_DOUBLE_QUOTE
        if char_class is CharClass.NONESCAPING_QUOTE:
            return TokenKind.WORD, _State.IN_SINGLE_QUOTE
        if char_class is CharClass.ESCAPE:
            return TokenKind.WORD, _State.AFTER_ESCAPE
        if char_class is CharClass.COMMENT:
            return TokenKind.COMMENT, _State.IN_COMMENT
        if char_class is CharClass.PIPE:
            buf.append(ch)
            return TokenKind.PIPE, _State.EMIT
        if char_class is CharClass.REDIRECT:
            buf.append(ch)
            # << and >> are single tokens
            if self._source.read() == ch:
                buf.append(ch)
            else:
                self._source.unread()
            return TokenKind.REDIRECT, _State.EMIT
        raise AssertionError(f"unexpected character class at start: {char_class}")

    def _in_word(self, ch: str, char_class: CharClass, buf: list[str]) -> _State:
        if char_class is CharClass.END_OF_STREAM:
            return _State.EMIT
        if char_class in (CharClass.WHITESPACE, CharClass.PIPE, CharClass.REDIRECT):
            self._source.unread()
            return _State.EMIT
        if char_class is CharClass.ESCAPING_QUOTE:
            return _State.IN_DOUBLE_QUOTE
        if char_class is CharClass.NONESCAPING_QUOTE:
            return _State.IN_SINGLE_QUOTE
        if char_class is CharClass.ESCAPE:
            return _State.AFTER_ESCAPE
        # Ordinary, and # once a word has started
        buf.append(ch)
        return _State.IN_WORD

    def _after_escape(self, ch: str, char_class: CharClass, buf: list[str]) -> _State:
        buf.append(ch)
        return _State.IN_WORD

    def _after_escape_in_double_quote(
        self, ch: str, char_class: CharClass, buf: list[str]
    ) -> _State:
        buf.append(ch)
        return _State.IN_DOUBLE_QUOTE

    def _in_double_quote(self, ch: str, char_class: CharClass, buf: list[str]) -> _State:
        if char_class is CharClass.ESCAPING_QUOTE:
            return _State.IN_WORD
        if char_class is CharClass.ESCAPE:
            return _State.AFTER_ESCAPE_IN_DOUBLE_QUOTE
        buf.append(ch)
        return _State.IN_DOUBLE_QUOTE

    def _in_single_quote(self, ch: str, char_class: CharClass, buf: list[str]) -> _State:
        if char_class is CharClass.NONESCAPING_QUOTE:
            return _State.IN_WORD
        buf.append(ch)
        return _State.IN_SINGLE_QUOTE

    def _in_comment(self, ch: str, char_class: CharClass, buf: list[str]) -> _State:
        if char_class is CharClass.END_OF_STREAM or ch == "\n":
            return _State.EMIT
        buf.append(ch)
        return _State.IN_COMMENT


def tokenize(
    source: CharSource | TextReader | str, classifier: Classifier | None = None
) -> list[Token]:
    """Convenience function: tokenize the whole source, comments included."""
    return list(Tokenizer(source, classifier))
