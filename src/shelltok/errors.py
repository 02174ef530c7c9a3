"""Error types with formatted source context."""

from __future__ import annotations

from shelltok.tokens import Position


class TokenizeError(Exception):
    """Raised when a token cannot be produced, with position and line context.

    ``line_text`` holds the offending line as far as it had been read when
    the error was detected; the tokenizer works on streams and never holds
    more than that.
    """

    def __init__(self, message: str, position: Position, line_text: str = "") -> None:
        self.message = message
        self.position = position
        self.line_text = line_text
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        col = self.position.column
        source_line = self.line_text.rstrip("\n").rstrip("\r")

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class UnterminatedEscapeError(TokenizeError):
    """End of input directly after an escape character."""


class UnterminatedQuoteError(TokenizeError):
    """End of input inside a quoted region."""

    def __init__(self, quote: str, position: Position, line_text: str = "") -> None:
        self.quote = quote
        super().__init__(f"unterminated quote: missing closing {quote}", position, line_text)


class UnclassifiableCharacterError(TokenizeError):
    """A strict classifier has no class for a character."""

    def __init__(self, char: str, position: Position, line_text: str = "") -> None:
        self.char = char
        super().__init__(
            f"unclassifiable character {char!r} (U+{ord(char):04X})", position, line_text
        )


class SourceReadError(TokenizeError):
    """The character source failed for a reason other than end of input.

    The underlying exception is chained as ``__cause__``.
    """
