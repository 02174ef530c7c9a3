"""Character source with one-character pushback and position tracking."""

from __future__ import annotations

import io
from typing import Protocol

from shelltok.errors import SourceReadError
from shelltok.tokens import Position


class TextReader(Protocol):
    def read(self, size: int = -1, /) -> str: ...


class CharSource:
    """Read characters one at a time from a string or text stream.

    ``read()`` returns the empty string at end of input, as often as it is
    called. ``unread()`` pushes the last character back; only one
    character can be pushed back at a time.

    Line and column are tracked for diagnostics, together with the text of
    the current line as far as it has been read.
    """

    def __init__(self, stream: TextReader | str) -> None:
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self._stream = stream
        self._last = ""
        self._pending: str | None = None
        self._line = 1
        self._col = 1
        self._offset = 0
        self._line_chars: list[str] = []
        # Line, column and line text from before the last read
        self._saved: tuple[int, int, list[str]] | None = None

    @property
    def position(self) -> Position:
        """Position of the next character to be read."""
        return Position(self._line, self._col, self._offset)

    @property
    def line_text(self) -> str:
        """Text of the current line read so far."""
        return "".join(self._line_chars)

    def read(self) -> str:
        if self._pending is not None:
            ch = self._pending
            self._pending = None
        else:
            try:
                ch = self._stream.read(1)
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceReadError(
                    f"failed to read input: {exc}", self.position, self.line_text
                ) from exc

        self._last = ch
        self._saved = (self._line, self._col, self._line_chars)
        if not ch:
            return ch

        self._offset += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
            self._line_chars = []
        else:
            self._col += 1
            self._line_chars.append(ch)
        return ch

    def unread(self) -> None:
        """Push the last character read back onto the source."""
        if self._saved is None:
            raise RuntimeError("only the last character read can be pushed back")
        self._line, self._col, self._line_chars = self._saved
        self._saved = None
        if self._last:
            self._offset -= 1
            if self._last != "\n":
                self._line_chars.pop()
        self._pending = self._last
