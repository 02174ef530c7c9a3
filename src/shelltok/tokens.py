"""Token kinds and token data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenKind(Enum):
    WORD = auto()  # plain, quoted or escaped text
    PIPE = auto()  # |
    REDIRECT = auto()  # < > << >>
    COMMENT = auto()  # text after a top-level #, up to the newline


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single token: its kind and resolved value.

    The span is diagnostic metadata only; two tokens compare equal when
    their kind and value match, wherever they were read from.
    """

    kind: TokenKind
    value: str
    span: Span | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.name}:{self.value!r}"
