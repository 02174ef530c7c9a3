"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from shelltok.tokens import Span, Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token, with its span, to *file*."""
    for token in tokens:
        file.write(f"{_span(token.span):<14} {token.kind.name:<8} {token.value!r}\n")


def _span(span: Span | None) -> str:
    if span is None:
        return "?"
    start, end = span.start, span.end
    return f"{start.line}:{start.column}-{end.line}:{end.column}"
