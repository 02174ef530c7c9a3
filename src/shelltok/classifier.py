"""Character classification for shell-style tokenizing."""

from __future__ import annotations

import string
from collections.abc import Iterable
from enum import Enum, auto
from types import MappingProxyType


class CharClass(Enum):
    ORDINARY = auto()
    WHITESPACE = auto()
    ESCAPING_QUOTE = auto()  # "  contents may contain escapes
    NONESCAPING_QUOTE = auto()  # '  contents are literal
    ESCAPE = auto()  # \
    COMMENT = auto()  # #  only meaningful before a token starts
    PIPE = auto()  # |
    REDIRECT = auto()  # < >
    END_OF_STREAM = auto()


# Named character sets
ORDINARY_CHARS = string.ascii_letters + string.digits + "._-,/@$*()+=:;&^%~!?[]{}"
WHITESPACE_CHARS = " \t\r\n"
ESCAPING_QUOTE_CHARS = '"'
NONESCAPING_QUOTE_CHARS = "'"
ESCAPE_CHARS = "\\"
COMMENT_CHARS = "#"
PIPE_CHARS = "|"
REDIRECT_CHARS = "<>"

# Registration order matters: on overlap the later entry wins.
DEFAULT_CLASSES: tuple[tuple[CharClass, str], ...] = (
    (CharClass.ORDINARY, ORDINARY_CHARS),
    (CharClass.WHITESPACE, WHITESPACE_CHARS),
    (CharClass.ESCAPING_QUOTE, ESCAPING_QUOTE_CHARS),
    (CharClass.NONESCAPING_QUOTE, NONESCAPING_QUOTE_CHARS),
    (CharClass.ESCAPE, ESCAPE_CHARS),
    (CharClass.COMMENT, COMMENT_CHARS),
    (CharClass.PIPE, PIPE_CHARS),
    (CharClass.REDIRECT, REDIRECT_CHARS),
)


class Classifier:
    """Map single characters to their syntactic class.

    The table is built once from ``(class, characters)`` pairs and is
    read-only afterwards, so one instance can be shared by any number of
    tokenizers, across threads too. Characters registered more than once
    take the class of their last registration.

    A strict classifier (the default) reports unregistered characters by
    returning ``None``; with ``fold_unknown=True`` they are ordinary.
    """

    __slots__ = ("_table", "_fold_unknown")

    def __init__(
        self,
        classes: Iterable[tuple[CharClass, str]] = DEFAULT_CLASSES,
        *,
        fold_unknown: bool = False,
    ) -> None:
        table: dict[str, CharClass] = {}
        for char_class, chars in classes:
            if char_class is CharClass.END_OF_STREAM:
                raise ValueError("END_OF_STREAM cannot be assigned to characters")
            for ch in chars:
                table[ch] = char_class
        self._table = MappingProxyType(table)
        self._fold_unknown = fold_unknown

    @classmethod
    def build(
        cls,
        *,
        comments: bool = True,
        fold_unknown: bool = False,
        extra_ordinary: str = "",
    ) -> Classifier:
        """Build a classifier from the default sets with the given options.

        ``comments=False`` drops the comment class, making ``#`` ordinary.
        ``extra_ordinary`` adds ordinary characters; it is registered ahead
        of the special classes and so cannot redefine them.
        """
        ordinary = ORDINARY_CHARS + extra_ordinary
        if not comments:
            ordinary += COMMENT_CHARS
        classes = [(CharClass.ORDINARY, ordinary)]
        classes.extend(
            (char_class, chars)
            for char_class, chars in DEFAULT_CLASSES[1:]
            if comments or char_class is not CharClass.COMMENT
        )
        return cls(classes, fold_unknown=fold_unknown)

    @property
    def fold_unknown(self) -> bool:
        return self._fold_unknown

    @property
    def has_comments(self) -> bool:
        return CharClass.COMMENT in self._table.values()

    def classify(self, ch: str) -> CharClass | None:
        """Return the class of *ch*, or None if a strict classifier has no entry.

        The empty string stands for end of stream.
        """
        if not ch:
            return CharClass.END_OF_STREAM
        char_class = self._table.get(ch)
        if char_class is None and self._fold_unknown:
            return CharClass.ORDINARY
        return char_class

    def chars(self, char_class: CharClass) -> frozenset[str]:
        """Return every character registered under *char_class*."""
        return frozenset(ch for ch, c in self._table.items() if c is char_class)

    def __contains__(self, ch: object) -> bool:
        return ch in self._table

    def __repr__(self) -> str:
        return (
            f"Classifier({len(self._table)} chars, "
            f"comments={self.has_comments}, fold_unknown={self._fold_unknown})"
        )


DEFAULT_CLASSIFIER = Classifier()
LENIENT_CLASSIFIER = Classifier(fold_unknown=True)
