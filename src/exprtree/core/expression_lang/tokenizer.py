"""
Tokenizer for the exprtree expression language.

Converts an expression string into a lazy sequence of typed tokens.
Scanning stops silently at the first character that cannot start a
token; the parser reports whatever is missing from there on.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from exprtree.core.errors import InvalidNumber


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals and names
    NUMBER = auto()
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    value: str
    pos: int

    @property
    def number(self) -> float:
        """Numeric value of a NUMBER token."""
        if self.kind != TokenKind.NUMBER:
            raise TypeError(f"{self.kind} token has no numeric value")
        return float(self.value)

    def __str__(self) -> str:
        return self.value


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# Digits and dots; validity as a float is checked separately
_NUMBER_RE = re.compile(r"[0-9][0-9.]*")
_DIGITS = frozenset("0123456789")


def _is_ident_char(c: str) -> bool:
    return c.isalpha() or c in _DIGITS or c == "_"


class Tokenizer:
    """Iterable over the tokens of ``source``.

    Each call to ``iter()`` starts a fresh scan from the beginning of the
    text, so a tokenizer can be replayed but never resumed mid-stream.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        source = self.source
        i = 0
        n = len(source)

        while True:
            while i < n and source[i].isspace():
                i += 1
            if i >= n:
                return

            c = source[i]

            if c in _DIGITS:
                m = _NUMBER_RE.match(source, i)
                assert m is not None
                text = m.group(0)
                try:
                    float(text)
                except ValueError:
                    raise InvalidNumber(text, i) from None
                yield Token(TokenKind.NUMBER, text, i)
                i = m.end()
                continue

            if c.isalpha():
                start = i
                while i < n and _is_ident_char(source[i]):
                    i += 1
                yield Token(TokenKind.IDENT, source[start:i], start)
                continue

            kind = _SINGLE_CHAR.get(c)
            if kind is None:
                return
            yield Token(kind, c, i)
            i += 1


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        InvalidNumber: If a numeric literal is malformed (e.g. ``1.2.3``).
    """
    return list(Tokenizer(source))
