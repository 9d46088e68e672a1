"""Tokenizer for the WKT/EWKT grammar."""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple


class TokenKind(Enum):
    NONE = "none"
    NUMERIC = "numeric"
    COMMA = "comma"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    GEOMETRY_TYPE = "geometry_type"
    SRID = "srid"
    EMPTY = "empty"
    DIMENSION = "dimension"
    EQUALS = "equals"
    SEMICOLON = "semicolon"


class Token(NamedTuple):
    kind: TokenKind
    literal: str
    position: int


GEOMETRY_KEYWORDS = frozenset(
    {
        "point",
        "linestring",
        "polygon",
        "multipoint",
        "multilinestring",
        "multipolygon",
        "geometrycollection",
    }
)
DIMENSION_KEYWORDS = frozenset({"z", "m", "zm"})
_PUNCTUATION = {
    ",": TokenKind.COMMA,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "=": TokenKind.EQUALS,
    ";": TokenKind.SEMICOLON,
}

# Alternatives are tried in order, longer keywords before their prefixes.
_CATCHABLE = (
    r"multilinestring|multipoint|multipolygon|geometrycollection|linestring|polygon|point",
    r"empty",
    r"zm|z|m",
    r"srid|=|\(|\)|;|,",
    r"[+-]?[0-9]+(?:\.[0-9]+)?(?:e[+-]?[0-9]+)?",
)
_WHITESPACE = r"\s+"
_SCANNER = re.compile(
    "|".join(f"({pattern})" for pattern in _CATCHABLE) + f"|{_WHITESPACE}|(.)",
    re.IGNORECASE | re.DOTALL,
)
_NUMERIC = re.compile(_CATCHABLE[-1], re.IGNORECASE)


def classify(literal: str) -> TokenKind:
    """Return the token kind of a single lexeme."""

    if _NUMERIC.fullmatch(literal):
        return TokenKind.NUMERIC
    value = literal.lower()
    if value in GEOMETRY_KEYWORDS:
        return TokenKind.GEOMETRY_TYPE
    if value == "empty":
        return TokenKind.EMPTY
    if value in DIMENSION_KEYWORDS:
        return TokenKind.DIMENSION
    if value == "srid":
        return TokenKind.SRID
    return _PUNCTUATION.get(value, TokenKind.NONE)


def _scan(text: str) -> Iterator[Token]:
    for match in _SCANNER.finditer(text):
        literal = match.group(match.lastindex) if match.lastindex else None
        if literal is None:
            continue
        yield Token(classify(literal), literal, match.start())


class WktLexer:
    """One-token lookahead scanner over a WKT string.

    After :meth:`advance`, ``token`` holds the token just consumed and
    ``lookahead`` the next one (``None`` at end of input). Tokens are
    produced lazily.

    The lexer keeps mutable scan state. An instance must not be shared
    between threads without external locking; :class:`WktDecoder` builds a
    fresh one per call unless one is handed to it explicitly.
    """

    def __init__(self, text: str = ""):
        self.set_input(text)

    def set_input(self, text: str) -> None:
        self._text = text
        self.reset()

    @property
    def text(self) -> str:
        return self._text

    def reset(self) -> None:
        """Rewind to the start of the current input."""

        self._tokens = _scan(self._text)
        self.token: Token | None = None
        self.lookahead: Token | None = None

    def advance(self) -> bool:
        """Move one token forward. Returns ``False`` once input is exhausted."""

        self.token = self.lookahead
        self.lookahead = next(self._tokens, None)
        return self.lookahead is not None

    def peek_is(self, kind: TokenKind) -> bool:
        return self.lookahead is not None and self.lookahead.kind is kind


__all__ = ["GEOMETRY_KEYWORDS", "Token", "TokenKind", "WktLexer", "classify"]
