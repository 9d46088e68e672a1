"""Recursive-descent decoder turning WKT/EWKT text into geometry records."""

from __future__ import annotations

import logging
import math
from typing import Callable

from ..errors import DimensionMismatch, UnsupportedGeometryType, WktSyntaxError
from ..record import NO_SRID, Crs, GeometryRecord, GeometryType
from .lexer import Token, TokenKind, WktLexer

logger = logging.getLogger(__name__)

MIN_ORDINATES = 2
MAX_ORDINATES = 4
END_OF_INPUT = "end of input"


class WktDecoder:
    """Decode WKT and EWKT strings.

    Parameters
    ----------
    strict_dimensions:
        When ``True`` every coordinate must carry exactly the number of
        ordinates announced by the dimension marker (2 + Z + M), otherwise
        :class:`DimensionMismatch` is raised. The default is permissive:
        a coordinate takes whatever two to four numbers appear.
    lexer:
        Optional lexer reused across calls. The caller then owns its
        synchronisation; without one, each call scans with its own lexer.
    """

    def __init__(self, *, strict_dimensions: bool = False, lexer: WktLexer | None = None):
        self.strict_dimensions = strict_dimensions
        self._shared_lexer = lexer

    def decode_geometry(self, text: str) -> GeometryRecord:
        lexer = self._shared_lexer or WktLexer()
        lexer.set_input(text)
        try:
            return _Parser(lexer, self.strict_dimensions).parse()
        finally:
            lexer.reset()


class _Parser:
    def __init__(self, lexer: WktLexer, strict_dimensions: bool):
        self.lexer = lexer
        self.strict_dimensions = strict_dimensions
        self.crs = Crs()
        self._bodies: dict[GeometryType, Callable[[], list]] = {
            GeometryType.POINT: self.point,
            GeometryType.LINESTRING: self.linestring,
            GeometryType.POLYGON: self.polygon,
            GeometryType.MULTIPOINT: self.multipoint,
            GeometryType.MULTILINESTRING: self.multilinestring,
        }

    def match(self, expected: TokenKind) -> Token:
        lookahead = self.lexer.lookahead
        if lookahead is None or lookahead.kind is not expected:
            raise _syntax_error(expected, lookahead)
        self.lexer.advance()
        return lookahead

    def parse(self) -> GeometryRecord:
        self.lexer.advance()
        srid = self.srid()
        geometry_type = GeometryType.from_name(self.match(TokenKind.GEOMETRY_TYPE).literal)
        is_3d, is_measured = self.dimension()
        self.crs = Crs(srid=srid, is_3d=is_3d, is_measured=is_measured)

        body = self._bodies.get(geometry_type)
        if body is None:
            raise UnsupportedGeometryType(geometry_type)

        if self.lexer.peek_is(TokenKind.EMPTY):
            self.match(TokenKind.EMPTY)
            coordinates: list = []
        else:
            coordinates = body()

        if self.lexer.lookahead is not None:
            raise _syntax_error(END_OF_INPUT, self.lexer.lookahead)

        logger.debug("Decoded %s (srid=%s, z=%s, m=%s)", geometry_type.value, srid, is_3d, is_measured)
        return GeometryRecord(type=geometry_type, crs=self.crs, coordinates=coordinates)

    def srid(self) -> int:
        if not self.lexer.peek_is(TokenKind.SRID):
            return NO_SRID
        self.match(TokenKind.SRID)
        self.match(TokenKind.EQUALS)
        token = self.match(TokenKind.NUMERIC)
        try:
            srid = int(token.literal)
        except ValueError:
            raise WktSyntaxError("integer SRID", token.literal, token.position) from None
        self.match(TokenKind.SEMICOLON)
        return srid

    def dimension(self) -> tuple[bool, bool]:
        if not self.lexer.peek_is(TokenKind.DIMENSION):
            return False, False
        marker = self.match(TokenKind.DIMENSION).literal.lower()
        return "z" in marker, "m" in marker

    def ordinate(self) -> float:
        token = self.match(TokenKind.NUMERIC)
        value = float(token.literal)
        if not math.isfinite(value):
            raise WktSyntaxError("finite NUMERIC", token.literal, token.position)
        return value

    def coordinate(self) -> list[float]:
        start = self.lexer.lookahead
        ordinates = [self.ordinate() for _ in range(MIN_ORDINATES)]
        while len(ordinates) < MAX_ORDINATES and self.lexer.peek_is(TokenKind.NUMERIC):
            ordinates.append(self.ordinate())
        if self.strict_dimensions and len(ordinates) != self.crs.dimension:
            raise DimensionMismatch(
                f"{self.crs.dimension} ordinates",
                start.literal,
                start.position,
                f"Coordinate at position {start.position} has {len(ordinates)} ordinates, "
                f"expected {self.crs.dimension}",
            )
        return ordinates

    def coordinate_sequence(self) -> list[list[float]]:
        values = [self.coordinate()]
        while self.lexer.peek_is(TokenKind.COMMA):
            self.match(TokenKind.COMMA)
            values.append(self.coordinate())
        return values

    def ring(self) -> list[list[float]]:
        self.match(TokenKind.OPEN_PAREN)
        values = self.coordinate_sequence()
        self.match(TokenKind.CLOSE_PAREN)
        return values

    def ring_sequence(self) -> list[list[list[float]]]:
        self.match(TokenKind.OPEN_PAREN)
        rings = [self.ring()]
        while self.lexer.peek_is(TokenKind.COMMA):
            self.match(TokenKind.COMMA)
            rings.append(self.ring())
        self.match(TokenKind.CLOSE_PAREN)
        return rings

    def point(self) -> list[float]:
        self.match(TokenKind.OPEN_PAREN)
        values = self.coordinate()
        self.match(TokenKind.CLOSE_PAREN)
        return values

    linestring = ring
    polygon = ring_sequence
    multilinestring = ring_sequence

    def multipoint(self) -> list[list[float]]:
        self.match(TokenKind.OPEN_PAREN)
        points = [self._multipoint_member()]
        while self.lexer.peek_is(TokenKind.COMMA):
            self.match(TokenKind.COMMA)
            points.append(self._multipoint_member())
        self.match(TokenKind.CLOSE_PAREN)
        return points

    def _multipoint_member(self) -> list[float]:
        # Both "MULTIPOINT (1 2, 3 4)" and "MULTIPOINT ((1 2), (3 4))" are in use.
        if self.lexer.peek_is(TokenKind.OPEN_PAREN):
            return self.point()
        return self.coordinate()


def _syntax_error(expected: TokenKind | str, lookahead: Token | None) -> WktSyntaxError:
    if lookahead is None:
        return WktSyntaxError(expected, None, None)
    return WktSyntaxError(expected, lookahead.literal, lookahead.position)


def decode_geometry(text: str, *, strict_dimensions: bool = False) -> GeometryRecord:
    """Decode ``text`` with a decoder built for this call."""

    return WktDecoder(strict_dimensions=strict_dimensions).decode_geometry(text)


__all__ = ["WktDecoder", "decode_geometry"]
