"""Typed errors raised by the WKT codec and the geometry normalizer."""

from __future__ import annotations

from typing import Any


class GeometrySerializationError(ValueError):
    """Base error of the project."""


class WktSyntaxError(GeometrySerializationError):
    """The input text does not follow the WKT/EWKT grammar.

    ``expected`` is the token kind (or a short description) the parser was
    waiting for; ``literal`` and ``position`` describe the token actually
    found. ``literal`` is ``None`` when the input ended early.
    """

    def __init__(self, expected: Any, literal: str | None, position: int | None, message: str | None = None):
        self.expected = expected
        self.literal = literal
        self.position = position
        if message is None:
            expected_name = getattr(expected, "name", expected)
            if literal is None:
                message = f"Syntax error: expected {expected_name}, reached end of input"
            else:
                message = f"Syntax error: expected {expected_name}, got {literal!r} at position {position}"
        super().__init__(message)


class DimensionMismatch(WktSyntaxError):
    """Coordinate arity differs from the declared Z/M flags (strict mode only)."""


class UnsupportedGeometryType(GeometrySerializationError):
    """The geometry kind is known but has no coordinate codec."""

    def __init__(self, geometry_type: Any):
        self.geometry_type = geometry_type
        name = getattr(geometry_type, "value", geometry_type)
        super().__init__(f"Unsupported geometry type: {name}")


class NonFiniteOrdinate(GeometrySerializationError):
    """NaN or an infinity cannot be written as a WKT numeral."""


class UnsupportedFormat(GeometrySerializationError):
    """Format selector other than ``wkt`` or ``ewkt``."""


class MissingCollaborator(GeometrySerializationError):
    """Denormalization was requested without a geometry factory."""


class UnsupportedTargetType(GeometrySerializationError, TypeError):
    """Denormalization target is not a domain geometry type."""


__all__ = [
    "DimensionMismatch",
    "GeometrySerializationError",
    "MissingCollaborator",
    "NonFiniteOrdinate",
    "UnsupportedFormat",
    "UnsupportedGeometryType",
    "UnsupportedTargetType",
    "WktSyntaxError",
]
