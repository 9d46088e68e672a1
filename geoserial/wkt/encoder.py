"""Render geometry records as WKT/EWKT text."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from ..errors import NonFiniteOrdinate, UnsupportedFormat, UnsupportedGeometryType
from ..record import GeometryRecord, GeometryType, as_record

logger = logging.getLogger(__name__)

WKT_FORMAT = "wkt"
EWKT_FORMAT = "ewkt"
FORMATS = (WKT_FORMAT, EWKT_FORMAT)


def format_ordinate(value: float) -> str:
    """Return a locale independent, lossless text form of ``value``.

    Integral values drop their fractional part (``1.0`` -> ``"1"``); every
    other value uses the shortest representation that reads back to the
    same float.
    """

    if isinstance(value, bool):
        raise TypeError("ordinates must be numbers, not booleans")
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if not math.isfinite(number):
        raise NonFiniteOrdinate(f"Cannot write non-finite ordinate {number!r} as WKT")
    text = repr(number)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def encode_point(coordinates: Sequence[float]) -> str:
    return " ".join(format_ordinate(value) for value in coordinates)


def encode_linestring(coordinates: Sequence[Sequence[float]]) -> str:
    return ",".join(encode_point(point) for point in coordinates)


def encode_polygon(coordinates: Sequence[Sequence[Sequence[float]]]) -> str:
    return ",".join(f"({encode_linestring(ring)})" for ring in coordinates)


_RENDERERS: dict[GeometryType, Callable[[Any], str]] = {
    GeometryType.POINT: encode_point,
    GeometryType.LINESTRING: encode_linestring,
    GeometryType.POLYGON: encode_polygon,
    GeometryType.MULTIPOINT: encode_linestring,
    GeometryType.MULTILINESTRING: encode_polygon,
}


class WktEncoder:
    """Encode :class:`GeometryRecord` objects (or their mapping form) as text."""

    def encode_type(self, record: GeometryRecord | Mapping[str, Any]) -> str:
        record = as_record(record)
        suffix = ("Z" if record.crs.is_3d else "") + ("M" if record.crs.is_measured else "")
        return f"{record.type.keyword} {suffix}".rstrip()

    def encode_geometry(self, record: GeometryRecord | Mapping[str, Any]) -> str:
        """Render only the coordinates of ``record``, without type or parentheses."""

        record = as_record(record)
        renderer = _RENDERERS.get(record.type)
        if renderer is None:
            raise UnsupportedGeometryType(record.type)
        return renderer(record.coordinates)

    def encode(self, record: GeometryRecord | Mapping[str, Any], format: str = WKT_FORMAT) -> str:
        if format not in FORMATS:
            raise UnsupportedFormat(f"Unsupported format {format!r}; expected one of {', '.join(FORMATS)}")
        record = as_record(record)
        if not record.type.is_implemented:
            raise UnsupportedGeometryType(record.type)

        if record.is_empty:
            text = f"{self.encode_type(record)} EMPTY"
        else:
            text = f"{self.encode_type(record)} ({self.encode_geometry(record)})"

        if format == EWKT_FORMAT and record.crs.has_srid:
            text = f"SRID={record.crs.srid};{text}"

        logger.debug("Encoded %s as %s", record.type.value, format)
        return text


def encode(record: GeometryRecord | Mapping[str, Any], format: str = WKT_FORMAT) -> str:
    return WktEncoder().encode(record, format)


__all__ = [
    "EWKT_FORMAT",
    "FORMATS",
    "WKT_FORMAT",
    "WktEncoder",
    "encode",
    "encode_linestring",
    "encode_point",
    "encode_polygon",
    "format_ordinate",
]
