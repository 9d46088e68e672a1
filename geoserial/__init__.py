"""Convert WKT/EWKT text to normalized geometry records and back."""

from .errors import (
    DimensionMismatch,
    GeometrySerializationError,
    MissingCollaborator,
    NonFiniteOrdinate,
    UnsupportedFormat,
    UnsupportedGeometryType,
    UnsupportedTargetType,
    WktSyntaxError,
)
from .record import NO_SRID, Crs, GeometryRecord, GeometryType
from .serializer import GeometrySerializer
from .wkt import EWKT_FORMAT, FORMATS, WKT_FORMAT, WktCodec, WktDecoder, WktEncoder

__version__ = "0.1.0"

__all__ = [
    "Crs",
    "DimensionMismatch",
    "EWKT_FORMAT",
    "FORMATS",
    "GeometryRecord",
    "GeometrySerializationError",
    "GeometrySerializer",
    "GeometryType",
    "MissingCollaborator",
    "NO_SRID",
    "NonFiniteOrdinate",
    "UnsupportedFormat",
    "UnsupportedGeometryType",
    "UnsupportedTargetType",
    "WKT_FORMAT",
    "WktCodec",
    "WktDecoder",
    "WktEncoder",
    "WktSyntaxError",
]
