"""Serialize domain geometries to WKT/EWKT and back."""

from __future__ import annotations

from typing import Any

from .normalizer.geometry import GeometryFactory, GeometryNormalizer
from .normalizer.shapely import shapely_normalizer
from .wkt.codec import WktCodec
from .wkt.encoder import WKT_FORMAT


class GeometrySerializer:
    """Chain a :class:`GeometryNormalizer` with the WKT codec.

    By default geometries are Shapely objects; pass another normalizer to
    work with a different domain model.
    """

    def __init__(self, normalizer: GeometryNormalizer | None = None, codec: WktCodec | None = None):
        self.normalizer = normalizer or shapely_normalizer()
        self.codec = codec or WktCodec()

    def serialize(self, geometry: Any, format: str = WKT_FORMAT) -> str:
        if not self.normalizer.supports_normalization(geometry):
            raise TypeError(f"Cannot serialize objects of type {type(geometry).__name__}")
        return self.codec.encode(self.normalizer.normalize(geometry), format)

    def deserialize(
        self,
        text: str,
        target_type: type,
        format: str = WKT_FORMAT,
        factory: GeometryFactory | None = None,
    ) -> Any:
        record = self.codec.decode(text, format)
        return self.normalizer.denormalize(record, target_type, factory)


__all__ = ["GeometrySerializer"]
