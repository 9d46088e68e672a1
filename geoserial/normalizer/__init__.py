"""Domain geometry (de)normalization."""

from .geometry import CoordinateSystem, DomainGeometry, DomainPoint, GeometryFactory, GeometryNormalizer
from .shapely import ShapelyGeometry, ShapelyGeometryFactory, shapely_normalizer

__all__ = [
    "CoordinateSystem",
    "DomainGeometry",
    "DomainPoint",
    "GeometryFactory",
    "GeometryNormalizer",
    "ShapelyGeometry",
    "ShapelyGeometryFactory",
    "shapely_normalizer",
]
