"""Bindings between Shapely geometries and normalized records.

Shapely objects carry no coordinate reference metadata of their own
apart from an optional SRID, so :class:`ShapelyGeometry` derives the
``crs`` from the geometry itself: ``shapely.get_srid`` (0 meaning "no
SRID"), ``has_z`` and ``shapely.has_m``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import shapely
from shapely.geometry.base import BaseGeometry

from ..errors import UnsupportedGeometryType
from ..record import NO_SRID, Crs, GeometryRecord, GeometryType
from ..wkt.encoder import WKT_FORMAT, WktEncoder
from .geometry import GeometryNormalizer


def crs_of(geometry: BaseGeometry) -> Crs:
    srid = int(shapely.get_srid(geometry))
    return Crs(
        srid=srid if srid > 0 else NO_SRID,
        is_3d=bool(geometry.has_z),
        is_measured=bool(shapely.has_m(geometry)),
    )


@dataclass(frozen=True)
class Vertex:
    """A single coordinate of a Shapely geometry, seen as a domain point."""

    crs: Crs
    x: float
    y: float
    z: float | None = None
    m: float | None = None

    @classmethod
    def from_row(cls, row: list[float], crs: Crs) -> Vertex:
        values = iter(row)
        x, y = next(values), next(values)
        z = next(values) if crs.is_3d else None
        m = next(values) if crs.is_measured else None
        return cls(crs, x, y, z, m)


class ShapelyGeometry:
    """Expose a Shapely geometry through the ``DomainGeometry`` protocol."""

    def __init__(self, geometry: BaseGeometry, crs: Crs | None = None):
        if not isinstance(geometry, BaseGeometry):
            raise TypeError("geometry must be a shapely geometry")
        self.geometry = geometry
        self.crs = crs or crs_of(geometry)

    def __repr__(self) -> str:
        return f"ShapelyGeometry({self.geometry.wkt!r})"

    @property
    def geometry_type(self) -> str:
        geom_type = self.geometry.geom_type
        return "LineString" if geom_type == "LinearRing" else geom_type

    @property
    def is_empty(self) -> bool:
        return bool(self.geometry.is_empty)

    def vertices(self) -> list[Vertex]:
        rows = shapely.get_coordinates(
            self.geometry,
            include_z=self.crs.is_3d,
            include_m=self.crs.is_measured,
        )
        return [Vertex.from_row(row.tolist(), self.crs) for row in rows]

    def _first_vertex(self) -> Vertex:
        return self.vertices()[0]

    @property
    def x(self) -> float:
        return self._first_vertex().x

    @property
    def y(self) -> float:
        return self._first_vertex().y

    @property
    def z(self) -> float | None:
        return self._first_vertex().z

    @property
    def m(self) -> float | None:
        return self._first_vertex().m

    def __iter__(self) -> Iterator[Any]:
        geom_type = self.geometry.geom_type
        if geom_type in ("LineString", "LinearRing"):
            return iter(self.vertices())
        if geom_type == "Polygon":
            rings = [self.geometry.exterior, *self.geometry.interiors]
            return iter([ShapelyGeometry(ring, self.crs) for ring in rings])
        if geom_type in ("MultiPoint", "MultiLineString"):
            return iter([ShapelyGeometry(part, self.crs) for part in self.geometry.geoms])
        if geom_type == "Point":
            return iter(())
        raise UnsupportedGeometryType(geom_type)


class ShapelyGeometryFactory:
    """Build Shapely geometries from normalized records."""

    def __init__(self, encoder: WktEncoder | None = None):
        self.encoder = encoder or WktEncoder()

    def create(self, record: GeometryRecord) -> BaseGeometry:
        if record.crs.is_measured:
            # Shapely constructors only take XY/XYZ coordinates.
            geometry = shapely.from_wkt(self.encoder.encode(record, WKT_FORMAT))
        else:
            geometry = self._construct(record)
        if record.crs.has_srid:
            geometry = shapely.set_srid(geometry, record.crs.srid)
        return geometry

    @staticmethod
    def _construct(record: GeometryRecord) -> BaseGeometry:
        coordinates = record.coordinates
        geometry_type = record.type
        if geometry_type is GeometryType.POINT:
            return shapely.Point(coordinates) if coordinates else shapely.Point()
        if geometry_type is GeometryType.LINESTRING:
            return shapely.LineString(coordinates)
        if geometry_type is GeometryType.POLYGON:
            if not coordinates:
                return shapely.Polygon()
            return shapely.Polygon(coordinates[0], coordinates[1:])
        if geometry_type is GeometryType.MULTIPOINT:
            return shapely.MultiPoint(coordinates)
        if geometry_type is GeometryType.MULTILINESTRING:
            return shapely.MultiLineString(coordinates)
        raise UnsupportedGeometryType(geometry_type)


def shapely_normalizer() -> GeometryNormalizer:
    """Return a normalizer for Shapely geometries."""

    return GeometryNormalizer(BaseGeometry, adapter=ShapelyGeometry)


__all__ = [
    "ShapelyGeometry",
    "ShapelyGeometryFactory",
    "Vertex",
    "crs_of",
    "shapely_normalizer",
]
