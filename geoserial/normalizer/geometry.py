"""Convert between domain geometry objects and normalized records."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Callable, Protocol

from ..errors import MissingCollaborator, UnsupportedGeometryType, UnsupportedTargetType
from ..record import Crs, GeometryRecord, GeometryType, as_record

logger = logging.getLogger(__name__)


class CoordinateSystem(Protocol):
    @property
    def srid(self) -> int: ...

    @property
    def is_3d(self) -> bool: ...

    @property
    def is_measured(self) -> bool: ...


class DomainGeometry(Protocol):
    """What the normalizer needs from a domain geometry.

    ``geometry_type`` is the kind tag (``"Point"``, ``"LineString"``...).
    Composite kinds iterate over their children in order: points for
    linestrings and multipoints, rings for polygons, linestrings for
    multilinestrings.
    """

    @property
    def geometry_type(self) -> str: ...

    @property
    def crs(self) -> CoordinateSystem: ...

    @property
    def is_empty(self) -> bool: ...

    def __iter__(self) -> Iterator[Any]: ...


class DomainPoint(Protocol):
    @property
    def crs(self) -> CoordinateSystem: ...

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float | None: ...

    @property
    def m(self) -> float | None: ...


class GeometryFactory(Protocol):
    def create(self, record: GeometryRecord) -> Any: ...


class GeometryNormalizer:
    """(De)normalize geometries of one domain model.

    Parameters
    ----------
    base_type:
        Base class of the domain model. Denormalization targets must be
        this class or one of its subclasses.
    adapter:
        Optional callable wrapping a domain object so that it exposes
        :class:`DomainGeometry`. Used for models whose own API differs.
    """

    def __init__(self, base_type: type, *, adapter: Callable[[Any], DomainGeometry] | None = None):
        self.base_type = base_type
        self.adapter = adapter

    def supports_normalization(self, data: Any) -> bool:
        return isinstance(data, self.base_type)

    def supports_denormalization(self, target_type: Any) -> bool:
        return isinstance(target_type, type) and issubclass(target_type, self.base_type)

    def normalize(self, geometry: Any) -> GeometryRecord:
        domain = self.adapter(geometry) if self.adapter is not None else geometry
        geometry_type = GeometryType.from_name(domain.geometry_type)
        crs = domain.crs
        return GeometryRecord(
            type=geometry_type,
            crs=Crs(srid=int(crs.srid), is_3d=bool(crs.is_3d), is_measured=bool(crs.is_measured)),
            coordinates=self.normalize_coordinates(domain, geometry_type),
        )

    def denormalize(
        self,
        data: GeometryRecord | Mapping[str, Any],
        target_type: type,
        factory: GeometryFactory | None,
    ) -> Any:
        if factory is None:
            raise MissingCollaborator("A geometry factory is required to denormalize a geometry")
        if not self.supports_denormalization(target_type):
            raise UnsupportedTargetType(
                f"{getattr(target_type, '__name__', target_type)!s} is not a {self.base_type.__name__}"
            )
        record = as_record(data)
        logger.debug("Denormalizing %s with %s", record.type.value, type(factory).__name__)
        return factory.create(record)

    def normalize_coordinates(self, geometry: DomainGeometry, geometry_type: GeometryType) -> list:
        if not geometry_type.is_implemented:
            raise UnsupportedGeometryType(geometry_type)
        if geometry.is_empty:
            return []
        if geometry_type is GeometryType.POINT:
            return self.normalize_point(geometry)
        if geometry_type in (GeometryType.LINESTRING, GeometryType.MULTIPOINT):
            return self.normalize_linestring(geometry)
        if geometry_type in (GeometryType.POLYGON, GeometryType.MULTILINESTRING):
            return [self.normalize_linestring(part) for part in geometry]
        raise UnsupportedGeometryType(geometry_type)

    def normalize_point(self, point: DomainPoint) -> list[float]:
        coordinates = [point.x, point.y]
        if point.crs.is_3d:
            coordinates.append(point.z)
        if point.crs.is_measured:
            coordinates.append(point.m)
        return coordinates

    def normalize_linestring(self, linestring: Any) -> list[list[float]]:
        return [self.normalize_point(point) for point in linestring]


__all__ = [
    "CoordinateSystem",
    "DomainGeometry",
    "DomainPoint",
    "GeometryFactory",
    "GeometryNormalizer",
]
