"""Normalized, type-tagged geometry records.

A record is the neutral exchange shape between the WKT codec and any
domain geometry model::

    {
        "type": "Point",
        "crs": {"srid": 4326, "3d": False, "measured": False},
        "coordinates": [1.0, 2.0],
    }

Ordinates inside a point are always ordered ``(X, Y, [Z], [M])`` and an
empty geometry carries an empty ``coordinates`` list.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import GeometrySerializationError

NO_SRID = -1


class GeometryType(str, Enum):
    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"

    @classmethod
    def from_name(cls, name: str | GeometryType) -> GeometryType:
        """Look up a kind by name, ignoring case (``"POINT"`` -> ``POINT``)."""

        if isinstance(name, cls):
            return name
        try:
            return _BY_LOWER_NAME[str(name).lower()]
        except KeyError:
            raise GeometrySerializationError(f"Unknown geometry type: {name!r}") from None

    @property
    def keyword(self) -> str:
        return self.value.upper()

    @property
    def is_implemented(self) -> bool:
        return self in IMPLEMENTED_TYPES


_BY_LOWER_NAME = {member.value.lower(): member for member in GeometryType}

# Kinds with a working coordinate codec. MultiPolygon and GeometryCollection
# are recognised lexically only.
IMPLEMENTED_TYPES = frozenset(
    {
        GeometryType.POINT,
        GeometryType.LINESTRING,
        GeometryType.POLYGON,
        GeometryType.MULTIPOINT,
        GeometryType.MULTILINESTRING,
    }
)


@dataclass(frozen=True)
class Crs:
    srid: int = NO_SRID
    is_3d: bool = False
    is_measured: bool = False

    @property
    def has_srid(self) -> bool:
        return self.srid != NO_SRID

    @property
    def dimension(self) -> int:
        """Number of ordinates a point is expected to carry."""

        return 2 + int(self.is_3d) + int(self.is_measured)

    def to_dict(self) -> dict[str, Any]:
        return {"srid": self.srid, "3d": self.is_3d, "measured": self.is_measured}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Crs:
        data = data or {}
        srid = data.get("srid")
        return cls(
            srid=NO_SRID if srid is None else int(srid),
            is_3d=bool(data.get("3d", False)),
            is_measured=bool(data.get("measured", False)),
        )


@dataclass(frozen=True)
class GeometryRecord:
    type: GeometryType
    crs: Crs = field(default_factory=Crs)
    coordinates: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.type, GeometryType):
            object.__setattr__(self, "type", GeometryType.from_name(self.type))

    @property
    def is_empty(self) -> bool:
        return len(self.coordinates) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "crs": self.crs.to_dict(),
            "coordinates": copy.deepcopy(self.coordinates),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GeometryRecord:
        """Build a record from its boundary mapping form."""

        if "type" not in data:
            raise GeometrySerializationError("normalized geometry must define a 'type'")
        return cls(
            type=GeometryType.from_name(data["type"]),
            crs=Crs.from_dict(data.get("crs")),
            coordinates=list(data.get("coordinates") or []),
        )


def as_record(value: GeometryRecord | Mapping[str, Any]) -> GeometryRecord:
    """Return ``value`` as a :class:`GeometryRecord`, accepting boundary mappings."""

    if isinstance(value, GeometryRecord):
        return value
    if isinstance(value, Mapping):
        return GeometryRecord.from_dict(value)
    raise TypeError("value must be a GeometryRecord or a mapping")


__all__ = [
    "Crs",
    "GeometryRecord",
    "GeometryType",
    "IMPLEMENTED_TYPES",
    "NO_SRID",
    "as_record",
]
