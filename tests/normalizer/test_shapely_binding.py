from __future__ import annotations

import pytest
import shapely
from shapely.geometry import GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon

from geoserial.errors import UnsupportedGeometryType
from geoserial.normalizer.shapely import ShapelyGeometry, ShapelyGeometryFactory, crs_of, shapely_normalizer
from geoserial.record import NO_SRID, Crs, GeometryRecord, GeometryType


@pytest.fixture
def normalizer():
    return shapely_normalizer()


@pytest.fixture
def factory() -> ShapelyGeometryFactory:
    return ShapelyGeometryFactory()


def test_crs_of_plain_geometry():
    assert crs_of(Point(1, 2)) == Crs(srid=NO_SRID, is_3d=False, is_measured=False)


def test_crs_of_geometry_with_srid_and_z():
    geometry = shapely.set_srid(Point(1, 2, 3), 4326)

    assert crs_of(geometry) == Crs(srid=4326, is_3d=True, is_measured=False)


def test_adapter_requires_shapely_geometry():
    with pytest.raises(TypeError):
        ShapelyGeometry((1, 2))


def test_linear_ring_reports_linestring():
    ring = Polygon([(0, 0), (1, 0), (1, 1)]).exterior

    assert ShapelyGeometry(ring).geometry_type == "LineString"


def test_normalize_point(normalizer):
    record = normalizer.normalize(Point(1, 2))

    assert record == GeometryRecord(GeometryType.POINT, Crs(), [1.0, 2.0])
    assert all(type(value) is float for value in record.coordinates)


def test_normalize_point_z_with_srid(normalizer):
    record = normalizer.normalize(shapely.set_srid(Point(1, 2, 3), 2193))

    assert record.crs == Crs(2193, True, False)
    assert record.coordinates == [1, 2, 3]


def test_normalize_measured_point(normalizer):
    record = normalizer.normalize(shapely.from_wkt("POINT M (1 2 5)"))

    assert record.crs.is_measured
    assert not record.crs.is_3d
    assert record.coordinates == [1, 2, 5]


def test_normalize_linestring(normalizer):
    record = normalizer.normalize(LineString([(0, 0), (1, 1), (2, 2)]))

    assert record.type is GeometryType.LINESTRING
    assert record.coordinates == [[0, 0], [1, 1], [2, 2]]


def test_normalize_polygon_with_hole(normalizer):
    polygon = Polygon(
        [(0, 0), (10, 0), (10, 10), (0, 10)],
        [[(2, 2), (4, 2), (4, 4)]],
    )

    record = normalizer.normalize(polygon)

    assert record.coordinates == [
        [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]],
        [[2, 2], [4, 2], [4, 4], [2, 2]],
    ]


def test_normalize_multipoint(normalizer):
    record = normalizer.normalize(MultiPoint([(1, 2, 3), (4, 5, 6)]))

    assert record.type is GeometryType.MULTIPOINT
    assert record.crs.is_3d
    assert record.coordinates == [[1, 2, 3], [4, 5, 6]]


def test_normalize_multilinestring(normalizer):
    record = normalizer.normalize(MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]]))

    assert record.coordinates == [[[0, 0], [1, 1]], [[2, 2], [3, 3]]]


@pytest.mark.parametrize("geometry", [Point(), LineString(), Polygon(), MultiPoint(), MultiLineString()])
def test_normalize_empty(normalizer, geometry):
    record = normalizer.normalize(geometry)

    assert record.coordinates == []
    assert record.type.value == geometry.geom_type


@pytest.mark.parametrize(
    "geometry",
    [
        shapely.from_wkt("MULTIPOLYGON (((0 0,1 0,1 1,0 0)))"),
        MultiPolygon(),
        GeometryCollection(),
        shapely.from_wkt("GEOMETRYCOLLECTION (POINT (1 2))"),
    ],
    ids=lambda geometry: geometry.wkt,
)
def test_normalize_unimplemented_kinds_are_unsupported(normalizer, geometry):
    with pytest.raises(UnsupportedGeometryType):
        normalizer.normalize(geometry)


@pytest.mark.parametrize(
    "geometry",
    [
        Point(1, 2),
        Point(1, 2, 3),
        LineString([(0, 0), (1, 1), (2, 3)]),
        Polygon([(0, 0), (4, 0), (4, 4), (0, 4)], [[(1, 1), (2, 1), (2, 2)]]),
        MultiPoint([(1, 2), (3, 4)]),
        MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]]),
    ],
    ids=lambda geometry: geometry.geom_type,
)
def test_factory_round_trip(normalizer, factory, geometry):
    created = normalizer.denormalize(normalizer.normalize(geometry), type(geometry), factory)

    assert created.geom_type == geometry.geom_type
    assert created.equals_exact(geometry, 0)
    assert created.has_z == geometry.has_z


def test_factory_applies_srid(factory):
    record = GeometryRecord(GeometryType.POINT, Crs(srid=4326), [1, 2])

    created = factory.create(record)

    assert shapely.get_srid(created) == 4326


def test_factory_builds_measured_geometries(factory):
    record = GeometryRecord(GeometryType.LINESTRING, Crs(is_measured=True), [[0, 0, 7], [1, 1, 8]])

    created = factory.create(record)

    assert shapely.has_m(created)
    assert shapely.get_coordinates(created, include_m=True).tolist() == [[0, 0, 7], [1, 1, 8]]


@pytest.mark.parametrize("geometry_type", [GeometryType.MULTIPOLYGON, GeometryType.GEOMETRYCOLLECTION])
def test_factory_rejects_unimplemented_kinds(factory, geometry_type):
    with pytest.raises(UnsupportedGeometryType):
        factory.create(GeometryRecord(geometry_type))


def test_factory_builds_empty_geometries(factory):
    for geometry_type in (GeometryType.POINT, GeometryType.POLYGON, GeometryType.MULTIPOINT):
        assert factory.create(GeometryRecord(geometry_type)).is_empty
