import pytest

import geocodec
from geocodec import point


def test_point_builder():
    p = geocodec.point_builder().latitude(3.0).longitude(7.0).build()
    assert p == point(3.0, 7.0)
    assert p.coordinates == (7.0, 3.0)


@pytest.mark.parametrize("which", ["latitude", "longitude"])
def test_point_builder_missing_value(which):
    builder = getattr(geocodec.point_builder(), which)(1.0)
    with pytest.raises(ValueError, match="latitude and longitude"):
        builder.build()


def test_line_string():
    ls = geocodec.line_string(point(1, 2), point(3, 5), point(19, 13))
    assert ls.coordinates == ((2.0, 1.0), (5.0, 3.0), (13.0, 19.0))


@pytest.mark.parametrize(
    "func", [geocodec.line_string, geocodec.multi_point, geocodec.polygon]
)
def test_factories_require_points(func):
    with pytest.raises(TypeError, match="Expected a `Point`, got `tuple`"):
        func(point(1, 2), (3, 4))


def test_multi_line_string_requires_line_strings():
    with pytest.raises(TypeError, match="Expected a `LineString`"):
        geocodec.multi_line_string(geocodec.multi_point(point(1, 2)))


def test_multi_polygon_requires_polygons():
    with pytest.raises(TypeError, match="Expected a `Polygon`"):
        geocodec.multi_polygon(point(1, 2))


class TestPolygonBuilder:
    def test_no_interior_rings(self):
        pts = (point(1.1, 2.0), point(2.3, 3.5), point(3.7, 1.0), point(1.1, 2.0))
        assert geocodec.polygon_builder(*pts).build() == geocodec.polygon(*pts)

    def test_interior_rings_keep_order(self):
        rings = [
            (point(1.5, 2.0), point(1.9, 2.0), point(1.5, 2.0)),
            (point(2.2, 2.1), point(2.4, 1.9), point(2.2, 2.1)),
            (point(3.0, 3.0), point(3.1, 3.1), point(3.0, 3.0)),
        ]
        builder = geocodec.polygon_builder(point(0, 0), point(5, 5), point(0, 0))
        for ring in rings:
            builder.interior_ring(*ring)
        poly = builder.build()

        assert len(poly.coordinates) == 4
        assert poly.interiors == tuple(geocodec.line_string(*r) for r in rings)

    def test_returns_self(self):
        builder = geocodec.polygon_builder(point(0, 0))
        assert builder.interior_ring(point(1, 1)) is builder

    def test_rings_not_validated(self):
        # Open rings and degenerate rings are the caller's concern
        poly = geocodec.polygon_builder(point(0, 0)).interior_ring().build()
        assert poly.coordinates == (((0.0, 0.0),), ())


class TestGeometryCollectionBuilder:
    def test_empty(self):
        assert geocodec.geometry_collection_builder().build() == (
            geocodec.GeometryCollection(())
        )

    def test_members_keep_order(self):
        members = [
            point(3.0, 7.0),
            geocodec.line_string(point(1, 2), point(3, 5)),
            point(3.0, 7.0),
            geocodec.multi_point(point(1, 2)),
        ]
        builder = geocodec.geometry_collection_builder()
        for m in members:
            builder.add(m)
        assert builder.build().geometries == tuple(members)

    def test_nested(self):
        inner = geocodec.geometry_collection_builder().add(point(1, 2)).build()
        outer = (
            geocodec.geometry_collection_builder().add(inner).add(point(3, 4)).build()
        )
        assert outer.geometries == (inner, point(3, 4))

    @pytest.mark.parametrize("obj", [1, "Point", {"type": "Point"}, None])
    def test_rejects_non_geometry(self, obj):
        with pytest.raises(TypeError, match="Expected a geometry"):
            geocodec.geometry_collection_builder().add(obj)

    def test_build_snapshots(self):
        builder = geocodec.geometry_collection_builder().add(point(1, 2))
        first = builder.build()
        builder.add(point(3, 4))
        assert first.geometries == (point(1, 2),)
