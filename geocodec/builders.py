"""Factory helpers and builders for constructing geometries from
``(latitude, longitude)`` points.

Geometry values are immutable, so shapes with a variable number of parts
(interior rings, collection members) are assembled by a builder, which is
discarded after a single call to ``build``. Builders are not thread-safe.
"""
from typing import Any, List, Optional, Tuple

from .coordinates import Position, to_wire
from .geometry import (
    COORDINATE_TYPES,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = (
    "point",
    "line_string",
    "polygon",
    "multi_point",
    "multi_line_string",
    "multi_polygon",
    "point_builder",
    "polygon_builder",
    "geometry_collection_builder",
    "PointBuilder",
    "PolygonBuilder",
    "GeometryCollectionBuilder",
)


def __dir__():
    return __all__


def _positions(points: Tuple[Any, ...]) -> Tuple[Position, ...]:
    for p in points:
        if not isinstance(p, Point):
            raise TypeError(f"Expected a `Point`, got `{type(p).__name__}`")
    return tuple(p.coordinates for p in points)


def _check_geometry(obj: Any) -> None:
    if not isinstance(obj, (*COORDINATE_TYPES, GeometryCollection)):
        raise TypeError(f"Expected a geometry, got `{type(obj).__name__}`")


def point(latitude: float, longitude: float) -> Point:
    """Create a Point from a latitude and longitude.

    Examples
    --------
    >>> geocodec.point(3.0, 7.0)
    Point(coordinates=(7.0, 3.0))
    """
    return Point(to_wire(latitude, longitude))


def line_string(*points: Point) -> LineString:
    """Create a LineString through ``points``, in order."""
    return LineString(_positions(points))


def multi_point(*points: Point) -> MultiPoint:
    return MultiPoint(_positions(points))


def polygon(*points: Point) -> Polygon:
    """Create a Polygon with no holes, whose exterior ring is ``points``.

    Use `polygon_builder` for a polygon with interior rings.
    """
    return Polygon((_positions(points),))


def multi_line_string(*line_strings: LineString) -> MultiLineString:
    for ls in line_strings:
        if not isinstance(ls, LineString):
            raise TypeError(f"Expected a `LineString`, got `{type(ls).__name__}`")
    return MultiLineString(tuple(ls.coordinates for ls in line_strings))


def multi_polygon(*polygons: Polygon) -> MultiPolygon:
    for p in polygons:
        if not isinstance(p, Polygon):
            raise TypeError(f"Expected a `Polygon`, got `{type(p).__name__}`")
    return MultiPolygon(tuple(p.coordinates for p in polygons))


class PointBuilder:
    """Builds a Point from separately provided latitude and longitude."""

    def __init__(self):
        self._latitude: Optional[float] = None
        self._longitude: Optional[float] = None

    def latitude(self, latitude: float) -> "PointBuilder":
        self._latitude = latitude
        return self

    def longitude(self, longitude: float) -> "PointBuilder":
        self._longitude = longitude
        return self

    def build(self) -> Point:
        if self._latitude is None or self._longitude is None:
            raise ValueError("Both latitude and longitude must be set")
        return point(self._latitude, self._longitude)


class PolygonBuilder:
    """Builds a Polygon from an exterior ring and any number of holes.

    Parameters
    ----------
    *points: Point
        The exterior ring.

    Examples
    --------
    >>> poly = (
    ...     geocodec.polygon_builder(
    ...         point(1.1, 2.0), point(2.3, 3.5), point(3.7, 1.0), point(1.1, 2.0)
    ...     )
    ...     .interior_ring(point(1.5, 2.0), point(1.9, 2.0), point(1.9, 1.8), point(1.5, 2.0))
    ...     .build()
    ... )
    """

    def __init__(self, *points: Point):
        self._rings: List[Tuple[Position, ...]] = [_positions(points)]

    def interior_ring(self, *points: Point) -> "PolygonBuilder":
        """Add a hole. Holes keep the order they were added in."""
        self._rings.append(_positions(points))
        return self

    def build(self) -> Polygon:
        return Polygon(tuple(self._rings))


class GeometryCollectionBuilder:
    """Builds a GeometryCollection, one member at a time."""

    def __init__(self):
        self._geometries: List[Geometry] = []

    def add(self, geometry: Geometry) -> "GeometryCollectionBuilder":
        """Append ``geometry``, which may itself be a GeometryCollection."""
        _check_geometry(geometry)
        self._geometries.append(geometry)
        return self

    def build(self) -> GeometryCollection:
        return GeometryCollection(tuple(self._geometries))


def point_builder() -> PointBuilder:
    return PointBuilder()


def polygon_builder(*points: Point) -> PolygonBuilder:
    return PolygonBuilder(*points)


def geometry_collection_builder() -> GeometryCollectionBuilder:
    return GeometryCollectionBuilder()
