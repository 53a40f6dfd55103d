import enum
from typing import ClassVar, Tuple, Type, Union

import msgspec

from .coordinates import Position, from_wire

__all__ = (
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "GeometryType",
)


def __dir__():
    return __all__


class _GeometryBase(msgspec.Struct, frozen=True, tag=True):
    # Shared configuration only. Every subclass is tagged with its own class
    # name under the ``type`` field, which is exactly the GeoJSON tag.

    @property
    def type(self) -> str:
        """The GeoJSON type tag for this geometry."""
        return self.__struct_config__.tag


class Point(_GeometryBase):
    """A single position.

    Parameters
    ----------
    coordinates: tuple
        The position in wire order, ``(longitude, latitude)``. Use
        `geocodec.point` to construct a Point from a latitude and longitude.
    """

    depth: ClassVar[int] = 1

    coordinates: Position

    @property
    def latitude(self) -> float:
        return from_wire(self.coordinates)[0]

    @property
    def longitude(self) -> float:
        return from_wire(self.coordinates)[1]


class LineString(_GeometryBase):
    """An ordered sequence of positions.

    No minimum length is enforced.
    """

    depth: ClassVar[int] = 2

    coordinates: Tuple[Position, ...]

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(Point(c) for c in self.coordinates)


class Polygon(_GeometryBase):
    """A polygon, optionally with holes.

    Parameters
    ----------
    coordinates: tuple
        A tuple of rings, each a tuple of positions. The first ring is the
        exterior boundary, any following rings are interior boundaries
        (holes), in order.
    """

    depth: ClassVar[int] = 3

    coordinates: Tuple[Tuple[Position, ...], ...]

    def __post_init__(self):
        if not self.coordinates:
            raise ValueError("A Polygon requires an exterior ring")

    @property
    def exterior(self) -> LineString:
        return LineString(self.coordinates[0])

    @property
    def interiors(self) -> Tuple[LineString, ...]:
        return tuple(LineString(ring) for ring in self.coordinates[1:])


class MultiPoint(_GeometryBase):
    depth: ClassVar[int] = 2

    coordinates: Tuple[Position, ...]

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(Point(c) for c in self.coordinates)


class MultiLineString(_GeometryBase):
    depth: ClassVar[int] = 3

    coordinates: Tuple[Tuple[Position, ...], ...]

    @property
    def line_strings(self) -> Tuple[LineString, ...]:
        return tuple(LineString(c) for c in self.coordinates)


class MultiPolygon(_GeometryBase):
    depth: ClassVar[int] = 4

    coordinates: Tuple[Tuple[Tuple[Position, ...], ...], ...]

    def __post_init__(self):
        for i, rings in enumerate(self.coordinates):
            if not rings:
                raise ValueError(f"Polygon {i} of a MultiPolygon has no exterior ring")

    @property
    def polygons(self) -> Tuple[Polygon, ...]:
        return tuple(Polygon(c) for c in self.coordinates)


class GeometryCollection(_GeometryBase):
    """A heterogeneous, ordered collection of geometries.

    Members may themselves be GeometryCollections.
    """

    geometries: Tuple["Geometry", ...]


Geometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]


class GeometryType(enum.Enum):
    """The GeoJSON geometry type tags."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @property
    def cls(self) -> Type[Geometry]:
        """The geometry type carrying this tag."""
        return _CLASSES[self]


_CLASSES = {
    GeometryType.POINT: Point,
    GeometryType.LINE_STRING: LineString,
    GeometryType.POLYGON: Polygon,
    GeometryType.MULTI_POINT: MultiPoint,
    GeometryType.MULTI_LINE_STRING: MultiLineString,
    GeometryType.MULTI_POLYGON: MultiPolygon,
    GeometryType.GEOMETRY_COLLECTION: GeometryCollection,
}

#: The geometry types that carry ``coordinates``.
COORDINATE_TYPES = (Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon)
