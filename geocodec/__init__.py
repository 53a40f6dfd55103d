from ._errors import (
    GeoCodecError,
    EncodeError,
    DecodeError,
    ValidationError,
    MissingTypeTag,
    UnknownGeometryType,
    MalformedCoordinate,
    MalformedGeometry,
)
from .geometry import (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    Geometry,
    GeometryType,
)
from .builders import (
    point,
    line_string,
    polygon,
    multi_point,
    multi_line_string,
    multi_polygon,
    point_builder,
    polygon_builder,
    geometry_collection_builder,
    PointBuilder,
    PolygonBuilder,
    GeometryCollectionBuilder,
)
from ._codec import encode, decode, Decoder

from . import coordinates
from . import json
from . import yaml
from ._version import __version__
