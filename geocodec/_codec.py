import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict

import msgspec

from ._errors import (
    DecodeError,
    EncodeError,
    MalformedCoordinate,
    MalformedGeometry,
    MissingTypeTag,
    UnknownGeometryType,
)
from .coordinates import _is_array, _type_name, check_nesting, to_lists
from .geometry import (
    COORDINATE_TYPES,
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = ("encode", "decode", "Decoder")

logger = logging.getLogger(__name__)


def encode(geometry: Geometry) -> Dict[str, Any]:
    """Encode a geometry as a GeoJSON document.

    Parameters
    ----------
    geometry : Geometry
        The geometry to encode.

    Returns
    -------
    document : dict
        A document composed only of builtin types (``dict``, ``list``,
        ``str``, and ``float``). GeometryCollections are encoded with a
        ``geometries`` field, every other type with ``coordinates``.

    Raises
    ------
    TypeError
        If ``geometry`` isn't a geometry.
    EncodeError
        If the geometry's coordinates don't have the nesting its type
        requires. This can only happen if the geometry was constructed
        directly with bad data, and indicates a programming error.

    See Also
    --------
    decode
    """
    if isinstance(geometry, GeometryCollection):
        return {
            "type": geometry.type,
            "geometries": [encode(g) for g in geometry.geometries],
        }
    if not isinstance(geometry, COORDINATE_TYPES):
        raise TypeError(f"Expected a geometry, got `{type(geometry).__name__}`")
    try:
        check_nesting(geometry.coordinates, geometry.depth, "$.coordinates")
    except MalformedCoordinate as exc:
        raise EncodeError(f"Invalid {geometry.type}: {exc}") from None
    return {"type": geometry.type, "coordinates": to_lists(geometry.coordinates)}


def _relocate(msg: str, path: str) -> str:
    # msgspec reports locations relative to the object it was handed, and
    # none at all for errors raised by ``__post_init__`` at the top level
    if " - at `$" not in msg:
        return f"{msg} - at `{path}.coordinates`"
    if path == "$":
        return msg
    return msg.replace("`$", f"`{path}", 1)



def _coordinates_rule(cls) -> Callable:
    def rule(decoder: "Decoder", obj: Mapping, path: str) -> Geometry:
        if "coordinates" not in obj:
            raise MalformedCoordinate(
                f"Object missing required field `coordinates` - at `{path}`"
            )
        if not isinstance(obj, dict):
            obj = dict(obj)
        try:
            return msgspec.convert(obj, cls, strict=decoder.strict)
        except msgspec.ValidationError as exc:
            raise MalformedCoordinate(_relocate(str(exc), path)) from None

    return rule


def _decode_collection(decoder: "Decoder", obj: Mapping, path: str) -> Geometry:
    if "geometries" not in obj:
        raise MalformedGeometry(
            f"Object missing required field `geometries` - at `{path}`"
        )
    geometries = obj["geometries"]
    if not _is_array(geometries):
        raise MalformedGeometry(
            f"Expected `array`, got `{_type_name(geometries)}` - at `{path}.geometries`"
        )
    return GeometryCollection(
        tuple(
            decoder._decode(g, f"{path}.geometries[{i}]")
            for i, g in enumerate(geometries)
        )
    )


_DECODE_RULES = {
    GeometryType.POINT: _coordinates_rule(Point),
    GeometryType.LINE_STRING: _coordinates_rule(LineString),
    GeometryType.POLYGON: _coordinates_rule(Polygon),
    GeometryType.MULTI_POINT: _coordinates_rule(MultiPoint),
    GeometryType.MULTI_LINE_STRING: _coordinates_rule(MultiLineString),
    GeometryType.MULTI_POLYGON: _coordinates_rule(MultiPolygon),
    GeometryType.GEOMETRY_COLLECTION: _decode_collection,
}

_TAGS = {t.value: t for t in GeometryType}


class Decoder:
    """A GeoJSON geometry decoder.

    Parameters
    ----------
    strict : bool, optional
        Whether coordinates must be numbers. If ``False``, numeric strings
        (e.g. ``"1.5"``) are also accepted. Defaults to ``True``.
    """

    def __init__(self, *, strict: bool = True):
        self.strict = strict

    def __repr__(self):
        return f"Decoder(strict={self.strict})"

    def decode(self, document: Mapping) -> Geometry:
        """Decode a GeoJSON document into a geometry.

        The document's ``"type"`` field selects the geometry type;
        GeometryCollection members are decoded recursively.

        Parameters
        ----------
        document : Mapping
            The document to decode, composed of builtin types.

        Returns
        -------
        geometry : Geometry

        Raises
        ------
        MissingTypeTag
            If a document has no ``"type"`` field.
        UnknownGeometryType
            If a ``"type"`` field isn't a known geometry type.
        MalformedCoordinate
            If ``coordinates`` are missing or malformed.
        MalformedGeometry
            If a GeometryCollection's ``geometries`` are missing or malformed.
        DecodeError
            If a document isn't an object at all.
        """
        return self._decode(document, "$")

    def _decode(self, obj: Any, path: str) -> Geometry:
        if not isinstance(obj, Mapping):
            logger.debug("Rejected non-object at %s: %r", path, obj)
            raise DecodeError(f"Expected `object`, got `{_type_name(obj)}` - at `{path}`")
        if "type" not in obj:
            logger.debug("Rejected object without a type at %s", path)
            raise MissingTypeTag(f"Object missing required field `type` - at `{path}`")
        tag = obj["type"]
        kind = _TAGS.get(tag) if isinstance(tag, str) else None
        if kind is None:
            logger.debug("Rejected unknown geometry type %r at %s", tag, path)
            raise UnknownGeometryType(
                f"Invalid value {tag!r} - at `{path}.type`"
            )
        return _DECODE_RULES[kind](self, obj, path)


_decoder = Decoder()
_lax_decoder = Decoder(strict=False)


def decode(document: Mapping, *, strict: bool = True) -> Geometry:
    """Decode a GeoJSON document into a geometry.

    Shorthand for ``Decoder(strict=strict).decode(document)``.

    See Also
    --------
    Decoder.decode
    encode
    """
    return (_decoder if strict else _lax_decoder).decode(document)
