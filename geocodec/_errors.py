__all__ = (
    "GeoCodecError",
    "EncodeError",
    "DecodeError",
    "ValidationError",
    "MissingTypeTag",
    "UnknownGeometryType",
    "MalformedCoordinate",
    "MalformedGeometry",
)


class GeoCodecError(Exception):
    """The base class for all geocodec exceptions."""


class EncodeError(GeoCodecError):
    """An error occurred while encoding a geometry.

    This indicates a geometry value that was constructed around its own
    invariants, and is a programming error rather than bad input data.
    """


class DecodeError(GeoCodecError):
    """An error occurred while decoding a document."""


class ValidationError(DecodeError):
    """The document was well formed, but didn't match the GeoJSON schema."""


class MissingTypeTag(ValidationError):
    """The document has no ``"type"`` field."""


class UnknownGeometryType(ValidationError):
    """The document's ``"type"`` field names no known geometry type."""


class MalformedCoordinate(ValidationError):
    """Coordinates are missing, have the wrong nesting depth or arity, or
    contain non-numeric values."""


class MalformedGeometry(ValidationError):
    """A GeometryCollection's ``"geometries"`` are missing or not an array."""
