"""Conversion between user-facing ``(latitude, longitude)`` pairs and the
``[longitude, latitude]`` order GeoJSON uses on the wire.

This is the only place the two orders meet. Every geometry type stores its
positions in wire order, and nothing above this module reorders them.
"""
from collections.abc import Sequence
from typing import Any, Tuple

from ._errors import MalformedCoordinate

__all__ = ("Position", "to_wire", "from_wire", "check_nesting", "to_lists")


def __dir__():
    return __all__


#: A single position in wire order, ``(longitude, latitude)``.
Position = Tuple[float, float]


_TYPE_NAMES = {
    type(None): "null",
    bool: "bool",
    int: "int",
    float: "float",
    str: "str",
    bytes: "bytes",
    dict: "object",
    list: "array",
    tuple: "array",
}


def _type_name(obj: Any) -> str:
    return _TYPE_NAMES.get(type(obj), type(obj).__name__)


def _is_number(obj: Any) -> bool:
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def _is_array(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def _check_pair(pair: Any, path: str) -> None:
    if not _is_array(pair):
        raise MalformedCoordinate(
            f"Expected `array`, got `{_type_name(pair)}` - at `{path}`"
        )
    if len(pair) != 2:
        raise MalformedCoordinate(
            f"Expected `array` of length 2, got {len(pair)} - at `{path}`"
        )
    for i, value in enumerate(pair):
        if not _is_number(value):
            raise MalformedCoordinate(
                f"Expected `float`, got `{_type_name(value)}` - at `{path}[{i}]`"
            )


def to_wire(latitude: float, longitude: float) -> Position:
    """Convert a ``(latitude, longitude)`` pair to a wire order position.

    Parameters
    ----------
    latitude : float
        The latitude, in degrees.
    longitude : float
        The longitude, in degrees.

    Returns
    -------
    position : tuple
        The position as ``(longitude, latitude)``.

    Raises
    ------
    MalformedCoordinate
        If either value isn't a number.
    """
    _check_pair((latitude, longitude), "$")
    return (float(longitude), float(latitude))


def from_wire(position: Sequence) -> Tuple[float, float]:
    """Convert a wire order ``[longitude, latitude]`` position back to a
    ``(latitude, longitude)`` pair.

    Raises
    ------
    MalformedCoordinate
        If ``position`` isn't a sequence of exactly two numbers.
    """
    _check_pair(position, "$")
    longitude, latitude = position
    return (float(latitude), float(longitude))


def check_nesting(coordinates: Any, depth: int, path: str = "$") -> None:
    """Check that ``coordinates`` is nested exactly ``depth`` levels deep.

    A depth of 1 is a single position, 2 is a sequence of positions, and so
    on. Errors name the location of the offending value relative to ``path``.

    Raises
    ------
    MalformedCoordinate
        If the nesting, arity, or leaf types are wrong.
    """
    if depth == 1:
        _check_pair(coordinates, path)
        return
    if not _is_array(coordinates):
        raise MalformedCoordinate(
            f"Expected `array`, got `{_type_name(coordinates)}` - at `{path}`"
        )
    for i, item in enumerate(coordinates):
        check_nesting(item, depth - 1, f"{path}[{i}]")


def to_lists(coordinates: Any) -> Any:
    """Copy a nested coordinate sequence into nested lists, as GeoJSON
    documents carry them."""
    if _is_array(coordinates):
        return [to_lists(c) for c in coordinates]
    return coordinates
