from typing import Union

import msgspec

from ._codec import decode as _decode, encode as _encode
from ._errors import DecodeError as _DecodeError
from .geometry import Geometry

__all__ = ("encode", "decode")


def __dir__():
    return __all__


_encoder = msgspec.json.Encoder()


def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as GeoJSON.

    Parameters
    ----------
    geometry : Geometry
        The geometry to serialize.

    Returns
    -------
    data : bytes
        The serialized geometry.

    See Also
    --------
    decode
    """
    return _encoder.encode(_encode(geometry))


def decode(buf: Union[bytes, str], *, strict: bool = True) -> Geometry:
    """Deserialize a geometry from GeoJSON.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    strict : bool, optional
        Whether coordinates must be numbers. If ``False``, numeric strings
        are also accepted. Defaults to ``True``.

    Returns
    -------
    geometry : Geometry
        The deserialized geometry.

    See Also
    --------
    encode
    """
    try:
        obj = msgspec.json.decode(buf)
    except msgspec.DecodeError as exc:
        raise _DecodeError(str(exc)) from None
    return _decode(obj, strict=strict)
