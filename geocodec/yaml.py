from typing import Union

from ._codec import decode as _decode, encode as _encode
from ._errors import DecodeError as _DecodeError
from .geometry import Geometry

__all__ = ("encode", "decode")


def __dir__():
    return __all__


def _pyyaml(func):
    try:
        import yaml
    except ImportError:
        raise ImportError(
            f"PyYAML is needed for `geocodec.yaml.{func}`; install it with "
            "`pip install geocodec[yaml]` or `pip install pyyaml`"
        ) from None
    return yaml



def encode(geometry: Geometry) -> bytes:
    """Serialize a geometry as YAML.

    Parameters
    ----------
    geometry : Geometry
        The geometry to serialize.

    Returns
    -------
    data : bytes
        The serialized geometry.

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    decode
    """
    yaml = _pyyaml("encode")
    # ``type`` stays ahead of ``coordinates``/``geometries``
    return yaml.dump(
        _encode(geometry),
        Dumper=getattr(yaml, "CSafeDumper", yaml.SafeDumper),
        encoding="utf-8",
        sort_keys=False,
    )



def decode(buf: Union[bytes, str], *, strict: bool = True) -> Geometry:
    """Deserialize a geometry from YAML.

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

    Notes
    -----
    This function requires that the third-party `PyYAML library
    <https://pyyaml.org/>`_ is installed.

    See Also
    --------
    encode
    """
    yaml = _pyyaml("decode")
    if isinstance(buf, (bytearray, memoryview)):
        buf = bytes(buf)
    try:
        document = yaml.load(buf, getattr(yaml, "CSafeLoader", yaml.SafeLoader))
    except yaml.YAMLError as exc:
        raise _DecodeError(f"Invalid YAML: {exc}") from None
    return _decode(document, strict=strict)

