import pytest

import geocodec
from geocodec import point


def test_module_dir():
    assert set(dir(geocodec.json)) == {"encode", "decode"}


def test_encode_point():
    assert geocodec.json.encode(point(3.0, 7.0)) == (
        b'{"type":"Point","coordinates":[7.0,3.0]}'
    )


def test_encode_geometry_collection():
    gc = geocodec.geometry_collection_builder().add(point(1, 2)).build()
    assert geocodec.json.encode(gc) == (
        b'{"type":"GeometryCollection","geometries":'
        b'[{"type":"Point","coordinates":[2.0,1.0]}]}'
    )


@pytest.mark.parametrize("buf_type", [bytes, str])
def test_decode(buf_type):
    msg = '{"type": "LineString", "coordinates": [[2, 1], [5, 3], [13, 19]]}'
    if buf_type is bytes:
        msg = msg.encode()
    res = geocodec.json.decode(msg)
    assert res == geocodec.line_string(point(1, 2), point(3, 5), point(19, 13))


def test_roundtrip():
    poly = (
        geocodec.polygon_builder(point(0, 0), point(0, 4), point(4, 4), point(0, 0))
        .interior_ring(point(1, 1), point(1, 2), point(2, 2), point(1, 1))
        .build()
    )
    gc = (
        geocodec.geometry_collection_builder()
        .add(poly)
        .add(geocodec.multi_polygon(poly, poly))
        .build()
    )
    assert geocodec.json.decode(geocodec.json.encode(gc)) == gc


def test_decode_invalid_json():
    with pytest.raises(geocodec.DecodeError):
        geocodec.json.decode(b'{"type": "Point",')


def test_decode_unknown_type():
    with pytest.raises(geocodec.UnknownGeometryType):
        geocodec.json.decode(b'{"type": "Feature", "geometry": null}')


def test_decode_strict():
    msg = b'{"type": "Point", "coordinates": ["7.5", "3.5"]}'
    with pytest.raises(geocodec.MalformedCoordinate):
        geocodec.json.decode(msg)
    assert geocodec.json.decode(msg, strict=False) == point(3.5, 7.5)
