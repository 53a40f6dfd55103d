import geocodec


def test_version():
    assert isinstance(geocodec.__version__, str)


def test_public_api():
    for name in [
        "Point",
        "LineString",
        "Polygon",
        "MultiPoint",
        "MultiLineString",
        "MultiPolygon",
        "GeometryCollection",
        "Geometry",
        "GeometryType",
        "encode",
        "decode",
        "Decoder",
        "point",
        "polygon_builder",
        "geometry_collection_builder",
        "MissingTypeTag",
        "UnknownGeometryType",
        "MalformedCoordinate",
    ]:
        assert hasattr(geocodec, name)


def test_geometry_union_members():
    assert set(geocodec.Geometry.__args__) == {t.cls for t in geocodec.GeometryType}
