import pytest

from wktio.exceptions import ParseError
from wktio.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from wktio.wkt_lexer import tokenize
from wktio.wkt_parser import MAX_NESTING_DEPTH, WKTParser, parse
from wktio.wkt_tokens import GEOMETRY_TAGS, CloseBracket, Number


def _parse(wkt):
    return parse(tokenize(wkt))


def test_every_geometry_tag_has_a_parser():
    assert set(WKTParser.TAGGED_TEXT_PARSERS) == set(GEOMETRY_TAGS)
    for method_name in WKTParser.TAGGED_TEXT_PARSERS.values():
        assert callable(getattr(WKTParser, method_name))


@pytest.mark.parametrize(
    "wkt,geometry_class",
    [
        ("POINT EMPTY", Point),
        ("MULTIPOINT EMPTY", MultiPoint),
        ("LINESTRING EMPTY", LineString),
        ("MultiLineString EMPTY", MultiLineString),
        ("POLYGON EMPTY", Polygon),
        ("MULTIPOLYGON EMPTY", MultiPolygon),
        ("GEOMETRYCOLLECTION EMPTY", GeometryCollection),
        ("point empty", Point),
    ],
)
def test_parse_empty(wkt, geometry_class):
    geometry = _parse(wkt)
    assert type(geometry) is geometry_class
    assert geometry.is_empty


def test_parse_point():
    point = _parse("POINT (4 -6)")
    assert isinstance(point, Point)
    assert not point.is_empty
    assert point.x == 4
    assert point.y == -6
    assert point == Point(4, -6)


def test_parse_point_without_whitespace_after_tag():
    assert _parse("POINT(1.5 -0.25)") == Point(1.5, -0.25)


def test_parse_multi_point():
    multi_point = _parse("MULTIPOINT ((5.0 10.0), (100.0 150.0))")
    assert isinstance(multi_point, MultiPoint)
    assert not multi_point.is_empty
    assert len(multi_point) == 2
    assert multi_point[0] == Point(5, 10)
    assert multi_point[1] == Point(100, 150)


def test_parse_multi_point_bare_coordinates():
    assert _parse("MULTIPOINT (1 2, 3 4)") == MultiPoint([Point(1, 2), Point(3, 4)])


def test_parse_multi_point_with_empty_point():
    multi_point = _parse("MULTIPOINT ((1 2), EMPTY)")
    assert multi_point[0] == Point(1, 2)
    assert multi_point[1].is_empty


def test_parse_line_string():
    line_string = _parse("LINESTRING (30 10, 10 30, 40 40)")
    assert isinstance(line_string, LineString)
    assert line_string.num_coords == 3
    assert list(line_string) == [(30, 10), (10, 30), (40, 40)]
    assert line_string.get_x(1) == 10
    assert line_string.get_y(2) == 40


def test_parse_line_string_comma_whitespace_is_optional():
    assert _parse("LINESTRING (30 10,10 30, 40 40)") == LineString(
        [30, 10, 10, 30, 40, 40]
    )


def test_parse_multi_line_string():
    multi_line_string = _parse("MultiLineString ((10 10, 20 20), (15 15, 30 15))")
    assert isinstance(multi_line_string, MultiLineString)
    assert len(multi_line_string) == 2
    assert list(multi_line_string[0]) == [(10, 10), (20, 20)]
    assert list(multi_line_string[1]) == [(15, 15), (30, 15)]


def test_parse_polygon():
    polygon = _parse("POLYGON ((0.5 0.5,5 0,5 5,0 5,0.5 0.5),(1.5 1,4 3,4 1,1.5 1))")
    assert isinstance(polygon, Polygon)
    assert not polygon.is_empty
    assert polygon.outer.num_coords == 5
    assert list(polygon.outer) == [(0.5, 0.5), (5, 0), (5, 5), (0, 5), (0.5, 0.5)]
    assert polygon.num_holes == 1
    assert list(polygon.get_hole(0)) == [(1.5, 1), (4, 3), (4, 1), (1.5, 1)]


def test_parse_polygon_without_holes():
    polygon = _parse("POLYGON ((0 0, 1 0, 1 1, 0 0))")
    assert polygon.num_holes == 0
    assert polygon.outer.num_coords == 4


def test_parse_multi_polygon():
    multi_polygon = _parse(
        "MULTIPOLYGON(((0 1,3 0,4 3,0 4,0 1)), ((3.66 4.44,6 3,555.15 -551.09,3.66 4.44)), ((0 0,-1 -2,-3 -2,-2 -1,0 0)))"
    )
    assert isinstance(multi_polygon, MultiPolygon)
    assert len(multi_polygon) == 3
    assert list(multi_polygon[0].outer) == [(0, 1), (3, 0), (4, 3), (0, 4), (0, 1)]
    assert list(multi_polygon[1].outer) == [
        (3.66, 4.44),
        (6, 3),
        (555.15, -551.09),
        (3.66, 4.44),
    ]
    assert list(multi_polygon[2].outer) == [
        (0, 0),
        (-1, -2),
        (-3, -2),
        (-2, -1),
        (0, 0),
    ]
    assert all(p.num_holes == 0 for p in multi_polygon)


def test_parse_geometry_collection():
    collection = _parse("GEOMETRYCOLLECTION (POINT (-4 -6), LINESTRING(4 6, 7 10))")
    assert isinstance(collection, GeometryCollection)
    assert len(collection) == 2
    assert collection[0] == Point(-4, -6)
    assert isinstance(collection[1], LineString)
    assert list(collection[1]) == [(4, 6), (7, 10)]


def test_parse_nested_geometry_collection():
    collection = _parse(
        "GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (POINT (1 2)), MULTIPOINT EMPTY, POLYGON EMPTY)"
    )
    assert collection == GeometryCollection(
        [GeometryCollection([Point(1, 2)]), MultiPoint(), Polygon()]
    )


def test_parse_preserves_order():
    multi_point = _parse("MULTIPOINT ((3 3), (1 1), (2 2), (1 1))")
    assert [(p.x, p.y) for p in multi_point] == [(3, 3), (1, 1), (2, 2), (1, 1)]


@pytest.mark.parametrize(
    "wkt",
    [
        pytest.param("", id="no-tokens"),
        pytest.param(" POINT (1 2)", id="leading-whitespace"),
        pytest.param("EMPTY", id="no-tag"),
        pytest.param("POINTEMPTY", id="no-space-before-empty"),
        pytest.param("(1 2)", id="no-tag-list"),
        pytest.param("POINT", id="tag-only"),
        pytest.param("POINT (1 2) POINT (3 4)", id="two-geometries"),
        pytest.param("POINT (1 2) ", id="trailing-whitespace"),
        pytest.param("POINT (1 2) EXTRA", id="trailing-word"),
        pytest.param("POINT (1)", id="one-number"),
        pytest.param("POINT ()", id="no-numbers"),
        pytest.param("POINT (1 2 3)", id="three-numbers"),
        pytest.param("POINT (1  2)", id="two-spaces"),
        pytest.param("POINT (1,2)", id="comma-in-coordinate"),
        pytest.param("POINT (1 2", id="unclosed"),
        pytest.param("POINT 1 2", id="no-brackets"),
        pytest.param("POINT  (1 2)", id="two-spaces-after-tag"),
        pytest.param("LINESTRING (1 2, 3)", id="short-coordinate"),
        pytest.param("LINESTRING (1 2 , 3 4)", id="space-before-comma"),
        pytest.param("LINESTRING (1 2,  3 4)", id="two-spaces-after-comma"),
        pytest.param("LINESTRING (1 2 3 4)", id="missing-comma"),
        pytest.param("LINESTRING (1 2,)", id="trailing-comma"),
        pytest.param("LINESTRING ()", id="empty-list"),
        pytest.param("POLYGON ()", id="empty-polygon-list"),
        pytest.param("MULTIPOINT ((1 2)(3 4))", id="missing-comma-between-points"),
        pytest.param("MULTIPOLYGON ((0 0, 1 1))", id="missing-ring-brackets"),
        pytest.param("GEOMETRYCOLLECTION ((1 2))", id="untagged-collection-element"),
        pytest.param("GEOMETRYCOLLECTION (EMPTY)", id="collection-element-empty"),
    ],
)
def test_parse_error(wkt):
    with pytest.raises(ParseError):
        _parse(wkt)


def test_parse_error_reports_token():
    with pytest.raises(ParseError) as e:
        _parse("LINESTRING (1 2, 3 4))")
    assert e.value.token.kind is CloseBracket
    assert e.value.token.start_offset == 21
    assert "after the end of the geometry" in str(e.value)


def test_parse_error_reports_expected_kind():
    with pytest.raises(ParseError) as e:
        _parse("POINT (( 2)")
    assert "expected NUMBER" in str(e.value)
    assert e.value.token.start_offset == 7


def test_parse_error_when_input_ends():
    with pytest.raises(ParseError) as e:
        _parse("POLYGON ((0 0, 1 1)")
    assert "input ended" in str(e.value)
    assert e.value.token is None


def test_parser_does_not_modify_tokens():
    tokens = tokenize("MULTIPOINT ((1 2), (3 4))")
    parser = WKTParser(tokens)
    parser.parse()
    assert parser.tokens == tokens
    assert tokens[-1].kind is CloseBracket
    assert tokens[4].kind is Number


def _nested_collection_wkt(depth):
    """WKT with `depth` geometry tags open at the innermost point."""
    return (
        "GEOMETRYCOLLECTION (" * (depth - 1) + "POINT (1 2)" + ")" * (depth - 1)
    )


def test_parse_deeply_nested_geometry_collection():
    geometry = _parse(_nested_collection_wkt(MAX_NESTING_DEPTH))
    for _ in range(MAX_NESTING_DEPTH - 1):
        assert isinstance(geometry, GeometryCollection)
        assert len(geometry) == 1
        geometry = geometry[0]
    assert geometry == Point(1, 2)


@pytest.mark.parametrize(
    "wkt",
    [
        pytest.param(_nested_collection_wkt(MAX_NESTING_DEPTH + 1), id="too-deep"),
        pytest.param("GEOMETRYCOLLECTION (" * 2000, id="unclosed-and-too-deep"),
    ],
)
def test_parse_error_nested_too_deeply(wkt):
    with pytest.raises(ParseError) as e:
        _parse(wkt)
    assert f"nested more than {MAX_NESTING_DEPTH} deep" in str(e.value)
    assert e.value.token.kind in GEOMETRY_TAGS
