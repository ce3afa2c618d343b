import logging

from .exceptions import ParseError
from .geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .wkt_tokens import (
    CloseBracket,
    Comma,
    Empty,
    GeometryCollectionTag,
    LineStringTag,
    MultiLineStringTag,
    MultiPointTag,
    MultiPolygonTag,
    Number,
    OpenBracket,
    PointTag,
    PolygonTag,
    Whitespace,
    kind_name,
)

L = logging.getLogger("wktio.wkt_parser")

# NUMBER WHITESPACE NUMBER
COORDINATE_TOKEN_COUNT = 3

# How many geometry tags can be open at once, eg "GEOMETRYCOLLECTION (POINT (1 2))" is 2.
# Each level costs a few stack frames, so this keeps well clear of Python's recursion limit.
MAX_NESTING_DEPTH = 100


class WKTParser:
    """
    Recursive descent parser that turns a sequence of WKT tokens into a Geometry.
    The tokens themselves are never modified - the parser just moves a cursor along them.
    A parser is good for a single parse() call.
    """

    # Which method parses the text that follows each geometry tag.
    TAGGED_TEXT_PARSERS = {
        PointTag: "_parse_point_text",
        MultiPointTag: "_parse_multi_point_text",
        LineStringTag: "_parse_line_string_text",
        MultiLineStringTag: "_parse_multi_line_string_text",
        PolygonTag: "_parse_polygon_text",
        MultiPolygonTag: "_parse_multi_polygon_text",
        GeometryCollectionTag: "_parse_geometry_collection_text",
    }

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.pos = 0
        self.depth = 0

    def parse(self):
        geometry = self._parse_geometry_tagged_text()
        if self.pos < len(self.tokens):
            raise ParseError(
                f"Invalid WKT: unexpected {self._peek()} after the end of the geometry",
                token=self._peek(),
            )
        L.debug(
            "Parsed %s from %d tokens", geometry.geometry_type.wkt_tag, len(self.tokens)
        )
        return geometry

    # Cursor handling:

    def _remaining(self):
        return len(self.tokens) - self.pos

    def _peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next_is(self, kind):
        token = self._peek()
        return token is not None and token.kind is kind

    def _consume(self, kind):
        """Consumes the next token, which must be of the given kind."""
        token = self._peek()
        if token is None:
            raise ParseError(
                f"Invalid WKT: expected {kind_name(kind)} but the input ended"
            )
        if token.kind is not kind:
            raise ParseError(
                f"Invalid WKT: expected {kind_name(kind)}, got {token}", token=token
            )
        self.pos += 1
        return token

    def _consume_if(self, kind):
        """Consumes the next token only if it is of the given kind. Returns True if it was."""
        if self._next_is(kind):
            self.pos += 1
            return True
        return False

    # Grammar:

    def _parse_geometry_tagged_text(self):
        token = self._peek()
        if token is None:
            raise ParseError("Invalid WKT: expected a geometry tag but the input ended")

        method_name = self.TAGGED_TEXT_PARSERS.get(token.kind)
        if method_name is None:
            raise ParseError(
                f"Invalid WKT: expected a geometry tag, got {token}", token=token
            )

        if self.depth >= MAX_NESTING_DEPTH:
            raise ParseError(
                f"Invalid WKT: geometry nested more than {MAX_NESTING_DEPTH} deep at {token}",
                token=token,
            )

        self._consume(token.kind)
        self._consume_if(Whitespace)
        self.depth += 1
        geometry = getattr(self, method_name)()
        self.depth -= 1
        return geometry

    def _parse_list(self, parse_element):
        """
        Parses "(" element { "," [whitespace] element } ")" and returns the elements.
        An empty list "()" is not allowed - the EMPTY keyword is the only way to write an empty geometry.
        """
        self._consume(OpenBracket)
        if self._next_is(CloseBracket):
            raise ParseError(
                f"Invalid WKT: empty list at {self._peek()}, use EMPTY instead",
                token=self._peek(),
            )

        elements = [parse_element()]
        while self._consume_if(Comma):
            self._consume_if(Whitespace)
            elements.append(parse_element())

        self._consume(CloseBracket)
        return elements

    def _parse_coordinate(self):
        if self._remaining() < COORDINATE_TOKEN_COUNT:
            token = self._peek()
            raise ParseError(
                "Invalid WKT: missing or malformed coordinates"
                + (f" at {token}" if token is not None else ""),
                token=token,
            )

        x = self._consume(Number)
        self._consume(Whitespace)
        y = self._consume(Number)
        return float(x.lexeme), float(y.lexeme)

    def _parse_point_text(self):
        if self._consume_if(Empty):
            return Point()

        self._consume(OpenBracket)
        x, y = self._parse_coordinate()
        self._consume(CloseBracket)
        return Point(x, y)

    def _parse_multi_point_element(self):
        # Accepts the bare form too: MULTIPOINT (1 2, 3 4)
        if self._next_is(Number):
            return Point(*self._parse_coordinate())
        return self._parse_point_text()

    def _parse_multi_point_text(self):
        if self._consume_if(Empty):
            return MultiPoint()
        return MultiPoint(self._parse_list(self._parse_multi_point_element))

    def _parse_line_string_text(self):
        if self._consume_if(Empty):
            return LineString()
        coordinates = self._parse_list(self._parse_coordinate)
        return LineString([ordinate for xy in coordinates for ordinate in xy])

    def _parse_multi_line_string_text(self):
        if self._consume_if(Empty):
            return MultiLineString()
        return MultiLineString(self._parse_list(self._parse_line_string_text))

    def _parse_polygon_text(self):
        if self._consume_if(Empty):
            return Polygon()
        outer, *holes = self._parse_list(self._parse_line_string_text)
        return Polygon(outer, holes)

    def _parse_multi_polygon_text(self):
        if self._consume_if(Empty):
            return MultiPolygon()
        return MultiPolygon(self._parse_list(self._parse_polygon_text))

    def _parse_geometry_collection_text(self):
        if self._consume_if(Empty):
            return GeometryCollection()
        return GeometryCollection(self._parse_list(self._parse_geometry_tagged_text))


def parse(tokens):
    """Parses a sequence of WKT tokens into a Geometry. Raises ParseError if they aren't valid WKT."""
    return WKTParser(tokens).parse()
