from collections import namedtuple

from pygments.token import Keyword, Punctuation
from pygments.token import Number as _Number
from pygments.token import Whitespace as _Whitespace

# Token kinds are pygments token types, so that whole families of tokens can be
# matched with `in` - eg `kind in GeometryTag`.
GeometryTag = Keyword.Geometry

PointTag = GeometryTag.Point
MultiPointTag = GeometryTag.MultiPoint
LineStringTag = GeometryTag.LineString
MultiLineStringTag = GeometryTag.MultiLineString
PolygonTag = GeometryTag.Polygon
MultiPolygonTag = GeometryTag.MultiPolygon
GeometryCollectionTag = GeometryTag.GeometryCollection

Empty = Keyword.Empty
OpenBracket = Punctuation.OpenBracket
CloseBracket = Punctuation.CloseBracket
Comma = Punctuation.Comma
Number = _Number
Whitespace = _Whitespace


def _keyword(word):
    # \b on both sides, so that eg POINT is never found inside MULTIPOINT.
    return rf"\b{word}\b"


# The recognition rule for each kind, in priority order.
# Rules are always matched at a specific offset, never searched for.
TOKEN_RULES = (
    (_keyword("POINT"), PointTag),
    (_keyword("MULTIPOINT"), MultiPointTag),
    (_keyword("LINESTRING"), LineStringTag),
    (_keyword("MULTILINESTRING"), MultiLineStringTag),
    (_keyword("POLYGON"), PolygonTag),
    (_keyword("MULTIPOLYGON"), MultiPolygonTag),
    (_keyword("GEOMETRYCOLLECTION"), GeometryCollectionTag),
    (_keyword("EMPTY"), Empty),
    (r"\(", OpenBracket),
    (r"\)", CloseBracket),
    (r",", Comma),
    (r"-?[0-9]+(\.[0-9]+)?", Number),
    # Exactly one whitespace character per token.
    (r"\s", Whitespace),
)

GEOMETRY_TAGS = (
    PointTag,
    MultiPointTag,
    LineStringTag,
    MultiLineStringTag,
    PolygonTag,
    MultiPolygonTag,
    GeometryCollectionTag,
)

KIND_NAMES = {
    PointTag: "POINT",
    MultiPointTag: "MULTIPOINT",
    LineStringTag: "LINESTRING",
    MultiLineStringTag: "MULTILINESTRING",
    PolygonTag: "POLYGON",
    MultiPolygonTag: "MULTIPOLYGON",
    GeometryCollectionTag: "GEOMETRYCOLLECTION",
    Empty: "EMPTY",
    OpenBracket: "LEFT_PAREN",
    CloseBracket: "RIGHT_PAREN",
    Comma: "COMMA",
    Number: "NUMBER",
    Whitespace: "WHITESPACE",
}


def kind_name(kind):
    """Returns the display name of a token kind, eg "LEFT_PAREN"."""
    return KIND_NAMES.get(kind, str(kind))


class Token(namedtuple("Token", ("kind", "lexeme", "end_offset"))):
    """
    A single lexical token.
    kind - one of the token kinds above.
    lexeme - the exact text that was matched.
    end_offset - the position in the input immediately after the lexeme.
    """

    __slots__ = ()

    @property
    def start_offset(self):
        return self.end_offset - len(self.lexeme)

    def __str__(self):
        return f"{kind_name(self.kind)} {self.lexeme!r} at offset {self.start_offset}"
