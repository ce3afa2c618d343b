from .wkt_lexer import tokenize
from .wkt_parser import parse
from .wkt_writer import write


def read(wkt):
    """
    Transforms the given well-known text into a Geometry object, eg:
    >>> read("POINT (4 -6)")
    Point(4.0, -6.0)

    Raises TokenizationError or ParseError if the text isn't valid WKT.
    """
    if not isinstance(wkt, str):
        raise TypeError(f"Expected WKT as str, got {type(wkt).__name__}")
    return parse(tokenize(wkt))


__all__ = ("read", "write")
