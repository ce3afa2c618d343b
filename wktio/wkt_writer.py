import decimal
import io
import logging
import math

from . import config
from .exceptions import GeometryError, InternalError
from .geometry import GEOMETRY_CLASSES, GeometryType

L = logging.getLogger("wktio.wkt_writer")

EMPTY = "EMPTY"
SEPARATOR = ", "

ONE_DECIMAL_PLACE = decimal.Decimal("0.1")
# Enough precision to quantize even the largest float to one decimal place.
_DECIMAL_CONTEXT = decimal.Context(prec=400, rounding=decimal.ROUND_HALF_UP)


def format_ordinate(value):
    """
    Formats an ordinate with exactly one digit after the decimal point, eg 1 -> "1.0".
    Rounds half-up, based on the shortest decimal representation of the float,
    so 0.25 -> "0.3" and 0.15 -> "0.2".
    """
    if not math.isfinite(value):
        return repr(float(value))
    d = decimal.Decimal(repr(float(value)))
    return f"{d.quantize(ONE_DECIMAL_PLACE, context=_DECIMAL_CONTEXT):f}"


class WKTWriter:
    """
    Writes Geometry objects as well-known text.
    >>> WKTWriter().write(LineString([30, 10, 10, 30, 40, 40]))
    'LINESTRING (30.0 10.0, 10.0 30.0, 40.0 40.0)'

    Collections can be nested to any depth: nested geometries are expanded from a
    stack of pending parts, not by recursion.

    strict - if True, a LineString with an unpaired trailing ordinate is an error, as is
        an ordinate that is NaN or infinite. Otherwise the unpaired ordinate is dropped,
        the non-finite ordinate is written as-is, and a warning is logged.
        Defaults to the WKTIO_STRICT_LINESTRINGS environment variable.
    """

    # Which method writes the text that follows the tag, for each type of non-empty geometry.
    # Each appends its output to a list of parts: strings, or (geometry, tagged) pairs
    # for nested geometries that are still to be written.
    TEXT_WRITERS = {
        GeometryType.POINT: "_write_point_text",
        GeometryType.MULTIPOINT: "_write_collection_text",
        GeometryType.LINESTRING: "_write_line_string_text",
        GeometryType.MULTILINESTRING: "_write_collection_text",
        GeometryType.POLYGON: "_write_polygon_text",
        GeometryType.MULTIPOLYGON: "_write_collection_text",
        GeometryType.GEOMETRYCOLLECTION: "_write_collection_text",
    }

    def __init__(self, strict=None):
        if strict is None:
            strict = config.strict_linestrings()
        self.strict = strict

    def write(self, geometry):
        # The buffer only lives as long as this call.
        with io.StringIO() as fp:
            pending = [(geometry, True)]
            while pending:
                part = pending.pop()
                if isinstance(part, str):
                    fp.write(part)
                    continue
                parts = []
                self._write_geometry_text(parts, *part)
                pending.extend(reversed(parts))
            return fp.getvalue()

    def _geometry_type(self, geometry):
        geometry_type = getattr(geometry, "geometry_type", None)
        if geometry_type not in self.TEXT_WRITERS or not isinstance(
            geometry, GEOMETRY_CLASSES[geometry_type]
        ):
            raise InternalError(
                f"Unexpected geometry class: {type(geometry).__name__}"
            )
        return geometry_type

    def _write_geometry_text(self, parts, geometry, tagged):
        geometry_type = self._geometry_type(geometry)
        if tagged:
            parts.append(geometry_type.wkt_tag)
            parts.append(" ")
        if geometry.is_empty:
            if geometry_type is GeometryType.LINESTRING:
                self._check_ordinates(geometry)
            parts.append(EMPTY)
            return

        getattr(self, self.TEXT_WRITERS[geometry_type])(parts, geometry)

    def _check_ordinates(self, line_string):
        if not line_string.has_unpaired_ordinate:
            return
        if self.strict:
            raise GeometryError(
                f"LineString has an odd number of ordinates ({len(line_string.ordinates)})"
            )
        L.warning(
            "Dropping unpaired ordinate %r from LineString with %d ordinates",
            line_string.ordinates[-1],
            len(line_string.ordinates),
        )

    def _write_coordinate(self, parts, x, y):
        for value in (x, y):
            if not math.isfinite(value):
                if self.strict:
                    raise GeometryError(f"Can't write non-finite ordinate {value!r}")
                L.warning(
                    "Writing non-finite ordinate %r, which can't be read back", value
                )
        parts.append(f"{format_ordinate(x)} {format_ordinate(y)}")

    def _write_point_text(self, parts, point):
        parts.append("(")
        self._write_coordinate(parts, point.x, point.y)
        parts.append(")")

    def _write_line_string_text(self, parts, line_string):
        self._check_ordinates(line_string)
        if line_string.num_coords == 0:
            parts.append(EMPTY)
            return

        parts.append("(")
        for i, (x, y) in enumerate(line_string):
            if i > 0:
                parts.append(SEPARATOR)
            self._write_coordinate(parts, x, y)
        parts.append(")")

    def _write_polygon_text(self, parts, polygon):
        parts.append("(")
        self._write_line_string_text(parts, polygon.outer)
        for hole in polygon.holes:
            parts.append(SEPARATOR)
            self._write_line_string_text(parts, hole)
        parts.append(")")

    def _write_collection_text(self, parts, collection):
        # Multi* elements are all the same type, so they don't repeat the tag.
        tagged = not collection.is_homogeneous

        parts.append("(")
        for i, geometry in enumerate(collection):
            if i > 0:
                parts.append(SEPARATOR)
            parts.append((geometry, tagged))
        parts.append(")")


def write(geometry, strict=None):
    """Returns the given Geometry as well-known text."""
    return WKTWriter(strict=strict).write(geometry)
