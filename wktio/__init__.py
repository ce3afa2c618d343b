__all__ = (
    "read",
    "write",
    "Geometry",
    "GeometryType",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "WKTError",
    "TokenizationError",
    "ParseError",
    "GeometryError",
    "InternalError",
    "get_version",
    "package_data_path",
)

import os

from .exceptions import (
    GeometryError,
    InternalError,
    ParseError,
    TokenizationError,
    WKTError,
)
from .geometry import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .wkt import read, write


package_data_path = os.path.split(__file__)[0]


def get_version():
    with open(os.path.join(package_data_path, "VERSION")) as version_file:
        return version_file.read().strip()
