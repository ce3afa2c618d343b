from enum import Enum


class GeometryType(str, Enum):
    """The discriminant of every geometry class. The value is the WKT tag."""

    POINT = "POINT"
    MULTIPOINT = "MULTIPOINT"
    LINESTRING = "LINESTRING"
    MULTILINESTRING = "MULTILINESTRING"
    POLYGON = "POLYGON"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"

    @property
    def wkt_tag(self):
        return self.value


class Geometry:
    """
    Base class of the seven geometry variants.
    Geometries are never modified once constructed.
    """

    geometry_type = None

    @property
    def is_empty(self):
        raise NotImplementedError()

    def _key(self):
        raise NotImplementedError()

    def __eq__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return (
            self.geometry_type == other.geometry_type and self._key() == other._key()
        )

    def __hash__(self):
        return hash((self.geometry_type, self._key()))

    def __str__(self):
        return self.to_wkt()

    def to_wkt(self):
        from .wkt_writer import write

        return write(self)

    @classmethod
    def from_wkt(cls, wkt):
        """
        Parses the given WKT. When called on a subclass, the WKT must describe
        a geometry of that type.
        """
        from .wkt import read

        geom = read(wkt)
        if not isinstance(geom, cls):
            raise TypeError(
                f"Expected {cls.__name__} WKT, got {geom.geometry_type.wkt_tag}"
            )
        return geom


class Point(Geometry):
    geometry_type = GeometryType.POINT

    def __init__(self, x=None, y=None):
        if (x is None) != (y is None):
            raise ValueError("Point needs both x and y, or neither")
        self._coords = None if x is None else (float(x), float(y))

    @property
    def is_empty(self):
        return self._coords is None

    @property
    def x(self):
        return None if self._coords is None else self._coords[0]

    @property
    def y(self):
        return None if self._coords is None else self._coords[1]

    def _key(self):
        return self._coords

    def __repr__(self):
        if self.is_empty:
            return "Point()"
        return f"Point({self.x!r}, {self.y!r})"


class LineString(Geometry):
    """
    An ordered sequence of coordinates, stored as a flat sequence of ordinates:
    [x0, y0, x1, y1, ...]
    If the flat sequence has an odd length, the final unpaired ordinate is not part
    of any coordinate.
    """

    geometry_type = GeometryType.LINESTRING

    def __init__(self, coords=None):
        self._ordinates = () if coords is None else tuple(float(c) for c in coords)

    @classmethod
    def from_points(cls, points):
        """Builds a LineString from an iterable of (x, y) pairs or Points."""
        ordinates = []
        for point in points:
            if isinstance(point, Point):
                point = (point.x, point.y)
            x, y = point
            ordinates.extend((x, y))
        return cls(ordinates)

    @property
    def ordinates(self):
        return self._ordinates

    @property
    def num_coords(self):
        return len(self._ordinates) // 2

    @property
    def has_unpaired_ordinate(self):
        return len(self._ordinates) % 2 == 1

    @property
    def is_empty(self):
        return self.num_coords == 0

    def get_x(self, i):
        return self._ordinates[2 * self._check_index(i)]

    def get_y(self, i):
        return self._ordinates[2 * self._check_index(i) + 1]

    def _check_index(self, i):
        if not 0 <= i < self.num_coords:
            raise IndexError(f"Coordinate index {i} out of range")
        return i

    def __iter__(self):
        for i in range(self.num_coords):
            yield self._ordinates[2 * i], self._ordinates[2 * i + 1]

    def __len__(self):
        return self.num_coords

    def _key(self):
        return tuple(self)

    def __repr__(self):
        return f"LineString({list(self._ordinates)!r})"


class Polygon(Geometry):
    """An outer ring plus zero or more holes. Each ring is a LineString."""

    geometry_type = GeometryType.POLYGON

    def __init__(self, outer=None, holes=()):
        if outer is None and holes:
            raise ValueError("Polygon with holes needs an outer ring")
        for ring in (outer, *holes):
            if ring is not None and not isinstance(ring, LineString):
                raise TypeError(f"Polygon rings must be LineStrings, got {ring!r}")
        self._outer = outer
        self._holes = tuple(holes)

    @property
    def is_empty(self):
        return self._outer is None

    @property
    def outer(self):
        return self._outer

    @property
    def holes(self):
        return self._holes

    @property
    def num_holes(self):
        return len(self._holes)

    def get_hole(self, i):
        return self._holes[i]

    @property
    def rings(self):
        if self._outer is None:
            return ()
        return (self._outer, *self._holes)

    def _key(self):
        return self.rings

    def __repr__(self):
        if self.is_empty:
            return "Polygon()"
        return f"Polygon({self._outer!r}, {list(self._holes)!r})"


class GeometryCollection(Geometry):
    """
    An ordered sequence of geometries of any type.
    The Multi* subclasses restrict the element type.
    """

    geometry_type = GeometryType.GEOMETRYCOLLECTION
    element_type = Geometry

    def __init__(self, geometries=None):
        geometries = () if geometries is None else tuple(geometries)
        for geom in geometries:
            if not isinstance(geom, self.element_type):
                raise TypeError(
                    f"{self.__class__.__name__} can't contain {geom!r}: "
                    f"expected {self.element_type.__name__}"
                )
        self._geometries = geometries

    @property
    def is_empty(self):
        return not self._geometries

    @property
    def is_homogeneous(self):
        """True for the Multi* types, whose elements are written without a tag."""
        return self.element_type is not Geometry

    def __len__(self):
        return len(self._geometries)

    def __getitem__(self, i):
        return self._geometries[i]

    def __iter__(self):
        return iter(self._geometries)

    def _key(self):
        return self._geometries

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._geometries)!r})"


class MultiPoint(GeometryCollection):
    geometry_type = GeometryType.MULTIPOINT
    element_type = Point


class MultiLineString(GeometryCollection):
    geometry_type = GeometryType.MULTILINESTRING
    element_type = LineString


class MultiPolygon(GeometryCollection):
    geometry_type = GeometryType.MULTIPOLYGON
    element_type = Polygon


GEOMETRY_CLASSES = {
    cls.geometry_type: cls
    for cls in (
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    )
}
