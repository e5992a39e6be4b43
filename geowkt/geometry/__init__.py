"""Layout-aware geometry model produced by the WKT decoder.

Every geometry is created empty for a given :class:`Layout` and then receives
its coordinates through ``set_coords``, which validates the nesting depth and
the number of ordinates of each coordinate against the layout stride.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Iterable, Sequence

Coordinate = tuple[float, ...]
Dim1 = list[Coordinate]
Dim2 = list[Dim1]
Dim3 = list[Dim2]


class ShapeError(ValueError):
    """Raised when coordinates do not fit the geometry or its layout."""


class Layout(Enum):
    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"

    @property
    def stride(self) -> int:
        """Number of ordinates per coordinate."""
        return len(self.value)

    @property
    def has_z(self) -> bool:
        return "Z" in self.value

    @property
    def has_m(self) -> bool:
        return "M" in self.value


def _coordinate(values: Iterable[float], layout: Layout) -> Coordinate:
    try:
        coord = tuple(float(value) for value in values)
    except (TypeError, ValueError) as exc:
        raise ShapeError(f"Coordinate must be a sequence of numbers, got {values!r}") from exc
    if len(coord) != layout.stride:
        raise ShapeError(
            f"Coordinate {coord!r} has {len(coord)} ordinates, layout {layout.value} expects {layout.stride}"
        )
    return coord


def _dim1(coords: Iterable[Sequence[float]], layout: Layout) -> Dim1:
    return [_coordinate(coord, layout) for coord in coords]


def _dim2(coords: Iterable[Iterable[Sequence[float]]], layout: Layout) -> Dim2:
    return [_dim1(line, layout) for line in coords]


def _dim3(coords: Iterable[Iterable[Iterable[Sequence[float]]]], layout: Layout) -> Dim3:
    return [_dim2(polygon, layout) for polygon in coords]


def _planar(coord: Coordinate, layout: Layout) -> Coordinate:
    # The measure is always the last ordinate.
    if layout.has_m:
        return coord[:-1]
    return coord


class BaseGeometry:
    """Common behaviour shared by all decoded geometries."""

    geom_type: ClassVar[str] = "Geometry"

    def __init__(self, layout: Layout = Layout.XY):
        if not isinstance(layout, Layout):
            raise TypeError(f"layout must be a Layout member, got {layout!r}")
        self._layout = layout

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def stride(self) -> int:
        return self.layout.stride

    @property
    def coords(self) -> Any:
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        return len(self.coords) == 0

    def _geo_coordinates(self) -> Any:
        raise NotImplementedError

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {"type": self.geom_type, "coordinates": self._geo_coordinates()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseGeometry):
            return NotImplemented
        return type(self) is type(other) and self.layout is other.layout and self.coords == other.coords

    def __repr__(self) -> str:
        if self.is_empty:
            return f"<{self.geom_type} {self.layout.value} EMPTY>"
        return f"<{self.geom_type} {self.layout.value} {self.coords!r}>"


class Point(BaseGeometry):
    geom_type = "Point"

    def __init__(self, layout: Layout = Layout.XY):
        super().__init__(layout)
        self._coords: Coordinate = ()

    def set_coords(self, coords: Sequence[float]) -> "Point":
        self._coords = _coordinate(coords, self.layout)
        return self

    @property
    def coords(self) -> Coordinate:
        return self._coords

    @property
    def x(self) -> float:
        return self._ordinate(0)

    @property
    def y(self) -> float:
        return self._ordinate(1)

    @property
    def z(self) -> float | None:
        return self._ordinate(2) if self.layout.has_z else None

    @property
    def m(self) -> float | None:
        return self._ordinate(-1) if self.layout.has_m else None

    def _ordinate(self, index: int) -> float:
        if self.is_empty:
            raise ValueError("Empty point has no ordinates")
        return self._coords[index]

    def _geo_coordinates(self) -> Coordinate:
        if self.is_empty:
            return ()
        return _planar(self._coords, self.layout)


class LineString(BaseGeometry):
    geom_type = "LineString"

    def __init__(self, layout: Layout = Layout.XY):
        super().__init__(layout)
        self._coords: Dim1 = []

    def set_coords(self, coords: Iterable[Sequence[float]]) -> "LineString":
        self._coords = _dim1(coords, self.layout)
        return self

    @property
    def coords(self) -> Dim1:
        return list(self._coords)

    @property
    def is_closed(self) -> bool:
        return bool(self._coords) and self._coords[0] == self._coords[-1]

    def _geo_coordinates(self) -> list[Coordinate]:
        return [_planar(coord, self.layout) for coord in self._coords]


class LinearRing(LineString):
    """A line string whose first and last coordinates are equal."""

    geom_type = "LinearRing"


class Polygon(BaseGeometry):
    geom_type = "Polygon"

    def __init__(self, layout: Layout = Layout.XY):
        super().__init__(layout)
        self._rings: Dim2 = []

    def set_coords(self, coords: Iterable[Iterable[Sequence[float]]]) -> "Polygon":
        self._rings = _dim2(coords, self.layout)
        return self

    @property
    def coords(self) -> Dim2:
        return [list(ring) for ring in self._rings]

    @property
    def exterior(self) -> LinearRing | None:
        if not self._rings:
            return None
        return LinearRing(self.layout).set_coords(self._rings[0])

    @property
    def interiors(self) -> list[LinearRing]:
        return [LinearRing(self.layout).set_coords(ring) for ring in self._rings[1:]]

    def _geo_coordinates(self) -> list[list[Coordinate]]:
        return [[_planar(coord, self.layout) for coord in ring] for ring in self._rings]


class MultiPoint(BaseGeometry):
    geom_type = "MultiPoint"

    def __init__(self, layout: Layout = Layout.XY):
        super().__init__(layout)
        self._coords: Dim1 = []

    def set_coords(self, coords: Iterable[Sequence[float]]) -> "MultiPoint":
        self._coords = _dim1(coords, self.layout)
        return self

    @property
    def coords(self) -> Dim1:
        return list(self._coords)

    @property
    def geoms(self) -> list[Point]:
        return [Point(self.layout).set_coords(coord) for coord in self._coords]

    def _geo_coordinates(self) -> list[Coordinate]:
        return [_planar(coord, self.layout) for coord in self._coords]


class MultiLineString(BaseGeometry):
    geom_type = "MultiLineString"

    def __init__(self, layout: Layout = Layout.XY):
        super().__init__(layout)
        self._lines: Dim2 = []

    def set_coords(self, coords: Iterable[Iterable[Sequence[float]]]) -> "MultiLineString":
        self._lines = _dim2(coords, self.layout)
        return self

    @property
    def coords(self) -> Dim2:
        return [list(line) for line in self._lines]

    @property
    def geoms(self) -> list[LineString]:
        return [LineString(self.layout).set_coords(line) for line in self._lines]

    def _geo_coordinates(self) -> list[list[Coordinate]]:
        return [[_planar(coord, self.layout) for coord in line] for line in self._lines]


class MultiPolygon(BaseGeometry):
    geom_type = "MultiPolygon"

    def __init__(self, layout: Layout = Layout.XY):
        super().__init__(layout)
        self._polygons: Dim3 = []

    def set_coords(self, coords: Iterable[Iterable[Iterable[Sequence[float]]]]) -> "MultiPolygon":
        self._polygons = _dim3(coords, self.layout)
        return self

    @property
    def coords(self) -> Dim3:
        return [[list(ring) for ring in polygon] for polygon in self._polygons]

    @property
    def geoms(self) -> list[Polygon]:
        return [Polygon(self.layout).set_coords(polygon) for polygon in self._polygons]

    def _geo_coordinates(self) -> list[list[list[Coordinate]]]:
        return [
            [[_planar(coord, self.layout) for coord in ring] for ring in polygon]
            for polygon in self._polygons
        ]


class GeometryCollection(BaseGeometry):
    """Ordered, possibly nested, collection of geometries sharing one layout.

    When ``layout`` is omitted the collection adopts the layout of its first
    member; an empty collection without a layout reports ``Layout.XY``.
    """

    geom_type = "GeometryCollection"

    def __init__(self, layout: Layout | None = None):
        super().__init__(layout or Layout.XY)
        self._explicit_layout = layout is not None
        self._geoms: list[BaseGeometry] = []

    @property
    def layout(self) -> Layout:
        if not self._explicit_layout and self._geoms:
            return self._geoms[0].layout
        return self._layout

    def push(self, geom: BaseGeometry) -> "GeometryCollection":
        if not isinstance(geom, BaseGeometry):
            raise TypeError(f"Only geometries can be added to a collection, got {geom!r}")
        if (self._explicit_layout or self._geoms) and geom.layout is not self.layout:
            raise ShapeError(
                f"{geom.geom_type} with layout {geom.layout.value} cannot join a "
                f"{self.layout.value} geometry collection"
            )
        self._geoms.append(geom)
        return self

    @property
    def geoms(self) -> list[BaseGeometry]:
        return list(self._geoms)

    @property
    def coords(self) -> list[Any]:
        return [geom.coords for geom in self._geoms]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseGeometry):
            return NotImplemented
        return isinstance(other, GeometryCollection) and self.layout is other.layout and self._geoms == other._geoms

    def __repr__(self) -> str:
        if self.is_empty:
            return f"<{self.geom_type} {self.layout.value} EMPTY>"
        return f"<{self.geom_type} {self.layout.value} {self._geoms!r}>"

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "geometries": [geom.__geo_interface__ for geom in self._geoms],
        }


def mapping(geometry: BaseGeometry) -> dict[str, Any]:
    """Return the GeoJSON-like mapping of ``geometry`` (measures dropped)."""

    data = getattr(geometry, "__geo_interface__", None)
    if isinstance(data, dict):
        return data
    raise TypeError("geometry must expose the __geo_interface__ protocol")


__all__ = [
    "BaseGeometry",
    "Coordinate",
    "Dim1",
    "Dim2",
    "Dim3",
    "GeometryCollection",
    "Layout",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "ShapeError",
    "mapping",
]
