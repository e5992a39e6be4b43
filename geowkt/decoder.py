"""Decode WKT text into :mod:`geowkt.geometry` objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from geowkt.config import DecoderSettings
from geowkt.errors import DimensionMismatchError, LayoutMismatchError, NestingDepthError, UnsupportedTypeError
from geowkt.geometry import (
    BaseGeometry,
    GeometryCollection,
    Layout,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    ShapeError,
)
from geowkt.parse.braces import extract_typed_child, match_braces
from geowkt.parse.coordinates import read_dim1, read_dim2, read_dim3
from geowkt.parse.keywords import GeometryType, is_empty, resolve_type_and_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _DecodeState:
    settings: DecoderSettings
    depth: int = 0

    def descend(self, text: str) -> "_DecodeState":
        depth = self.depth + 1
        if depth > self.settings.max_depth:
            raise NestingDepthError(self.settings.max_depth, text)
        return _DecodeState(self.settings, depth)


def _decode_point(text: str, layout: Layout, state: _DecodeState) -> Point:
    coords, _ = read_dim1(text, layout)
    point = Point(layout)
    if coords:
        point.set_coords(coords[0])
    return point


def _decode_line_string(text: str, layout: Layout, state: _DecodeState) -> LineString:
    coords, _ = read_dim1(text, layout)
    if not coords:
        return LineString(layout)

    # A closed line string is returned as a LinearRing.
    if coords[0] == coords[-1]:
        return LinearRing(layout).set_coords(coords)
    return LineString(layout).set_coords(coords)


def _decode_polygon(text: str, layout: Layout, state: _DecodeState) -> Polygon:
    coords, _ = read_dim2(text, layout)
    return Polygon(layout).set_coords(coords)


def _decode_multi_point(text: str, layout: Layout, state: _DecodeState) -> MultiPoint:
    coords, _ = read_dim1(text, layout)
    return MultiPoint(layout).set_coords(coords)


def _decode_multi_line_string(text: str, layout: Layout, state: _DecodeState) -> MultiLineString:
    coords, _ = read_dim2(text, layout)
    return MultiLineString(layout).set_coords(coords)


def _decode_multi_polygon(text: str, layout: Layout, state: _DecodeState) -> MultiPolygon:
    coords, _ = read_dim3(text, layout)
    return MultiPolygon(layout).set_coords(coords)


def _decode_collection(text: str, layout: Layout, state: _DecodeState) -> GeometryCollection:
    # Without a modifier the collection takes the layout of its first member.
    collection = GeometryCollection(None if layout is Layout.XY else layout)
    if is_empty(text):
        return collection

    content, _ = match_braces(text)
    child_state = state.descend(text)
    while content:
        child_text, content = extract_typed_child(content)
        child = _decode(child_text, child_state)
        try:
            collection.push(child)
        except ShapeError as exc:
            raise LayoutMismatchError(collection.stride, child_text, str(exc)) from exc
    return collection


_Decoder = Callable[[str, Layout, _DecodeState], BaseGeometry]

_DECODERS: dict[GeometryType, _Decoder] = {
    GeometryType.POINT: _decode_point,
    GeometryType.LINESTRING: _decode_line_string,
    GeometryType.POLYGON: _decode_polygon,
    GeometryType.MULTIPOINT: _decode_multi_point,
    GeometryType.MULTILINESTRING: _decode_multi_line_string,
    GeometryType.MULTIPOLYGON: _decode_multi_polygon,
    GeometryType.GEOMETRYCOLLECTION: _decode_collection,
}


def _decode(text: str, state: _DecodeState) -> BaseGeometry:
    geom_type, layout = resolve_type_and_layout(text)

    handler = _DECODERS.get(geom_type)
    if handler is None:
        raise UnsupportedTypeError(geom_type.value, text)

    logger.debug("Decoding %s with layout %s at depth %d", geom_type.value, layout.value, state.depth)
    try:
        return handler(text, layout, state)
    except ShapeError as exc:
        raise DimensionMismatchError(layout.stride, text, str(exc)) from exc


def decode(text: str, *, settings: DecoderSettings | None = None) -> BaseGeometry:
    """Decode a WKT string into a geometry.

    Parameters
    ----------
    text:
        WKT starting exactly at the geometry keyword, e.g. ``"POINT Z(1 2 3)"``.
    settings:
        Decoder limits. When omitted the defaults of
        :class:`geowkt.config.DecoderSettings` apply; the environment is only
        consulted through :meth:`~geowkt.config.DecoderSettings.from_environment`.

    Raises
    ------
    geowkt.errors.WKTDecodeError
        Subclasses describe what went wrong; no partial geometry is returned.
    """

    if not isinstance(text, str):
        raise TypeError(f"WKT must be a string, got {type(text).__name__}")

    cfg = settings or DecoderSettings()
    return _decode(text, _DecodeState(cfg))


__all__ = ["decode"]
