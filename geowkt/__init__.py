"""Decode Well-Known-Text geometries."""

from .config import DecoderSettings, configure_logging, load_environment, read_env_file
from .decoder import decode
from .errors import (
    DimensionMismatchError,
    InvalidOrdinateError,
    LayoutMismatchError,
    MalformedBracesError,
    NestingDepthError,
    UnknownTypeError,
    UnsupportedTypeError,
    WKTDecodeError,
)
from .geometry import (
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
    mapping,
)
from .parse.keywords import GeometryType

__all__ = [
    "BaseGeometry",
    "DecoderSettings",
    "DimensionMismatchError",
    "GeometryCollection",
    "GeometryType",
    "InvalidOrdinateError",
    "Layout",
    "LayoutMismatchError",
    "LineString",
    "LinearRing",
    "MalformedBracesError",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NestingDepthError",
    "Point",
    "Polygon",
    "ShapeError",
    "UnknownTypeError",
    "UnsupportedTypeError",
    "WKTDecodeError",
    "configure_logging",
    "decode",
    "load_environment",
    "mapping",
    "read_env_file",
]
