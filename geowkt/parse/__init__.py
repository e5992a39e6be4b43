"""Low-level WKT scanning helpers used by the decoder."""

from .braces import BraceMatch, extract_typed_child, match_braces, match_braces_then_advance
from .coordinates import parse_coordinates, read_dim1, read_dim2, read_dim3
from .keywords import EMPTY, GeometryType, is_empty, layout_modifier, resolve_type_and_layout

__all__ = [
    "BraceMatch",
    "EMPTY",
    "GeometryType",
    "extract_typed_child",
    "is_empty",
    "layout_modifier",
    "match_braces",
    "match_braces_then_advance",
    "parse_coordinates",
    "read_dim1",
    "read_dim2",
    "read_dim3",
    "resolve_type_and_layout",
]
