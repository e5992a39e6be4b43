"""Geometry keywords, layout modifiers and their resolution from WKT text."""

from __future__ import annotations

from enum import Enum

from geowkt.errors import UnknownTypeError
from geowkt.geometry import Layout

EMPTY = "EMPTY"


class GeometryType(Enum):
    POINT = "POINT"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    MULTIPOINT = "MULTIPOINT"
    MULTILINESTRING = "MULTILINESTRING"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"


# Order matters: "ZM" has to be tested before "M" and "Z".
LAYOUT_MODIFIERS: tuple[tuple[str, Layout], ...] = (
    ("ZM", Layout.XYZM),
    ("M", Layout.XYM),
    ("Z", Layout.XYZ),
)

_MODIFIER_TEXT = {layout: f" {modifier}" for modifier, layout in LAYOUT_MODIFIERS}
_MODIFIER_TEXT[Layout.XY] = ""


def layout_modifier(layout: Layout) -> str:
    """Return the canonical modifier written after a keyword, e.g. ``" Z"``."""

    return _MODIFIER_TEXT[layout]


def resolve_type_and_layout(text: str) -> tuple[GeometryType, Layout]:
    """Identify the geometry keyword and coordinate layout starting ``text``.

    ``text`` must begin exactly at the keyword. The keyword may be followed by
    whitespace, a layout modifier, and then ``(``, ``EMPTY`` or nothing.

    Raises:
        UnknownTypeError: if no keyword matches, or a keyword is followed by
            something other than a modifier, a brace or ``EMPTY``.
    """

    for geom_type in GeometryType:
        if text.startswith(geom_type.value):
            break
    else:
        raise UnknownTypeError(text)

    rest = text[len(geom_type.value):].lstrip()
    layout = Layout.XY
    for modifier, candidate in LAYOUT_MODIFIERS:
        if rest.startswith(modifier):
            layout = candidate
            rest = rest[len(modifier):].lstrip()
            break

    if rest and not rest.startswith(("(", EMPTY)):
        raise UnknownTypeError(text)

    return geom_type, layout


def is_empty(text: str) -> bool:
    """Return ``True`` when the header of ``text`` ends with ``EMPTY``.

    The header is everything before the first ``(``, so an ``EMPTY`` member
    nested inside a body does not make the enclosing text empty.
    """

    header = text.split("(", 1)[0].rstrip()
    return header.endswith(EMPTY)


__all__ = [
    "EMPTY",
    "GeometryType",
    "LAYOUT_MODIFIERS",
    "is_empty",
    "layout_modifier",
    "resolve_type_and_layout",
]
