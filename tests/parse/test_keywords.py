from __future__ import annotations

import pytest

from geowkt.errors import UnknownTypeError
from geowkt.geometry import Layout
from geowkt.parse.keywords import GeometryType, is_empty, layout_modifier, resolve_type_and_layout


@pytest.mark.parametrize(
    "text, expected",
    [
        ("POINT(1 2)", GeometryType.POINT),
        ("LINESTRING(0 0,1 1)", GeometryType.LINESTRING),
        ("POLYGON((0 0,1 0,1 1,0 0))", GeometryType.POLYGON),
        ("MULTIPOINT(0 0,1 1)", GeometryType.MULTIPOINT),
        ("MULTILINESTRING((0 0,1 1))", GeometryType.MULTILINESTRING),
        ("MULTIPOLYGON(((0 0,1 0,1 1,0 0)))", GeometryType.MULTIPOLYGON),
        ("GEOMETRYCOLLECTION(POINT(1 1))", GeometryType.GEOMETRYCOLLECTION),
    ],
)
def test_resolves_every_keyword_as_planar_by_default(text, expected):
    assert resolve_type_and_layout(text) == (expected, Layout.XY)


@pytest.mark.parametrize(
    "text, layout",
    [
        ("POINT Z(1 2 3)", Layout.XYZ),
        ("POINT M(1 2 3)", Layout.XYM),
        ("POINT ZM(1 2 3 4)", Layout.XYZM),
        ("POINT ZM (1 2 3 4)", Layout.XYZM),
        ("POINTZ(1 2 3)", Layout.XYZ),
        ("MULTIPOLYGON ZM EMPTY", Layout.XYZM),
        ("LINESTRING M EMPTY", Layout.XYM),
        ("POINT EMPTY", Layout.XY),
    ],
)
def test_resolves_layout_modifier(text, layout):
    _, resolved = resolve_type_and_layout(text)

    assert resolved is layout


@pytest.mark.parametrize(
    "text",
    ["FOO(1 2)", " POINT(1 2)", "POINTS(1 2)", "point(1 2)", "POINT Q(1 2)", ""],
)
def test_rejects_unknown_keywords(text):
    with pytest.raises(UnknownTypeError) as excinfo:
        resolve_type_and_layout(text)

    assert excinfo.value.text == text


def test_layout_modifier_round_trips_through_resolution():
    for layout in Layout:
        text = f"POINT{layout_modifier(layout)} EMPTY"
        assert resolve_type_and_layout(text) == (GeometryType.POINT, layout)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("POINT EMPTY", True),
        ("POINT Z EMPTY ", True),
        ("GEOMETRYCOLLECTION EMPTY", True),
        ("POINT(1 2)", False),
        ("GEOMETRYCOLLECTION(POINT(1 1),POINT EMPTY)", False),
        ("(0 0,1 1),EMPTY", False),
    ],
)
def test_is_empty_only_looks_at_the_header(text, expected):
    assert is_empty(text) is expected
