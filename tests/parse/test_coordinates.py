from __future__ import annotations

import pytest

from geowkt.errors import DimensionMismatchError, InvalidOrdinateError, MalformedBracesError
from geowkt.geometry import Layout
from geowkt.parse.coordinates import parse_coordinates, read_dim1, read_dim2, read_dim3


def test_parse_coordinates_keeps_input_order():
    assert parse_coordinates("1 2,3 4", Layout.XY) == [(1.0, 2.0), (3.0, 4.0)]


def test_parse_coordinates_trims_whitespace():
    assert parse_coordinates(" 1 2 ,  3   4 ", Layout.XY) == [(1.0, 2.0), (3.0, 4.0)]


def test_parse_coordinates_reads_numeric_notations():
    assert parse_coordinates("1e3 -2.5 .5 +4", Layout.XYZM) == [(1000.0, -2.5, 0.5, 4.0)]


@pytest.mark.parametrize(
    "content, layout",
    [("1 2 3", Layout.XY), ("1 2", Layout.XYZ), ("1 2 3", Layout.XYZM), ("", Layout.XY)],
)
def test_parse_coordinates_requires_layout_stride(content, layout):
    with pytest.raises(DimensionMismatchError) as excinfo:
        parse_coordinates(content, layout)

    assert excinfo.value.expected == layout.stride
    assert excinfo.value.text == content


@pytest.mark.parametrize("token", ["abc", "1_000.5", "١", "0x10", "1.2.3", "e5", "--1"])
def test_parse_coordinates_rejects_non_numeric_ordinates(token):
    with pytest.raises(InvalidOrdinateError) as excinfo:
        parse_coordinates(f"1 2,3 {token}", Layout.XY)

    assert excinfo.value.token == token


def test_parse_coordinates_accepts_special_values():
    coords = parse_coordinates("NaN inf,-Infinity 5.", Layout.XY)

    assert coords[0][0] != coords[0][0]
    assert coords[0][1] == float("inf")
    assert coords[1] == (float("-inf"), 5.0)


def test_read_dim1_parses_single_group():
    assert read_dim1("POINT(1 2)", Layout.XY) == ([(1.0, 2.0)], "")


def test_read_dim1_returns_next_sibling_as_remainder():
    coords, remainder = read_dim1("(0 0,1 1),(2 2,3 3)", Layout.XY)

    assert coords == [(0.0, 0.0), (1.0, 1.0)]
    assert remainder == "(2 2,3 3)"


def test_read_dim1_short_circuits_on_empty():
    assert read_dim1("LINESTRING Z EMPTY", Layout.XYZ) == ([], "")


def test_read_dim2_collects_every_ring():
    coords, remainder = read_dim2(
        "POLYGON((0 0,4 0,4 4,0 0),(1 1,2 1,1 1),(3 3,3.5 3,3 3))",
        Layout.XY,
    )

    assert remainder == ""
    assert len(coords) == 3
    assert coords[0] == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 0.0)]
    assert coords[2][1] == (3.5, 3.0)


def test_read_dim2_requires_inner_braces():
    with pytest.raises(MalformedBracesError):
        read_dim2("POLYGON(0 0,1 0,1 1,0 0)", Layout.XY)


def test_read_dim3_collects_every_polygon():
    coords, remainder = read_dim3(
        "MULTIPOLYGON(((0 0,1 0,1 1,0 0)),((5 5,6 5,6 6,5 5),(5.1 5.1,5.2 5.1,5.1 5.1)))",
        Layout.XY,
    )

    assert remainder == ""
    assert [len(polygon) for polygon in coords] == [1, 2]
    assert coords[1][1][0] == (5.1, 5.1)


def test_read_dim3_short_circuits_on_empty():
    assert read_dim3("MULTIPOLYGON EMPTY", Layout.XY) == ([], "")
