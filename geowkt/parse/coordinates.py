"""Coordinate tokenizing and the nested coordinate readers."""

from __future__ import annotations

import re

from geowkt.errors import DimensionMismatchError, InvalidOrdinateError
from geowkt.geometry import Dim1, Dim2, Dim3, Layout
from geowkt.parse.braces import match_braces_then_advance
from geowkt.parse.keywords import is_empty

_ORDINATE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_coordinates(content: str, layout: Layout) -> Dim1:
    """Parse ``"x y,x y"`` style brace content into coordinates.

    Raises:
        DimensionMismatchError: if a coordinate does not have ``layout.stride``
            ordinates.
        InvalidOrdinateError: if an ordinate is not a number.
    """

    coords: Dim1 = []
    for raw_coord in content.split(","):
        tokens = raw_coord.strip().split()
        if len(tokens) != layout.stride:
            raise DimensionMismatchError(layout.stride, content)

        ordinates = []
        for token in tokens:
            if not _ORDINATE.fullmatch(token):
                raise InvalidOrdinateError(token)
            ordinates.append(float(token))
        coords.append(tuple(ordinates))
    return coords


def read_dim1(text: str, layout: Layout) -> tuple[Dim1, str]:
    if is_empty(text):
        return [], ""

    content, remainder = match_braces_then_advance(text)
    return parse_coordinates(content, layout), remainder


def read_dim2(text: str, layout: Layout) -> tuple[Dim2, str]:
    if is_empty(text):
        return [], ""

    content, remainder = match_braces_then_advance(text)
    coords: Dim2 = []
    while True:
        line, content = read_dim1(content, layout)
        coords.append(line)
        if not content:
            break
    return coords, remainder


def read_dim3(text: str, layout: Layout) -> tuple[Dim3, str]:
    if is_empty(text):
        return [], ""

    content, remainder = match_braces_then_advance(text)
    coords: Dim3 = []
    while True:
        polygon, content = read_dim2(content, layout)
        coords.append(polygon)
        if not content:
            break
    return coords, remainder


__all__ = ["parse_coordinates", "read_dim1", "read_dim2", "read_dim3"]
