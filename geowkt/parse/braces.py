"""Balanced parenthesis scanning over WKT text."""

from __future__ import annotations

from typing import NamedTuple

from geowkt.errors import MalformedBracesError
from geowkt.parse.keywords import is_empty, layout_modifier, resolve_type_and_layout


class BraceMatch(NamedTuple):
    content: str
    remainder: str


def match_braces(text: str) -> BraceMatch:
    """Return the content of the first top-level brace group of ``text``.

    ``content`` excludes the enclosing braces; ``remainder`` starts at the
    closing brace so callers can keep scanning from there.
    """

    depth = 0
    open_index = -1
    for index, char in enumerate(text):
        if char == "(":
            if depth == 0:
                open_index = index
            depth += 1
        elif char == ")":
            if depth == 0:
                break
            depth -= 1
            if depth == 0:
                return BraceMatch(text[open_index + 1:index], text[index:])

    raise MalformedBracesError(text)


def match_braces_then_advance(text: str) -> BraceMatch:
    """Like :func:`match_braces` with the remainder moved to the next ``(``.

    An empty remainder means there is no further sibling group.
    """

    content, remainder = match_braces(text)
    next_open = remainder.find("(")
    return BraceMatch(content, remainder[next_open:] if next_open > -1 else "")


def _advance_to_letter(text: str) -> str:
    for index, char in enumerate(text):
        if char.isalpha():
            return text[index:]
    return ""


def _empty_child(text: str) -> str | None:
    stop = len(text)
    for delimiter in ("(", ","):
        index = text.find(delimiter)
        if index > -1:
            stop = min(stop, index)
    header = text[:stop].rstrip()
    return header if is_empty(header) else None


def extract_typed_child(text: str) -> BraceMatch:
    """Split the first member geometry off a collection body.

    ``content`` is the member as self-contained WKT; ``remainder`` starts at
    the keyword of the next member, or is empty after the last one.
    """

    geom_type, layout = resolve_type_and_layout(text)

    empty_child = _empty_child(text)
    if empty_child is not None:
        return BraceMatch(empty_child, _advance_to_letter(text[len(empty_child):]))

    content, remainder = match_braces(text)
    child = f"{geom_type.value}{layout_modifier(layout)}({content})"
    return BraceMatch(child, _advance_to_letter(remainder))


__all__ = [
    "BraceMatch",
    "extract_typed_child",
    "match_braces",
    "match_braces_then_advance",
]
