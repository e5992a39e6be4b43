"""Exceptions raised while decoding WKT text."""

from __future__ import annotations


class WKTDecodeError(ValueError):
    """Base class for every decode failure.

    ``text`` holds the substring or token that triggered the failure.
    """

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class UnknownTypeError(WKTDecodeError):
    def __init__(self, text: str):
        super().__init__(f"Unknown geometry type in WKT: {text}", text)


class MalformedBracesError(WKTDecodeError):
    def __init__(self, text: str):
        super().__init__(f"Malformed braces in WKT string: {text}", text)


class DimensionMismatchError(WKTDecodeError):
    def __init__(self, expected: int, text: str, message: str | None = None):
        super().__init__(
            message or f"Expected coordinates with dimension {expected}. Found: {text}",
            text,
        )
        self.expected = expected


class LayoutMismatchError(DimensionMismatchError):
    """A collection member does not share the collection's layout."""


class InvalidOrdinateError(WKTDecodeError):
    def __init__(self, token: str):
        super().__init__(f"Found invalid coordinate value in WKT string: {token!r}", token)
        self.token = token


class UnsupportedTypeError(WKTDecodeError):
    def __init__(self, geom_type: str, text: str):
        super().__init__(f"Cannot create geometry for unsupported type {geom_type}", text)
        self.geom_type = geom_type


class NestingDepthError(WKTDecodeError):
    def __init__(self, max_depth: int, text: str):
        super().__init__(f"Geometry collections nested deeper than {max_depth} levels", text)
        self.max_depth = max_depth


__all__ = [
    "DimensionMismatchError",
    "InvalidOrdinateError",
    "LayoutMismatchError",
    "MalformedBracesError",
    "NestingDepthError",
    "UnknownTypeError",
    "UnsupportedTypeError",
    "WKTDecodeError",
]
