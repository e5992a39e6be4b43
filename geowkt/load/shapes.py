"""Conversion of decoded geometries into shapely geometries."""

from __future__ import annotations

from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry as ShapelyGeometry

from geowkt.geometry import BaseGeometry


def to_shapely(geom: BaseGeometry) -> ShapelyGeometry:
    """Return the shapely counterpart of ``geom``.

    The conversion goes through the ``__geo_interface__`` protocol, so measure
    ordinates (XYM/XYZM layouts) are dropped; elevation is kept.
    """

    if not isinstance(geom, BaseGeometry):
        raise TypeError(f"Expected a geowkt geometry, got {type(geom).__name__}")
    return shape(geom)


__all__ = ["to_shapely"]
