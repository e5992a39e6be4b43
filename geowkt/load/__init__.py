"""Loading helpers for decoded geometries."""

from .frames import decode_series, to_geodataframe
from .geojson import save_geometry
from .shapes import to_shapely

__all__ = ["decode_series", "save_geometry", "to_geodataframe", "to_shapely"]
