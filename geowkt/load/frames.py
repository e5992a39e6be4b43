"""Decode WKT columns of tabular data into GeoPandas structures."""

from __future__ import annotations

import logging

import geopandas as gpd
import pandas as pd

from geowkt.config import DecoderSettings
from geowkt.decoder import decode
from geowkt.errors import WKTDecodeError
from geowkt.load.shapes import to_shapely

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce")


def decode_series(
    values: pd.Series,
    *,
    crs: str | None = None,
    errors: str = "raise",
    settings: DecoderSettings | None = None,
) -> gpd.GeoSeries:
    """Decode a series of WKT strings into a GeoSeries of shapely geometries.

    Parameters
    ----------
    values:
        Series holding WKT strings. Missing values stay missing.
    crs:
        Coordinate reference system assigned to the result.
    errors:
        ``"raise"`` propagates decode failures; ``"coerce"`` logs them and
        stores a missing value instead. Non-string values count as failures.
    settings:
        Decoder limits shared by every row.
    """

    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")

    cfg = settings or DecoderSettings()
    geometries = []
    failures = 0
    for index, value in values.items():
        if not isinstance(value, str) and pd.api.types.is_scalar(value) and pd.isna(value):
            geometries.append(None)
            continue
        try:
            geometries.append(to_shapely(decode(value, settings=cfg)))
        except (WKTDecodeError, TypeError) as exc:
            if errors == "raise":
                raise
            failures += 1
            logger.warning("Could not decode WKT at index %r: %s", index, exc)
            geometries.append(None)

    logger.info("Decoded %s WKT values (%s failures)", len(geometries) - failures, failures)
    return gpd.GeoSeries(geometries, index=values.index, crs=crs)


def to_geodataframe(
    df: pd.DataFrame,
    column: str = "wkt",
    *,
    crs: str | None = None,
    errors: str = "raise",
    settings: DecoderSettings | None = None,
) -> gpd.GeoDataFrame:
    """Return a GeoDataFrame whose ``geometry`` column is decoded from ``column``.

    The WKT column itself is dropped from the result.
    """

    if column not in df.columns:
        raise ValueError(f"input DataFrame must contain a {column!r} column")

    geometries = decode_series(df[column], crs=crs, errors=errors, settings=settings)
    return gpd.GeoDataFrame(df.drop(columns=[column]), geometry=geometries, crs=crs)


__all__ = ["decode_series", "to_geodataframe"]
