from __future__ import annotations

import json
import logging
from pathlib import Path

import geopandas as gpd
import pandas as pd
import pytest

from geowkt.errors import UnknownTypeError
from geowkt.load.frames import decode_series, to_geodataframe

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def geometries_df():
    with open(DATA_DIR / "geometries.json", "r", encoding="utf-8") as fh:
        rows = json.load(fh)
    return pd.DataFrame(rows)


def test_to_geodataframe_replaces_wkt_column(geometries_df):
    gdf = to_geodataframe(geometries_df, crs="EPSG:4326")

    assert isinstance(gdf, gpd.GeoDataFrame)
    assert "wkt" not in gdf.columns
    assert gdf["name"].tolist() == ["Marco Zero", "Trilha Norte", "Reserva Norte", "Postos"]
    assert gdf.geometry.geom_type.tolist() == ["Point", "LineString", "Polygon", "MultiPoint"]
    assert gdf.crs == "EPSG:4326"


def test_to_geodataframe_keeps_elevation(geometries_df):
    gdf = to_geodataframe(geometries_df)

    assert gdf.geometry.has_z.tolist() == [False, False, False, True]


def test_to_geodataframe_requires_column():
    df = pd.DataFrame({"id": [1, 2]})

    with pytest.raises(ValueError):
        to_geodataframe(df)


def test_decode_series_keeps_missing_values():
    series = pd.Series(["POINT(1 2)", None], index=["a", "b"])

    result = decode_series(series)

    assert result.index.tolist() == ["a", "b"]
    assert result.isna().tolist() == [False, True]


def test_decode_series_raises_by_default():
    with pytest.raises(UnknownTypeError):
        decode_series(pd.Series(["POINT(1 2)", "CIRCLE(0 0 1)"]))


def test_decode_series_can_coerce_failures(caplog):
    series = pd.Series(["POINT(1 2)", "CIRCLE(0 0 1)", "POINT(1 2"])

    with caplog.at_level(logging.WARNING, logger="geowkt.load.frames"):
        result = decode_series(series, errors="coerce")

    assert result.isna().tolist() == [False, True, True]
    assert "Could not decode WKT at index 1" in caplog.text


def test_decode_series_rejects_unknown_error_mode():
    with pytest.raises(ValueError):
        decode_series(pd.Series(["POINT(1 2)"]), errors="ignore")


def test_decode_series_coerces_non_string_values():
    series = pd.Series(["POINT(1 2)", b"POINT(1 2)", 42], dtype=object)

    result = decode_series(series, errors="coerce")

    assert result.isna().tolist() == [False, True, True]

    with pytest.raises(TypeError):
        decode_series(series)


def test_decode_series_ignores_environment(monkeypatch):
    monkeypatch.setenv("GEOWKT_MAX_DEPTH", "deep")

    result = decode_series(pd.Series(["GEOMETRYCOLLECTION(POINT(1 1))"]), errors="coerce")

    assert result.isna().tolist() == [False]
