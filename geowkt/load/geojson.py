"""Persist decoded geometries on disk as GeoJSON."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any

from geowkt.geometry import BaseGeometry, mapping


def _ensure_path(path: Path | str | PathLike[str]) -> Path:
    """Return ``path`` as :class:`pathlib.Path` enforcing valid types."""

    if isinstance(path, Path):
        return path
    if isinstance(path, (str, PathLike)):
        return Path(path)
    raise TypeError("path must be a string, Path or os.PathLike instance")


def _as_feature_collection(geom: BaseGeometry, properties: dict[str, Any] | None) -> dict[str, Any]:
    if not isinstance(geom, BaseGeometry):
        raise TypeError(f"Expected a geowkt geometry, got {type(geom).__name__}")
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": dict(properties or {}), "geometry": mapping(geom)},
        ],
    }


def save_geometry(
    geom: BaseGeometry,
    path: Path | str | PathLike[str],
    *,
    properties: dict[str, Any] | None = None,
) -> Path:
    """Write ``geom`` as a single-feature GeoJSON FeatureCollection."""

    target = _ensure_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    feature_collection = _as_feature_collection(geom, properties)
    target.write_text(json.dumps(feature_collection, ensure_ascii=False, indent=2), encoding="utf-8")
    return target


__all__ = ["save_geometry"]
