from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from rc_browser.core.exceptions import DatasetLoadError
from rc_browser.core.fields import LAT, LON
from rc_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)


def _flatten_feature(feature: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Feature properties plus point coordinates as LON/LAT.
    Non-point geometries keep no coordinates.
    """
    props = dict(feature.get("properties") or {})
    geometry = feature.get("geometry") or {}
    coords = geometry.get("coordinates")
    if geometry.get("type") == "Point" and isinstance(coords, (list, tuple)) and len(coords) >= 2:
        props.setdefault(LON, coords[0])
        props.setdefault(LAT, coords[1])
    return props


def features_to_store(geojson: Mapping[str, Any]) -> RecordStore:
    if geojson.get("type") != "FeatureCollection":
        raise DatasetLoadError(
            f"Expected a GeoJSON FeatureCollection, got {geojson.get('type')!r}"
        )
    features = geojson.get("features")
    if not isinstance(features, list):
        raise DatasetLoadError("FeatureCollection has no 'features' list")

    rows: List[Dict[str, Any]] = [
        _flatten_feature(f) for f in features if isinstance(f, Mapping)
    ]
    return RecordStore.from_properties(rows)


def load_record_store(path: Path | str) -> RecordStore:
    """
    Load the record dataset from a GeoJSON file.

    :param path: path to a FeatureCollection of point features
    :return: a read-only RecordStore in source order
    :raises DatasetLoadError: if the file is missing or not a FeatureCollection
    """
    path = Path(path)
    logger.info("Loading records", extra={"data_file": str(path)})

    if not path.is_file():
        raise DatasetLoadError(f"Dataset file not found at {path}")

    try:
        with path.open(encoding="utf-8") as f:
            geojson = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(geojson, dict):
        raise DatasetLoadError(f"Expected a JSON object in {path}")

    store = features_to_store(geojson)
    logger.info(
        "Records loaded",
        extra={"data_file": str(path), "n_records": len(store)},
    )
    return store
