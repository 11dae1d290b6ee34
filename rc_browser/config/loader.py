from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from rc_browser.config.model import GlobalConfig
from rc_browser.core.exceptions import ConfigError
from rc_browser.core.fields import AgeMode, SortOrder

logger = logging.getLogger(__name__)


def _resolve_path(root: Path, raw: Any) -> Path:
    """Absolute paths are used as-is; relative ones are resolved against the config root."""
    path = Path(str(raw))
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _parse_center(raw: Any) -> Tuple[float, float]:
    try:
        lon, lat = raw
        return float(lon), float(lat)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"map_center must be [lon, lat], got {raw!r}") from e


def _parse_float(raw: Dict[str, Any], key: str, default: float) -> float:
    value = raw.get(key, default)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be a number, got {value!r}") from e


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json
            data/
                points.geojson

    Keys in global.json (all optional):

    - ui_title / subtitle: navbar text
    - data_file: path to the GeoJSON dataset, relative to 'root' unless absolute
                 (default: data/points.geojson)
    - map_center, map_zoom: initial map view
    - default_sort_order: one of uncal-desc, uncal-asc, margin-asc
    - default_age_mode: one of overlap, contained, center

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or has invalid values.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()

    sort_raw = raw.get("default_sort_order", defaults.default_sort_order.value)
    mode_raw = raw.get("default_age_mode", defaults.default_age_mode.value)
    if not isinstance(sort_raw, str) or sort_raw not in {o.value for o in SortOrder}:
        raise ConfigError(f"Unknown default_sort_order {sort_raw!r}")
    if not isinstance(mode_raw, str) or mode_raw not in {m.value for m in AgeMode}:
        raise ConfigError(f"Unknown default_age_mode {mode_raw!r}")

    return GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        data_file=_resolve_path(root, raw.get("data_file", "data/points.geojson")),
        map_center=_parse_center(raw.get("map_center", list(defaults.map_center))),
        map_zoom=_parse_float(raw, "map_zoom", defaults.map_zoom),
        default_sort_order=SortOrder(sort_raw),
        default_age_mode=AgeMode(mode_raw),
        layer_title=raw.get("layer_title", defaults.layer_title),
        source_path=global_path,
    )
