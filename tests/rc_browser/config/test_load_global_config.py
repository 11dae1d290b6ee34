import json
from pathlib import Path

import pytest

from rc_browser.config.loader import load_global_config
from rc_browser.core.exceptions import ConfigError
from rc_browser.core.fields import AgeMode, SortOrder


def _write_global(root: Path, payload) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    path = root / "global.json"
    path.write_text(json.dumps(payload))
    return path


def test_load_global_config_from_config_dir(tmp_path):
    # Arrange: build config dir:
    # root/
    #   global.json
    config_root = tmp_path / "config"
    global_path = _write_global(
        config_root,
        {
            "ui_title": "Test Browser",
            "data_file": "data/test.geojson",
            "map_center": [-90, 38],
            "map_zoom": 5,
            "default_sort_order": "margin-asc",
            "default_age_mode": "center",
        },
    )

    # Act
    cfg = load_global_config(config_root)

    # Assert
    assert cfg.ui_title == "Test Browser"
    assert cfg.data_file == (config_root / "data" / "test.geojson").resolve()
    assert cfg.map_center == (-90.0, 38.0)
    assert cfg.map_zoom == 5.0
    assert cfg.default_sort_order is SortOrder.MARGIN_ASC
    assert cfg.default_age_mode is AgeMode.CENTER
    assert cfg.source_path == global_path


def test_defaults_when_keys_are_missing(tmp_path):
    _write_global(tmp_path, {})

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Radiocarbon Browser"
    assert cfg.data_file == (tmp_path / "data" / "points.geojson").resolve()
    assert cfg.default_sort_order is SortOrder.UNCAL_DESC
    assert cfg.default_age_mode is AgeMode.OVERLAP


def test_absolute_data_file_is_kept(tmp_path):
    data_file = tmp_path / "elsewhere" / "points.geojson"
    _write_global(tmp_path / "config", {"data_file": str(data_file)})

    assert load_global_config(tmp_path / "config").data_file == data_file


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"default_sort_order": "random"},
        {"default_age_mode": "within"},
        {"default_age_mode": ["overlap"]},
        {"map_center": [1, 2, 3]},
        {"map_center": "somewhere"},
        {"map_zoom": "close"},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, payload):
    _write_global(tmp_path, payload)
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{broken")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_shipped_config_loads():
    root = Path(__file__).resolve().parents[3] / "config"
    cfg = load_global_config(root)
    assert cfg.data_file is not None and cfg.data_file.is_file()
