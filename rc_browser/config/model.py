from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from rc_browser.core.fields import AgeMode, SortOrder


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - data_file: GeoJSON FeatureCollection of dated points (already resolved)
    - map_center: (lon, lat) of the initial map view
    """
    ui_title: str = "Radiocarbon Browser"
    subtitle: str = "Uncalibrated radiocarbon dates"
    data_file: Optional[Path] = None
    map_center: Tuple[float, float] = (-89.5, 37.8)
    map_zoom: float = 4.0
    default_sort_order: SortOrder = SortOrder.UNCAL_DESC
    default_age_mode: AgeMode = AgeMode.OVERLAP
    layer_title: str = "FADEU Radiocarbon Points"
    source_path: Optional[Path] = field(default=None, repr=False)
