from __future__ import annotations

import atexit
import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from rc_browser.config.loader import load_global_config
from rc_browser.core.dataset_loader import load_record_store
from rc_browser.core.session import BrowserSession
from rc_browser.services.map_layer import MapLayer
from rc_browser.validation.record_validation import warn_on_invalid_records
from rc_browser.ui.layout.build_layout import build_layout
from rc_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from rc_browser.ui.callbacks.callbacks_render import register_render_callbacks
from rc_browser.ui.callbacks.callbacks_results import register_results_callbacks
from rc_browser.ui.callbacks.callbacks_io import register_io_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load records once; they are read-only from here on
    store = load_record_store(global_config.data_file)
    warn_on_invalid_records(store, logger)

    # 3) Session (local predicate path) and map layer (clause path)
    session = BrowserSession(
        store,
        default_sort_order=global_config.default_sort_order,
        default_age_mode=global_config.default_age_mode,
    )
    map_layer = MapLayer.from_store(
        store,
        center=global_config.map_center,
        zoom=global_config.map_zoom,
        title=global_config.layer_title,
    )
    atexit.register(map_layer.close)

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        session=session,
        map_layer=map_layer,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_results_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "App created",
        extra={"config_root": str(config_root), "n_records": len(store)},
    )
    return app
