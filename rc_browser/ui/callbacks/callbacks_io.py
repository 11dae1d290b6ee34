from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, dcc, exceptions

from rc_browser.ui.ids import IDs

if TYPE_CHECKING:
    from rc_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "radiocarbon_records.csv"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Export: last ResultList -> CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks):
        if not n_clicks:
            raise exceptions.PreventUpdate

        result = ctx.session.last_result
        if result is None or not result.can_export:
            raise exceptions.PreventUpdate

        frame = result.to_export_frame()
        logger.info("Exporting records", extra={"n_rows": len(frame)})
        return dcc.send_data_frame(frame.to_csv, EXPORT_FILENAME, index=False)
