from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Tuple

import dash
from dash import Input, Output, html

from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.projector import EMPTY_MESSAGE
from rc_browser.core.session import BrowserSession
from rc_browser.ui.callbacks.callbacks_utils import try_parse_filter_state
from rc_browser.ui.helpers import results_table
from rc_browser.ui.ids import IDs

if TYPE_CHECKING:
    from rc_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_results(session: BrowserSession, fs_data: dict[str, Any] | None) -> Tuple[Any, str, bool]:
    """
    Table body, count label and download-disabled flag for a filter-state
    payload. Missing or unreadable state shows every record.
    """
    parsed = try_parse_filter_state(fs_data)
    if parsed is None:
        spec, sort_order = FilterSpec(), None
    else:
        spec, sort_order = parsed

    try:
        result = session.project(spec, sort_order)
    except Exception:
        logger.exception("Error projecting results", extra={"filter_state": fs_data})
        return (
            html.Div("Something went wrong while filtering records.", className="text-danger p-2"),
            EMPTY_MESSAGE,
            True,
        )

    return results_table(result), result.count_label, not result.can_export


def register_results_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Table: filter-state -> predicate -> sorted ResultList
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESULTS_BODY, "children"),
        Output(IDs.Control.RECORD_COUNT, "children"),
        Output(IDs.Control.DOWNLOAD_DATA_BTN, "disabled"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_results(fs_data: dict[str, Any] | None):
        return render_results(ctx.session, fs_data)
