from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from rc_browser.core.fields import CATEGORICAL_FIELDS
from rc_browser.ui.callbacks.callbacks_utils import filter_state_payload
from rc_browser.ui.helpers import spec_from_controls
from rc_browser.ui.ids import IDs, choice_select_id

if TYPE_CHECKING:
    from rc_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    choice_states = [State(choice_select_id(f.key), "value") for f in CATEGORICAL_FIELDS]
    choice_outputs = [
        Output(choice_select_id(f.key), "value")
        for f in CATEGORICAL_FIELDS
    ]

    # ---------------------------------------------------------
    # Apply: controls -> FilterSpec -> (filter-state, where-clause)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Store.WHERE_CLAUSE, "data"),
        Input(IDs.Control.APPLY_BTN, "n_clicks"),
        Input(IDs.Control.SORT_ORDER_SELECT, "value"),
        *choice_states,
        State(IDs.Control.AGE_MIN, "value"),
        State(IDs.Control.AGE_MAX, "value"),
        State(IDs.Control.UNCERTAINTY_MAX, "value"),
        State(IDs.Control.AGE_MODE_SELECT, "value"),
    )
    def apply_filter(_n_clicks, sort_order, *values):
        *choice_values, age_min, age_max, max_uncertainty, mode = values
        spec = spec_from_controls(choice_values, age_min, age_max, max_uncertainty, mode)
        where = ctx.session.compile(spec)

        logger.info(
            "Filter submitted",
            extra={"where": where, "sort_order": sort_order},
        )
        return filter_state_payload(spec, sort_order), where

    # ---------------------------------------------------------
    # Reset: defaults back into the controls, then apply them
    # ---------------------------------------------------------
    @app.callback(
        *choice_outputs,
        Output(IDs.Control.AGE_MIN, "value"),
        Output(IDs.Control.AGE_MAX, "value"),
        Output(IDs.Control.UNCERTAINTY_MAX, "value"),
        Output(IDs.Control.AGE_MODE_SELECT, "value"),
        Output(IDs.Control.SORT_ORDER_SELECT, "value"),
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Output(IDs.Store.WHERE_CLAUSE, "data", allow_duplicate=True),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filter(n_clicks):
        if not n_clicks:
            raise exceptions.PreventUpdate

        defaults = ctx.session.reset_inputs()
        spec = ctx.session.reset_spec()
        where = ctx.session.compile(spec)

        return (
            *(defaults[f.key] for f in CATEGORICAL_FIELDS),
            defaults["age_min"],
            defaults["age_max"],
            defaults["max_uncertainty"],
            defaults["mode"],
            defaults["sort_order"],
            filter_state_payload(spec, defaults["sort_order"]),
            where,
        )
