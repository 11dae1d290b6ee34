from __future__ import annotations

from typing import Any, Dict

import dash_bootstrap_components as dbc
from dash import dcc, html

from rc_browser.core.fields import CATEGORICAL_FIELDS
from rc_browser.core.session import BrowserSession
from rc_browser.ui.helpers import (
    age_mode_options,
    get_choice_dropdown_options,
    sort_order_options,
)
from rc_browser.ui.ids import IDs, choice_select_id


def _number_input(component_id: str, label: str, value: Any, bounds: Dict[str, Any]) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label"),
            dbc.Input(
                id=component_id,
                type="number",
                value=value,
                placeholder="Any",
                className="mb-3",
                **bounds,
            ),
        ]
    )


def build_filter_panel(session: BrowserSession) -> dbc.Card:
    store = session.store
    options = get_choice_dropdown_options(store)
    defaults = session.reset_inputs()

    age_lo, age_hi = store.age_extent()
    age_bounds = {k: v for k, v in (("min", age_lo), ("max", age_hi)) if v is not None}

    choice_dropdowns = [
        html.Div(
            [
                html.Label(f.label, className="form-label"),
                dcc.Dropdown(
                    id=choice_select_id(f.key),
                    options=options[f.key],
                    value=None,
                    placeholder=f"All ({f.label.lower()})",
                    className="mb-3",
                ),
            ],
        )
        for f in CATEGORICAL_FIELDS
    ]

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.P(
                        f"{len(store)} records loaded",
                        id=IDs.Control.SIDEBAR_DATASET_META,
                        className="card-subtitle text-muted mb-3",
                    ),
                    html.Hr(),
                    *choice_dropdowns,
                    _number_input(IDs.Control.AGE_MIN, "Age from (14C yr BP)", defaults["age_min"], age_bounds),
                    _number_input(IDs.Control.AGE_MAX, "Age to (14C yr BP)", defaults["age_max"], age_bounds),
                    html.Div(
                        [
                            html.Label("Age mode", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.AGE_MODE_SELECT,
                                options=age_mode_options(),
                                value=defaults["mode"],
                                clearable=False,
                                className="mb-3",
                            ),
                        ]
                    ),
                    _number_input(IDs.Control.UNCERTAINTY_MAX, "Max margin (±)", None, {"min": 0}),
                    html.Div(
                        [
                            html.Label("Sort by", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.SORT_ORDER_SELECT,
                                options=sort_order_options(),
                                value=defaults["sort_order"],
                                clearable=False,
                                className="mb-3",
                            ),
                        ]
                    ),
                    html.Div(
                        [
                            dbc.Button("Apply", id=IDs.Control.APPLY_BTN, color="primary", size="sm", className="me-2"),
                            dbc.Button("Reset", id=IDs.Control.RESET_BTN, color="secondary", size="sm"),
                        ],
                        className="d-flex",
                    ),
                ]
            ),
        ],
        className="rcb-sidebar",
    )
