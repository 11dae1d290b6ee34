from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from rc_browser.ui.ids import IDs
from rc_browser.ui.layout.build_filter_panel import build_filter_panel
from rc_browser.ui.layout.build_map_panel import build_map_panel
from rc_browser.ui.layout.build_navbar import build_navbar
from rc_browser.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from rc_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    ctx.validate()

    return dbc.Container(
        fluid=True,
        className="rcb-root",
        children=[
            build_navbar(ctx.global_config),

            # Filter state lives for the page only; nothing is persisted.
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.WHERE_CLAUSE, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(ctx.session), md=3, className="mt-3"),
                    dbc.Col(
                        [build_map_panel(), build_results_panel()],
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
