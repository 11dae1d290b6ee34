from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from rc_browser.ui.ids import IDs


def build_results_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Records"),
                        html.Span(id=IDs.Control.RECORD_COUNT, className="ms-2 text-muted"),
                        dbc.Button(
                            "Download data (CSV)",
                            id=IDs.Control.DOWNLOAD_DATA_BTN,
                            color="secondary",
                            size="sm",
                            disabled=True,
                            className="ms-auto",
                        ),
                        dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(html.Div(id=IDs.Control.RESULTS_BODY)),
        ],
        className="rcb-maincard",
    )
