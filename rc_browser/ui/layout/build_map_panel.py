from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from rc_browser.ui.ids import IDs


def build_map_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Map"), className="p-2"),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="map-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAP_GRAPH,
                            style={"height": "520px"},
                            config={"responsive": True},
                        ),
                    ),
                    html.Small(
                        id=IDs.Control.CLAUSE_TEXT,
                        className="text-muted font-monospace",
                    ),
                ],
                className="rcb-main-body",
            ),
        ],
        className="rcb-maincard mb-3",
    )
