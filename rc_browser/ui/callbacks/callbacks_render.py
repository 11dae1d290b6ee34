from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from rc_browser.core.clause_compiler import TAUTOLOGY
from rc_browser.ui.ids import IDs

if TYPE_CHECKING:
    from rc_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}\n\n{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Map: where-clause -> figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAP_GRAPH, "figure"),
        Output(IDs.Control.CLAUSE_TEXT, "children"),
        Input(IDs.Store.WHERE_CLAUSE, "data"),
    )
    def update_map_from_clause(where: str | None):
        where = where or TAUTOLOGY
        try:
            return ctx.map_layer.render_figure(where), f"WHERE {where}"
        except Exception:
            logger.exception("Error rendering map layer", extra={"where": where})
            return (
                _message_figure(
                    "Something went wrong while rendering the map.",
                    "If this keeps happening, grab the logs and open an issue.",
                ),
                f"WHERE {where}",
            )
