from __future__ import annotations

import logging
import sqlite3
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd
import plotly.graph_objs as go

from rc_browser.core.fields import (
    CATEGORICAL_FIELDS,
    CENTER_AGE,
    LAT,
    LON,
    MARGIN,
    NUMERIC_COLUMNS,
    RANGE_HIGH,
    RANGE_LOW,
)
from rc_browser.core.projector import format_value
from rc_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)

TABLE_NAME = "records"

PALETTE: Tuple[str, ...] = (
    "#d95a3d",
    "#2c72bb",
    "#2f8f65",
    "#f1a93b",
    "#7a4dd8",
    "#0f4c81",
    "#c63f67",
)
DEFAULT_COLOR = "#374655"

# (label, column) shown on hover
POPUP_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Author", "AUTHOR"),
    ("Publication year", "DATE"),
    ("River", "RIVER"),
    ("Material", "MATERIAL"),
    ("Lab Code", "LAB_CODE"),
    ("State", "STATE"),
    ("Sedimentary Context", "SEDIMENTARY_CONTEXT"),
    ("Deposition Environment", "DEPOSITION_ENVIRONMENT"),
    ("Alluvial Assemble", "ALLUVIAL_ESSEMBLE"),
    ("Basin", "BASIN"),
)


def basin_colors(basins: Sequence[str]) -> Dict[str, str]:
    """Palette colors cycled over the sorted basin names."""
    return {b: PALETTE[i % len(PALETTE)] for i, b in enumerate(sorted(basins))}


def _hover_template() -> str:
    header = (
        "<b>%{customdata[0]} (%{customdata[1]})</b><br>"
        "Radiocarbon age (uncalibrated): %{customdata[2]} ± %{customdata[3]} 14C yr BP<br>"
        "Uncalibrated range: %{customdata[4]}–%{customdata[5]} 14C yr BP<br>"
    )
    body = "<br>".join(
        f"{label}: %{{customdata[{i + 6}]}}" for i, (label, _) in enumerate(POPUP_FIELDS)
    )
    return header + body + "<extra></extra>"


class MapLayer:
    """
    Point layer shown on the map.

    Holds its own copy of the records in an in-memory SQLite table and
    selects points by running the WHERE clause produced by the clause
    compiler. It never sees the FilterSpec itself.
    """

    def __init__(
        self,
        frame: pd.DataFrame,
        *,
        center: Tuple[float, float] = (-89.5, 37.8),
        zoom: float = 4.0,
        title: str = "Radiocarbon Points",
    ) -> None:
        self._frame = frame.copy()
        self.center = center
        self.zoom = zoom
        self.title = title

        basin_column = CATEGORICAL_FIELDS[0].column
        basins = [b for b in self._frame[basin_column].dropna().unique()]
        self.colors = basin_colors([str(b) for b in basins])

        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(":memory:", check_same_thread=False)
        queryable = [f.column for f in CATEGORICAL_FIELDS] + list(NUMERIC_COLUMNS)
        self._frame[queryable].to_sql(
            TABLE_NAME,
            self._conn,
            index=True,
            index_label="record_id",
        )

    @classmethod
    def from_store(cls, store: RecordStore, **kwargs) -> MapLayer:
        return cls(store.to_frame(), **kwargs)

    def close(self) -> None:
        """Close the SQLite connection. Safe to call more than once."""
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug("Map layer closed")

    @property
    def closed(self) -> bool:
        return self._conn is None

    def __enter__(self) -> MapLayer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def selected_ids(self, where: str) -> List[int]:
        """
        Record ids selected by a WHERE clause, in source order.

        :raises sqlite3.Error: if SQLite rejects the clause or the layer is closed
        """
        if self._conn is None:
            raise sqlite3.ProgrammingError("Cannot query a closed map layer.")
        sql = f"SELECT record_id FROM {TABLE_NAME} WHERE {where} ORDER BY record_id"  # nosec B608
        cursor = self._conn.execute(sql)
        return [int(row[0]) for row in cursor.fetchall()]

    def query(self, where: str) -> pd.DataFrame:
        """Rows selected by the clause; an invalid clause selects nothing."""
        try:
            ids = self.selected_ids(where)
        except sqlite3.Error:
            logger.exception("Map layer rejected filter clause", extra={"where": where})
            return self._frame.iloc[0:0]
        return self._frame.loc[ids]

    def _trace(self, rows: pd.DataFrame, name: str, color: str, size: int) -> go.Scattermap:
        customdata = [
            [format_value(row.get(col)) for col in ("RIVER", "BASIN", CENTER_AGE, MARGIN, RANGE_LOW, RANGE_HIGH)]
            + [format_value(row.get(col)) for _, col in POPUP_FIELDS]
            for _, row in rows.iterrows()
        ]
        return go.Scattermap(
            lon=rows[LON],
            lat=rows[LAT],
            mode="markers",
            name=name,
            marker=dict(color=color, size=size),
            customdata=customdata,
            hovertemplate=_hover_template(),
        )

    def render_figure(self, where: str, *, title: Optional[str] = None) -> go.Figure:
        selected = self.query(where).dropna(subset=[LON, LAT])
        basin_column = CATEGORICAL_FIELDS[0].column

        fig = go.Figure()
        for basin, color in self.colors.items():
            rows = selected[selected[basin_column] == basin]
            if not rows.empty:
                fig.add_trace(self._trace(rows, basin, color, size=8))

        others = selected[~selected[basin_column].isin(list(self.colors))]
        if not others.empty:
            fig.add_trace(self._trace(others, "Other", DEFAULT_COLOR, size=7))

        fig.update_layout(
            title=title or self.title,
            map=dict(
                style="open-street-map",
                center=dict(lon=self.center[0], lat=self.center[1]),
                zoom=self.zoom,
            ),
            margin=dict(l=0, r=0, t=40, b=0),
            legend=dict(title="Basin"),
            uirevision="map",
        )

        logger.info(
            "Map layer rendered",
            extra={"where": where, "n_points": len(selected)},
        )
        return fig
