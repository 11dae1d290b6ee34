from __future__ import annotations

from typing import Any, Dict, List, Sequence

from dash import dash_table, html

from rc_browser.core.fields import (
    AGE_MODE_LABELS,
    CATEGORICAL_FIELDS,
    SORT_ORDER_LABELS,
)
from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.projector import DISPLAY_COLUMNS, EMPTY_MESSAGE, ResultList
from rc_browser.core.record_store import RecordStore

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def get_choice_dropdown_options(store: RecordStore) -> Dict[str, List[dict]]:
    """Dropdown options per categorical field key, from the loaded records."""
    return {
        f.key: [{"label": v, "value": v} for v in store.distinct_values(f.column)]
        for f in CATEGORICAL_FIELDS
    }


def age_mode_options() -> List[dict]:
    return [{"label": label, "value": mode.value} for mode, label in AGE_MODE_LABELS.items()]


def sort_order_options() -> List[dict]:
    return [{"label": label, "value": order.value} for order, label in SORT_ORDER_LABELS.items()]


def spec_from_controls(
    choice_values: Sequence[Any],
    age_min: Any,
    age_max: Any,
    max_uncertainty: Any,
    mode: Any,
) -> FilterSpec:
    """
    Build a FilterSpec from callback values. `choice_values` follows
    CATEGORICAL_FIELDS order.
    """
    choices = {f.key: value for f, value in zip(CATEGORICAL_FIELDS, choice_values)}
    return FilterSpec.from_inputs(
        choices=choices,
        age_min=age_min,
        age_max=age_max,
        max_uncertainty=max_uncertainty,
        mode=mode,
    )


def results_table(result: ResultList, page_size: int = 25):
    """
    Results table for the current ResultList, or the empty-state message.
    Sorting is done by the projector, so the table itself does not sort.
    """
    if result.is_empty:
        return html.Div(EMPTY_MESSAGE, className="text-muted fst-italic p-2")

    return dash_table.DataTable(
        data=result.display_rows(),
        columns=[{"name": c, "id": c} for c in DISPLAY_COLUMNS],
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        page_size=page_size,
        sort_action="none",
        filter_action="none",
    )
