from dash import dash_table, html

from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.projector import DISPLAY_COLUMNS, EMPTY_MESSAGE, project
from rc_browser.core.record_store import RecordStore
from rc_browser.core.session import BrowserSession
from rc_browser.ui.callbacks.callbacks_results import render_results
from rc_browser.ui.callbacks.callbacks_utils import filter_state_payload
from rc_browser.ui.helpers import results_table


def _make_store() -> RecordStore:
    return RecordStore.from_properties(
        [
            {"BASIN": "Ohio", "RIVER": "Wabash River", "UNCAL_DATA": 1200, "MARGIN": 10,
             "UNCAL_MIN": 1180, "UNCAL_MAX": 1220},
            {"BASIN": "Lower Mississippi", "RIVER": "White River", "UNCAL_DATA": 500, "MARGIN": 30,
             "UNCAL_MIN": 440, "UNCAL_MAX": 560},
        ]
    )


def test_empty_result_shows_message():
    body = results_table(project([]))

    assert isinstance(body, html.Div)
    assert body.children == EMPTY_MESSAGE


def test_non_empty_result_shows_table_rows():
    result = project(_make_store())
    body = results_table(result)

    assert isinstance(body, dash_table.DataTable)
    assert body.data == result.display_rows()
    assert [c["id"] for c in body.columns] == list(DISPLAY_COLUMNS)


def test_render_results_for_filter_matching_nothing_disables_export():
    session = BrowserSession(_make_store())
    payload = filter_state_payload(FilterSpec.from_inputs(choices={"basin": "Missouri"}), "uncal-desc")

    body, count_label, download_disabled = render_results(session, payload)

    assert isinstance(body, html.Div)
    assert body.children == EMPTY_MESSAGE
    assert count_label == "0 records shown"
    assert download_disabled is True
    assert session.last_result is not None and session.last_result.is_empty


def test_render_results_without_state_shows_everything():
    session = BrowserSession(_make_store())

    body, count_label, download_disabled = render_results(session, None)

    assert isinstance(body, dash_table.DataTable)
    assert count_label == "2 records shown"
    assert download_disabled is False
