from rc_browser.core.fields import AgeMode, SortOrder
from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.record_store import RecordStore
from rc_browser.ui.callbacks.callbacks_utils import filter_state_payload, try_parse_filter_state
from rc_browser.ui.helpers import get_choice_dropdown_options, spec_from_controls


def test_filter_state_payload_roundtrip():
    spec = FilterSpec.from_inputs(choices={"river": "O'Brien Creek"}, age_min=1000, mode="center")
    payload = filter_state_payload(spec, "margin-asc")

    parsed = try_parse_filter_state(payload)

    assert parsed is not None
    parsed_spec, order = parsed
    assert parsed_spec == spec
    assert order is SortOrder.MARGIN_ASC


def test_try_parse_filter_state_rejects_empty_or_foreign_data():
    assert try_parse_filter_state(None) is None
    assert try_parse_filter_state({}) is None
    assert try_parse_filter_state(["spec"]) is None


def test_spec_from_controls_follows_field_order():
    spec = spec_from_controls(["Ohio", None, " ", "Floodplain"], "100", "", None, "contained")

    assert dict(spec.categorical) == {"BASIN": "Ohio", "DEPOSITION_ENVIRONMENT": "Floodplain"}
    assert spec.age_min == 100.0
    assert spec.age_max is None
    assert spec.mode is AgeMode.CONTAINED


def test_choice_dropdown_options_come_from_the_store():
    store = RecordStore.from_properties([{"BASIN": "Ohio"}, {"BASIN": "Missouri"}, {"BASIN": None}])
    options = get_choice_dropdown_options(store)

    assert options["basin"] == [
        {"label": "Missouri", "value": "Missouri"},
        {"label": "Ohio", "value": "Ohio"},
    ]
    assert options["river"] == []
