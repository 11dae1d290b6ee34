from __future__ import annotations

import pytest

from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.predicate import make_predicate, matches, select
from rc_browser.core.record_store import Record, RecordStore


def _record(**props) -> Record:
    return Record.from_properties(0, props)


def _make_store() -> RecordStore:
    return RecordStore.from_properties(
        [
            {"BASIN": "Ohio", "RIVER": "Wabash River", "UNCAL_DATA": 1200, "MARGIN": 10,
             "UNCAL_MIN": 1180, "UNCAL_MAX": 1220},
            {"BASIN": "Upper Mississippi", "RIVER": "O'Brien Creek", "UNCAL_DATA": 1900, "MARGIN": 10,
             "UNCAL_MIN": 1880, "UNCAL_MAX": 1920},
            {"BASIN": "Ohio", "RIVER": None, "UNCAL_DATA": 500, "MARGIN": 30,
             "UNCAL_MIN": 440, "UNCAL_MAX": 560},
            {"BASIN": " ", "UNCAL_DATA": None, "MARGIN": "", "UNCAL_MIN": None, "UNCAL_MAX": None},
        ]
    )


def test_unconstrained_spec_selects_every_record():
    store = _make_store()
    assert select(store, FilterSpec()) == list(store)


def test_categorical_equality_is_exact():
    store = _make_store()

    basin = select(store, FilterSpec.from_inputs(choices={"basin": "Ohio"}))
    assert [r.index for r in basin] == [0, 2]

    assert select(store, FilterSpec.from_inputs(choices={"basin": "ohio"})) == []


def test_missing_categorical_value_fails_constrained_test():
    store = _make_store()
    river = select(store, FilterSpec.from_inputs(choices={"river": "O'Brien Creek"}))
    assert [r.index for r in river] == [1]

    # record 3 has a blank basin, which never equals anything
    spec = FilterSpec.from_inputs(choices={"basin": "Ohio", "river": "Wabash River"})
    assert [r.index for r in select(store, spec)] == [0]


def test_margin_ceiling_is_inclusive_and_missing_margin_fails():
    store = _make_store()
    spec = FilterSpec.from_inputs(max_uncertainty="10")
    assert [r.index for r in select(store, spec)] == [0, 1]

    spec = FilterSpec.from_inputs(max_uncertainty=1000)
    assert [r.index for r in select(store, spec)] == [0, 1, 2]


def test_mode_sensitivity_for_one_sided_lower_bound():
    record = _record(UNCAL_DATA=1100, UNCAL_MIN=1000, UNCAL_MAX=1200)

    assert matches(record, FilterSpec.from_inputs(age_min=1150, mode="overlap"))
    assert not matches(record, FilterSpec.from_inputs(age_min=1150, mode="center"))
    assert not matches(record, FilterSpec.from_inputs(age_min=1150, mode="contained"))


@pytest.mark.parametrize(
    "mode, lo, hi, expected",
    [
        ("center", 1100, 1100, True),
        ("center", 1100.5, None, False),
        ("contained", 1000, 1200, True),
        ("contained", 1000, 1199, False),
        ("overlap", 1200, None, True),
        ("overlap", None, 1000, True),
        ("overlap", 1201, None, False),
        ("overlap", None, 999, False),
    ],
)
def test_bounds_are_inclusive(mode, lo, hi, expected):
    record = _record(UNCAL_DATA=1100, UNCAL_MIN=1000, UNCAL_MAX=1200)
    spec = FilterSpec.from_inputs(age_min=lo, age_max=hi, mode=mode)
    assert matches(record, spec) is expected


def test_missing_center_age_fails_only_center_mode():
    record = _record(UNCAL_DATA=None, UNCAL_MIN=1000, UNCAL_MAX=1200)

    assert not matches(record, FilterSpec.from_inputs(age_min=0, mode="center"))
    assert matches(record, FilterSpec.from_inputs(age_min=0, mode="overlap"))
    assert matches(record, FilterSpec.from_inputs(age_min=0, mode="contained"))


@pytest.mark.parametrize("mode", ["contained", "overlap"])
def test_missing_range_end_fails_range_modes(mode):
    record = _record(UNCAL_DATA=1100, UNCAL_MIN=None, UNCAL_MAX=1200)

    assert not matches(record, FilterSpec.from_inputs(age_min=0, mode=mode))
    assert not matches(record, FilterSpec.from_inputs(age_max=5000, mode=mode))
    # no age bound: age data is not consulted at all
    assert matches(record, FilterSpec.from_inputs(mode=mode))


def test_inverted_range_is_evaluated_literally():
    record = _record(UNCAL_DATA=1100, UNCAL_MIN=1300, UNCAL_MAX=900)

    assert not matches(record, FilterSpec.from_inputs(age_min=1000, mode="overlap"))
    assert matches(record, FilterSpec.from_inputs(age_max=1000, mode="contained"))
    assert matches(record, FilterSpec.from_inputs(age_min=1000, age_max=1000, mode="overlap")) is False


def test_make_predicate_matches_function():
    store = _make_store()
    spec = FilterSpec.from_inputs(age_min=1000, mode="overlap")
    predicate = make_predicate(spec)
    assert [predicate(r) for r in store] == [matches(r, spec) for r in store]


def test_repeated_evaluation_is_identical():
    store = _make_store()
    spec = FilterSpec.from_inputs(choices={"basin": "Ohio"}, age_max=2000, mode="contained")
    assert select(store, spec) == select(store, spec)
