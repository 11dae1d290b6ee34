from __future__ import annotations

import pytest

from rc_browser.core.clause_compiler import compile_where, escape_literal, format_number
from rc_browser.core.filter_spec import FilterSpec


def test_unconstrained_spec_compiles_to_tautology():
    assert compile_where(FilterSpec()) == "1=1"
    assert compile_where(FilterSpec.from_inputs(choices={"basin": "  "}, age_min="")) == "1=1"


def test_single_quotes_are_doubled():
    spec = FilterSpec.from_inputs(choices={"river": "O'Brien Creek"})
    assert compile_where(spec) == "RIVER = 'O''Brien Creek'"


def test_only_single_quotes_are_escaped():
    assert escape_literal('a"b\\c%_;') == 'a"b\\c%_;'
    assert escape_literal("''") == "''''"


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("center", "UNCAL_DATA >= 1000 AND UNCAL_DATA <= 2000"),
        ("contained", "UNCAL_MIN >= 1000 AND UNCAL_MAX <= 2000"),
        ("overlap", "UNCAL_MAX >= 1000 AND UNCAL_MIN <= 2000"),
    ],
)
def test_age_clauses_per_mode(mode, expected):
    spec = FilterSpec.from_inputs(age_min="1000", age_max="2000", mode=mode)
    assert compile_where(spec) == expected


def test_one_sided_age_window():
    assert compile_where(FilterSpec.from_inputs(age_min=1150, mode="overlap")) == "UNCAL_MAX >= 1150"
    assert compile_where(FilterSpec.from_inputs(age_max=1150, mode="contained")) == "UNCAL_MAX <= 1150"


def test_emission_order_is_categorical_then_age_then_margin():
    spec = FilterSpec.from_inputs(
        choices={
            "deposition": "Floodplain",
            "river": "Wabash River",
            "state": "IN",
            "basin": "Ohio",
        },
        age_min=500,
        age_max=1500.5,
        max_uncertainty=40,
        mode="center",
    )

    assert compile_where(spec) == (
        "BASIN = 'Ohio' AND STATE = 'IN' AND RIVER = 'Wabash River' "
        "AND DEPOSITION_ENVIRONMENT = 'Floodplain' "
        "AND UNCAL_DATA >= 500 AND UNCAL_DATA <= 1500.5 AND MARGIN <= 40"
    )


def test_margin_only():
    assert compile_where(FilterSpec.from_inputs(max_uncertainty="0")) == "MARGIN <= 0"


@pytest.mark.parametrize(
    "value, expected",
    [(1150.0, "1150"), (1150.5, "1150.5"), (-20.0, "-20"), (0.1, "0.1")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected
