"""
In-memory evaluation of a FilterSpec against Record Store entries.

Must select exactly the records the map layer selects when it runs the
compiled clause: a missing value never satisfies a constrained comparison,
bounds are inclusive, and no tolerance is applied.
"""
from __future__ import annotations

import math
from typing import Callable, Iterable, List

from rc_browser.core.clause_compiler import age_columns
from rc_browser.core.fields import CENTER_AGE, MARGIN, RANGE_HIGH, RANGE_LOW, AgeMode
from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.record_store import Record


def _categorical_ok(record: Record, spec: FilterSpec) -> bool:
    return all(
        record.text(column) == value
        for column, value in spec.categorical.items()
    )


def matches(record: Record, spec: FilterSpec) -> bool:
    if not _categorical_ok(record, spec):
        return False

    if spec.max_uncertainty is not None:
        margin = record.number(MARGIN)
        if math.isnan(margin) or margin > spec.max_uncertainty:
            return False

    if not spec.has_age_bounds:
        return True

    if spec.mode is AgeMode.CENTER:
        if math.isnan(record.number(CENTER_AGE)):
            return False
    elif math.isnan(record.number(RANGE_LOW)) or math.isnan(record.number(RANGE_HIGH)):
        # Missing range data never matches an age-bounded query in these modes.
        return False

    lower_column, upper_column = age_columns(spec.mode)
    if spec.age_min is not None and record.number(lower_column) < spec.age_min:
        return False
    if spec.age_max is not None and record.number(upper_column) > spec.age_max:
        return False
    return True


def make_predicate(spec: FilterSpec) -> Callable[[Record], bool]:
    return lambda record: matches(record, spec)


def select(records: Iterable[Record], spec: FilterSpec) -> List[Record]:
    """Matching records, in the order given."""
    if spec.is_unconstrained:
        return list(records)
    predicate = make_predicate(spec)
    return [r for r in records if predicate(r)]
