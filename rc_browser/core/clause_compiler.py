"""
Compile a FilterSpec into the WHERE clause consumed by the map layer.

Grammar of the output:

    <conjunct> (AND <conjunct>)*

where each conjunct is `FIELD = 'literal'`, `FIELD >= number` or
`FIELD <= number`. An unconstrained spec compiles to the tautology `1=1` so
the consumer always receives a valid filter.

Only single quotes inside literals are escaped (doubled). Values are expected
to arrive already normalised; no other characters are touched.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from rc_browser.core.fields import (
    CENTER_AGE,
    MARGIN,
    RANGE_HIGH,
    RANGE_LOW,
    AgeMode,
)
from rc_browser.core.filter_spec import FilterSpec

logger = logging.getLogger(__name__)

TAUTOLOGY = "1=1"


def escape_literal(value: str) -> str:
    return value.replace("'", "''")


def format_number(value: float) -> str:
    """Plain decimal text: 1150.0 -> '1150', 1150.5 -> '1150.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def age_columns(mode: AgeMode) -> Tuple[str, str]:
    """
    Columns compared against the (lower, upper) age bounds for a mode.

    center:    center age within the window
    contained: record range inside the window
    overlap:   record range intersects the window
    """
    if mode is AgeMode.CENTER:
        return CENTER_AGE, CENTER_AGE
    if mode is AgeMode.CONTAINED:
        return RANGE_LOW, RANGE_HIGH
    return RANGE_HIGH, RANGE_LOW


def _bound_clause(column: str, op: str, bound: Optional[float]) -> Optional[str]:
    if bound is None:
        return None
    return f"{column} {op} {format_number(bound)}"


def compile_where(spec: FilterSpec) -> str:
    clauses: List[str] = [
        f"{column} = '{escape_literal(value)}'"
        for column, value in spec.categorical.items()
    ]

    if spec.has_age_bounds:
        lower_column, upper_column = age_columns(spec.mode)
        for clause in (
            _bound_clause(lower_column, ">=", spec.age_min),
            _bound_clause(upper_column, "<=", spec.age_max),
        ):
            if clause is not None:
                clauses.append(clause)

    uncertainty = _bound_clause(MARGIN, "<=", spec.max_uncertainty)
    if uncertainty is not None:
        clauses.append(uncertainty)

    where = " AND ".join(clauses) if clauses else TAUTOLOGY
    logger.debug("Compiled filter clause", extra={"where": where})
    return where
