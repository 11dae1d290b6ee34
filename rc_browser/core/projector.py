from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from rc_browser.core.clause_compiler import format_number
from rc_browser.core.fields import (
    CENTER_AGE,
    MARGIN,
    RANGE_HIGH,
    RANGE_LOW,
    SortOrder,
)
from rc_browser.core.record_store import Record

MISSING = "n/a"
EMPTY_MESSAGE = "No records match the current filters."

# (header, source column); None marks the combined range column
EXPORT_COLUMNS: Tuple[Tuple[str, Optional[str]], ...] = (
    ("River", "RIVER"),
    ("Basin", "BASIN"),
    ("State", "STATE"),
    ("Uncal age (14C yr BP)", CENTER_AGE),
    ("Margin", MARGIN),
    ("Uncal range (14C yr BP)", None),
    ("Author", "AUTHOR"),
    ("Publication year", "DATE"),
    ("Material", "MATERIAL"),
    ("Lab code", "LAB_CODE"),
    ("Sedimentary context", "SEDIMENTARY_CONTEXT"),
    ("Deposition environment", "DEPOSITION_ENVIRONMENT"),
    ("Alluvial assemblage", "ALLUVIAL_ESSEMBLE"),
)

DISPLAY_COLUMNS: Tuple[str, ...] = (
    "River",
    "Basin",
    "State",
    "Uncal age (14C yr BP)",
    "Margin",
    "Uncal range (14C yr BP)",
)


def _or_zero(value: float) -> float:
    return 0.0 if math.isnan(value) else value


def sort_key(order: SortOrder) -> Callable[[Record], Any]:
    """
    Key function for a sort order. Missing numbers compare as 0.

    uncal-desc is expressed as an ascending key on the negated age so that a
    single stable sort keeps filtered order for ties.
    """
    if order is SortOrder.UNCAL_ASC:
        return lambda r: _or_zero(r.number(CENTER_AGE))
    if order is SortOrder.MARGIN_ASC:
        return lambda r: (_or_zero(r.number(MARGIN)), -_or_zero(r.number(CENTER_AGE)))
    return lambda r: -_or_zero(r.number(CENTER_AGE))


def format_value(value: Any) -> str:
    """Render a single attribute for display/export; absent values become 'n/a'."""
    if value is None:
        return MISSING
    if isinstance(value, float):
        if math.isnan(value):
            return MISSING
        return format_number(value)
    try:
        if pd.isna(value):
            return MISSING
    except (TypeError, ValueError):
        pass
    return str(value)


def format_range(record: Record) -> str:
    low = format_value(record.number(RANGE_LOW))
    high = format_value(record.number(RANGE_HIGH))
    return f"{low}–{high}"


def export_row(record: Record) -> Dict[str, str]:
    row: Dict[str, str] = {}
    for header, column in EXPORT_COLUMNS:
        row[header] = format_range(record) if column is None else format_value(record.get(column))
    return row


def display_row(record: Record) -> Dict[str, str]:
    row = {header: export_row(record)[header] for header in DISPLAY_COLUMNS}
    if record.text("RIVER") is None:
        row["River"] = "Unknown river"
    if record.text("BASIN") is None:
        row["Basin"] = "Unknown basin"
    return row


@dataclass(frozen=True)
class ResultList:
    """
    Ordered records matching the current filter.

    Produced fresh on every filter/sort action; the most recent one is the
    only thing that can be exported.
    """
    records: Tuple[Record, ...]
    order: SortOrder = SortOrder.UNCAL_DESC

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def can_export(self) -> bool:
        return not self.is_empty

    @property
    def count_label(self) -> str:
        return f"{len(self.records)} records shown"

    def display_rows(self) -> List[Dict[str, str]]:
        return [display_row(r) for r in self.records]

    def export_rows(self) -> List[Dict[str, str]]:
        return [export_row(r) for r in self.records]

    def to_export_frame(self) -> pd.DataFrame:
        """
        Fixed-column export table: one row per record, 13 named columns,
        absent values rendered as 'n/a'. Written to CSV with a header row.
        """
        headers = [header for header, _ in EXPORT_COLUMNS]
        return pd.DataFrame(self.export_rows(), columns=headers)


def project(records: Iterable[Record], order: SortOrder | str | None = None) -> ResultList:
    """Sort matching records (stable) and wrap them in a ResultList."""
    order = SortOrder.parse(order)
    ordered: Sequence[Record] = sorted(records, key=sort_key(order))
    return ResultList(records=tuple(ordered), order=order)
