from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import pandas as pd

from rc_browser.core.fields import (
    ALL_COLUMNS,
    CENTER_AGE,
    LAT,
    LON,
    NUMERIC_COLUMNS,
    TEXT_COLUMNS,
)


def normalise_text(value: Any) -> Optional[str]:
    """Trim a categorical value; None and blank strings become None."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


def to_float(value: Any) -> float:
    """
    Parse a record's numeric attribute.

    Anything absent, blank, unparsable or non-finite becomes NaN, which every
    consumer treats as "missing".
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return math.nan
    try:
        number = float(value)
    except (TypeError, ValueError):
        return math.nan
    if not math.isfinite(number):
        return math.nan
    return number


@dataclass(frozen=True)
class Record:
    """
    One flattened point feature.

    `attributes` is keyed by source column name and holds normalised values:
    categorical/text columns are str or None, numeric columns are float
    (NaN when missing).
    """
    index: int
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def text(self, column: str) -> Optional[str]:
        value = self.attributes.get(column)
        return value if isinstance(value, str) else None

    def number(self, column: str) -> float:
        value = self.attributes.get(column, math.nan)
        if value is None:
            return math.nan
        return float(value)

    def get(self, column: str, default: Any = None) -> Any:
        return self.attributes.get(column, default)

    @classmethod
    def from_properties(cls, index: int, properties: Mapping[str, Any]) -> Record:
        """
        Normalise a raw property bag (e.g. GeoJSON feature properties).
        Unknown properties are kept as-is for display.
        """
        attrs: Dict[str, Any] = dict(properties)

        for column in TEXT_COLUMNS:
            attrs[column] = normalise_text(properties.get(column))

        for column in NUMERIC_COLUMNS + (LON, LAT):
            attrs[column] = to_float(properties.get(column))

        year = to_float(properties.get("DATE"))
        attrs["DATE"] = None if math.isnan(year) else int(year)

        return cls(index=index, attributes=MappingProxyType(attrs))


class RecordStore:
    """
    Read-only, ordered collection of normalised records.

    Insertion order is source order. Nothing in the browser mutates the
    stored sequence; filtering and sorting always build new lists.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: Tuple[Record, ...] = tuple(records)
        self._frame: Optional[pd.DataFrame] = None

    @classmethod
    def from_properties(cls, rows: Iterable[Mapping[str, Any]]) -> RecordStore:
        return cls(Record.from_properties(i, row) for i, row in enumerate(rows))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def distinct_values(self, column: str) -> List[str]:
        """Sorted unique non-blank values of a categorical column."""
        values = {r.text(column) for r in self._records}
        values.discard(None)
        return sorted(values)

    def age_extent(self) -> Tuple[Optional[float], Optional[float]]:
        """Min/max of all present center ages, or (None, None) if there are none."""
        ages = [r.number(CENTER_AGE) for r in self._records]
        ages = [a for a in ages if not math.isnan(a)]
        if not ages:
            return None, None
        return min(ages), max(ages)

    def to_frame(self) -> pd.DataFrame:
        """
        Return a DataFrame copy of all records, indexed by record index.
        Missing text is None, missing numerics are NaN.
        """
        if self._frame is None:
            rows = [
                {column: r.get(column) for column in ALL_COLUMNS}
                for r in self._records
            ]
            frame = pd.DataFrame(
                rows,
                columns=list(ALL_COLUMNS),
                index=pd.Index([r.index for r in self._records], name="record_id"),
            )
            for column in NUMERIC_COLUMNS + (LON, LAT):
                frame[column] = frame[column].astype(float)
            frame["DATE"] = frame["DATE"].astype("Int64")
            self._frame = frame
        return self._frame.copy()
