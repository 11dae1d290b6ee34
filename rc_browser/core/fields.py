from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class CategoricalField:
    """
    A categorical column that can be constrained by equality.

    :param key: name used for UI inputs and serialised filter state
    :param column: source column name, also the field name in compiled clauses
    :param label: human readable label
    """
    key: str
    column: str
    label: str


# Order matters: clauses are emitted in this order.
CATEGORICAL_FIELDS: Tuple[CategoricalField, ...] = (
    CategoricalField(key="basin", column="BASIN", label="Basin"),
    CategoricalField(key="state", column="STATE", label="State"),
    CategoricalField(key="river", column="RIVER", label="River"),
    CategoricalField(
        key="deposition",
        column="DEPOSITION_ENVIRONMENT",
        label="Deposition environment",
    ),
)

CATEGORICAL_BY_KEY = {f.key: f for f in CATEGORICAL_FIELDS}

# Numeric columns
CENTER_AGE = "UNCAL_DATA"
RANGE_LOW = "UNCAL_MIN"
RANGE_HIGH = "UNCAL_MAX"
MARGIN = "MARGIN"

NUMERIC_COLUMNS: Tuple[str, ...] = (CENTER_AGE, MARGIN, RANGE_LOW, RANGE_HIGH)

# Display-only metadata
METADATA_COLUMNS: Tuple[str, ...] = (
    "AUTHOR",
    "DATE",
    "MATERIAL",
    "LAB_CODE",
    "SEDIMENTARY_CONTEXT",
    "ALLUVIAL_ESSEMBLE",
)

# Point coordinates kept for the map layer
LON = "LON"
LAT = "LAT"

TEXT_COLUMNS: Tuple[str, ...] = tuple(f.column for f in CATEGORICAL_FIELDS) + (
    "AUTHOR",
    "MATERIAL",
    "LAB_CODE",
    "SEDIMENTARY_CONTEXT",
    "ALLUVIAL_ESSEMBLE",
)

ALL_COLUMNS: Tuple[str, ...] = (
    tuple(f.column for f in CATEGORICAL_FIELDS)
    + NUMERIC_COLUMNS
    + METADATA_COLUMNS
    + (LON, LAT)
)


class AgeMode(str, Enum):
    """How an age window is compared against a record."""

    CENTER = "center"
    CONTAINED = "contained"
    OVERLAP = "overlap"

    @classmethod
    def parse(cls, value: Optional[str]) -> "AgeMode":
        """Unknown or missing values fall back to OVERLAP."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OVERLAP


class SortOrder(str, Enum):
    UNCAL_ASC = "uncal-asc"
    MARGIN_ASC = "margin-asc"
    UNCAL_DESC = "uncal-desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortOrder":
        """Unknown or missing values fall back to UNCAL_DESC."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNCAL_DESC


AGE_MODE_LABELS = {
    AgeMode.OVERLAP: "Range overlaps window",
    AgeMode.CONTAINED: "Range inside window",
    AgeMode.CENTER: "Center age inside window",
}

SORT_ORDER_LABELS = {
    SortOrder.UNCAL_DESC: "Uncal age (oldest first)",
    SortOrder.UNCAL_ASC: "Uncal age (youngest first)",
    SortOrder.MARGIN_ASC: "Margin (smallest first)",
}
