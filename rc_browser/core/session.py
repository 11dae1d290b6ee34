from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd

from rc_browser.core.clause_compiler import compile_where
from rc_browser.core.fields import CATEGORICAL_FIELDS, AgeMode, SortOrder
from rc_browser.core.filter_spec import FilterSpec
from rc_browser.core.predicate import select
from rc_browser.core.projector import EXPORT_COLUMNS, ResultList, project
from rc_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOutcome:
    """Both evaluation paths for one filter action."""
    where: str
    result: ResultList


class BrowserSession:
    """
    Per-app session state: the loaded Record Store and the last ResultList.

    One instance is created per running app (single user). Tests can build as
    many as they like.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        default_sort_order: SortOrder | str = SortOrder.UNCAL_DESC,
        default_age_mode: AgeMode | str = AgeMode.OVERLAP,
    ) -> None:
        self.store = store
        self.default_sort_order = SortOrder.parse(default_sort_order)
        self.default_age_mode = AgeMode.parse(default_age_mode)
        self._last_result: Optional[ResultList] = None

    @property
    def last_result(self) -> Optional[ResultList]:
        return self._last_result

    def compile(self, spec: FilterSpec) -> str:
        return compile_where(spec)

    def project(self, spec: FilterSpec, sort_order: SortOrder | str | None = None) -> ResultList:
        """Run the predicate over the store, sort, and remember the result for export."""
        matched = select(self.store, spec)
        result = project(matched, sort_order or self.default_sort_order)
        self._last_result = result

        logger.info(
            "Filter applied",
            extra={
                "n_records": len(self.store),
                "n_matched": len(result),
                "sort_order": result.order.value,
                "age_mode": spec.mode.value,
            },
        )
        return result

    def apply(self, spec: FilterSpec, sort_order: SortOrder | str | None = None) -> FilterOutcome:
        where = self.compile(spec)
        return FilterOutcome(where=where, result=self.project(spec, sort_order))

    def reset_inputs(self) -> Dict[str, Any]:
        """
        Raw input values for a reset: no categorical choices, the age window
        spanning every center age in the store, no margin ceiling.
        """
        age_min, age_max = self.store.age_extent()
        inputs: Dict[str, Any] = {f.key: None for f in CATEGORICAL_FIELDS}
        inputs.update(
            age_min=age_min,
            age_max=age_max,
            max_uncertainty=None,
            mode=self.default_age_mode.value,
            sort_order=self.default_sort_order.value,
        )
        return inputs

    def reset_spec(self) -> FilterSpec:
        inputs = self.reset_inputs()
        return FilterSpec.from_inputs(
            age_min=inputs["age_min"],
            age_max=inputs["age_max"],
            mode=inputs["mode"],
        )

    def export_frame(self) -> pd.DataFrame:
        """Export table of whatever is currently displayed (empty if nothing yet)."""
        if self._last_result is None:
            return pd.DataFrame(columns=[header for header, _ in EXPORT_COLUMNS])
        return self._last_result.to_export_frame()
