from __future__ import annotations

__all__ = ["IDs", "choice_select_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        WHERE_CLAUSE = "where-clause"

    class Control:
        # Categorical selectors are built from CATEGORICAL_FIELDS, see choice_select_id()
        AGE_MIN = "age-min"
        AGE_MAX = "age-max"
        UNCERTAINTY_MAX = "uncertainty-max"
        AGE_MODE_SELECT = "age-mode"
        SORT_ORDER_SELECT = "sort-order"

        APPLY_BTN = "apply-filter"
        RESET_BTN = "reset-filter"

        # Sidebar metadata
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Map + results
        MAP_GRAPH = "map-graph"
        RECORD_COUNT = "record-count"
        RESULTS_BODY = "results-body"
        CLAUSE_TEXT = "clause-text"

        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"


def choice_select_id(key: str) -> str:
    """Component id of the dropdown for a categorical field key (e.g. 'basin')."""
    return f"{key}-select"
