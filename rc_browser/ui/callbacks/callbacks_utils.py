from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from rc_browser.core.fields import SortOrder
from rc_browser.core.filter_spec import FilterSpec

logger = logging.getLogger(__name__)


def filter_state_payload(spec: FilterSpec, sort_order: SortOrder | str | None) -> Dict[str, Any]:
    """Serialisable content of the filter-state store."""
    return {"spec": spec.to_dict(), "sort_order": SortOrder.parse(sort_order).value}


def try_parse_filter_state(data: object) -> Optional[Tuple[FilterSpec, SortOrder]]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        spec = FilterSpec.from_dict(data.get("spec") or {})
    except Exception:
        logger.exception("Invalid filter-state: %r", data)
        return None
    return spec, SortOrder.parse(data.get("sort_order"))
