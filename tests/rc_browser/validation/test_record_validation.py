import logging

import pytest

from rc_browser.core.record_store import RecordStore
from rc_browser.validation.errors import ValidationError
from rc_browser.validation.record_validation import validate_record_store, warn_on_invalid_records


def _codes(store: RecordStore) -> set[str]:
    with pytest.raises(ValidationError) as exc:
        validate_record_store(store)
    return {issue.code for issue in exc.value.issues}


def test_clean_store_passes():
    store = RecordStore.from_properties(
        [{"UNCAL_DATA": 1200, "UNCAL_MIN": 1180, "UNCAL_MAX": 1220}]
    )
    validate_record_store(store)


def test_empty_store_is_reported():
    assert _codes(RecordStore()) == {"RECORDS_EMPTY"}


def test_missing_and_inconsistent_age_data_is_reported():
    store = RecordStore.from_properties(
        [
            {"UNCAL_DATA": None, "UNCAL_MIN": 1000, "UNCAL_MAX": 1200},
            {"UNCAL_DATA": 1100, "UNCAL_MIN": None, "UNCAL_MAX": None},
            {"UNCAL_DATA": 1100, "UNCAL_MIN": None, "UNCAL_MAX": 1200},
            {"UNCAL_DATA": 1100, "UNCAL_MIN": 1300, "UNCAL_MAX": 900},
        ]
    )
    assert _codes(store) == {
        "RECORDS_NO_CENTER_AGE",
        "RECORDS_NO_RANGE",
        "RECORDS_PARTIAL_RANGE",
        "RECORDS_INVERTED_RANGE",
    }


def test_warn_on_invalid_records_logs_instead_of_raising(caplog):
    logger = logging.getLogger("test.validation")
    with caplog.at_level(logging.WARNING, logger="test.validation"):
        warn_on_invalid_records(RecordStore(), logger)

    assert "RECORDS_EMPTY" in caplog.text
