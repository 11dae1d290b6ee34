from __future__ import annotations

import logging
import math

from rc_browser.core.fields import CENTER_AGE, RANGE_HIGH, RANGE_LOW
from rc_browser.core.record_store import RecordStore
from rc_browser.validation.errors import ValidationError, ValidationIssue


def validate_record_store(store: RecordStore) -> None:
    """
    Report data-quality problems that change how records filter.
    Nothing is repaired; records are always evaluated as loaded.
    """
    issues: list[ValidationIssue] = []

    if len(store) == 0:
        issues.append(ValidationIssue("RECORDS_EMPTY", "Dataset contains no records."))

    no_center = 0
    no_range = 0
    partial_range = 0
    inverted = 0
    for record in store:
        low = record.number(RANGE_LOW)
        high = record.number(RANGE_HIGH)
        if math.isnan(record.number(CENTER_AGE)):
            no_center += 1
        if math.isnan(low) and math.isnan(high):
            no_range += 1
        elif math.isnan(low) or math.isnan(high):
            partial_range += 1
        elif low > high:
            inverted += 1

    if no_center:
        issues.append(
            ValidationIssue(
                "RECORDS_NO_CENTER_AGE",
                f"{no_center} record(s) have no {CENTER_AGE}; they never match center-mode age filters.",
            )
        )
    if no_range:
        issues.append(
            ValidationIssue(
                "RECORDS_NO_RANGE",
                f"{no_range} record(s) lack {RANGE_LOW}/{RANGE_HIGH}; they never match range-mode age filters.",
            )
        )
    if partial_range:
        issues.append(
            ValidationIssue(
                "RECORDS_PARTIAL_RANGE",
                f"{partial_range} record(s) have only one of {RANGE_LOW}/{RANGE_HIGH}; "
                "with a one-sided age window the map may show them while the table does not.",
            )
        )
    if inverted:
        issues.append(
            ValidationIssue(
                "RECORDS_INVERTED_RANGE",
                f"{inverted} record(s) have {RANGE_LOW} > {RANGE_HIGH}.",
            )
        )

    if issues:
        raise ValidationError(issues)


def warn_on_invalid_records(store: RecordStore, logger: logging.Logger) -> None:
    """
    Validate the store and log a warning instead of failing: the app still
    runs with the data as loaded.
    """
    try:
        validate_record_store(store)
    except ValidationError as e:
        logger.warning(
            "Record validation found issues: %s",
            "; ".join(f"{issue.code}: {issue.message}" for issue in e.issues),
        )
