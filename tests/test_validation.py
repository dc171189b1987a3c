from __future__ import annotations

from datetime import date

import pytest

from datebook.domain import (
    EventValidationError,
    IncompleteFieldsError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    MissingDateContextError,
    check_event_fields,
    check_submission,
)


def test_valid_fields_pass():
    check_event_fields("Standup", "09:00", "09:15")


@pytest.mark.parametrize(
    ("name", "start", "end"),
    [("", "09:00", "10:00"), ("Standup", "", "10:00"), ("Standup", "09:00", "")],
)
def test_blank_fields_are_incomplete(name, start, end):
    with pytest.raises(IncompleteFieldsError) as excinfo:
        check_event_fields(name, start, end)
    assert excinfo.value.message == "Please fill out all fields!"


@pytest.mark.parametrize(("start", "end"), [("10:00", "09:00"), ("09:00", "09:00")])
def test_start_must_precede_end(start, end):
    with pytest.raises(InvalidTimeRangeError) as excinfo:
        check_event_fields("Standup", start, end)
    assert str(excinfo.value) == "Start time must be earlier than end time!"


@pytest.mark.parametrize(("start", "end"), [("9:00", "10:00"), ("09:00", "24:00"), ("noon", "13:00")])
def test_times_must_be_24_hour_hh_mm(start, end):
    with pytest.raises(InvalidTimeFormatError):
        check_event_fields("Standup", start, end)


def test_incomplete_fields_reported_before_time_range():
    with pytest.raises(IncompleteFieldsError):
        check_event_fields("", "10:00", "09:00")


def test_missing_date_reported_first():
    with pytest.raises(MissingDateContextError) as excinfo:
        check_submission(None, "", "", "")
    assert excinfo.value.message == "Please Refresh the page and select the date"


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        check_submission(date(2024, 1, 1), "Standup", "10:00", "09:00")
    assert issubclass(IncompleteFieldsError, EventValidationError)
