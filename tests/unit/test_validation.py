"""
Unit tests for required-field validation.

Covers:
    - valid payloads produce no messages
    - missing, None and empty-string values are each reported
    - every missing field is reported, in declaration order
    - ensure_valid raises ValidationFailed carrying the full list
"""

import pytest

from course_platform.errors import ValidationFailed
from course_platform.manager.validation import (
    COURSE_FIELDS,
    USER_FIELDS,
    ensure_valid,
    validate_required,
)


def test_valid_course_payload_has_no_errors():
    assert validate_required({"title": "T", "description": "D"}, COURSE_FIELDS) == []


@pytest.mark.parametrize("value", [None, ""])
def test_null_and_empty_values_are_missing(value):
    errors = validate_required({"title": value, "description": "D"}, COURSE_FIELDS)
    assert errors == ['Please provide a value for "Title"']


def test_whitespace_counts_as_a_value():
    assert validate_required({"title": " ", "description": "D"}, COURSE_FIELDS) == []


def test_every_missing_field_is_reported_in_order():
    errors = validate_required({}, USER_FIELDS)
    assert errors == [
        'Please provide a value for "First Name"',
        'Please provide a value for "Last Name"',
        'Please provide a value for "Email Address"',
        'Please provide a value for "Password"',
    ]


def test_only_missing_fields_are_reported():
    payload = {"firstName": "Ada", "lastName": "", "emailAddress": "ada@example.com"}
    assert validate_required(payload, USER_FIELDS) == [
        'Please provide a value for "Last Name"',
        'Please provide a value for "Password"',
    ]


def test_extra_keys_are_ignored():
    payload = {"title": "T", "description": "D", "estimatedTime": None, "unexpected": 1}
    assert validate_required(payload, COURSE_FIELDS) == []


def test_ensure_valid_raises_with_all_messages():
    with pytest.raises(ValidationFailed) as info:
        ensure_valid({"description": ""}, COURSE_FIELDS)
    assert info.value.errors == [
        'Please provide a value for "Title"',
        'Please provide a value for "Description"',
    ]


def test_ensure_valid_passes_silently():
    assert ensure_valid({"title": "T", "description": "D"}, COURSE_FIELDS) is None
