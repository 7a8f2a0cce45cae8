"""Record Rules — tests for key normalization and field validation.

Tests cover:
    - normalize_key trims and lowercases, None → empty key
    - clean_text returns None for blank or non-string input
    - is_valid_age inclusive bounds, rejects bool and non-int
    - check_record_fields reports the first invalid field in order
"""

import pytest

from roster.core.domain_types import RecordField
from roster.core.record_rules import (
    MAX_AGE,
    MIN_AGE,
    check_record_fields,
    clean_text,
    is_valid_age,
    normalize_key,
)


def test_normalize_key_trims_and_folds_case():
    assert normalize_key("  STU001 ") == "stu001"
    assert normalize_key("stu001") == normalize_key("STU001")


def test_normalize_key_none_is_empty():
    assert normalize_key(None) == ""


def test_clean_text_trims():
    assert clean_text("  Grade 10  ") == "Grade 10"


@pytest.mark.parametrize("value", ["", "   ", None, 42])
def test_clean_text_blank_is_none(value):
    assert clean_text(value) is None


def test_age_bounds_are_inclusive():
    assert MIN_AGE == 5
    assert MAX_AGE == 100
    assert is_valid_age(5)
    assert is_valid_age(100)
    assert not is_valid_age(4)
    assert not is_valid_age(101)


@pytest.mark.parametrize("age", [True, False, 16.0, "16", None])
def test_non_int_age_is_invalid(age):
    assert not is_valid_age(age)


def test_check_record_fields_all_valid():
    assert check_record_fields("S1", "Alice", 16, "G10") is None


def test_check_record_fields_reports_first_invalid():
    bad_field, message = check_record_fields("", "", 200, "")
    assert bad_field is RecordField.ID
    assert "id" in message


def test_check_record_fields_age_message_names_range():
    bad_field, message = check_record_fields("S1", "Alice", 3, "G10")
    assert bad_field is RecordField.AGE
    assert "5" in message and "100" in message


def test_normalize_key_keeps_casefold_only_matches_apart():
    assert normalize_key("STRASSE") != normalize_key("straße")
    assert normalize_key("ÉLÈVE") == normalize_key("élève")
