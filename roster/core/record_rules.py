"""Record Rules — key normalization and field validation, pure functions only.

Invariants:
    - normalize_key is the ONLY place ids are trimmed and lowercased
    - Age bounds are inclusive: MIN_AGE and MAX_AGE both valid
    - Validators return the cleaned value or None: they never raise

Design Decisions:
    - One normalization function for insert and lookup: uniqueness and
      lookup cannot drift apart
    - bool rejected as age: True/False are ints in Python but never a real age
"""

from roster.core.domain_types import RecordField, RecordKey


MIN_AGE: int = 5
MAX_AGE: int = 100


def normalize_key(raw_id: str | None) -> RecordKey:
    """Trim and lowercase an id into its lookup key. None → empty key.

    lower(), not casefold(): "STRASSE" and "straße" stay distinct keys.
    """
    if raw_id is None:
        return RecordKey("")
    return RecordKey(raw_id.strip().lower())


def clean_text(value: str | None) -> str | None:
    """Trimmed text, or None when missing or blank."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def is_valid_age(age: object) -> bool:
    if isinstance(age, bool) or not isinstance(age, int):
        return False
    return MIN_AGE <= age <= MAX_AGE


def check_record_fields(
    record_id: str | None,
    display_name: str | None,
    age: object,
    category: str | None,
) -> tuple[RecordField, str] | None:
    """Return (field, message) for the first invalid field, or None if all valid."""
    if clean_text(record_id) is None:
        return RecordField.ID, "id must not be empty"
    if clean_text(display_name) is None:
        return RecordField.DISPLAY_NAME, "display_name must not be empty"
    if not is_valid_age(age):
        return RecordField.AGE, f"age must be an integer between {MIN_AGE} and {MAX_AGE}"
    if clean_text(category) is None:
        return RecordField.CATEGORY, "category must not be empty"
    return None
