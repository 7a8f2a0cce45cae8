"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordKey is always the output of normalize_key (trimmed, lowercased)
    - Every mutating store call returns a StoreResult, never raises for expected outcomes
    - All outcome kinds encoded as Enums: no raw string matching

Design Decisions:
    - NewType for RecordKey: zero runtime cost, type checker separates keys from raw ids
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from roster.core.record import Record


# ─── Identity Types ──────────────────────────────────────────────

RecordKey = NewType("RecordKey", str)


# ─── Enums ───────────────────────────────────────────────────────

class StoreOutcome(str, Enum):
    """Outcome of a store operation, maps 1:1 to shell error codes."""
    OK = "ok"
    DUPLICATE_KEY = "duplicate_key"
    INVALID_FIELD = "invalid_field"
    NOT_FOUND = "not_found"


class RecordField(str, Enum):
    """Validated record fields, named as they appear on Record."""
    ID = "id"
    DISPLAY_NAME = "display_name"
    AGE = "age"
    CATEGORY = "category"


# ─── Result Value ────────────────────────────────────────────────

@dataclass(frozen=True)
class StoreResult:
    """Result of add/update/remove.

    `record` is the stored (add/update) or removed (remove) record on success.
    `field` names the first offending field on INVALID_FIELD.
    `ignored_fields` lists patch values that were supplied but invalid (update only).
    """
    outcome: StoreOutcome
    record: "Record | None" = None
    field: RecordField | None = None
    message: str = ""
    ignored_fields: tuple[RecordField, ...] = ()

    @property
    def ok(self) -> bool:
        return self.outcome is StoreOutcome.OK
