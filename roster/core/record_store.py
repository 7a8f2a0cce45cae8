"""Record Store — in-memory keyed collection of student records.

Invariants:
    - At most one record per normalized key (case-insensitive id)
    - Every stored record passed check_record_fields: no partially-valid inserts
    - add checks key existence BEFORE field validation (duplicate wins over invalid)
    - update never changes id or key; invalid patch values leave the field unchanged
    - update with both a RecordPatch and field keywords raises TypeError (caller bug, not an outcome)
    - list() and search_by_name() return new lists; stored Records are frozen,
      so a returned snapshot never changes after the call
    - count() == len(list()) at every instant

Design Decisions:
    - dict keyed by RecordKey: insertion order preserved by dict, O(1) lookup
    - Explicit store object, not module-level state: one instance per app, fresh per test
    - RLock around mutations and snapshot copies: routes may run on a threadpool
    - Returns StoreResult instead of raising: expected outcomes are values,
      the shell decides how to present them
"""

import logging
import threading
from dataclasses import replace

from roster.core.domain_types import RecordField, RecordKey, StoreOutcome, StoreResult
from roster.core.record import Record, RecordPatch
from roster.core.record_rules import (
    check_record_fields,
    clean_text,
    is_valid_age,
    normalize_key,
)

logger = logging.getLogger(__name__)


class RecordStore:
    """Owns the record collection exclusively. All access goes through these methods."""

    def __init__(self) -> None:
        self._records: dict[RecordKey, Record] = {}
        self._lock = threading.RLock()

    # ─── Mutations ───────────────────────────────────────────────

    def add(
        self, record_id: str, display_name: str, age: int, category: str,
    ) -> StoreResult:
        """Create a record. DUPLICATE_KEY is checked before field validation."""
        key = normalize_key(record_id)
        with self._lock:
            if key and key in self._records:
                logger.warning(
                    "Rejected add: duplicate id",
                    extra={"record_id": record_id, "operation": "add",
                           "error_code": StoreOutcome.DUPLICATE_KEY.value},
                )
                return StoreResult(
                    StoreOutcome.DUPLICATE_KEY,
                    field=RecordField.ID,
                    message=f"Record '{record_id.strip()}' already exists",
                )

            invalid = check_record_fields(record_id, display_name, age, category)
            if invalid is not None:
                bad_field, message = invalid
                logger.warning(
                    f"Rejected add: {message}",
                    extra={"record_id": record_id, "operation": "add",
                           "error_code": StoreOutcome.INVALID_FIELD.value},
                )
                return StoreResult(
                    StoreOutcome.INVALID_FIELD, field=bad_field, message=message,
                )

            record = Record(
                id=record_id.strip(),
                display_name=display_name.strip(),
                age=age,
                category=category.strip(),
            )
            self._records[record.key] = record

        logger.info(
            "Added record", extra={"record_id": record.id, "operation": "add"},
        )
        return StoreResult(StoreOutcome.OK, record=record)

    def update(
        self,
        record_id: str,
        patch: RecordPatch | None = None,
        *,
        display_name: str | None = None,
        age: int | None = None,
        category: str | None = None,
    ) -> StoreResult:
        """Apply a partial patch. Pass a RecordPatch or the fields as keywords, not both."""
        if patch is not None:
            if any(v is not None for v in (display_name, age, category)):
                raise TypeError("update() takes a RecordPatch or field keywords, not both")
        else:
            patch = RecordPatch(
                display_name=display_name, age=age, category=category,
            )
        key = normalize_key(record_id)
        with self._lock:
            current = self._records.get(key) if key else None
            if current is None:
                return self._not_found(record_id, "update")

            if patch.is_empty:
                return StoreResult(StoreOutcome.OK, record=current)

            changes, ignored = _resolve_patch(patch)
            updated = replace(current, **changes) if changes else current
            self._records[key] = updated

        if ignored:
            logger.warning(
                "Ignored invalid update values: "
                + ", ".join(f.value for f in ignored),
                extra={"record_id": updated.id, "operation": "update"},
            )
        logger.info(
            "Updated record", extra={"record_id": updated.id, "operation": "update"},
        )
        return StoreResult(
            StoreOutcome.OK, record=updated, ignored_fields=tuple(ignored),
        )

    def remove(self, record_id: str) -> StoreResult:
        key = normalize_key(record_id)
        with self._lock:
            removed = self._records.pop(key, None) if key else None
        if removed is None:
            return self._not_found(record_id, "remove")
        logger.info(
            "Removed record", extra={"record_id": removed.id, "operation": "remove"},
        )
        return StoreResult(StoreOutcome.OK, record=removed)

    # ─── Queries ─────────────────────────────────────────────────

    def find_by_id(self, record_id: str | None) -> Record | None:
        key = normalize_key(record_id)
        if not key:
            return None
        return self._records.get(key)

    def search_by_name(self, query: str | None) -> list[Record]:
        """Case-insensitive substring match on display_name. Blank query → []."""
        needle = clean_text(query)
        if needle is None:
            return []
        needle = needle.lower()
        return [
            r for r in self.list() if needle in r.display_name.lower()
        ]

    def list(self) -> list[Record]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, record_id: object) -> bool:
        if not isinstance(record_id, str):
            return False
        return self.find_by_id(record_id) is not None

    # ─── Internals ───────────────────────────────────────────────

    @staticmethod
    def _not_found(record_id: str | None, operation: str) -> StoreResult:
        logger.warning(
            f"Rejected {operation}: record not found",
            extra={"record_id": record_id, "operation": operation,
                   "error_code": StoreOutcome.NOT_FOUND.value},
        )
        return StoreResult(
            StoreOutcome.NOT_FOUND,
            message=f"Record '{(record_id or '').strip()}' not found",
        )


def _resolve_patch(
    patch: RecordPatch,
) -> tuple[dict[str, object], list[RecordField]]:
    """Split a patch into applicable changes and supplied-but-invalid fields."""
    changes: dict[str, object] = {}
    ignored: list[RecordField] = []

    if patch.display_name is not None:
        name = clean_text(patch.display_name)
        if name is None:
            ignored.append(RecordField.DISPLAY_NAME)
        else:
            changes["display_name"] = name

    if patch.age is not None:
        if is_valid_age(patch.age):
            changes["age"] = patch.age
        else:
            ignored.append(RecordField.AGE)

    if patch.category is not None:
        category = clean_text(patch.category)
        if category is None:
            ignored.append(RecordField.CATEGORY)
        else:
            changes["category"] = category

    return changes, ignored
