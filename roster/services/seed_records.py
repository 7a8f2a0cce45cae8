"""Sample Records — demonstration roster loaded at startup.

Invariants:
    - Seeding goes through RecordStore.add: uniqueness and validation still apply
    - Re-seeding a populated store adds nothing (duplicates are rejected, not overwritten)
"""

import logging

from roster.core.record_store import RecordStore

logger = logging.getLogger(__name__)

SAMPLE_RECORDS: tuple[tuple[str, str, int, str], ...] = (
    ("STU001", "Alice Johnson", 16, "Grade 10"),
    ("STU002", "Bob Smith", 15, "Grade 9"),
    ("STU003", "Carol Williams", 17, "Grade 11"),
)


def seed_sample_records(store: RecordStore) -> int:
    """Add the sample records. Returns how many were actually added."""
    added = 0
    for record_id, name, age, category in SAMPLE_RECORDS:
        if store.add(record_id, name, age, category).ok:
            added += 1
    logger.info(f"Seeded {added} sample record(s)")
    return added
