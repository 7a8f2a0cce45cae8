"""Record — immutable student record and the partial patch applied by update.

Invariants:
    - Record is frozen: a stored record never changes in place, update stores a replacement
    - RecordPatch uses None for "no change requested": no sentinel strings or negative ages
    - Record.key is derived, never stored separately from id

Design Decisions:
    - Frozen dataclass over Pydantic model: core stays framework-free, schemas/ owns the wire shape
    - Snapshots share Record instances safely because Records cannot be mutated
"""

from dataclasses import dataclass

from roster.core.domain_types import RecordKey
from roster.core.record_rules import normalize_key


@dataclass(frozen=True)
class Record:
    """One student record. `category` is the grade/class."""

    id: str
    display_name: str
    age: int
    category: str

    @property
    def key(self) -> RecordKey:
        return normalize_key(self.id)


@dataclass(frozen=True)
class RecordPatch:
    """Field-level partial update: only non-None fields are applied."""

    display_name: str | None = None
    age: int | None = None
    category: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.display_name is None
            and self.age is None
            and self.category is None
        )
