"""Record Schemas — Pydantic models for the records API boundary.

Invariants:
    - RecordCreate/RecordUpdate parse types only (str, int); blank strings and
      out-of-range ages pass through so the store reports INVALID_FIELD
    - RecordUpdate fields default to None: None means "leave unchanged"
    - Responses are built from core Record values, never from request bodies

Design Decisions:
    - No min_length/ge/le constraints here: a second copy of the rules would
      drift from core/record_rules
"""

from pydantic import BaseModel, Field

from roster.core.record import Record, RecordPatch


class RecordCreate(BaseModel):
    """Record creation body."""
    id: str
    display_name: str
    age: int
    category: str = Field(description="Grade or class, e.g. 'Grade 10'")


class RecordUpdate(BaseModel):
    """Partial update body. Omitted or null fields are not changed."""
    display_name: str | None = None
    age: int | None = None
    category: str | None = None

    def to_patch(self) -> RecordPatch:
        return RecordPatch(
            display_name=self.display_name, age=self.age, category=self.category,
        )


class RecordResponse(BaseModel):
    id: str
    display_name: str
    age: int
    category: str

    @classmethod
    def from_record(cls, record: Record) -> "RecordResponse":
        return cls(
            id=record.id,
            display_name=record.display_name,
            age=record.age,
            category=record.category,
        )


class RecordListResponse(BaseModel):
    records: list[RecordResponse]
    count: int


class RecordUpdateResponse(BaseModel):
    record: RecordResponse
    ignored_fields: list[str] = []
