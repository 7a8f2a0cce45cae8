"""Records — CRUD routes over the application's RecordStore.

Invariants:
    - Every failed StoreResult becomes a RosterError via error_from_result
    - /{record_id} is the only item path: every valid id, "count" included, reaches the record
    - The record count travels with list/search responses, not on a separate path
    - GET with ?name= searches; a blank name returns an empty list, not all records

Design Decisions:
    - async def handlers: store calls never block, so they run on the event loop
      and are serialized with each other
    - PATCH returns ignored_fields so clients can warn about rejected values
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from roster.api.dependencies import get_record_store
from roster.core.errors import ResourceNotFoundError, ErrorContext, error_from_result
from roster.core.record_store import RecordStore
from roster.schemas.record import (
    RecordCreate,
    RecordListResponse,
    RecordResponse,
    RecordUpdate,
    RecordUpdateResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/records", tags=["records"])


@router.post(
    "", response_model=RecordResponse, status_code=status.HTTP_201_CREATED,
)
async def create_record(
    body: RecordCreate, store: RecordStore = Depends(get_record_store),
):
    result = store.add(body.id, body.display_name, body.age, body.category)
    if not result.ok:
        raise error_from_result(result, body.id, "add")
    return RecordResponse.from_record(result.record)


@router.get("", response_model=RecordListResponse)
async def list_records(
    name: str | None = Query(None, description="Case-insensitive name substring"),
    store: RecordStore = Depends(get_record_store),
):
    """List all records, or search by name when ?name= is given."""
    records = store.list() if name is None else store.search_by_name(name)
    return RecordListResponse(
        records=[RecordResponse.from_record(r) for r in records],
        count=len(records),
    )


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: str, store: RecordStore = Depends(get_record_store),
):
    record = store.find_by_id(record_id)
    if record is None:
        raise ResourceNotFoundError(
            "Record", record_id.strip(),
            ErrorContext(record_id=record_id, operation="find_by_id"),
        )
    return RecordResponse.from_record(record)


@router.patch("/{record_id}", response_model=RecordUpdateResponse)
async def update_record(
    record_id: str,
    body: RecordUpdate,
    store: RecordStore = Depends(get_record_store),
):
    """Partial update: only fields present in the body are considered."""
    result = store.update(record_id, body.to_patch())
    if not result.ok:
        raise error_from_result(result, record_id, "update")
    return RecordUpdateResponse(
        record=RecordResponse.from_record(result.record),
        ignored_fields=[f.value for f in result.ignored_fields],
    )


@router.delete("/{record_id}", response_model=RecordResponse)
async def delete_record(
    record_id: str, store: RecordStore = Depends(get_record_store),
):
    result = store.remove(record_id)
    if not result.ok:
        raise error_from_result(result, record_id, "remove")
    return RecordResponse.from_record(result.record)
