"""Error Handlers — log lines carry the store operation and record id.

Invariants:
    - Store-originated errors log the record_id/operation from the error context
    - Malformed bodies log the operation the request was headed for
"""

import logging


def _handler_records(caplog):
    return [r for r in caplog.records if r.name == "roster.api.error_handlers"]


async def test_not_found_logs_operation_and_record_id(client, caplog):
    with caplog.at_level(logging.WARNING, logger="roster.api.error_handlers"):
        res = await client.delete("/api/v1/records/S404")
    assert res.status_code == 404
    [record] = _handler_records(caplog)
    assert record.operation == "remove"
    assert record.record_id == "S404"
    assert record.error_code == "NOT_FOUND"


async def test_duplicate_logs_add(client, seeded, caplog):
    with caplog.at_level(logging.WARNING, logger="roster.api.error_handlers"):
        await client.post("/api/v1/records", json={
            "id": "stu001", "display_name": "Other", "age": 20, "category": "G12",
        })
    [record] = _handler_records(caplog)
    assert record.operation == "add"
    assert record.record_id == "stu001"
    assert record.error_code == "DUPLICATE_KEY"


async def test_malformed_patch_logs_update(client, seeded, caplog):
    with caplog.at_level(logging.WARNING, logger="roster.api.error_handlers"):
        res = await client.patch("/api/v1/records/STU001", json={"age": "old"})
    assert res.status_code == 400
    [record] = _handler_records(caplog)
    assert record.operation == "update"
    assert record.record_id == "STU001"
    assert record.error_code == "VALIDATION_ERROR"
    assert "age" in record.getMessage()
