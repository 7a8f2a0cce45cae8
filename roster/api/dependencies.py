"""Dependencies — hands the application's RecordStore to route handlers.

Invariants:
    - Exactly one RecordStore per app, created in the lifespan and kept on app.state
    - Routes obtain the store only through get_record_store (tests override it)
"""

from fastapi import Request

from roster.core.record_store import RecordStore


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store
