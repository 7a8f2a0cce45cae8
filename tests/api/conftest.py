"""API test fixtures — FastAPI test client bound to a fresh RecordStore.

Invariants:
    - Every test gets its own empty store via dependency override
    - Overrides cleared after each test so stores never leak between tests

Design Decisions:
    - ASGITransport does not run the lifespan, so app.state.record_store is
      never consulted; get_record_store is always overridden
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.api.dependencies import get_record_store
from roster.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_record_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seeded(store):
    """Store pre-loaded with two records."""
    store.add("STU001", "Alice Johnson", 16, "Grade 10")
    store.add("STU002", "Bob Smith", 15, "Grade 9")
    return store
