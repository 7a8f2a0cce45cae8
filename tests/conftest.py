"""Root conftest — shared test configuration."""

import os

import pytest

# Route tests inject their own store; keep startup seeding out of the way
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from roster.core.record_store import RecordStore  # noqa: E402


@pytest.fixture
def store() -> RecordStore:
    """A fresh, empty store per test."""
    return RecordStore()
