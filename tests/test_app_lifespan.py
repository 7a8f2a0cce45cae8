"""Lifespan — one RecordStore per app, seeded according to settings."""

import logging

import pytest

import roster.main as main_module
from roster.config import Settings
from roster.core.record_store import RecordStore


@pytest.fixture(autouse=True)
def restore_logging():
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "roster":
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


@pytest.mark.parametrize("seed, expected", [(True, 3), (False, 0)])
async def test_lifespan_creates_store(monkeypatch, seed, expected):
    settings = Settings(_env_file=None, seed_sample_data=seed, log_format="text")
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)

    async with main_module.lifespan(main_module.app):
        store = main_module.app.state.record_store
        assert isinstance(store, RecordStore)
        assert store.count() == expected


async def test_each_startup_gets_a_fresh_store(monkeypatch):
    settings = Settings(_env_file=None, seed_sample_data=False, log_format="text")
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)

    async with main_module.lifespan(main_module.app):
        first = main_module.app.state.record_store
        first.add("S1", "Alice", 16, "G10")
    async with main_module.lifespan(main_module.app):
        assert main_module.app.state.record_store is not first
        assert main_module.app.state.record_store.count() == 0
