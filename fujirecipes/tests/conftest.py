from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fujirecipes.app import app, get_llm_config, get_store
from fujirecipes.data_ingestion.ingest import run_import
from fujirecipes.db.config import StoreConfig
from fujirecipes.db.store import RecipeStore
from fujirecipes.llm.config import LLMConfig


@pytest.fixture
def store(tmp_path: Path):
    """An initialized but empty store in a temporary directory."""
    s = RecipeStore(StoreConfig(db_path=tmp_path / "recipes.db")).open(create=True)
    yield s
    s.close()


@pytest.fixture
def seeded_store(store: RecipeStore) -> RecipeStore:
    run_import(store)
    return store


@pytest.fixture
def client(seeded_store: RecipeStore):
    app.dependency_overrides[get_store] = lambda: seeded_store
    app.dependency_overrides[get_llm_config] = lambda: LLMConfig(enabled=False)
    yield TestClient(app)
    app.dependency_overrides.clear()
