from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from fujirecipes.data_ingestion.models import RecipeRecord
from fujirecipes.data_ingestion.normalize import normalize_recipe
from fujirecipes.db.config import StoreConfig
from fujirecipes.db.init_db import init_database
from fujirecipes.db.store import RecipeStore, RecipeStoreError
from fujirecipes.recommendations.tag_tables import TAG_VOCABULARY


def test_open_missing_database_raises(tmp_path: Path):
    store = RecipeStore(StoreConfig(db_path=tmp_path / "missing.db"))
    with pytest.raises(RecipeStoreError, match="not initialized"):
        store.open()
    assert not store.is_open


def test_closed_store_raises_on_read(tmp_path: Path):
    store = RecipeStore(StoreConfig(db_path=tmp_path / "recipes.db"))
    with pytest.raises(RecipeStoreError):
        store.fetch_corpus()


def test_initialize_seeds_vocabulary_and_cameras(store: RecipeStore):
    tags = store.list_tags()
    assert len(tags) == len(TAG_VOCABULARY)
    assert {t["category"] for t in tags} == {"lighting", "subject", "mood", "color", "location", "season"}
    assert len(store.list_cameras()) == 10


def test_initialize_is_repeatable(store: RecipeStore):
    store.initialize()
    assert len(store.list_tags()) == len(TAG_VOCABULARY)


def test_empty_store_has_empty_corpus(store: RecipeStore):
    assert store.fetch_corpus().empty


def test_corpus_ordered_by_id_with_tag_lists(seeded_store: RecipeStore):
    corpus = seeded_store.fetch_corpus()
    assert len(corpus) == 12
    assert list(corpus["id"]) == sorted(corpus["id"])
    assert all(isinstance(tags, list) and tags for tags in corpus["tags"])
    assert all(isinstance(images, list) for images in corpus["sample_images"])


def test_list_recipes_ordered_by_name(seeded_store: RecipeStore):
    names = list(seeded_store.list_recipes()["name"])
    assert names == sorted(names)


def test_get_recipe_includes_cameras(seeded_store: RecipeStore):
    recipe_id = seeded_store.find_recipe_id("Velvia Landscape")
    recipe = seeded_store.get_recipe(recipe_id)
    assert recipe["name"] == "Velvia Landscape"
    assert recipe["film_simulation"] == "Velvia"
    assert "X100V" in recipe["compatible_cameras"]
    assert recipe["compatible_cameras"] == sorted(recipe["compatible_cameras"])


def test_get_recipe_missing_returns_none(seeded_store: RecipeStore):
    assert seeded_store.get_recipe(9999) is None


def test_find_recipe_id_prefers_source_url(seeded_store: RecipeStore):
    by_url = seeded_store.find_recipe_id(
        "Some Other Name", "https://fujixweekly.com/2019/12/04/acros-street/"
    )
    assert by_url == seeded_store.find_recipe_id("Acros Street Mono")
    assert seeded_store.find_recipe_id("No Such Recipe") is None


def test_assign_tags_skips_unknown_names(store: RecipeStore):
    recipe_id = store.insert_recipe(normalize_recipe(RecipeRecord(name="Tag Test")))
    assert store.assign_tags(recipe_id, ["night", "not_a_tag", "moody"]) == 2
    assert sorted(store.get_recipe(recipe_id)["tags"]) == ["moody", "night"]


def test_context_manager_closes(tmp_path: Path):
    config = StoreConfig(db_path=tmp_path / "recipes.db")
    RecipeStore(config).open(create=True).close()
    with RecipeStore(config) as store:
        assert store.is_open
    assert not store.is_open


def test_init_database_creates_and_seeds(tmp_path: Path):
    config = StoreConfig(db_path=tmp_path / "fresh" / "recipes.db")
    summary = init_database(store_config=config)
    assert summary.imported == 12
    with RecipeStore(config) as store:
        assert len(store.fetch_corpus()) == 12


def test_concurrent_imports_share_one_connection(store: RecipeStore):
    def _import(i: int) -> int:
        values = normalize_recipe(RecipeRecord(name=f"Threaded {i}", film_simulation="Velvia"))
        return store.insert_tagged_recipe(values, ["landscape", "vibrant"])

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(_import, range(40)))

    assert len(set(ids)) == 40
    corpus = store.fetch_corpus()
    assert len(corpus) == 40
    assert all(sorted(tags) == ["landscape", "vibrant"] for tags in corpus["tags"])
