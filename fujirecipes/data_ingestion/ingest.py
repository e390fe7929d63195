from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd
from pydantic import ValidationError

from ..db.store import RecipeStore, RecipeStoreError
from .config import DEFAULT_IMPORT_CONFIG, ImportConfig
from .models import ImportResult, ImportStatus, ImportSummary, RecipeRecord
from .normalize import normalize_recipe
from .tagging import assign_tags

logger = logging.getLogger(__name__)


def import_recipe(
    store: RecipeStore,
    record: RecipeRecord | dict[str, Any],
    update_existing: bool = False,
    config: ImportConfig = DEFAULT_IMPORT_CONFIG,
) -> ImportResult:
    """
    Normalise and store one recipe.

    An existing recipe (matched by source URL, then name) is skipped, or
    has its settings rewritten when ``update_existing`` is set. Tags and
    camera links are only assigned when a recipe is first inserted,
    in the same transaction as the insert.
    """
    if not isinstance(record, RecipeRecord):
        record = RecipeRecord.model_validate(record)
    normalized = normalize_recipe(record, config)
    name = normalized["name"]

    existing_id = store.find_recipe_id(name, normalized["source_url"])
    if existing_id is not None:
        if not update_existing:
            logger.info("Skipping existing recipe: %s", name)
            return ImportResult(status=ImportStatus.skipped, id=existing_id, name=name)
        store.update_recipe(existing_id, normalized)
        logger.info("Updated recipe: %s", name)
        return ImportResult(status=ImportStatus.updated, id=existing_id, name=name)

    recipe_id = store.insert_tagged_recipe(normalized, assign_tags(normalized))
    logger.info("Imported recipe: %s (ID: %s)", name, recipe_id)
    return ImportResult(status=ImportStatus.imported, id=recipe_id, name=name)


def import_recipes(
    store: RecipeStore,
    records: Iterable[RecipeRecord | dict[str, Any]],
    update_existing: bool = False,
    config: ImportConfig = DEFAULT_IMPORT_CONFIG,
) -> ImportSummary:
    """Import a batch; a failing record is counted and logged, never fatal to the batch."""
    summary = ImportSummary()
    for record in records:
        try:
            result = import_recipe(store, record, update_existing=update_existing, config=config)
        except (ValidationError, RecipeStoreError) as exc:
            name = _record_name(record)
            logger.warning("Failed to import %s: %s", name, exc)
            result = ImportResult(status=ImportStatus.failed, name=name, error=str(exc))

        setattr(summary, result.status.value, getattr(summary, result.status.value) + 1)
        summary.details.append(result)
    return summary


def _record_name(record: RecipeRecord | dict[str, Any]) -> str:
    if isinstance(record, RecipeRecord):
        return record.name or "Unknown"
    return str(record.get("name") or "Unknown") if isinstance(record, dict) else "Unknown"


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of scraped recipe records."""
    df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def run_import(
    store: RecipeStore,
    config: ImportConfig = DEFAULT_IMPORT_CONFIG,
) -> ImportSummary:
    """
    Load the configured record file and import every recipe into ``store``.
    """
    records = load_records(config.seed_path)
    return import_recipes(store, records, update_existing=config.update_existing, config=config)
