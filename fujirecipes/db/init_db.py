"""
Create the recipe database and load the bundled seed recipes.

Usage:
    python -m fujirecipes.db.init_db
"""
from __future__ import annotations

from ..data_ingestion.config import DEFAULT_IMPORT_CONFIG, ImportConfig
from ..data_ingestion.ingest import run_import
from ..data_ingestion.models import ImportSummary
from .config import DEFAULT_STORE_CONFIG, StoreConfig
from .store import RecipeStore


def init_database(
    store_config: StoreConfig = DEFAULT_STORE_CONFIG,
    import_config: ImportConfig = DEFAULT_IMPORT_CONFIG,
) -> ImportSummary:
    store = RecipeStore(store_config).open(create=True)
    try:
        return run_import(store, import_config)
    finally:
        store.close()


if __name__ == "__main__":
    summary = init_database()
    print(f"Database initialized at: {DEFAULT_STORE_CONFIG.db_path}")
    print(
        f"  - {summary.imported} imported, {summary.updated} updated, "
        f"{summary.skipped} skipped, {summary.failed} failed"
    )
