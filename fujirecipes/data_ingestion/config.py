"""
Import configuration for the recipe corpus.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImportConfig:
    """
    Configuration for loading scraped recipe records into the store.
    """

    seed_path: Path = Path(__file__).resolve().parent.parent / "data" / "seed_recipes.json"
    update_existing: bool = False
    max_sample_images: int = 6


DEFAULT_IMPORT_CONFIG = ImportConfig()
