from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class StoreConfig:
    """
    Location of the SQLite recipe database.
    """

    db_path: Path = Path(os.getenv("FUJIRECIPES_DB", str(_DATA_DIR / "recipes.db")))
    timeout: float = 5.0


DEFAULT_STORE_CONFIG = StoreConfig()
