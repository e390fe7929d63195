from __future__ import annotations

import json
import logging
import sqlite3
import threading
from typing import Any

import pandas as pd

from ..recommendations.tag_tables import TAG_VOCABULARY
from .config import DEFAULT_STORE_CONFIG, StoreConfig
from .schema import CAMERAS, RECIPE_COLUMNS, SCHEMA_SQL

logger = logging.getLogger(__name__)

_RECIPES_WITH_TAGS_SQL = """
    SELECT r.*, GROUP_CONCAT(t.name) AS tag_names
    FROM recipes r
    LEFT JOIN recipe_tags rt ON r.id = rt.recipe_id
    LEFT JOIN tags t ON rt.tag_id = t.id
    {where}
    GROUP BY r.id
    ORDER BY {order_by}
"""


class RecipeStoreError(RuntimeError):
    """Raised when the recipe database cannot be opened or queried."""


def _split_tags(value: Any) -> list[str]:
    if not isinstance(value, str) or not value:
        return []
    return [t for t in value.split(",") if t]


def _parse_images(value: Any) -> list[str]:
    if not isinstance(value, str) or not value:
        return []
    try:
        images = json.loads(value)
    except json.JSONDecodeError:
        return []
    return [str(i) for i in images] if isinstance(images, list) else []


class RecipeStore:
    """
    SQLite-backed recipe repository.

    The store is constructed explicitly, opened once by its owner (the API
    lifespan or a CLI entry point) and passed to whatever needs the corpus.
    """

    def __init__(self, config: StoreConfig = DEFAULT_STORE_CONFIG) -> None:
        self.config = config
        self._conn: sqlite3.Connection | None = None
        self._write_lock = threading.Lock()

    # -- lifecycle ---------------------------------------------------------

    def open(self, create: bool = False) -> RecipeStore:
        """
        Connect to the database. With ``create`` the schema, tag vocabulary
        and camera list are created if missing; otherwise the file must exist.
        """
        if self._conn is not None:
            return self

        path = self.config.db_path
        if not create and not path.exists():
            raise RecipeStoreError(
                f"Database not initialized at {path}. Run: python -m fujirecipes.db.init_db"
            )
        if create:
            path.parent.mkdir(parents=True, exist_ok=True)

        try:
            conn = sqlite3.connect(str(path), timeout=self.config.timeout, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Could not open database at {path}: {exc}") from exc

        self._conn = conn
        if create:
            self.initialize()
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> RecipeStore:
        return self.open()

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RecipeStoreError("Recipe store is not open")
        return self._conn

    def initialize(self) -> None:
        """Create tables and seed the fixed tag vocabulary and cameras."""
        try:
            with self._write_lock, self.connection as conn:
                conn.executescript(SCHEMA_SQL)
                conn.executemany(
                    "INSERT OR IGNORE INTO tags (name, category) VALUES (?, ?)",
                    list(TAG_VOCABULARY.items()),
                )
                conn.executemany(
                    "INSERT OR IGNORE INTO cameras (model, sensor) VALUES (?, ?)",
                    CAMERAS,
                )
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Failed to initialize schema: {exc}") from exc

    # -- reads -------------------------------------------------------------

    def _read_recipes(
        self,
        where: str = "",
        params: tuple[Any, ...] = (),
        order_by: str = "r.id",
    ) -> pd.DataFrame:
        sql = _RECIPES_WITH_TAGS_SQL.format(where=where, order_by=order_by)
        try:
            df = pd.read_sql_query(sql, self.connection, params=params)
        except (sqlite3.Error, pd.errors.DatabaseError) as exc:
            raise RecipeStoreError(f"Failed to fetch recipes: {exc}") from exc

        df["tags"] = df["tag_names"].apply(_split_tags)
        df["sample_images"] = df["sample_images"].apply(_parse_images)
        return df.drop(columns=["tag_names"])

    def fetch_corpus(self) -> pd.DataFrame:
        """Return every recipe with its tag names as a list, ordered by id."""
        return self._read_recipes()

    def list_recipes(self) -> pd.DataFrame:
        return self._read_recipes(order_by="r.name")

    def get_recipe(self, recipe_id: int) -> dict[str, Any] | None:
        df = self._read_recipes(where="WHERE r.id = ?", params=(recipe_id,))
        if df.empty:
            return None
        record = df.iloc[0].to_dict()
        try:
            rows = self.connection.execute(
                """
                SELECT c.model
                FROM cameras c
                JOIN recipe_cameras rc ON c.id = rc.camera_id
                WHERE rc.recipe_id = ?
                ORDER BY c.model
                """,
                (recipe_id,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Failed to fetch cameras for recipe {recipe_id}: {exc}") from exc
        record["compatible_cameras"] = [row["model"] for row in rows]
        return record

    def list_tags(self) -> list[dict[str, Any]]:
        return self._fetch_dicts("SELECT id, name, category FROM tags ORDER BY category, name")

    def list_cameras(self) -> list[dict[str, Any]]:
        return self._fetch_dicts("SELECT id, model, sensor FROM cameras ORDER BY model")

    def find_recipe_id(self, name: str, source_url: str | None = None) -> int | None:
        """Look up an existing recipe by source URL first, then by name."""
        if source_url:
            rows = self._fetch_dicts("SELECT id FROM recipes WHERE source_url = ?", (source_url,))
            if rows:
                return rows[0]["id"]
        rows = self._fetch_dicts("SELECT id FROM recipes WHERE name = ?", (name,))
        return rows[0]["id"] if rows else None

    def _fetch_dicts(self, sql: str, params: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        try:
            return [dict(row) for row in self.connection.execute(sql, params).fetchall()]
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Query failed: {exc}") from exc

    # -- writes ------------------------------------------------------------

    def insert_recipe(self, values: dict[str, Any]) -> int:
        try:
            with self._write_lock, self.connection as conn:
                return self._insert_row(conn, values)
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Failed to insert recipe {values.get('name')!r}: {exc}") from exc

    def insert_tagged_recipe(
        self,
        values: dict[str, Any],
        tag_names: list[str],
        weight: float = 1.0,
    ) -> int:
        """
        Insert a new recipe, link its tags and every camera in a single
        transaction. Nothing is written if any step fails.
        """
        try:
            with self._write_lock, self.connection as conn:
                recipe_id = self._insert_row(conn, values)
                self._link_tags(conn, recipe_id, tag_names, weight)
                self._link_all_cameras(conn, recipe_id)
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Failed to import recipe {values.get('name')!r}: {exc}") from exc
        return recipe_id

    def update_recipe(self, recipe_id: int, values: dict[str, Any]) -> None:
        columns = [col for col in RECIPE_COLUMNS if col != "name"]
        assignments = ", ".join(f"{col} = ?" for col in columns)
        params = [values.get(col) for col in columns] + [recipe_id]
        try:
            with self._write_lock, self.connection as conn:
                conn.execute(f"UPDATE recipes SET {assignments} WHERE id = ?", params)
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Failed to update recipe {recipe_id}: {exc}") from exc

    def assign_tags(self, recipe_id: int, tag_names: list[str], weight: float = 1.0) -> int:
        """
        Link ``recipe_id`` to each named tag. Names outside the seeded
        vocabulary are skipped. Returns the number of tags linked.
        """
        try:
            with self._write_lock, self.connection as conn:
                return self._link_tags(conn, recipe_id, tag_names, weight)
        except sqlite3.Error as exc:
            raise RecipeStoreError(f"Failed to tag recipe {recipe_id}: {exc}") from exc

    # Statement helpers run inside the caller's transaction

    @staticmethod
    def _insert_row(conn: sqlite3.Connection, values: dict[str, Any]) -> int:
        placeholders = ", ".join("?" for _ in RECIPE_COLUMNS)
        cursor = conn.execute(
            f"INSERT INTO recipes ({', '.join(RECIPE_COLUMNS)}) VALUES ({placeholders})",
            [values.get(col) for col in RECIPE_COLUMNS],
        )
        return int(cursor.lastrowid)

    @staticmethod
    def _link_tags(
        conn: sqlite3.Connection,
        recipe_id: int,
        tag_names: list[str],
        weight: float,
    ) -> int:
        if not tag_names:
            return 0
        placeholders = ", ".join("?" for _ in tag_names)
        rows = conn.execute(
            f"SELECT id, name FROM tags WHERE name IN ({placeholders})",
            tag_names,
        ).fetchall()
        conn.executemany(
            "INSERT OR IGNORE INTO recipe_tags (recipe_id, tag_id, weight) VALUES (?, ?, ?)",
            [(recipe_id, row["id"], weight) for row in rows],
        )

        known = {row["name"] for row in rows}
        unknown = [t for t in tag_names if t not in known]
        if unknown:
            logger.debug("Skipping tags outside the vocabulary for recipe %s: %s", recipe_id, unknown)
        return len(rows)

    @staticmethod
    def _link_all_cameras(conn: sqlite3.Connection, recipe_id: int) -> None:
        conn.execute(
            "INSERT OR IGNORE INTO recipe_cameras (recipe_id, camera_id) SELECT ?, id FROM cameras",
            (recipe_id,),
        )
