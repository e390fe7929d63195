from __future__ import annotations

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS recipes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    description TEXT NOT NULL DEFAULT '',
    film_simulation TEXT NOT NULL DEFAULT 'Classic Chrome',
    white_balance TEXT NOT NULL DEFAULT 'Auto',
    white_balance_shift_red INTEGER NOT NULL DEFAULT 0,
    white_balance_shift_blue INTEGER NOT NULL DEFAULT 0,
    dynamic_range TEXT NOT NULL DEFAULT 'DR100',
    highlight INTEGER NOT NULL DEFAULT 0,
    shadow INTEGER NOT NULL DEFAULT 0,
    color INTEGER NOT NULL DEFAULT 0,
    sharpness INTEGER NOT NULL DEFAULT 0,
    noise_reduction INTEGER NOT NULL DEFAULT 0,
    grain_effect TEXT NOT NULL DEFAULT 'Off',
    grain_size TEXT,
    color_chrome_effect TEXT NOT NULL DEFAULT 'Off',
    color_chrome_fx_blue TEXT NOT NULL DEFAULT 'Off',
    clarity INTEGER NOT NULL DEFAULT 0,
    exposure_compensation TEXT NOT NULL DEFAULT '0',
    sample_images TEXT NOT NULL DEFAULT '[]',
    source TEXT NOT NULL DEFAULT 'manual',
    source_url TEXT,
    author TEXT,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS tags (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    category TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS recipe_tags (
    recipe_id INTEGER NOT NULL REFERENCES recipes(id) ON DELETE CASCADE,
    tag_id INTEGER NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
    weight REAL NOT NULL DEFAULT 1.0,
    PRIMARY KEY (recipe_id, tag_id)
);

CREATE TABLE IF NOT EXISTS cameras (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    model TEXT NOT NULL UNIQUE,
    sensor TEXT
);

CREATE TABLE IF NOT EXISTS recipe_cameras (
    recipe_id INTEGER NOT NULL REFERENCES recipes(id) ON DELETE CASCADE,
    camera_id INTEGER NOT NULL REFERENCES cameras(id) ON DELETE CASCADE,
    PRIMARY KEY (recipe_id, camera_id)
);

CREATE INDEX IF NOT EXISTS idx_recipes_source_url ON recipes(source_url);
"""

CAMERAS: list[tuple[str, str]] = [
    ("X100V", "X-Trans IV"),
    ("X100VI", "X-Trans V"),
    ("X-T4", "X-Trans IV"),
    ("X-T5", "X-Trans V"),
    ("X-T30 II", "X-Trans IV"),
    ("X-S10", "X-Trans IV"),
    ("X-S20", "X-Trans IV"),
    ("X-E4", "X-Trans IV"),
    ("X-Pro3", "X-Trans IV"),
    ("X-H2", "X-Trans V"),
]

# Columns written by the importer, in insert order
RECIPE_COLUMNS: list[str] = [
    "name",
    "description",
    "film_simulation",
    "white_balance",
    "white_balance_shift_red",
    "white_balance_shift_blue",
    "dynamic_range",
    "highlight",
    "shadow",
    "color",
    "sharpness",
    "noise_reduction",
    "grain_effect",
    "grain_size",
    "color_chrome_effect",
    "color_chrome_fx_blue",
    "clarity",
    "exposure_compensation",
    "sample_images",
    "source",
    "source_url",
    "author",
]
