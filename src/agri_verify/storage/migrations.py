"""Idempotent reference database schema creation."""

from __future__ import annotations

import aiosqlite

CROPS_TABLE = """
CREATE TABLE IF NOT EXISTS crops (
    crop_id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    season TEXT NOT NULL,
    average_yield REAL NOT NULL,
    yield_unit TEXT NOT NULL DEFAULT 'kg/ha',
    duration_min_days INTEGER NOT NULL,
    duration_max_days INTEGER NOT NULL,
    is_active INTEGER NOT NULL DEFAULT 1
)
"""

CROP_ALIASES_TABLE = """
CREATE TABLE IF NOT EXISTS crop_aliases (
    alias TEXT PRIMARY KEY,
    crop_id INTEGER NOT NULL,
    FOREIGN KEY (crop_id) REFERENCES crops(crop_id)
)
"""

WEATHER_TABLE = """
CREATE TABLE IF NOT EXISTS weather_observations (
    observation_id INTEGER PRIMARY KEY AUTOINCREMENT,
    state TEXT NOT NULL,
    district TEXT NOT NULL,
    temperature REAL NOT NULL,
    humidity REAL NOT NULL,
    observed_at TEXT NOT NULL
)
"""

WEATHER_LOCATION_INDEX = """
CREATE INDEX IF NOT EXISTS idx_weather_location
ON weather_observations(state, district, observed_at)
"""


async def initialize_records_db(db_path: str) -> None:
    async with aiosqlite.connect(db_path) as db:
        await db.execute(CROPS_TABLE)
        await db.execute(CROP_ALIASES_TABLE)
        await db.execute(WEATHER_TABLE)
        await db.execute(WEATHER_LOCATION_INDEX)
        await db.commit()
