"""SQLite-backed reference record store implementing both gateway protocols."""

from __future__ import annotations

from datetime import datetime, timezone

import aiosqlite

from agri_verify.exceptions import GatewayError
from agri_verify.models.domain import CropRecord, Season, WeatherRecord
from agri_verify.storage.migrations import initialize_records_db


def _alias_key(name: str) -> str:
    return name.strip().casefold()


class SQLiteRecordStore:
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    async def initialize(self) -> None:
        await initialize_records_db(self._db_path)

    # --- Gateway lookups ---

    async def lookup_crop_record(self, name_or_alias: str) -> CropRecord | None:
        try:
            async with aiosqlite.connect(self._db_path) as db:
                db.row_factory = aiosqlite.Row
                async with db.execute(
                    "SELECT c.* FROM crops c JOIN crop_aliases a ON a.crop_id = c.crop_id "
                    "WHERE a.alias = ? AND c.is_active = 1",
                    (_alias_key(name_or_alias),),
                ) as cursor:
                    row = await cursor.fetchone()
                if row is None:
                    return None
                async with db.execute(
                    "SELECT alias FROM crop_aliases WHERE crop_id = ? ORDER BY alias",
                    (row["crop_id"],),
                ) as cursor:
                    aliases = tuple(r["alias"] for r in await cursor.fetchall())
                return self._row_to_crop(row, aliases)
        except aiosqlite.Error as e:
            raise GatewayError(f"Crop lookup failed for {name_or_alias!r}: {e}") from e

    async def lookup_current_weather(self, state: str, district: str) -> WeatherRecord | None:
        try:
            async with aiosqlite.connect(self._db_path) as db:
                db.row_factory = aiosqlite.Row
                async with db.execute(
                    "SELECT * FROM weather_observations "
                    "WHERE LOWER(state) = LOWER(?) AND LOWER(district) = LOWER(?) "
                    "ORDER BY observed_at DESC LIMIT 1",
                    (state.strip(), district.strip()),
                ) as cursor:
                    row = await cursor.fetchone()
                    if row is None:
                        return None
                    return self._row_to_weather(row)
        except aiosqlite.Error as e:
            raise GatewayError(f"Weather lookup failed for {state}/{district}: {e}") from e

    # --- Writes (seeding and ingestion) ---

    async def save_crop(self, crop: CropRecord, is_active: bool = True) -> None:
        async with aiosqlite.connect(self._db_path) as db:
            await db.execute(
                "INSERT INTO crops "
                "(name, season, average_yield, yield_unit, duration_min_days, duration_max_days, is_active) "
                "VALUES (?, ?, ?, ?, ?, ?, ?) "
                "ON CONFLICT(name) DO UPDATE SET season = excluded.season, "
                "average_yield = excluded.average_yield, yield_unit = excluded.yield_unit, "
                "duration_min_days = excluded.duration_min_days, "
                "duration_max_days = excluded.duration_max_days, is_active = excluded.is_active",
                (
                    crop.name,
                    crop.season.value,
                    crop.average_yield,
                    crop.yield_unit,
                    crop.duration_min_days,
                    crop.duration_max_days,
                    int(is_active),
                ),
            )
            async with db.execute("SELECT crop_id FROM crops WHERE name = ?", (crop.name,)) as cursor:
                (crop_id,) = await cursor.fetchone()
            await db.execute("DELETE FROM crop_aliases WHERE crop_id = ?", (crop_id,))
            aliases = {_alias_key(a) for a in (crop.name, *crop.aliases)}
            await db.executemany(
                "INSERT OR REPLACE INTO crop_aliases (alias, crop_id) VALUES (?, ?)",
                [(alias, crop_id) for alias in sorted(aliases)],
            )
            await db.commit()

    async def save_weather(self, observation: WeatherRecord) -> None:
        async with aiosqlite.connect(self._db_path) as db:
            await db.execute(
                "INSERT INTO weather_observations "
                "(state, district, temperature, humidity, observed_at) VALUES (?, ?, ?, ?, ?)",
                (
                    observation.state,
                    observation.district,
                    observation.temperature,
                    observation.humidity,
                    observation.observed_at.astimezone(timezone.utc).isoformat(),
                ),
            )
            await db.commit()

    async def count_crops(self) -> int:
        async with aiosqlite.connect(self._db_path) as db:
            async with db.execute("SELECT COUNT(*) FROM crops WHERE is_active = 1") as cursor:
                row = await cursor.fetchone()
                return row[0]

    async def count_weather_observations(self) -> int:
        async with aiosqlite.connect(self._db_path) as db:
            async with db.execute("SELECT COUNT(*) FROM weather_observations") as cursor:
                row = await cursor.fetchone()
                return row[0]

    @staticmethod
    def _row_to_crop(row: aiosqlite.Row, aliases: tuple[str, ...]) -> CropRecord:
        return CropRecord(
            name=row["name"],
            season=Season(row["season"]),
            average_yield=row["average_yield"],
            yield_unit=row["yield_unit"],
            duration_min_days=row["duration_min_days"],
            duration_max_days=row["duration_max_days"],
            aliases=aliases,
        )

    @staticmethod
    def _row_to_weather(row: aiosqlite.Row) -> WeatherRecord:
        return WeatherRecord(
            state=row["state"],
            district=row["district"],
            temperature=row["temperature"],
            humidity=row["humidity"],
            observed_at=datetime.fromisoformat(row["observed_at"]),
        )
