"""Seed the reference record store with sample crop and weather data for development."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from agri_verify.config.settings import Settings
from agri_verify.models.domain import CropRecord, Season, WeatherRecord
from agri_verify.storage.sqlite_record_store import SQLiteRecordStore

SAMPLE_CROPS = [
    CropRecord(
        name="Rice",
        season=Season.KHARIF,
        average_yield=4000,
        duration_min_days=90,
        duration_max_days=150,
        aliases=("चावल", "paddy", "ਚਾਵਲ", "চাল", "వరి", "அரிசி", "तांदूळ", "ચોખા", "ಅಕ್ಕಿ", "അരി"),
    ),
    CropRecord(
        name="Wheat",
        season=Season.RABI,
        average_yield=3500,
        duration_min_days=110,
        duration_max_days=150,
        aliases=("गेहूं", "ਕਣਕ", "গম", "గోధుమ", "கோதுமை", "गहू", "ઘઉં", "ಗೋಧಿ", "ഗോതമ്പ്"),
    ),
    CropRecord(
        name="Cotton",
        season=Season.KHARIF,
        average_yield=500,
        yield_unit="kg lint/ha",
        duration_min_days=150,
        duration_max_days=210,
        aliases=("कपास", "ਕਪਾਹ", "তুলা", "పత్తి", "பருத்தி", "कापूस", "કપાસ", "ಹತ್ತಿ", "പരുത്തി"),
    ),
]

SAMPLE_WEATHER = [
    ("Punjab", "Ludhiana", 32.0, 65.0),
    ("Maharashtra", "Pune", 29.0, 55.0),
    ("Uttar Pradesh", "Lucknow", 35.0, 48.0),
    ("Tamil Nadu", "Coimbatore", 27.0, 72.0),
]


async def main(db_path: str) -> None:
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    store = SQLiteRecordStore(db_path)
    await store.initialize()

    for crop in SAMPLE_CROPS:
        await store.save_crop(crop)
        print(f"  crop: {crop.name} ({crop.season.value}, {len(crop.aliases)} aliases)")

    now = datetime.now(timezone.utc)
    for state, district, temperature, humidity in SAMPLE_WEATHER:
        await store.save_weather(
            WeatherRecord(
                state=state,
                district=district,
                temperature=temperature,
                humidity=humidity,
                observed_at=now,
            )
        )
        print(f"  weather: {district}, {state} {temperature}°C {humidity}%")

    print(
        f"\nSeeded {await store.count_crops()} crops and "
        f"{await store.count_weather_observations()} weather observations into {db_path}"
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--db", default=Settings().sqlite_records_db_path)
    args = parser.parse_args()
    asyncio.run(main(args.db))
