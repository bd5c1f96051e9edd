"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest
import structlog

from agri_verify.config.settings import Settings
from agri_verify.models.domain import CropRecord, Season, WeatherRecord
from agri_verify.pipeline.verification_pipeline import create_pipeline
from agri_verify.storage.memory_record_store import InMemoryRecordStore


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog events instead of printing them."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture
def settings():
    """Test settings with temp paths."""
    tmp = tempfile.mkdtemp()
    return Settings(sqlite_records_db_path=str(Path(tmp) / "test_records.db"))


@pytest.fixture
def rice_record():
    return CropRecord(
        name="Rice",
        season=Season.KHARIF,
        average_yield=4000,
        duration_min_days=90,
        duration_max_days=150,
        aliases=("चावल", "paddy"),
    )


@pytest.fixture
def weather_record():
    return WeatherRecord(
        state="Punjab",
        district="Ludhiana",
        temperature=30.0,
        humidity=60.0,
        observed_at=datetime(2024, 7, 1, 6, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def record_store(rice_record, weather_record):
    return InMemoryRecordStore(crops=[rice_record], weather=[weather_record])


@pytest.fixture
def pipeline(record_store, settings):
    return create_pipeline(record_store, settings)


class CountingGateway:
    """Wraps a store and counts lookups."""

    def __init__(self, delegate) -> None:
        self._delegate = delegate
        self.crop_lookups = 0
        self.weather_lookups = 0

    async def lookup_crop_record(self, name_or_alias: str):
        self.crop_lookups += 1
        return await self._delegate.lookup_crop_record(name_or_alias)

    async def lookup_current_weather(self, state: str, district: str):
        self.weather_lookups += 1
        return await self._delegate.lookup_current_weather(state, district)


class FailingGateway:
    """Gateway whose every lookup blows up."""

    async def lookup_crop_record(self, name_or_alias: str):
        raise RuntimeError("connection reset by peer")

    async def lookup_current_weather(self, state: str, district: str):
        raise TimeoutError("lookup timed out")


@pytest.fixture
def counting_gateway(record_store):
    return CountingGateway(record_store)


@pytest.fixture
def failing_gateway():
    return FailingGateway()
