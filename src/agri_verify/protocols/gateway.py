"""Protocols for the reference record lookup service."""

from __future__ import annotations

from typing import Protocol

from agri_verify.models.domain import CropRecord, WeatherRecord


class CropRecordGateway(Protocol):
    async def lookup_crop_record(self, name_or_alias: str) -> CropRecord | None: ...


class WeatherRecordGateway(Protocol):
    async def lookup_current_weather(
        self, state: str, district: str
    ) -> WeatherRecord | None: ...


class RecordGateway(CropRecordGateway, WeatherRecordGateway, Protocol):
    """A single store that serves both crop and weather lookups."""
