"""Dict-backed reference record store, for tests and embedding without a database."""

from __future__ import annotations

from collections.abc import Iterable

from agri_verify.models.domain import CropRecord, WeatherRecord


class InMemoryRecordStore:
    def __init__(
        self,
        crops: Iterable[CropRecord] = (),
        weather: Iterable[WeatherRecord] = (),
    ) -> None:
        self._crops: dict[str, CropRecord] = {}
        self._weather: dict[tuple[str, str], WeatherRecord] = {}
        for crop in crops:
            self.add_crop(crop)
        for observation in weather:
            self.add_weather(observation)

    def add_crop(self, crop: CropRecord) -> None:
        for name in (crop.name, *crop.aliases):
            self._crops[name.strip().casefold()] = crop

    def add_weather(self, observation: WeatherRecord) -> None:
        key = (observation.state.strip().casefold(), observation.district.strip().casefold())
        current = self._weather.get(key)
        if current is None or observation.observed_at >= current.observed_at:
            self._weather[key] = observation

    async def lookup_crop_record(self, name_or_alias: str) -> CropRecord | None:
        return self._crops.get(name_or_alias.strip().casefold())

    async def lookup_current_weather(self, state: str, district: str) -> WeatherRecord | None:
        return self._weather.get((state.strip().casefold(), district.strip().casefold()))
