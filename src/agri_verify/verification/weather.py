"""Weather verifier: temperature and humidity against the latest observation."""

from __future__ import annotations

from agri_verify.config.settings import Settings
from agri_verify.extraction.quantities import first_quantity, format_number
from agri_verify.models.domain import VerificationOutcome, WeatherRecord
from agri_verify.models.schemas import VerificationContext
from agri_verify.protocols.gateway import WeatherRecordGateway
from agri_verify.verification import outcomes

RAIN_KEYWORDS = ("rain", "precipitation")


class WeatherVerifier:
    domain = "weather"
    requires_record = True

    def __init__(self, gateway: WeatherRecordGateway, settings: Settings) -> None:
        self._gateway = gateway
        self._temperature_tolerance = settings.temperature_tolerance_c
        self._humidity_tolerance = settings.humidity_tolerance_pct
        self._rainfall_confidence = settings.rainfall_confidence
        self._neutral = settings.weather_neutral_confidence

    async def fetch_record(self, context: VerificationContext | None) -> WeatherRecord | None:
        if context is None or context.location is None:
            return None
        location = context.location
        return await self._gateway.lookup_current_weather(location.state, location.district)

    def missing_record(self, context: VerificationContext | None = None) -> VerificationOutcome:
        return outcomes.missing_record("No current weather data available for verification")

    def verify(
        self, claim: str, record: WeatherRecord | None, context: VerificationContext | None = None
    ) -> VerificationOutcome:
        if record is None:
            return self.missing_record(context)

        lower = claim.lower()

        temperature = first_quantity(claim, "celsius")
        if temperature is not None:
            # Absolute tolerance: relative error is meaningless near 0°C
            if abs(temperature.value - record.temperature) < self._temperature_tolerance:
                return outcomes.confirmed(0.9)
            return outcomes.contradicted(
                0.3,
                f"Current temperature is approximately {format_number(record.temperature)}°C",
            )

        if "humidity" in lower:
            humidity = first_quantity(claim, "percent")
            if humidity is not None:
                if abs(humidity.value - record.humidity) < self._humidity_tolerance:
                    return outcomes.confirmed(0.85)
                return outcomes.contradicted(
                    0.4,
                    f"Current humidity is approximately {format_number(record.humidity)}%",
                )

        if any(keyword in lower for keyword in RAIN_KEYWORDS):
            # No rainfall ground truth to compare against
            return outcomes.unverifiable(self._rainfall_confidence)

        return outcomes.unverifiable(self._neutral)
