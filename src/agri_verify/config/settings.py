"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Overall pass thresholds (aggregate confidence must exceed these)
    crop_pass_threshold: float = 0.7
    weather_pass_threshold: float = 0.7
    finance_pass_threshold: float = 0.8
    general_pass_threshold: float = 0.7

    # Reliability tiers (strict ">" comparison)
    reliability_high_threshold: float = 0.8
    reliability_medium_threshold: float = 0.6

    # Crop tolerances (relative)
    yield_tolerance: float = 0.30
    duration_tolerance: float = 0.20

    # Weather tolerances (absolute)
    temperature_tolerance_c: float = 5.0
    humidity_tolerance_pct: float = 15.0

    # Neutral confidences for claims without a checkable assertion
    crop_neutral_confidence: float = 0.5
    weather_neutral_confidence: float = 0.6
    finance_neutral_confidence: float = 0.6
    general_neutral_confidence: float = 0.6
    rainfall_confidence: float = 0.7

    # Reference record store
    sqlite_records_db_path: str = "data/records.db"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_file": ".env", "env_prefix": "AGRI_"}

    def pass_threshold(self, domain: str) -> float:
        return {
            "crop": self.crop_pass_threshold,
            "weather": self.weather_pass_threshold,
            "finance": self.finance_pass_threshold,
        }.get(domain, self.general_pass_threshold)
