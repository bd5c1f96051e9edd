"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Season(str, Enum):
    KHARIF = "kharif"
    RABI = "rabi"
    ZAID = "zaid"
    PERENNIAL = "perennial"


class OutcomeKind(str, Enum):
    CHECKED = "checked"
    UNVERIFIABLE = "unverifiable"
    MISSING_RECORD = "missing_record"
    GATEWAY_ERROR = "gateway_error"


@dataclass(frozen=True)
class CropRecord:
    name: str
    season: Season
    average_yield: float  # kg/ha
    duration_min_days: int
    duration_max_days: int
    yield_unit: str = "kg/ha"
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class WeatherRecord:
    state: str
    district: str
    temperature: float  # °C
    humidity: float  # %
    observed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class FinanceFacts:
    """Compiled parameters of the government schemes the finance verifier knows."""

    pm_kisan_annual_amount: int = 6000
    pm_kisan_installments: int = 3
    kcc_rate_min: float = 7.0
    kcc_rate_max: float = 9.0
    pmfby_premiums: tuple[tuple[float, Season], ...] = (
        (2.0, Season.KHARIF),
        (1.5, Season.RABI),
    )


@dataclass(frozen=True)
class Quantity:
    value: float
    unit: str  # "kg", "days", "celsius", "percent", "rupees"
    raw: str


@dataclass(frozen=True)
class VerificationOutcome:
    verified: bool
    confidence: float
    correction: str | None = None
    kind: OutcomeKind = OutcomeKind.CHECKED
