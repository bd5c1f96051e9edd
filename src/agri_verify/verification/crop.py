"""Crop agronomy verifier: yield, duration and season claims."""

from __future__ import annotations

from agri_verify.config.settings import Settings
from agri_verify.extraction.claims import find_season
from agri_verify.extraction.quantities import first_quantity, format_number
from agri_verify.models.domain import CropRecord, VerificationOutcome
from agri_verify.models.schemas import VerificationContext
from agri_verify.protocols.gateway import CropRecordGateway
from agri_verify.verification import outcomes

YIELD_KEYWORDS = ("yield", "produc", "output")


class CropVerifier:
    domain = "crop"
    requires_record = True

    def __init__(self, gateway: CropRecordGateway, settings: Settings) -> None:
        self._gateway = gateway
        self._yield_tolerance = settings.yield_tolerance
        self._duration_tolerance = settings.duration_tolerance
        self._neutral = settings.crop_neutral_confidence

    async def fetch_record(self, context: VerificationContext | None) -> CropRecord | None:
        if context is None or not context.crop_name:
            return None
        return await self._gateway.lookup_crop_record(context.crop_name)

    def missing_record(self, context: VerificationContext | None = None) -> VerificationOutcome:
        name = context.crop_name if context is not None and context.crop_name else "unspecified"
        return outcomes.missing_record(f"No reliable data found for crop: {name}")

    def verify(
        self, claim: str, record: CropRecord | None, context: VerificationContext | None = None
    ) -> VerificationOutcome:
        if record is None:
            return self.missing_record(context)

        lower = claim.lower()

        if any(keyword in lower for keyword in YIELD_KEYWORDS):
            claimed = first_quantity(claim, "kg")
            if claimed is not None:
                return self._check_yield(claimed.value, record)

        duration = first_quantity(claim, "days")
        if duration is not None:
            return self._check_duration(duration.value, record)

        season = find_season(claim)
        if season:
            return self._check_season(season, record)

        return outcomes.unverifiable(self._neutral)

    def _check_yield(self, claimed: float, record: CropRecord) -> VerificationOutcome:
        actual = record.average_yield
        if actual <= 0:
            return outcomes.unverifiable(self._neutral)
        if abs(claimed - actual) / actual < self._yield_tolerance:
            return outcomes.confirmed(0.9)
        return outcomes.contradicted(
            0.3,
            f"Actual average yield for {record.name} is approximately "
            f"{format_number(actual)} {record.yield_unit}",
        )

    def _check_duration(self, claimed_days: float, record: CropRecord) -> VerificationOutcome:
        actual = record.duration_max_days
        if actual <= 0:
            return outcomes.unverifiable(self._neutral)
        if abs(claimed_days - actual) / actual < self._duration_tolerance:
            return outcomes.confirmed(0.85)
        return outcomes.contradicted(
            0.4, f"Actual duration for {record.name} is {actual} days"
        )

    @staticmethod
    def _check_season(claimed: str, record: CropRecord) -> VerificationOutcome:
        if claimed == record.season.value:
            return outcomes.confirmed(0.95)
        return outcomes.contradicted(
            0.2, f"{record.name} is actually a {record.season.value} crop"
        )
