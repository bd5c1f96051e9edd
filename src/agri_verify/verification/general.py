"""Fallback verifier for general queries: nothing to check against."""

from __future__ import annotations

from agri_verify.config.settings import Settings
from agri_verify.models.domain import VerificationOutcome
from agri_verify.models.schemas import VerificationContext
from agri_verify.verification import outcomes


class GeneralVerifier:
    domain = "general"
    requires_record = False

    def __init__(self, settings: Settings) -> None:
        self._neutral = settings.general_neutral_confidence

    async def fetch_record(self, context: VerificationContext | None) -> None:
        return None

    def missing_record(self, context: VerificationContext | None = None) -> VerificationOutcome:
        return outcomes.unverifiable(self._neutral)

    def verify(
        self, claim: str, record: object | None, context: VerificationContext | None = None
    ) -> VerificationOutcome:
        return outcomes.unverifiable(self._neutral)
