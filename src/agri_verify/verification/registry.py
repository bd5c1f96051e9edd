"""Registry mapping response categories to domain verifiers."""

from __future__ import annotations

from agri_verify.config.settings import Settings
from agri_verify.protocols.gateway import RecordGateway
from agri_verify.protocols.verifier import Verifier
from agri_verify.verification.crop import CropVerifier
from agri_verify.verification.finance import FinanceVerifier
from agri_verify.verification.general import GeneralVerifier
from agri_verify.verification.weather import WeatherVerifier

FALLBACK_CATEGORY = "general"


class VerifierRegistry:
    def __init__(self) -> None:
        self._verifiers: dict[str, Verifier] = {}

    def register(self, verifier: Verifier) -> None:
        self._verifiers[verifier.domain] = verifier

    def get_verifier(self, category: str) -> Verifier:
        """Unknown categories fall back to the general verifier."""
        verifier = self._verifiers.get(category.lower().strip())
        if verifier is None:
            verifier = self._verifiers[FALLBACK_CATEGORY]
        return verifier


def create_default_registry(gateway: RecordGateway, settings: Settings) -> VerifierRegistry:
    """Create a registry with the crop, weather, finance and general verifiers."""
    registry = VerifierRegistry()
    verifiers: list[Verifier] = [
        CropVerifier(gateway, settings),
        WeatherVerifier(gateway, settings),
        FinanceVerifier(settings),
        GeneralVerifier(settings),
    ]
    for verifier in verifiers:
        registry.register(verifier)
    return registry
