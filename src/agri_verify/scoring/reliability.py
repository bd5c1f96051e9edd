"""Reliability tiers and per-source trust scores."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from agri_verify.config.constants import DEFAULT_SOURCE_RELIABILITY, UNKNOWN_SOURCE_RELIABILITY
from agri_verify.config.settings import Settings
from agri_verify.exceptions import ConfigurationError

Reliability = Literal["high", "medium", "low"]


def classify_reliability(
    confidence: float, high: float = 0.8, medium: float = 0.6
) -> Reliability:
    if confidence > high:
        return "high"
    if confidence > medium:
        return "medium"
    return "low"


class ReliabilityClassifier:
    """Maps an aggregate confidence to a tier. Boundaries use strict ``>``."""

    def __init__(self, settings: Settings) -> None:
        self.high = settings.reliability_high_threshold
        self.medium = settings.reliability_medium_threshold
        if not 0.0 <= self.medium <= self.high <= 1.0:
            raise ConfigurationError(
                f"Reliability thresholds out of order: medium={self.medium}, high={self.high}"
            )

    def classify(self, confidence: float) -> Reliability:
        return classify_reliability(confidence, self.high, self.medium)


class SourceReliabilityTable:
    """Immutable keyword -> trust score map, matched case-insensitively."""

    def __init__(
        self,
        scores: Mapping[str, float] = DEFAULT_SOURCE_RELIABILITY,
        unknown: float = UNKNOWN_SOURCE_RELIABILITY,
    ) -> None:
        self._scores = MappingProxyType(dict(scores))
        self._unknown = unknown

    @property
    def scores(self) -> Mapping[str, float]:
        return self._scores

    def score(self, source_name: str) -> float:
        name = source_name.lower()
        for keyword, score in self._scores.items():
            if keyword.lower() in name:
                return score
        return self._unknown
