"""Combine per-claim outcomes into one AggregateReport."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from agri_verify.config.constants import GENERIC_FAILURE_CORRECTION
from agri_verify.config.settings import Settings
from agri_verify.models.domain import OutcomeKind, VerificationOutcome
from agri_verify.models.schemas import AggregateReport
from agri_verify.scoring.reliability import ReliabilityClassifier

# Outcomes of these kinds never touched a reference source
_UNSOURCED = (OutcomeKind.MISSING_RECORD, OutcomeKind.GATEWAY_ERROR)


class ConfidenceAggregator:
    def __init__(self, settings: Settings, classifier: ReliabilityClassifier) -> None:
        self._settings = settings
        self._classifier = classifier

    def aggregate(
        self,
        outcomes: Sequence[VerificationOutcome],
        domain: str,
        sources: Iterable[str] = (),
    ) -> AggregateReport:
        total = len(outcomes)
        if total == 0:
            return AggregateReport(
                overall_verification=False,
                confidence=0.0,
                verified_claims=0,
                total_claims=0,
                reliability=self._classifier.classify(0.0),
            )

        confidence = max(0.0, min(1.0, sum(o.confidence for o in outcomes) / total))
        verified = sum(1 for o in outcomes if o.verified)
        threshold = self._settings.pass_threshold(domain)

        corrections = [o.correction for o in outcomes if not o.verified and o.correction]
        sourced = any(o.kind not in _UNSOURCED for o in outcomes)

        return AggregateReport(
            overall_verification=verified == total and confidence > threshold,
            confidence=confidence,
            verified_claims=verified,
            total_claims=total,
            unverifiable_claims=sum(1 for o in outcomes if o.kind == OutcomeKind.UNVERIFIABLE),
            sources=sorted(set(sources)) if sourced else [],
            corrections=corrections,
            reliability=self._classifier.classify(confidence),
        )

    def failed(self, correction: str = GENERIC_FAILURE_CORRECTION) -> AggregateReport:
        """Report for a verification that could not run at all."""
        return AggregateReport(
            overall_verification=False,
            confidence=0.0,
            verified_claims=0,
            total_claims=0,
            corrections=[correction],
            reliability="low",
        )
