"""Constructors for the outcome shapes shared by all verifiers."""

from __future__ import annotations

from agri_verify.config.constants import GENERIC_FAILURE_CORRECTION
from agri_verify.models.domain import OutcomeKind, VerificationOutcome


def confirmed(confidence: float) -> VerificationOutcome:
    return VerificationOutcome(verified=True, confidence=confidence)


def contradicted(confidence: float, correction: str) -> VerificationOutcome:
    return VerificationOutcome(verified=False, confidence=confidence, correction=correction)


def unverifiable(confidence: float) -> VerificationOutcome:
    """No checkable assertion in the claim. Not treated as a contradiction."""
    return VerificationOutcome(
        verified=True, confidence=confidence, kind=OutcomeKind.UNVERIFIABLE
    )


def missing_record(correction: str) -> VerificationOutcome:
    return VerificationOutcome(
        verified=False,
        confidence=0.0,
        correction=correction,
        kind=OutcomeKind.MISSING_RECORD,
    )


def gateway_failure(correction: str = GENERIC_FAILURE_CORRECTION) -> VerificationOutcome:
    return VerificationOutcome(
        verified=False,
        confidence=0.0,
        correction=correction,
        kind=OutcomeKind.GATEWAY_ERROR,
    )
