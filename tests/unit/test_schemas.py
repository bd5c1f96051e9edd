"""Tests for Pydantic schemas and settings."""

import pytest
from pydantic import ValidationError

from agri_verify.config.settings import Settings
from agri_verify.models.schemas import AggregateReport, VerificationContext, VerificationRequest


def test_report_serializes_with_camel_case_keys():
    report = AggregateReport(
        overall_verification=True,
        confidence=0.925,
        verified_claims=2,
        total_claims=2,
        sources=["ICAR Database"],
        corrections=[],
        reliability="high",
    )
    data = report.model_dump(by_alias=True)
    assert data == {
        "overallVerification": True,
        "confidence": 0.925,
        "verifiedClaims": 2,
        "totalClaims": 2,
        "unverifiableClaims": 0,
        "sources": ["ICAR Database"],
        "corrections": [],
        "reliability": "high",
    }


def test_report_rejects_more_verified_than_total():
    with pytest.raises(ValidationError):
        AggregateReport(
            overall_verification=False,
            confidence=0.5,
            verified_claims=3,
            total_claims=2,
            reliability="low",
        )


def test_report_rejects_out_of_range_confidence():
    with pytest.raises(ValidationError):
        AggregateReport(
            overall_verification=False,
            confidence=1.5,
            verified_claims=0,
            total_claims=0,
            reliability="low",
        )


def test_context_accepts_camel_case():
    context = VerificationContext.model_validate(
        {"cropName": "Rice", "location": {"state": "Punjab", "district": "Ludhiana"}}
    )
    assert context.crop_name == "Rice"
    assert context.location.district == "Ludhiana"


def test_request_defaults():
    request = VerificationRequest(response="Some text")
    assert request.category == "general"
    assert request.context is None


def test_settings_pass_thresholds():
    settings = Settings()
    assert settings.pass_threshold("crop") == 0.7
    assert settings.pass_threshold("weather") == 0.7
    assert settings.pass_threshold("finance") == 0.8
    assert settings.pass_threshold("anything-else") == 0.7


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("AGRI_FINANCE_PASS_THRESHOLD", "0.9")
    monkeypatch.setenv("AGRI_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.pass_threshold("finance") == 0.9
    assert settings.log_level == "DEBUG"
