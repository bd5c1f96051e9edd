"""Tests for confidence aggregation, reliability tiers and source trust scores."""

import pytest

from agri_verify.config.constants import DOMAIN_SOURCES
from agri_verify.config.settings import Settings
from agri_verify.exceptions import ConfigurationError
from agri_verify.scoring.aggregator import ConfidenceAggregator
from agri_verify.scoring.reliability import (
    ReliabilityClassifier,
    SourceReliabilityTable,
    classify_reliability,
)
from agri_verify.verification import outcomes


@pytest.fixture
def classifier(settings):
    return ReliabilityClassifier(settings)


@pytest.fixture
def aggregator(settings, classifier):
    return ConfidenceAggregator(settings, classifier)


@pytest.mark.parametrize(
    "confidence,tier",
    [(0.85, "high"), (0.81, "high"), (0.8, "medium"), (0.7, "medium"), (0.6, "low"), (0.4, "low"), (0.0, "low")],
)
def test_reliability_tiers(classifier, confidence, tier):
    assert classifier.classify(confidence) == tier


def test_classify_reliability_default_boundaries():
    assert classify_reliability(0.85) == "high"
    assert classify_reliability(0.8) == "medium"
    assert classify_reliability(0.6) == "low"


def test_reliability_is_monotonic(classifier):
    rank = {"low": 0, "medium": 1, "high": 2}
    tiers = [rank[classifier.classify(c / 100)] for c in range(101)]
    assert tiers == sorted(tiers)


def test_reliability_thresholds_out_of_order():
    with pytest.raises(ConfigurationError):
        ReliabilityClassifier(
            Settings(reliability_high_threshold=0.5, reliability_medium_threshold=0.7)
        )


def test_aggregate_zero_outcomes(aggregator):
    report = aggregator.aggregate([], "crop", DOMAIN_SOURCES["crop"])
    assert report.total_claims == 0
    assert report.verified_claims == 0
    assert report.confidence == 0.0
    assert report.overall_verification is False
    assert report.reliability == "low"
    assert report.sources == []
    assert report.corrections == []


def test_aggregate_all_verified(aggregator):
    report = aggregator.aggregate(
        [outcomes.confirmed(0.9), outcomes.confirmed(0.95)], "crop", DOMAIN_SOURCES["crop"]
    )
    assert report.overall_verification is True
    assert report.confidence == pytest.approx(0.925)
    assert report.verified_claims == 2
    assert report.total_claims == 2
    assert report.reliability == "high"
    assert report.sources == ["Agricultural Research Institutes", "ICAR Database"]


def test_finance_threshold_is_stricter(aggregator):
    results = [outcomes.confirmed(0.9), outcomes.unverifiable(0.6)]
    assert aggregator.aggregate(results, "crop").overall_verification is True
    finance = aggregator.aggregate(results, "finance")
    assert finance.confidence == pytest.approx(0.75)
    assert finance.overall_verification is False


def test_any_unverified_claim_fails_overall(aggregator):
    report = aggregator.aggregate(
        [outcomes.confirmed(0.95), outcomes.confirmed(0.95), outcomes.contradicted(0.9, "fix")],
        "weather",
    )
    assert report.confidence > 0.7
    assert report.overall_verification is False


def test_corrections_only_from_unverified(aggregator):
    report = aggregator.aggregate(
        [
            outcomes.confirmed(0.9),
            outcomes.contradicted(0.3, "first"),
            outcomes.unverifiable(0.5),
            outcomes.contradicted(0.2, "second"),
        ],
        "crop",
    )
    assert report.corrections == ["first", "second"]
    assert report.verified_claims == 2
    assert report.unverifiable_claims == 1


def test_repeated_corrections_kept_per_claim(aggregator):
    missing = outcomes.missing_record("No reliable data found for crop: Quinoa")
    report = aggregator.aggregate([missing, missing, missing], "crop", DOMAIN_SOURCES["crop"])
    assert report.corrections == ["No reliable data found for crop: Quinoa"] * 3
    assert report.total_claims == 3
    assert report.confidence == 0.0
    assert report.sources == []


def test_failed_report(aggregator):
    report = aggregator.failed()
    assert report.overall_verification is False
    assert report.reliability == "low"
    assert report.corrections == ["Unable to verify information due to system error"]


@pytest.mark.parametrize(
    "source,score",
    [
        ("ICAR Database", 0.95),
        ("India Meteorological Department (IMD)", 0.9),
        ("Ministry of Agriculture & Farmers Welfare", 0.98),
        ("NABARD", 0.9),
        ("agmarknet price feed", 0.8),
        ("Some farming blog", 0.5),
    ],
)
def test_source_reliability_defaults(source, score):
    assert SourceReliabilityTable().score(source) == score


def test_source_reliability_custom_table_is_immutable():
    table = SourceReliabilityTable({"KVK": 0.88}, unknown=0.3)
    assert table.score("District KVK bulletin") == 0.88
    assert table.score("ICAR Database") == 0.3
    with pytest.raises(TypeError):
        table.scores["KVK"] = 1.0
