"""Tests for the finance verifier."""

import pytest

from agri_verify.config.constants import FINANCE_FACTS
from agri_verify.models.domain import OutcomeKind
from agri_verify.verification.finance import FinanceVerifier, claimed_amounts


@pytest.fixture
def verifier(settings):
    return FinanceVerifier(settings)


@pytest.mark.parametrize(
    "claim",
    [
        "PM-KISAN provides 6000 rupees per year",
        "PM Kisan gives ₹6,000 annually in 3 installments",
        "Eligible farmers receive Rs 6000 every year",
    ],
)
def test_pm_kisan_exact_amount(verifier, claim):
    outcome = verifier.verify(claim, FINANCE_FACTS)
    assert outcome.verified
    assert outcome.confidence == 0.95


def test_pm_kisan_wrong_amount(verifier):
    outcome = verifier.verify("PM-KISAN provides 5000 rupees per year", FINANCE_FACTS)
    assert not outcome.verified
    assert outcome.confidence == 0.3
    assert outcome.correction == "PM-KISAN provides ₹6,000 per year in 3 installments"


def test_pm_kisan_without_amount_is_neutral(verifier):
    outcome = verifier.verify("PM-KISAN supports small and marginal farmers", FINANCE_FACTS)
    assert outcome.verified
    assert outcome.confidence == 0.6
    assert outcome.kind == OutcomeKind.UNVERIFIABLE


def test_pm_kisan_installment_count_is_not_an_amount(verifier):
    outcome = verifier.verify("PM-KISAN is paid in 3 installments every year", FINANCE_FACTS)
    assert outcome.verified
    assert outcome.kind == OutcomeKind.UNVERIFIABLE
    assert outcome.correction is None


def test_pm_kisan_launch_year_is_not_an_amount(verifier):
    outcome = verifier.verify("PM-KISAN was launched in 2019 for farmers", FINANCE_FACTS)
    assert outcome.kind == OutcomeKind.UNVERIFIABLE


def test_pm_kisan_rs_dot_prefix(verifier):
    outcome = verifier.verify("PM-KISAN provides Rs.6000 per year to farmers", FINANCE_FACTS)
    assert outcome.verified
    assert outcome.confidence == 0.95
    assert outcome.kind == OutcomeKind.CHECKED


@pytest.mark.parametrize(
    "claim,expected",
    [
        ("PM-KISAN pays Rs.6000 in 3 installments", {6000.0}),
        ("Launched in 2019, it pays ₹6,000", {6000.0}),
        ("Apply within 30 days", set()),
        ("A bare 5000 per year", {5000.0}),
    ],
)
def test_claimed_amounts(claim, expected):
    assert claimed_amounts(claim) == expected


@pytest.mark.parametrize("rate", ["7%", "8%", "9%", "8.5%"])
def test_kcc_rate_inside_band(verifier, rate):
    outcome = verifier.verify(f"KCC loans carry {rate} interest", FINANCE_FACTS)
    assert outcome.verified
    assert outcome.confidence == 0.9


def test_kcc_rate_outside_band(verifier):
    outcome = verifier.verify("Kisan Credit Card interest is 12% per year", FINANCE_FACTS)
    assert not outcome.verified
    assert outcome.confidence == 0.4
    assert outcome.correction == "KCC interest rates are typically 7-9% per annum"


def test_pmfby_known_pairs(verifier):
    assert verifier.verify("PMFBY premium is 2% for kharif crops", FINANCE_FACTS).verified
    assert verifier.verify("Crop insurance premium is 1.5% for rabi", FINANCE_FACTS).verified


def test_pmfby_wrong_pair(verifier):
    outcome = verifier.verify("PMFBY premium is 2% for rabi crops", FINANCE_FACTS)
    assert not outcome.verified
    assert outcome.confidence == 0.4
    assert outcome.correction == "PMFBY farmer premium is 2% for kharif and 1.5% for rabi crops"


def test_pmfby_without_season_is_neutral(verifier):
    outcome = verifier.verify("PMFBY premium is 5% for commercial crops", FINANCE_FACTS)
    assert outcome.verified
    assert outcome.confidence == 0.6


def test_unrelated_claim_is_neutral(verifier):
    outcome = verifier.verify("Loans are available from cooperative banks", FINANCE_FACTS)
    assert outcome.verified
    assert outcome.confidence == 0.6
    assert outcome.kind == OutcomeKind.UNVERIFIABLE


def test_compiled_facts_used_without_record(verifier):
    assert verifier.verify("PM-KISAN provides 6000 rupees per year", None).verified


async def test_fetch_record_returns_compiled_facts(verifier):
    assert await verifier.fetch_record(None) is FINANCE_FACTS
