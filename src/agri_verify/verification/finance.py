"""Finance verifier: checks claims against the compiled government scheme facts.

Three schemes are recognized:

- PM-KISAN income support: a fixed annual amount. Only rupee amounts are
  compared: currency-tagged values and bare numbers of four or more digits
  that do not read as a calendar year. Installment counts and launch years
  are ignored.
- Kisan Credit Card (KCC): an interest-rate band. Verified when the claimed
  rate falls inside the band (inclusive).
- PMFBY crop insurance: farmer premium by season. Verified only for the exact
  known (percentage, season) pairs.

Claims that mention none of these get the neutral outcome.
"""

from __future__ import annotations

from agri_verify.config.constants import FINANCE_FACTS
from agri_verify.config.settings import Settings
from agri_verify.extraction.claims import find_season
from agri_verify.extraction.quantities import (
    find_numbers,
    find_quantities,
    first_quantity,
    format_number,
)
from agri_verify.models.domain import FinanceFacts, VerificationOutcome
from agri_verify.models.schemas import VerificationContext
from agri_verify.verification import outcomes

PM_KISAN_KEYWORDS = ("pm-kisan", "pm kisan", "pmkisan", "kisan samman nidhi")
KCC_KEYWORDS = ("kcc", "kisan credit card")
PMFBY_KEYWORDS = ("pmfby", "crop insurance", "fasal bima")

# Bare numbers below this are counts or rates, never a scheme amount
MIN_BARE_AMOUNT = 1000
_YEAR_RANGE = range(1900, 2101)


class FinanceVerifier:
    domain = "finance"
    requires_record = False

    def __init__(self, settings: Settings, facts: FinanceFacts = FINANCE_FACTS) -> None:
        self._facts = facts
        self._neutral = settings.finance_neutral_confidence

    async def fetch_record(self, context: VerificationContext | None) -> FinanceFacts:
        return self._facts

    def missing_record(self, context: VerificationContext | None = None) -> VerificationOutcome:
        return outcomes.missing_record("No scheme data available for verification")

    def verify(
        self, claim: str, record: FinanceFacts | None, context: VerificationContext | None = None
    ) -> VerificationOutcome:
        facts = record or self._facts
        lower = claim.lower()
        amounts = claimed_amounts(claim)

        names_pm_kisan = any(keyword in lower for keyword in PM_KISAN_KEYWORDS)
        if names_pm_kisan or facts.pm_kisan_annual_amount in amounts:
            outcome = self._check_pm_kisan(amounts, facts)
            if outcome is not None:
                return outcome

        if any(keyword in lower for keyword in KCC_KEYWORDS):
            rate = first_quantity(claim, "percent")
            if rate is not None:
                return self._check_kcc(rate.value, facts)

        if any(keyword in lower for keyword in PMFBY_KEYWORDS):
            premium = first_quantity(claim, "percent")
            season = find_season(claim)
            if premium is not None and season:
                return self._check_pmfby(premium.value, season, facts)

        return outcomes.unverifiable(self._neutral)

    @staticmethod
    def _check_pm_kisan(amounts: set[float], facts: FinanceFacts) -> VerificationOutcome | None:
        if facts.pm_kisan_annual_amount in amounts:
            return outcomes.confirmed(0.95)
        if not amounts:
            return None
        return outcomes.contradicted(
            0.3,
            f"PM-KISAN provides ₹{facts.pm_kisan_annual_amount:,} per year "
            f"in {facts.pm_kisan_installments} installments",
        )

    @staticmethod
    def _check_kcc(rate: float, facts: FinanceFacts) -> VerificationOutcome:
        if facts.kcc_rate_min <= rate <= facts.kcc_rate_max:
            return outcomes.confirmed(0.9)
        return outcomes.contradicted(
            0.4,
            f"KCC interest rates are typically {format_number(facts.kcc_rate_min)}-"
            f"{format_number(facts.kcc_rate_max)}% per annum",
        )

    @staticmethod
    def _check_pmfby(premium: float, season: str, facts: FinanceFacts) -> VerificationOutcome:
        if any(premium == pct and season == s.value for pct, s in facts.pmfby_premiums):
            return outcomes.confirmed(0.9)
        known = " and ".join(
            f"{format_number(pct)}% for {s.value}" for pct, s in facts.pmfby_premiums
        )
        return outcomes.contradicted(0.4, f"PMFBY farmer premium is {known} crops")


def claimed_amounts(claim: str) -> set[float]:
    """Rupee amounts stated in ``claim``.

    "Rs.6000", "₹6,000" and "6000 rupees" are always amounts. A bare number
    counts only when it is at least MIN_BARE_AMOUNT and is not a year, so
    "3 installments" and "launched in 2019" are skipped.
    """
    amounts = {q.value for q in find_quantities(claim, "rupees")}
    for n in find_numbers(claim):
        if n < MIN_BARE_AMOUNT or (n.is_integer() and int(n) in _YEAR_RANGE):
            continue
        amounts.add(n)
    return amounts
