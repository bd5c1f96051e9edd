"""Split a response into atomic, independently checkable claims."""

from __future__ import annotations

import re

from agri_verify.config.constants import SEASON_WORDS

MIN_CLAIM_LENGTH = 10

# Runs of sentence terminators. A "." between two digits is a decimal point.
_TERMINATORS = re.compile(r"(?:(?<!\d)\.|\.(?!\d)|[!?])+")
_SEASON_RE = re.compile(r"\b(" + "|".join(SEASON_WORDS) + r")\b", re.IGNORECASE)


def extract_claims(text: str) -> list[str]:
    """Return trimmed sentence fragments longer than ``MIN_CLAIM_LENGTH`` chars."""
    fragments = (f.strip() for f in _TERMINATORS.split(text))
    return [f for f in fragments if len(f) > MIN_CLAIM_LENGTH]


def find_season(claim: str) -> str | None:
    """First cropping-season word in ``claim``, lowercased."""
    match = _SEASON_RE.search(claim)
    return match.group(1).lower() if match else None
