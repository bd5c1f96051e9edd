"""Static reference tables: provenance strings, source trust scores, scheme facts."""

from __future__ import annotations

from types import MappingProxyType

from agri_verify.models.domain import FinanceFacts

DOMAIN_SOURCES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "crop": ("ICAR Database", "Agricultural Research Institutes"),
        "weather": ("India Meteorological Department", "Weather Monitoring Stations"),
        "finance": (
            "Ministry of Agriculture & Farmers Welfare",
            "NABARD",
            "Government Scheme Portals",
        ),
        "general": ("General Agricultural Knowledge Base",),
    }
)

# Keyword -> trust score; first keyword contained in a source name wins.
DEFAULT_SOURCE_RELIABILITY: MappingProxyType[str, float] = MappingProxyType(
    {
        "ICAR": 0.95,
        "IMD": 0.9,
        "Ministry of Agriculture": 0.98,
        "NABARD": 0.9,
        "eNAM": 0.85,
        "Agmarknet": 0.8,
        "State Agricultural Universities": 0.85,
        "Research Papers": 0.8,
        "Government Portals": 0.9,
    }
)
UNKNOWN_SOURCE_RELIABILITY = 0.5

FINANCE_FACTS = FinanceFacts()

SEASON_WORDS = ("kharif", "rabi", "zaid")

GENERIC_FAILURE_CORRECTION = "Unable to verify information due to system error"
