"""Pydantic models for the engine's externally visible input and output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


class Location(BaseModel):
    state: str
    district: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class VerificationContext(BaseModel):
    crop_name: str | None = None
    location: Location | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class VerificationRequest(BaseModel):
    response: str
    category: str = "general"
    context: VerificationContext | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class AggregateReport(BaseModel):
    """Per-response verdict. Serialize with ``model_dump(by_alias=True)``."""

    overall_verification: bool
    confidence: float = Field(ge=0.0, le=1.0)
    verified_claims: int = Field(ge=0)
    total_claims: int = Field(ge=0)
    unverifiable_claims: int = Field(default=0, ge=0)
    sources: list[str] = Field(default_factory=list)
    corrections: list[str] = Field(default_factory=list)
    reliability: Literal["high", "medium", "low"]

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_counts(self) -> AggregateReport:
        if self.verified_claims > self.total_claims:
            raise ValueError("verified_claims cannot exceed total_claims")
        return self
