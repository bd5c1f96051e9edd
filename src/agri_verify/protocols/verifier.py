"""Protocol for per-domain claim verifiers."""

from __future__ import annotations

from typing import Any, Protocol

from agri_verify.models.domain import VerificationOutcome
from agri_verify.models.schemas import VerificationContext


class Verifier(Protocol):
    domain: str
    # False when the verifier checks against compiled facts and never looks anything up
    requires_record: bool

    async def fetch_record(self, context: VerificationContext | None) -> Any | None: ...

    def verify(
        self, claim: str, record: Any | None, context: VerificationContext | None = None
    ) -> VerificationOutcome: ...

    def missing_record(self, context: VerificationContext | None = None) -> VerificationOutcome: ...
