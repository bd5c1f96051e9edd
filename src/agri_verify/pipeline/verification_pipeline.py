"""Verification pipeline: extraction -> lookup -> per-claim verification -> aggregation."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from agri_verify.config.constants import DOMAIN_SOURCES
from agri_verify.config.settings import Settings
from agri_verify.correction.synthesizer import add_corrections
from agri_verify.extraction.claims import extract_claims
from agri_verify.models.domain import VerificationOutcome
from agri_verify.models.schemas import AggregateReport, VerificationContext, VerificationRequest
from agri_verify.observability.logger import get_logger
from agri_verify.observability.metrics import log_verification_metrics
from agri_verify.observability.tracing import TraceContext
from agri_verify.protocols.gateway import RecordGateway
from agri_verify.protocols.verifier import Verifier
from agri_verify.scoring.aggregator import ConfidenceAggregator
from agri_verify.scoring.reliability import ReliabilityClassifier, SourceReliabilityTable
from agri_verify.verification import outcomes
from agri_verify.verification.registry import VerifierRegistry, create_default_registry

logger = get_logger("verification_pipeline")


class VerificationPipeline:
    def __init__(
        self,
        registry: VerifierRegistry,
        aggregator: ConfidenceAggregator,
        source_reliability: SourceReliabilityTable,
        domain_sources: Mapping[str, Sequence[str]] = DOMAIN_SOURCES,
    ) -> None:
        self._registry = registry
        self._aggregator = aggregator
        self._source_reliability = source_reliability
        self._domain_sources = domain_sources

    async def verify_response(
        self,
        response: str,
        category: str,
        context: VerificationContext | dict | None = None,
    ) -> AggregateReport:
        """Verify every claim in ``response``. Never raises.

        ``context`` may be a plain dict such as ``{"cropName": "Rice"}``. Any
        failure degrades to an unverified, low-reliability report.
        """
        trace = TraceContext()
        domain = "unknown"
        with structlog.contextvars.bound_contextvars(trace_id=trace.trace_id):
            try:
                verifier = self._registry.get_verifier(category)
                domain = verifier.domain
                if isinstance(context, dict):
                    context = VerificationContext.model_validate(context)
                report = await self._run(verifier, response, context, trace)
            except Exception:
                logger.exception("verification_failed", category=category)
                report = self._aggregator.failed()

            log_verification_metrics(
                trace.trace_id,
                domain,
                report,
                trace.summary(),
                trace.elapsed_ms,
            )
        return report

    async def verify_many(
        self, requests: Sequence[VerificationRequest]
    ) -> list[AggregateReport]:
        """Verify independent responses concurrently, preserving order."""
        return list(
            await asyncio.gather(
                *(self.verify_response(r.response, r.category, r.context) for r in requests)
            )
        )

    def correct_response(self, response: str, report: AggregateReport) -> str:
        return add_corrections(response, report.corrections)

    def get_source_reliability(self, source_name: str) -> float:
        return self._source_reliability.score(source_name)

    async def _run(
        self,
        verifier: Verifier,
        response: str,
        context: VerificationContext | None,
        trace: TraceContext,
    ) -> AggregateReport:
        with trace.span("extraction"):
            claims = extract_claims(response)

        if not claims:
            logger.info("no_claims_extracted", domain=verifier.domain)
            return self._aggregator.aggregate([], verifier.domain)

        with trace.span("lookup"):
            record, lookup_failed = await self._fetch_record(verifier, context)

        with trace.span("verification", claims=len(claims)):
            if lookup_failed:
                results = [outcomes.gateway_failure() for _ in claims]
            elif record is None and verifier.requires_record:
                logger.info("reference_record_missing", domain=verifier.domain)
                results = [verifier.missing_record(context) for _ in claims]
            else:
                results = [
                    self._verify_claim(verifier, claim, record, context) for claim in claims
                ]

        with trace.span("aggregation"):
            return self._aggregator.aggregate(
                results,
                verifier.domain,
                self._domain_sources.get(verifier.domain, ()),
            )

    @staticmethod
    async def _fetch_record(
        verifier: Verifier, context: VerificationContext | None
    ) -> tuple[Any | None, bool]:
        """Return (record, failed). Gateway errors never propagate past here."""
        try:
            return await verifier.fetch_record(context), False
        except Exception as e:
            logger.warning(
                "gateway_lookup_failed",
                domain=verifier.domain,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None, True

    @staticmethod
    def _verify_claim(
        verifier: Verifier,
        claim: str,
        record: Any,
        context: VerificationContext | None,
    ) -> VerificationOutcome:
        outcome = verifier.verify(claim, record, context)
        logger.debug(
            "claim_verified",
            domain=verifier.domain,
            verified=outcome.verified,
            confidence=outcome.confidence,
            kind=outcome.kind.value,
        )
        return outcome


def create_pipeline(
    gateway: RecordGateway,
    settings: Settings | None = None,
    source_reliability: Mapping[str, float] | None = None,
) -> VerificationPipeline:
    """Wire a pipeline with the default verifiers over ``gateway``."""
    settings = settings or Settings()
    classifier = ReliabilityClassifier(settings)
    table = (
        SourceReliabilityTable(source_reliability)
        if source_reliability is not None
        else SourceReliabilityTable()
    )
    return VerificationPipeline(
        registry=create_default_registry(gateway, settings),
        aggregator=ConfidenceAggregator(settings, classifier),
        source_reliability=table,
    )
