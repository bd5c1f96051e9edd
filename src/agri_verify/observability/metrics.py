"""Metric recording helpers for verification runs."""

from __future__ import annotations

from agri_verify.models.schemas import AggregateReport
from agri_verify.observability.logger import get_logger

logger = get_logger("metrics")


def log_verification_metrics(
    trace_id: str,
    domain: str,
    report: AggregateReport,
    stages: list[dict],
    latency_ms: float,
) -> None:
    logger.info(
        "verification_metrics",
        trace_id=trace_id,
        domain=domain,
        confidence=round(report.confidence, 4),
        verified_claims=report.verified_claims,
        total_claims=report.total_claims,
        unverifiable_claims=report.unverifiable_claims,
        corrections=len(report.corrections),
        reliability=report.reliability,
        stages=stages,
        latency_ms=round(latency_ms, 2),
    )
