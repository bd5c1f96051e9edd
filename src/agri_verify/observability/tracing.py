"""Per-verification stage timing.

Each ``verify_response`` call gets one TraceContext. Stages (extraction,
lookup, verification, aggregation) run inside ``trace.span(...)`` and the
summary ends up in the ``verification_metrics`` log event.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class StageSpan:
    stage: str
    started_ms: float
    ended_ms: float | None = None
    failed: bool = False
    attributes: dict = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.ended_ms is None:
            return 0.0
        return self.ended_ms - self.started_ms

    def as_dict(self) -> dict:
        return {
            "stage": self.stage,
            "duration_ms": round(self.duration_ms, 2),
            "failed": self.failed,
            **self.attributes,
        }


class TraceContext:
    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or uuid4().hex
        self.stages: list[StageSpan] = []
        self._t0 = time.perf_counter()

    def _now_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000

    @contextmanager
    def span(self, stage: str, **attributes):
        s = StageSpan(stage=stage, started_ms=self._now_ms(), attributes=attributes)
        self.stages.append(s)
        try:
            yield s
        except BaseException:
            s.failed = True
            raise
        finally:
            s.ended_ms = self._now_ms()

    @property
    def elapsed_ms(self) -> float:
        return self._now_ms()

    def summary(self) -> list[dict]:
        """Finished and failed stages in the order they started."""
        return [s.as_dict() for s in self.stages]
