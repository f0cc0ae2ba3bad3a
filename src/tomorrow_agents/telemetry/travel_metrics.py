"""OpenTelemetry instrumentation for the travel agents.

Every tracker is a context manager that opens a span, times the block,
records the matching histogram and re-raises whatever the block raised
after marking the span as failed:

    with telemetry.track_weather_api_call("Lisbon"):
        payload = client.get(...)
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Iterator

from opentelemetry import metrics, trace
from opentelemetry.metrics import Meter
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

from tomorrow_agents.heuristics.categorizer import categorize

logger = logging.getLogger(__name__)

INSTRUMENTATION_NAME = "tomorrow-travel-agent"
INSTRUMENTATION_VERSION = "1.0.0"
ANONYMOUS = "anonymous"


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


class TravelAgentTelemetry:
    """Tracer, meter and instruments shared by agents, tools and voice flows."""

    def __init__(self, tracer: Tracer | None = None, meter: Meter | None = None) -> None:
        self.tracer = tracer or trace.get_tracer(INSTRUMENTATION_NAME, INSTRUMENTATION_VERSION)
        self.meter = meter or metrics.get_meter(INSTRUMENTATION_NAME, INSTRUMENTATION_VERSION)

        self.agent_response_time = self.meter.create_histogram(
            "travel_agent_response_time",
            unit="ms",
            description="Time taken for travel agent to generate responses",
        )
        self.memory_retrieval_time = self.meter.create_histogram(
            "memory_retrieval_time",
            unit="ms",
            description="Time taken to retrieve user preferences from memory",
        )
        self.weather_api_call_time = self.meter.create_histogram(
            "weather_api_call_time",
            unit="ms",
            description="Time taken for weather API calls",
        )
        self.user_engagement = self.meter.create_counter(
            "user_engagement_total",
            description="Total number of user interactions with travel agent",
        )
        self.errors = self.meter.create_counter(
            "travel_agent_errors_total",
            description="Total number of errors in travel agent operations",
        )
        self.recommendation_quality = self.meter.create_up_down_counter(
            "recommendation_quality_score",
            description="Quality score of travel recommendations (0-1)",
        )

    @contextmanager
    def _tracked(
        self,
        span_name: str,
        *,
        kind: SpanKind,
        prefix: str,
        attributes: dict[str, Any],
        histogram: Any,
        metric_attributes: dict[str, Any],
        error_attributes: dict[str, Any],
        duration_key: str,
    ) -> Iterator[Span]:
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            span_name,
            kind=kind,
            attributes=attributes,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            try:
                yield span
            except Exception as exc:
                elapsed = _elapsed_ms(started)
                histogram.record(elapsed, {**metric_attributes, "status": "error"})
                self.errors.add(1, {**error_attributes, "error_type": type(exc).__name__})
                span.set_attributes(
                    {
                        f"{prefix}.{duration_key}": elapsed,
                        f"{prefix}.status": "error",
                        f"{prefix}.error_message": str(exc),
                    }
                )
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                raise
            elapsed = _elapsed_ms(started)
            histogram.record(elapsed, {**metric_attributes, "status": "success"})
            span.set_attributes(
                {f"{prefix}.{duration_key}": elapsed, f"{prefix}.status": "success"}
            )
            span.set_status(Status(StatusCode.OK))

    @contextmanager
    def track_agent_response(
        self, user_query: str, user_id: str | None = None
    ) -> Iterator[Span]:
        user = user_id or ANONYMOUS
        with self._tracked(
            "travel_agent_generate_response",
            kind=SpanKind.SERVER,
            prefix="travel",
            attributes={
                "travel.user_query": user_query,
                "travel.user_id": user,
                "travel.operation": "generate_response",
            },
            histogram=self.agent_response_time,
            metric_attributes={"operation": "generate_response"},
            error_attributes={"operation": "generate_response"},
            duration_key="response_time_ms",
        ) as span:
            yield span
        self.user_engagement.add(
            1, {"user_id": user, "query_type": categorize(user_query).value}
        )

    @contextmanager
    def track_memory_retrieval(
        self, memory_type: str, user_id: str | None = None
    ) -> Iterator[Span]:
        with self._tracked(
            "travel_memory_retrieval",
            kind=SpanKind.CLIENT,
            prefix="memory",
            attributes={"memory.type": memory_type, "memory.user_id": user_id or ANONYMOUS},
            histogram=self.memory_retrieval_time,
            metric_attributes={"memory_type": memory_type},
            error_attributes={"operation": "memory_retrieval", "memory_type": memory_type},
            duration_key="retrieval_time_ms",
        ) as span:
            yield span

    @contextmanager
    def track_weather_api_call(self, location: str) -> Iterator[Span]:
        with self._tracked(
            "weather_api_call",
            kind=SpanKind.CLIENT,
            prefix="weather",
            attributes={"weather.location": location, "weather.api": "open-meteo"},
            histogram=self.weather_api_call_time,
            metric_attributes={"location": location},
            error_attributes={"operation": "weather_api_call", "location": location},
            duration_key="api_call_time_ms",
        ) as span:
            yield span

    @contextmanager
    def track_voice_interaction(
        self, interaction_type: str, user_id: str | None = None
    ) -> Iterator[Span]:
        """Span plus a log line for speech-to-text, text-to-speech and speech-to-speech."""
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            f"voice_{interaction_type.replace('-', '_')}",
            attributes={"voice.interaction_type": interaction_type, "voice.user_id": user_id or ANONYMOUS},
        ) as span:
            try:
                yield span
            except Exception:
                logger.exception(
                    "Voice %s failed after %.0fms", interaction_type, _elapsed_ms(started)
                )
                raise
        logger.info("Voice %s completed in %.0fms", interaction_type, _elapsed_ms(started))

    def record_recommendation_quality(
        self, score: float, query_type: str, user_id: str | None = None
    ) -> None:
        user = user_id or ANONYMOUS
        self.recommendation_quality.add(score, {"query_type": query_type, "user_id": user})
        with self.tracer.start_as_current_span(
            "recommendation_quality_assessment",
            attributes={
                "recommendation.quality_score": score,
                "recommendation.query_type": query_type,
                "recommendation.user_id": user,
            },
        ):
            pass


@lru_cache
def get_telemetry() -> TravelAgentTelemetry:
    return TravelAgentTelemetry()
