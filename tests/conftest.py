"""Shared fixtures: file-backed settings, in-memory telemetry and a tool context."""

from __future__ import annotations

import pytest
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from tomorrow_agents.config.settings import Settings
from tomorrow_agents.knowledge.base import TravelKnowledgeBase
from tomorrow_agents.memory.file_store import FileMemoryStore
from tomorrow_agents.telemetry.travel_metrics import TravelAgentTelemetry
from tomorrow_agents.tools.context import ToolContext


@pytest.fixture
def settings(tmp_path):
    return Settings(
        LLM_PROVIDER="openai",
        OPENAI_API_KEY="",
        MEMORY_BACKEND="file",
        MEMORY_STORE_DIR=str(tmp_path / "memory"),
        DATABASE_URL=f"sqlite:///{tmp_path / 'memory.db'}",
        TELEMETRY_ENABLED=False,
        VOICE_ENABLED=False,
    )


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def metric_reader():
    return InMemoryMetricReader()


@pytest.fixture
def telemetry(span_exporter, metric_reader):
    tracer_provider = TracerProvider()
    tracer_provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    meter_provider = MeterProvider(metric_readers=[metric_reader])
    return TravelAgentTelemetry(
        tracer=tracer_provider.get_tracer("tests"),
        meter=meter_provider.get_meter("tests"),
    )


@pytest.fixture
def memory(tmp_path):
    return FileMemoryStore(tmp_path / "store", working_memory_template="# Travel Profile\n")


@pytest.fixture
def tool_context(settings, telemetry, memory):
    return ToolContext(
        settings=settings,
        telemetry=telemetry,
        user_id="traveler-1",
        memory=memory,
        knowledge=TravelKnowledgeBase(),
    )


def metric_points(reader: InMemoryMetricReader, name: str) -> list:
    """Data points recorded so far for one instrument."""
    data = reader.get_metrics_data()
    if data is None:
        return []
    points = []
    for resource_metrics in data.resource_metrics:
        for scope_metrics in resource_metrics.scope_metrics:
            for metric in scope_metrics.metrics:
                if metric.name == name:
                    points.extend(metric.data.data_points)
    return points
