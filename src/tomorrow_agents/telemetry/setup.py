from __future__ import annotations

import logging

from opentelemetry import metrics, trace
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricExporter,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)

from tomorrow_agents.config.settings import Settings, get_settings
from tomorrow_agents.telemetry.travel_metrics import INSTRUMENTATION_VERSION

logger = logging.getLogger(__name__)

_configured = False


def _exporters(settings: Settings) -> tuple[SpanExporter, MetricExporter] | None:
    target = settings.telemetry_export.strip().lower()
    if target == "console":
        return ConsoleSpanExporter(), ConsoleMetricExporter()
    if target == "otlp":
        from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        return (
            OTLPSpanExporter(endpoint=settings.otlp_endpoint),
            OTLPMetricExporter(endpoint=settings.otlp_endpoint),
        )
    if target == "none":
        return None
    raise ValueError(
        f"Unsupported TELEMETRY_EXPORT={settings.telemetry_export!r}. "
        "Use 'console', 'otlp' or 'none'."
    )


def configure_telemetry(settings: Settings | None = None) -> bool:
    """Install SDK tracer and meter providers once per process.

    Returns False when telemetry is disabled, in which case the API's no-op
    providers stay in place and every tracker still works.
    """
    global _configured
    settings = settings or get_settings()
    if not settings.telemetry_enabled:
        return False
    if _configured:
        return True

    resource = Resource.create(
        {
            "service.name": settings.telemetry_service_name,
            "service.version": INSTRUMENTATION_VERSION,
            "deployment.environment": settings.environment,
        }
    )
    tracer_provider = TracerProvider(resource=resource)
    readers = []

    exporters = _exporters(settings)
    if exporters is not None:
        span_exporter, metric_exporter = exporters
        tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))
        readers.append(PeriodicExportingMetricReader(metric_exporter))

    trace.set_tracer_provider(tracer_provider)
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=readers))
    _configured = True
    logger.info(
        "Telemetry configured for %s (export=%s)",
        settings.telemetry_service_name,
        settings.telemetry_export,
    )
    return True
