"""Dashboard thresholds and alert definitions for the travel agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Rating = Literal["excellent", "good", "acceptable", "poor"]


@dataclass(frozen=True)
class KpiThresholds:
    excellent: float
    good: float
    acceptable: float
    poor: float
    higher_is_better: bool = False

    def rate(self, value: float) -> Rating:
        if self.higher_is_better:
            if value > self.excellent:
                return "excellent"
            if value > self.good:
                return "good"
            if value > self.acceptable:
                return "acceptable"
            return "poor"
        if value < self.excellent:
            return "excellent"
        if value < self.good:
            return "good"
        if value < self.acceptable:
            return "acceptable"
        return "poor"


@dataclass(frozen=True)
class AlertRule:
    threshold: float
    duration: str
    severity: Literal["warning", "critical"]


@dataclass(frozen=True)
class TelemetryConfig:
    service_name: str
    version: str
    kpis: dict[str, KpiThresholds]
    alerts: dict[str, AlertRule]
    metrics: tuple[str, ...]
    dimensions: dict[str, tuple[str, ...]] = field(default_factory=dict)


TELEMETRY_CONFIG = TelemetryConfig(
    service_name="tomorrow-travel-agent",
    version="1.0.0",
    kpis={
        # milliseconds
        "response_time": KpiThresholds(1000, 3000, 5000, 10000),
        "memory_retrieval": KpiThresholds(500, 1000, 2000, 5000),
        "weather_api": KpiThresholds(1000, 2000, 3000, 5000),
        # 0-1 score
        "quality_score": KpiThresholds(0.8, 0.6, 0.4, 0.2, higher_is_better=True),
        # percent
        "error_rate": KpiThresholds(1, 3, 5, 10),
    },
    alerts={
        "high_response_time": AlertRule(5000, "5m", "warning"),
        "high_error_rate": AlertRule(5, "2m", "critical"),
        "low_quality_score": AlertRule(0.4, "10m", "warning"),
        "memory_failure": AlertRule(50, "1m", "critical"),
        "weather_api_failure": AlertRule(30, "2m", "warning"),
    },
    metrics=(
        "travel_agent_response_time",
        "memory_retrieval_time",
        "weather_api_call_time",
        "user_engagement_total",
        "travel_agent_errors_total",
        "recommendation_quality_score",
    ),
    dimensions={
        "query_type": (
            "beach_travel",
            "mountain_travel",
            "city_travel",
            "budget_travel",
            "luxury_travel",
            "family_travel",
            "general_travel",
        ),
        "memory_type": ("file", "db", "knowledge"),
        "operation_type": (
            "generate_response",
            "memory_retrieval",
            "weather_api_call",
            "recommendation_quality",
        ),
        "status": ("success", "error"),
    },
)


def rate(kpi: str, value: float) -> Rating:
    """Classify a measurement against the dashboard thresholds for ``kpi``."""
    try:
        thresholds = TELEMETRY_CONFIG.kpis[kpi]
    except KeyError:
        raise ValueError(f"Unknown KPI: {kpi}") from None
    return thresholds.rate(value)
