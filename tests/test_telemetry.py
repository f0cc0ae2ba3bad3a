import pytest
from opentelemetry.trace import StatusCode

from tomorrow_agents.config.settings import Settings
from tomorrow_agents.telemetry.dashboard import TELEMETRY_CONFIG, KpiThresholds, rate
from tomorrow_agents.telemetry.setup import configure_telemetry

from conftest import metric_points


class TestTrackers:
    def test_agent_response_success(self, telemetry, span_exporter, metric_reader):
        with telemetry.track_agent_response("cheap beach trip", "u1"):
            pass

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "travel_agent_generate_response"
        assert span.attributes["travel.user_id"] == "u1"
        assert span.attributes["travel.status"] == "success"
        assert span.status.status_code is StatusCode.OK

        (engagement,) = metric_points(metric_reader, "user_engagement_total")
        assert engagement.value == 1
        assert engagement.attributes["query_type"] == "beach_travel"

    def test_agent_response_error_is_reraised(self, telemetry, span_exporter, metric_reader):
        with pytest.raises(RuntimeError, match="model down"):
            with telemetry.track_agent_response("hello"):
                raise RuntimeError("model down")

        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
        assert span.attributes["travel.user_id"] == "anonymous"
        assert span.attributes["travel.error_message"] == "model down"

        (error,) = metric_points(metric_reader, "travel_agent_errors_total")
        assert error.attributes == {"operation": "generate_response", "error_type": "RuntimeError"}
        assert metric_points(metric_reader, "user_engagement_total") == []

    def test_memory_and_weather_histograms(self, telemetry, metric_reader):
        with telemetry.track_memory_retrieval("file", "u1"):
            pass
        with pytest.raises(ValueError):
            with telemetry.track_weather_api_call("Lisbon"):
                raise ValueError("bad payload")

        (memory,) = metric_points(metric_reader, "memory_retrieval_time")
        assert memory.attributes == {"memory_type": "file", "status": "success"}
        (weather,) = metric_points(metric_reader, "weather_api_call_time")
        assert weather.attributes == {"location": "Lisbon", "status": "error"}

    def test_voice_interaction_span_name(self, telemetry, span_exporter):
        with telemetry.track_voice_interaction("speech-to-speech", "u1"):
            pass
        (span,) = span_exporter.get_finished_spans()
        assert span.name == "voice_speech_to_speech"

    def test_recommendation_quality(self, telemetry, span_exporter, metric_reader):
        telemetry.record_recommendation_quality(0.8, "city_travel", "u1")

        (point,) = metric_points(metric_reader, "recommendation_quality_score")
        assert point.value == pytest.approx(0.8)
        (span,) = span_exporter.get_finished_spans()
        assert span.attributes["recommendation.query_type"] == "city_travel"


class TestDashboard:
    @pytest.mark.parametrize(
        "value,expected",
        [(500, "excellent"), (2000, "good"), (4000, "acceptable"), (9000, "poor")],
    )
    def test_response_time_ratings(self, value, expected):
        assert rate("response_time", value) == expected

    def test_higher_is_better(self):
        assert rate("quality_score", 0.9) == "excellent"
        assert rate("quality_score", 0.5) == "acceptable"
        assert rate("quality_score", 0.1) == "poor"

    def test_boundaries_are_strict(self):
        thresholds = KpiThresholds(1, 2, 3, 4)
        assert thresholds.rate(1) == "good"

    def test_unknown_kpi(self):
        with pytest.raises(ValueError, match="Unknown KPI"):
            rate("latency", 1)

    def test_config_lists_every_instrument(self):
        assert "recommendation_quality_score" in TELEMETRY_CONFIG.metrics
        assert TELEMETRY_CONFIG.alerts["high_error_rate"].severity == "critical"


class TestSetup:
    def test_disabled_telemetry_is_a_no_op(self):
        assert configure_telemetry(Settings(TELEMETRY_ENABLED=False)) is False

    def test_unknown_exporter(self, monkeypatch):
        monkeypatch.setattr("tomorrow_agents.telemetry.setup._configured", False)
        with pytest.raises(ValueError, match="TELEMETRY_EXPORT"):
            configure_telemetry(Settings(TELEMETRY_ENABLED=True, TELEMETRY_EXPORT="carrier-pigeon"))
