from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from tomorrow_agents import api
from tomorrow_agents.config.settings import Settings
from tomorrow_agents.errors import InvalidArgumentError
from tomorrow_agents.orchestrator.runner import AgentResult
from tomorrow_agents.tools.tool_factory.web.scraper import PageMetadata
from tomorrow_agents.workflows.insights_engine import (
    ActivityAnalysis,
    ActivityPatterns,
    InsightsEngine,
)
from tomorrow_agents.workflows.theme_recommendation import ThemeRecommendationWorkflow

NOW = datetime(2025, 6, 30, tzinfo=timezone.utc)


@pytest.fixture
def runner():
    runner = Mock()
    runner.generate.return_value = AgentResult(
        agent="tomorrow_travel_agent",
        response="Go to Porto.",
        user_id="u1",
        query_type="city_travel",
        quality_score=0.7,
    )
    return runner


@pytest.fixture
def client(runner, tool_context):
    def runner_for(name):
        if name != "tomorrow_travel_agent":
            raise ValueError(f"Unknown agent: {name}")
        return runner

    analyzer = Mock(
        return_value=ActivityAnalysis(
            patterns=ActivityPatterns(
                most_active_time="mornings",
                top_performing_content=[],
                underperforming_links=[],
                visitor_behavior="steady",
            ),
            opportunities=[],
        )
    )
    api.app.dependency_overrides = {
        api.get_runner_factory: lambda: runner_for,
        api.get_tool_context: lambda: tool_context,
        api.get_theme_workflow: lambda: ThemeRecommendationWorkflow(
            scraper=Mock(return_value=PageMetadata())
        ),
        api.get_insights_engine: lambda: InsightsEngine(analyzer, clock=lambda: NOW),
    }
    yield TestClient(api.app)
    api.app.dependency_overrides = {}


class TestMeta:
    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_root_redirects_to_docs(self, client):
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/api/docs"

    def test_lists_agents_and_tools(self, client):
        assert "credo_agent" in client.get("/api/agents").json()
        tools = client.get("/api/tools").json()
        assert "weather" in tools["tools"]
        assert "travel" in tools["groups"]


class TestInvoke:
    def test_invoke(self, client, runner):
        response = client.post("/api/invoke", json={"prompt": "City break?", "user_id": "u1"})
        assert response.status_code == 200
        assert response.json()["response"] == "Go to Porto."
        runner.generate.assert_called_once_with("City break?", "u1")

    def test_invoke_with_evaluations(self, client, runner):
        runner.generate_with_evaluations.return_value = runner.generate.return_value.model_copy(
            update={"evaluations": {"destination_relevance": 0.8}}
        )
        response = client.post("/api/invoke", json={"prompt": "City break?", "evaluate": True})
        assert response.json()["evaluations"] == {"destination_relevance": 0.8}

    def test_unknown_agent(self, client):
        response = client.post("/api/invoke", json={"prompt": "hi", "agent_id": "nope"})
        assert response.status_code == 404

    def test_invalid_argument_is_422(self, client, runner):
        runner.generate.side_effect = InvalidArgumentError("prompt", "is required")
        response = client.post("/api/invoke", json={"prompt": ""})
        assert response.status_code == 422
        assert response.json() == {"detail": "is required", "field": "prompt"}

    def test_agent_failure_is_500(self, client, runner):
        runner.generate.side_effect = RuntimeError("model down")
        response = client.post("/api/invoke", json={"prompt": "hi"})
        assert response.status_code == 500
        assert response.json()["detail"] == "model down"


class TestTools:
    def test_invoke_tool(self, client):
        response = client.post(
            "/api/tools/categorize_travel_query", json={"input": {"query": "luxury spa"}}
        )
        assert response.json() == {"category": "luxury_travel"}

    def test_unknown_tool(self, client):
        assert client.post("/api/tools/nope", json={}).status_code == 404

    def test_bad_tool_input(self, client):
        response = client.post("/api/tools/categorize_travel_query", json={"input": {}})
        assert response.status_code == 422


class TestWorkflowsAndSpeech:
    def test_theme(self, client):
        response = client.post("/api/themes/recommend", json={"bio": "Creative designer", "links": []})
        assert response.json()["recommended_theme"] == "apex"

    def test_insights(self, client):
        response = client.post(
            "/api/insights",
            json={
                "user_id": "u1",
                "analytics": {
                    "total_clicks": 10,
                    "unique_visitors": 500,
                    "avg_time_on_page": 12,
                    "bounce_rate": 40,
                },
                "profile": {"last_updated": "2025-06-29T00:00:00Z"},
            },
        )
        assert response.status_code == 200
        assert [card["title"] for card in response.json()] == [
            "Monetize Your Audience",
            "Add Video Content",
        ]

    def test_speech_helpers(self, client):
        assert client.post("/api/speech/format", json={"text": "**Hi**"}).json() == {
            "speech_text": "Hi"
        }
        intent = client.post("/api/speech/intent", json={"transcript": "visit rome"}).json()
        assert intent["location"] == "rome"


class TestTelemetryEndpoints:
    def test_rate_kpi(self, client):
        response = client.get("/api/telemetry/kpis/response_time", params={"value": 500})
        assert response.json() == {"kpi": "response_time", "value": 500.0, "rating": "excellent"}

    def test_unknown_kpi(self, client):
        assert client.get("/api/telemetry/kpis/nope", params={"value": 1}).status_code == 404

    def test_alerts(self, client):
        assert client.get("/api/telemetry/alerts").json()["memory_failure"]["severity"] == "critical"


class TestGetModels:
    def test_missing_key(self, client, monkeypatch):
        monkeypatch.setattr(api, "settings", Settings(LLM_PROVIDER="gemini", GOOGLE_API_KEY=""))
        assert client.get("/api/get-models").status_code == 400

    def test_openai_models(self, client, monkeypatch):
        monkeypatch.setattr(api, "settings", Settings(LLM_PROVIDER="openai", OPENAI_API_KEY="sk-test"))
        with patch("tomorrow_agents.api.requests.get") as get:
            get.return_value.json.return_value = {"data": [{"id": "gpt-4o-mini"}]}
            response = client.get("/api/get-models")

        assert response.json() == {"data": [{"id": "gpt-4o-mini"}]}
        assert get.call_args.kwargs["headers"] == {"Authorization": "Bearer sk-test"}
