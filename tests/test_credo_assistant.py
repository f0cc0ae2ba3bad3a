from unittest.mock import Mock

import pytest

from tomorrow_agents.errors import InvalidArgumentError
from tomorrow_agents.orchestrator.credo import (
    ArticleSummary,
    CredoAssistant,
    LinkTitleIdeas,
)
from tomorrow_agents.orchestrator.runner import AgentResult
from tomorrow_agents.workflows.theme_recommendation import (
    ThemeAnalysis,
    ThemeWorkflowResult,
)


@pytest.fixture
def runner(memory):
    runner = Mock()
    runner.context.memory = memory
    runner.generate.return_value = AgentResult(
        agent="credo_agent", response="Designer and builder.", user_id="u1", query_type="general_travel"
    )
    return runner


@pytest.fixture
def workflow():
    workflow = Mock()
    workflow.invoke.return_value = ThemeWorkflowResult(
        recommended_theme="lunar",
        reasoning="Professional tone",
        confidence=0.88,
        analysis=ThemeAnalysis(bio_tone="professional", topics=[], content_types=["article"]),
    )
    return workflow


class TestCredoAssistant:
    def test_new_bio_uses_linkedin_data(self, runner, workflow):
        assistant = CredoAssistant(runner, workflow)
        result = assistant.generate_bio_with_memory("u1", "creative", linkedin_data={"role": "Designer"})

        assert result.bio == "Designer and builder."
        assert result.style == "creative"
        assert result.confidence == 0.95
        prompt = runner.generate.call_args.args[0]
        assert '{"role": "Designer"}' in prompt
        assert "new user" in prompt

    def test_bio_rewrite_mentions_current_bio(self, runner, workflow):
        CredoAssistant(runner, workflow).generate_bio_with_memory(
            "u1", "executive", current_bio="I make things"
        )
        prompt = runner.generate.call_args.args[0]
        assert 'Current bio: "I make things"' in prompt
        assert "executive version" in prompt

    def test_theme_recommendation_is_remembered(self, runner, workflow, memory):
        result = CredoAssistant(runner, workflow).recommend_theme_with_workflow(
            "u1", "Consultant", ["https://blog.test"]
        )
        assert result.recommended_theme == "lunar"
        workflow.invoke.assert_called_once_with("Consultant", ["https://blog.test"])
        assert memory.search("u1", "lunar theme") == [
            "Recommended the lunar theme because: Professional tone"
        ]

    def test_theme_recommendation_without_memory(self, runner, workflow):
        runner.context.memory = None
        result = CredoAssistant(runner, workflow).recommend_theme_with_workflow("u1", "Bio", [])
        assert result.confidence == 0.88

    def test_structured_helpers(self, runner, workflow):
        ideas = LinkTitleIdeas(suggestions=["A", "B", "C"])
        summary = ArticleSummary(summary="Short", title="Post", relevance_score=0.7)
        runner.generate_structured.side_effect = [ideas, summary]
        assistant = CredoAssistant(runner, workflow)

        assert assistant.suggest_link_titles_with_tools("u1", "https://x.test") is ideas
        assert assistant.summarize_article_with_context("u1", "https://x.test/post", "Post") is summary

        first, second = runner.generate_structured.call_args_list
        assert first.args[1] is LinkTitleIdeas
        assert "web_scraper" in first.args[0]
        assert second.args[1] is ArticleSummary
        assert "The user calls it: Post" in second.args[0]

    def test_link_titles_need_url(self, runner, workflow):
        with pytest.raises(InvalidArgumentError):
            CredoAssistant(runner, workflow).suggest_link_titles_with_tools("u1", None)
