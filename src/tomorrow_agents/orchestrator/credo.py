from __future__ import annotations

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from tomorrow_agents.errors import require_text
from tomorrow_agents.orchestrator.runner import AgentRunner
from tomorrow_agents.workflows.theme_recommendation import (
    ThemeRecommendationWorkflow,
    ThemeWorkflowResult,
)

logger = logging.getLogger(__name__)

BioStyle = Literal["professional", "creative", "executive"]


class BioResult(BaseModel):
    bio: str
    style: BioStyle
    confidence: float = 0.95


class ScrapedSummary(BaseModel):
    title: str | None = None
    description: str | None = None


class LinkTitleIdeas(BaseModel):
    suggestions: list[str] = Field(min_length=3, max_length=3)
    scraped_data: ScrapedSummary = Field(default_factory=ScrapedSummary)


class ArticleSummary(BaseModel):
    summary: str
    title: str
    relevance_score: float = Field(ge=0, le=1)


class CredoAssistant:
    """Profile-building helpers on top of the Credo agent.

    Each helper phrases one request for the agent; the agent decides which
    tools to use and reads the user's working memory from its prompt.
    """

    def __init__(
        self,
        runner: AgentRunner,
        theme_workflow: ThemeRecommendationWorkflow | None = None,
    ) -> None:
        self.runner = runner
        self.theme_workflow = theme_workflow or ThemeRecommendationWorkflow()

    def generate_bio_with_memory(
        self,
        user_id: str,
        style: BioStyle,
        *,
        linkedin_data: dict[str, Any] | None = None,
        current_bio: str | None = None,
    ) -> BioResult:
        if current_bio:
            prompt = (
                f'The user wants to modify their bio. Current bio: "{current_bio}". '
                f"They want a {style} version. Check your working memory for their "
                "previous bio versions and preferences."
            )
        else:
            prompt = (
                f"Generate a {style} bio based on: {json.dumps(linkedin_data or {})}. "
                "This is a new user - remember their preferences."
            )
        result = self.runner.generate(prompt, user_id)
        return BioResult(bio=result.response, style=style)

    def suggest_link_titles_with_tools(
        self, user_id: str, url: str, current_title: str | None = None
    ) -> LinkTitleIdeas:
        url = require_text(url, "url")
        prompt = (
            f"Use the web_scraper tool to analyze this URL: {url}\n"
            f"Current title: {current_title or 'None'}\n\n"
            "Based on the scraped content and the user's preferred title style (check "
            "working memory), generate 3 compelling title suggestions."
        )
        return self.runner.generate_structured(prompt, LinkTitleIdeas, user_id)

    def recommend_theme_with_workflow(
        self, user_id: str, bio: str, links: list[str]
    ) -> ThemeWorkflowResult:
        result = self.theme_workflow.invoke(bio, links)
        memory = self.runner.context.memory
        if memory is not None:
            memory.remember(
                user_id,
                f"Recommended the {result.recommended_theme} theme because: {result.reasoning}",
            )
        else:
            logger.debug("Memory disabled; theme recommendation for %s not stored", user_id)
        return result

    def summarize_article_with_context(
        self, user_id: str, url: str, title: str | None = None
    ) -> ArticleSummary:
        url = require_text(url, "url")
        prompt = (
            f"Use the article_fetcher tool to get content from: {url}\n"
            + (f"The user calls it: {title}\n" if title else "")
            + "Then create a one-sentence summary that would appeal to this user's "
            "interests (check working memory). Make it compelling and relevant to their "
            "profile."
        )
        return self.runner.generate_structured(prompt, ArticleSummary, user_id)
