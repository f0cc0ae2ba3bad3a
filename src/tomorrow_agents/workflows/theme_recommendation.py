from __future__ import annotations

import logging
from typing import Callable, TypedDict

from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel

from tomorrow_agents.errors import require_text, require_text_list
from tomorrow_agents.heuristics.credo import (
    THEME_LINK_TYPES,
    ThemeRecommendation,
    analyze_tone,
    content_type_for_url,
    synthesize_theme,
    topics_from_title,
)
from tomorrow_agents.heuristics.rules import unique_in_order
from tomorrow_agents.tools.tool_factory.web.scraper import PageMetadata, scrape_page

logger = logging.getLogger(__name__)

LINKS_ANALYZED = 3


class ThemeWorkflowState(TypedDict, total=False):
    bio: str
    links: list[str]
    bio_tone: str
    tone_confidence: float
    keywords: list[str]
    topics: list[str]
    content_types: list[str]
    recommendation: ThemeRecommendation


class ThemeAnalysis(BaseModel):
    bio_tone: str
    topics: list[str]
    content_types: list[str]


class ThemeWorkflowResult(BaseModel):
    recommended_theme: str
    reasoning: str
    confidence: float
    analysis: ThemeAnalysis


class ThemeRecommendationWorkflow:
    """Bio tone, then the top links, then a theme.

    Only links whose page has a title count towards topics and content types.
    """

    def __init__(self, scraper: Callable[[str], PageMetadata] = scrape_page) -> None:
        self._scrape = scraper
        self._app = self._build_graph()

    def analyze_bio_tone_node(self, state: ThemeWorkflowState) -> ThemeWorkflowState:
        analysis = analyze_tone(state["bio"])
        return {
            "bio_tone": analysis.primary_tone.value,
            "tone_confidence": analysis.confidence,
            "keywords": analysis.keywords,
        }

    def analyze_top_links_node(self, state: ThemeWorkflowState) -> ThemeWorkflowState:
        topics: list[str] = []
        content_types: list[str] = []
        for url in state.get("links", [])[:LINKS_ANALYZED]:
            page = self._scrape(url)
            if not page.title:
                logger.info("Skipping %s: no page title", url)
                continue
            topics.extend(topics_from_title(page.title))
            content_types.append(content_type_for_url(url, THEME_LINK_TYPES))
        return {
            "topics": unique_in_order(topics),
            "content_types": unique_in_order(content_types),
        }

    @staticmethod
    def synthesize_node(state: ThemeWorkflowState) -> ThemeWorkflowState:
        return {
            "recommendation": synthesize_theme(
                state["bio_tone"], state["topics"], state["content_types"]
            )
        }

    def _build_graph(self):
        graph = StateGraph(ThemeWorkflowState)
        graph.add_node("analyze_bio_tone", self.analyze_bio_tone_node)
        graph.add_node("analyze_top_links", self.analyze_top_links_node)
        graph.add_node("synthesize_recommendation", self.synthesize_node)

        graph.add_edge(START, "analyze_bio_tone")
        graph.add_edge("analyze_bio_tone", "analyze_top_links")
        graph.add_edge("analyze_top_links", "synthesize_recommendation")
        graph.add_edge("synthesize_recommendation", END)
        return graph.compile()

    def invoke(self, bio: str, links: list[str]) -> ThemeWorkflowResult:
        result = self._app.invoke(
            {
                "bio": require_text(bio, "bio"),
                "links": require_text_list(links, "links"),
            }
        )
        recommendation: ThemeRecommendation = result["recommendation"]
        return ThemeWorkflowResult(
            recommended_theme=recommendation.theme.value,
            reasoning=recommendation.reasoning,
            confidence=recommendation.confidence,
            analysis=ThemeAnalysis(
                bio_tone=result["bio_tone"],
                topics=result["topics"],
                content_types=result["content_types"],
            ),
        )
