from __future__ import annotations

import json
import logging
from typing import Any, Literal, TypedDict

from langchain_core.language_models import BaseChatModel
from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.credo import MAX_TITLE_LENGTH, ONBOARDING_LINK_TYPES, content_type_for_url
from tomorrow_agents.orchestrator.llm_factory import LLMFactory

logger = logging.getLogger(__name__)


class OnboardingUser(BaseModel):
    id: str
    name: str
    linkedin_data: dict[str, Any] | None = None
    current_bio: str | None = None
    headline: str | None = None


class OnboardingLink(BaseModel):
    id: str
    url: str
    title: str
    clicks: int | None = None


class ProfileAnalysis(BaseModel):
    industry: str
    professional_focus: str
    target_audience: str
    strengths: list[str]


class BioSuggestion(BaseModel):
    style: Literal["professional", "creative", "executive"]
    text: str
    reasoning: str


class ProfileReview(BaseModel):
    analysis: ProfileAnalysis
    bios: list[BioSuggestion] = Field(description="Three alternative bios")


class TitleProposal(BaseModel):
    suggested_title: str = Field(description=f"Action-oriented title, at most {MAX_TITLE_LENGTH} characters")
    reasoning: str
    seo_keywords: list[str] = Field(description="3-5 SEO keywords")


class LinkSuggestion(TitleProposal):
    link_id: str
    original_title: str


class ThemePreview(BaseModel):
    primary_color: str
    description: str
    benefits: list[str]


class OnboardingTheme(BaseModel):
    recommended_theme: Literal["apex", "mineral", "lunar"]
    reasoning: str
    preview: ThemePreview


class OnboardingResult(BaseModel):
    profile_analysis: ProfileAnalysis
    bio_suggestions: list[BioSuggestion]
    link_suggestions: list[LinkSuggestion]
    theme_recommendation: OnboardingTheme


class OnboardingState(TypedDict, total=False):
    user: OnboardingUser
    links: list[OnboardingLink]
    current_theme: str | None
    review: ProfileReview
    link_suggestions: list[LinkSuggestion]
    link_types: list[str]
    theme: OnboardingTheme


def profile_prompt(user: OnboardingUser) -> str:
    return (
        "Analyze this professional profile and generate 3 alternative bios:\n\n"
        f"Name: {user.name}\n"
        f"Current Headline: {user.headline or 'None'}\n"
        f"Current Bio: {user.current_bio or 'None'}\n"
        f"LinkedIn Data: {json.dumps(user.linkedin_data or {})}\n\n"
        "Provide:\n"
        "1. Analysis of their professional profile (industry, focus, audience, strengths)\n"
        "2. Three bio alternatives in Executive tone that will attract high-value clients"
    )


def link_prompt(link: OnboardingLink) -> str:
    return (
        "Analyze this link and create a more compelling, SEO-friendly title:\n\n"
        f"URL: {link.url}\n"
        f"Current Title: {link.title}\n"
        f"Clicks: {link.clicks or 0}\n\n"
        "Generate:\n"
        f"1. A compelling, action-oriented title (max {MAX_TITLE_LENGTH} chars)\n"
        "2. Reasoning for the change\n"
        "3. 3-5 SEO keywords\n\n"
        "Focus on conversion and click-through rate."
    )


def theme_prompt(analysis: ProfileAnalysis, link_types: list[str], current_theme: str | None) -> str:
    return (
        "Based on this professional profile, recommend the best theme:\n\n"
        f"Industry: {analysis.industry}\n"
        f"Professional Focus: {analysis.professional_focus}\n"
        f"Content Types: {', '.join(link_types) or 'none'}\n"
        f"Current Theme: {current_theme or 'default'}\n\n"
        "Available themes:\n"
        "- Apex: Bold gradients, floating elements, aurora effects (creative/design)\n"
        "- Mineral: Brutalist design, monolithic blocks (technical/engineering)\n"
        "- Lunar: Glassmorphism, cosmic particles (executive/professional)\n\n"
        "Recommend the best theme with reasoning and benefits."
    )


class OnboardingWizard:
    """Profile review, link title suggestions and a theme, in that order."""

    def __init__(self, llm: BaseChatModel | None = None) -> None:
        self._llm = llm or LLMFactory.create_chat_model()
        self._app = self._build_graph()

    def _structured(self, schema: type[BaseModel], prompt: str):
        return self._llm.with_structured_output(schema).invoke(prompt)

    def analyze_profile_node(self, state: OnboardingState) -> OnboardingState:
        return {"review": self._structured(ProfileReview, profile_prompt(state["user"]))}

    def analyze_links_node(self, state: OnboardingState) -> OnboardingState:
        suggestions: list[LinkSuggestion] = []
        for link in state.get("links", []):
            proposal: TitleProposal = self._structured(TitleProposal, link_prompt(link))
            suggestions.append(
                LinkSuggestion(
                    link_id=link.id,
                    original_title=link.title,
                    suggested_title=proposal.suggested_title[:MAX_TITLE_LENGTH],
                    reasoning=proposal.reasoning,
                    seo_keywords=proposal.seo_keywords,
                )
            )
        link_types = [
            content_type_for_url(link.url, ONBOARDING_LINK_TYPES)
            for link in state.get("links", [])
        ]
        return {"link_suggestions": suggestions, "link_types": link_types}

    def recommend_theme_node(self, state: OnboardingState) -> OnboardingState:
        prompt = theme_prompt(
            state["review"].analysis, state["link_types"], state.get("current_theme")
        )
        return {"theme": self._structured(OnboardingTheme, prompt)}

    def _build_graph(self):
        graph = StateGraph(OnboardingState)
        graph.add_node("analyze_profile", self.analyze_profile_node)
        graph.add_node("analyze_links", self.analyze_links_node)
        graph.add_node("recommend_theme", self.recommend_theme_node)

        graph.add_edge(START, "analyze_profile")
        graph.add_edge("analyze_profile", "analyze_links")
        graph.add_edge("analyze_links", "recommend_theme")
        graph.add_edge("recommend_theme", END)
        return graph.compile()

    def invoke(
        self,
        user: OnboardingUser,
        links: list[OnboardingLink],
        current_theme: str | None = None,
    ) -> OnboardingResult:
        logger.info("Running onboarding for %s with %d links", user.id, len(links))
        result = self._app.invoke(
            {"user": user, "links": links, "current_theme": current_theme}
        )
        review: ProfileReview = result["review"]
        return OnboardingResult(
            profile_analysis=review.analysis,
            bio_suggestions=review.bios,
            link_suggestions=result["link_suggestions"],
            theme_recommendation=result["theme"],
        )
