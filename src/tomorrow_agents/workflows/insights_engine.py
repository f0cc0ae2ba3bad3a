"""Proactive insight cards for a link-in-bio profile.

An activity analysis (LLM structured output unless another analyzer is
injected) feeds three rule steps that run as parallel graph branches.
Cards are numbered in step order, optimization first, then sorted by
priority; the sort is stable so numbering survives within a priority.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Callable, Literal, TypedDict

from langchain_core.language_models import BaseChatModel
from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.credo import INSIGHT_LINK_TYPES, content_type_for_url
from tomorrow_agents.orchestrator.llm_factory import LLMFactory

logger = logging.getLogger(__name__)

InsightType = Literal["optimization", "content", "monetization", "engagement", "growth"]
Priority = Literal["high", "medium", "low"]

PRIORITY_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}
STALE_AFTER_DAYS = 14
MONETIZE_MIN_VISITORS = 100
AFFILIATE_KEYWORDS = ("tool", "software")


class LinkStats(BaseModel):
    id: str
    title: str
    url: str
    clicks: int = 0
    position: int | None = None
    conversion_rate: float | None = None


class ActivityAnalytics(BaseModel):
    total_clicks: int
    unique_visitors: int
    avg_time_on_page: float
    bounce_rate: float
    top_links: list[LinkStats] = Field(default_factory=list)
    traffic_sources: dict[str, int] = Field(default_factory=dict)


class ProfileSnapshot(BaseModel):
    bio: str = ""
    theme: str = "default"
    links_count: int = 0
    has_digital_products: bool = False
    last_updated: datetime
    industry: str | None = None


class ContentCount(BaseModel):
    type: str
    count: int


class ActivityPatterns(BaseModel):
    most_active_time: str = Field(description="When visitors are most active")
    top_performing_content: list[str] = Field(description="Titles of the best performing links")
    underperforming_links: list[str] = Field(description="Titles of links with few clicks")
    visitor_behavior: str = Field(description="One-sentence summary of visitor behavior")


class ActivityAnalysis(BaseModel):
    patterns: ActivityPatterns
    opportunities: list[str] = Field(description="Concrete growth opportunities")


class InsightDraft(BaseModel):
    type: InsightType
    title: str
    description: str
    action: str
    priority: Priority
    data: dict[str, Any] | None = None


class InsightCard(InsightDraft):
    id: str
    created_at: datetime


class InsightsState(TypedDict, total=False):
    user_id: str
    analytics: ActivityAnalytics
    profile: ProfileSnapshot
    current_content: list[ContentCount]
    activity: ActivityAnalysis
    optimization_insights: list[InsightDraft]
    content_insights: list[InsightDraft]
    monetization_insights: list[InsightDraft]
    insights: list[InsightCard]


ActivityAnalyzer = Callable[[ActivityAnalytics, ProfileSnapshot], ActivityAnalysis]


def activity_prompt(analytics: ActivityAnalytics, profile: ProfileSnapshot) -> str:
    top_links = "\n".join(f"- {link.title}: {link.clicks} clicks" for link in analytics.top_links)
    return (
        "Analyze this user's activity data and identify patterns:\n\n"
        "Analytics:\n"
        f"- Total Clicks: {analytics.total_clicks}\n"
        f"- Unique Visitors: {analytics.unique_visitors}\n"
        f"- Avg Time on Page: {analytics.avg_time_on_page:g}s\n"
        f"- Bounce Rate: {analytics.bounce_rate:g}%\n\n"
        f"Top Links:\n{top_links or '- none'}\n\n"
        "Profile:\n"
        f"- Links Count: {profile.links_count}\n"
        f"- Has Digital Products: {profile.has_digital_products}\n"
        f"- Last Updated: {profile.last_updated.isoformat()}\n\n"
        "Identify:\n"
        "1. Content performance patterns\n"
        "2. Visitor behavior insights\n"
        "3. Underperforming areas\n"
        "4. Growth opportunities"
    )


def llm_activity_analyzer(llm: BaseChatModel) -> ActivityAnalyzer:
    structured_llm = llm.with_structured_output(ActivityAnalysis)

    def _analyze(analytics: ActivityAnalytics, profile: ProfileSnapshot) -> ActivityAnalysis:
        return structured_llm.invoke(activity_prompt(analytics, profile))

    return _analyze


def optimization_insights(
    analytics: ActivityAnalytics, patterns: ActivityPatterns
) -> list[InsightDraft]:
    insights: list[InsightDraft] = []

    if analytics.top_links:
        positioned = [
            (link.position or index, link)
            for index, link in enumerate(analytics.top_links, start=1)
        ]
        position, top = max(positioned, key=lambda item: item[1].clicks)
        if position > 1:
            insights.append(
                InsightDraft(
                    type="optimization",
                    title="Move Top Performer Up",
                    description=f'Your "{top.title}" link is getting the most clicks but isn\'t at the top',
                    action="Move to top position",
                    priority="high",
                    data={
                        "link_id": top.id,
                        "current_position": position,
                        "suggested_position": 1,
                        "expected_impact": "15-20% increase in clicks",
                    },
                )
            )

    if patterns.underperforming_links:
        insights.append(
            InsightDraft(
                type="optimization",
                title="Update Low-Performing Links",
                description=f"{len(patterns.underperforming_links)} links are underperforming",
                action="Review and update titles or remove",
                priority="medium",
                data={"expected_impact": "Improved overall engagement"},
            )
        )
    return insights


def content_insights(
    last_updated: datetime, current_content: list[ContentCount], now: datetime
) -> list[InsightDraft]:
    insights: list[InsightDraft] = []

    if last_updated.tzinfo is None:
        last_updated = last_updated.replace(tzinfo=timezone.utc)
    days_since_update = (now - last_updated).days
    if days_since_update > STALE_AFTER_DAYS:
        insights.append(
            InsightDraft(
                type="content",
                title="Refresh Your Content",
                description=f"Your page hasn't been updated in {days_since_update} days",
                action="Add new links or update existing ones",
                priority="high",
            )
        )

    if not any(item.type == "video" for item in current_content):
        insights.append(
            InsightDraft(
                type="content",
                title="Add Video Content",
                description="Video content typically gets 2x more engagement",
                action="Add YouTube or TikTok links",
                priority="medium",
            )
        )
    return insights


def monetization_insights(
    has_digital_products: bool, top_performing_content: list[str], visitor_count: int
) -> list[InsightDraft]:
    insights: list[InsightDraft] = []

    if not has_digital_products and visitor_count > MONETIZE_MIN_VISITORS:
        insights.append(
            InsightDraft(
                type="monetization",
                title="Monetize Your Audience",
                description=f"With {visitor_count} visitors, you could be earning from digital products",
                action="Create a guide or template",
                priority="high",
                data={"potential_revenue": "$500-2000/month", "recommended_price": "$29-49"},
            )
        )

    if any(
        keyword in content.lower()
        for content in top_performing_content
        for keyword in AFFILIATE_KEYWORDS
    ):
        insights.append(
            InsightDraft(
                type="monetization",
                title="Add Affiliate Links",
                description="Your tool-related content is perfect for affiliate marketing",
                action="Join affiliate programs",
                priority="medium",
                data={"potential_revenue": "$100-500/month"},
            )
        )
    return insights


def count_content_types(links: list[LinkStats]) -> list[ContentCount]:
    counts = Counter(content_type_for_url(link.url, INSIGHT_LINK_TYPES) for link in links)
    return [ContentCount(type=kind, count=count) for kind, count in counts.items()]


class InsightsEngine:
    def __init__(
        self,
        analyzer: ActivityAnalyzer | None = None,
        *,
        llm: BaseChatModel | None = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        if analyzer is None:
            analyzer = llm_activity_analyzer(llm or LLMFactory.create_chat_model())
        self._analyze = analyzer
        self._clock = clock
        self._app = self._build_graph()

    def analyze_activity_node(self, state: InsightsState) -> InsightsState:
        return {"activity": self._analyze(state["analytics"], state["profile"])}

    @staticmethod
    def optimization_node(state: InsightsState) -> InsightsState:
        return {
            "optimization_insights": optimization_insights(
                state["analytics"], state["activity"].patterns
            )
        }

    def content_node(self, state: InsightsState) -> InsightsState:
        return {
            "content_insights": content_insights(
                state["profile"].last_updated, state["current_content"], self._clock()
            )
        }

    @staticmethod
    def monetization_node(state: InsightsState) -> InsightsState:
        return {
            "monetization_insights": monetization_insights(
                state["profile"].has_digital_products,
                state["activity"].patterns.top_performing_content,
                state["analytics"].unique_visitors,
            )
        }

    def compile_node(self, state: InsightsState) -> InsightsState:
        created_at = self._clock()
        drafts = (
            state.get("optimization_insights", [])
            + state.get("content_insights", [])
            + state.get("monetization_insights", [])
        )
        cards = [
            InsightCard(id=f"insight-{index}", created_at=created_at, **draft.model_dump())
            for index, draft in enumerate(drafts, start=1)
        ]
        cards.sort(key=lambda card: PRIORITY_ORDER[card.priority])
        return {"insights": cards}

    def _build_graph(self):
        graph = StateGraph(InsightsState)
        graph.add_node("analyze_activity", self.analyze_activity_node)
        graph.add_node("optimization", self.optimization_node)
        graph.add_node("content", self.content_node)
        graph.add_node("monetization", self.monetization_node)
        graph.add_node("compile", self.compile_node)

        graph.add_edge(START, "analyze_activity")
        for branch in ("optimization", "content", "monetization"):
            graph.add_edge("analyze_activity", branch)
        graph.add_edge(["optimization", "content", "monetization"], "compile")
        graph.add_edge("compile", END)
        return graph.compile()

    def invoke(
        self,
        user_id: str,
        analytics: ActivityAnalytics,
        profile: ProfileSnapshot,
        current_content: list[ContentCount] | None = None,
    ) -> list[InsightCard]:
        if current_content is None:
            current_content = count_content_types(analytics.top_links)
        result = self._app.invoke(
            {
                "user_id": user_id,
                "analytics": analytics,
                "profile": profile,
                "current_content": current_content,
            }
        )
        logger.info("Generated %d insights for %s", len(result["insights"]), user_id)
        return result["insights"]


def generate_insights(
    user_id: str,
    analytics: ActivityAnalytics,
    profile: ProfileSnapshot,
    analyzer: ActivityAnalyzer | None = None,
) -> list[InsightCard]:
    return InsightsEngine(analyzer).invoke(user_id, analytics, profile)
