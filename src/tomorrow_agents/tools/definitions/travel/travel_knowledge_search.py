import logging
from typing import Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.knowledge.base import fallback_advice
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)

NO_RESULTS_SUGGESTIONS = [
    "Try a broader search term",
    "Check spelling of destination names",
    'Use general terms like "budget tips" or "safety advice"',
]


class TravelKnowledgeSearchInput(BaseModel):
    query: str = Field(
        description='Search query for travel information (e.g., "Tokyo attractions", "budget travel tips", "Paris safety")'
    )
    category: Literal["destination", "tips", "safety", "culture", "budget", "activities"] | None = Field(
        default=None, description="Filter by content category"
    )
    region: Literal["Asia", "Europe", "Americas", "Africa", "Oceania"] | None = Field(
        default=None, description="Filter by geographic region"
    )
    budget_level: Literal["budget-friendly", "medium", "medium-high", "luxury"] | None = Field(
        default=None, description="Filter by budget level"
    )
    activities: list[str] | None = Field(
        default=None,
        description='Filter by activity types (e.g., ["beaches", "culture", "food"])',
    )


def build_travel_knowledge_search(context: ToolContext) -> StructuredTool:
    def _run(
        query: str,
        category: str | None = None,
        region: str | None = None,
        budget_level: str | None = None,
        activities: list[str] | None = None,
    ) -> dict:
        filters = {
            key: value
            for key, value in (
                ("category", category),
                ("region", region),
                ("budget_level", budget_level),
            )
            if value
        }
        knowledge = context.knowledge
        logger.info("Searching travel knowledge base: %r", query)
        try:
            with context.telemetry.track_memory_retrieval("knowledge", context.user_id):
                if knowledge is None:
                    hits = []
                else:
                    knowledge.ensure_populated()
                    hits = knowledge.query(
                        query, top_k=5, filter=filters or None, activities=activities
                    )
        except Exception as exc:  # noqa: BLE001
            logger.warning("Travel knowledge search failed: %s", exc)
            return {
                "success": False,
                "message": "Travel knowledge base temporarily unavailable. Using general travel advice.",
                "fallback_advice": fallback_advice(query),
            }

        if not hits:
            return {
                "success": False,
                "message": "No relevant travel information found for your query.",
                "suggestions": NO_RESULTS_SUGGESTIONS,
            }

        return {
            "success": True,
            "query": query,
            "total_results": len(hits),
            "results": [hit.model_dump() for hit in hits],
            "summary": f'Found {len(hits)} relevant travel knowledge entries for "{query}"',
            "filters": {**filters, "activities": activities},
        }

    return StructuredTool.from_function(
        name="travel_knowledge_search",
        description=(
            "Search the travel knowledge base for destination information, travel tips, "
            "cultural insights, safety information, and local recommendations"
        ),
        func=_run,
        args_schema=TravelKnowledgeSearchInput,
    )


tool = ToolSpec(
    name="travel_knowledge_search",
    builder=build_travel_knowledge_search,
    intent="Ground destination advice in the bundled travel guides.",
    schema_notes=(
        "Takes 'query' plus optional category, region, budget_level and activities filters. "
        "Returns ranked 'results', or 'suggestions' / 'fallback_advice' when nothing is found."
    ),
)
