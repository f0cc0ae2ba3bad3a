from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.categorizer import categorize
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class CategorizeInput(BaseModel):
    query: str = Field(description="Free-text travel request.")


def build_categorize_travel_query(context: ToolContext) -> StructuredTool:
    def _run(query: str) -> dict:
        return {"category": categorize(query).value}

    return StructuredTool.from_function(
        name="categorize_travel_query",
        description="Classify a travel request as beach, mountain, city, budget, luxury, family or general travel",
        func=_run,
        args_schema=CategorizeInput,
    )


tool = ToolSpec(
    name="categorize_travel_query",
    builder=build_categorize_travel_query,
    intent="Label a request with one fixed travel category.",
    schema_notes="Returns 'category', e.g. 'beach_travel'. Never fails on valid text.",
)
