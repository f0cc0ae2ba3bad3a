from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.intent import extract_intent
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class ExtractIntentInput(BaseModel):
    transcript: str = Field(description="What the traveller said.")


def build_extract_travel_intent(context: ToolContext) -> StructuredTool:
    def _run(transcript: str) -> dict:
        return extract_intent(transcript).model_dump()

    return StructuredTool.from_function(
        name="extract_travel_intent",
        description="Pull location, budget, activities, timeframe and travel style out of a spoken request",
        func=_run,
        args_schema=ExtractIntentInput,
    )


tool = ToolSpec(
    name="extract_travel_intent",
    builder=build_extract_travel_intent,
    intent="Structure a free-form voice request before planning.",
    schema_notes="Every field is optional; null means it was not mentioned.",
)
