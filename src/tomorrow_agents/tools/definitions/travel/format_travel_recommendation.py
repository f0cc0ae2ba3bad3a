from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.speech import WeatherSnapshot, format_travel_recommendation
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class FormatRecommendationInput(BaseModel):
    location: str
    temperature: float = Field(description="Current temperature in degrees Celsius.")
    conditions: str = Field(default="clear skies", description="Short weather description.")
    activities: list[str] = Field(default_factory=list)
    budget: str | None = None


def build_format_travel_recommendation(context: ToolContext) -> StructuredTool:
    def _run(
        location: str,
        temperature: float,
        conditions: str = "clear skies",
        activities: list[str] | None = None,
        budget: str | None = None,
    ) -> dict:
        text = format_travel_recommendation(
            location,
            WeatherSnapshot(temperature=temperature, description=conditions),
            activities or [],
            budget,
        )
        return {"recommendation": text}

    return StructuredTool.from_function(
        name="format_travel_recommendation",
        description="Compose a short spoken recommendation from weather, interests and budget",
        func=_run,
        args_schema=FormatRecommendationInput,
    )


tool = ToolSpec(
    name="format_travel_recommendation",
    builder=build_format_travel_recommendation,
    intent="Turn weather plus preferences into a voice-ready recommendation.",
    schema_notes="Returns 'recommendation' text ending with a follow-up question.",
)
