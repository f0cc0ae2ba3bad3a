from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.credo import analyze_tone
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class ToneAnalyzerInput(BaseModel):
    text: str = Field(description="The text to analyze")


def build_tone_analyzer(context: ToolContext) -> StructuredTool:
    def _run(text: str) -> dict:
        return analyze_tone(text).model_dump(mode="json")

    return StructuredTool.from_function(
        name="tone_analyzer",
        description="Analyzes the tone and style of text content",
        func=_run,
        args_schema=ToneAnalyzerInput,
    )


tool = ToolSpec(
    name="tone_analyzer",
    builder=build_tone_analyzer,
    intent="Classify bio or post tone before writing in the user's voice.",
    schema_notes="Returns primary_tone, confidence and up to five keywords.",
)
