from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.quality import score_response
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class ScoreInput(BaseModel):
    response: str = Field(description="Generated travel answer to score.")
    query: str = Field(description="The request the answer responds to.")


def build_score_travel_response(context: ToolContext) -> StructuredTool:
    def _run(response: str, query: str) -> dict:
        return {"score": score_response(response, query)}

    return StructuredTool.from_function(
        name="score_travel_response",
        description="Heuristic 0-1 quality score for a travel answer",
        func=_run,
        args_schema=ScoreInput,
    )


tool = ToolSpec(
    name="score_travel_response",
    builder=build_score_travel_response,
    intent="Cheap self-check of answer quality before replying.",
    schema_notes="Returns 'score' in [0, 1].",
)
