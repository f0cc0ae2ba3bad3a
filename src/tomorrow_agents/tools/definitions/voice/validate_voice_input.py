from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.speech import validate_voice_input
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class ValidateVoiceInput(BaseModel):
    transcript: str = Field(description="Speech-to-text transcript.")


def build_validate_voice_input(context: ToolContext) -> StructuredTool:
    def _run(transcript: str) -> dict:
        return validate_voice_input(transcript).model_dump()

    return StructuredTool.from_function(
        name="validate_voice_input",
        description="Check a voice transcript for length, audio problems and travel content",
        func=_run,
        args_schema=ValidateVoiceInput,
    )


tool = ToolSpec(
    name="validate_voice_input",
    builder=build_validate_voice_input,
    intent="Flag transcripts that are too short, garbled or off-topic.",
    schema_notes="Returns is_valid, confidence (0-1) and a list of issues.",
)
