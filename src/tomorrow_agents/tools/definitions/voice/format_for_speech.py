from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.speech import to_speech_text
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class FormatForSpeechInput(BaseModel):
    text: str = Field(description="Markdown text to rewrite for text-to-speech.")


def build_format_for_speech(context: ToolContext) -> StructuredTool:
    def _run(text: str) -> dict:
        return {"speech_text": to_speech_text(text)}

    return StructuredTool.from_function(
        name="format_for_speech",
        description="Strip markdown and expand abbreviations and symbols so text reads naturally aloud",
        func=_run,
        args_schema=FormatForSpeechInput,
    )


tool = ToolSpec(
    name="format_for_speech",
    builder=build_format_for_speech,
    intent="Prepare model output for a speech engine.",
    schema_notes="Returns 'speech_text'. Apply once: the transform is not idempotent.",
)
