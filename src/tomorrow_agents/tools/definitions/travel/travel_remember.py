import logging

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)

MEMORY_DISABLED = "Memory is not configured for this assistant."


class TravelRememberInput(BaseModel):
    question: str = Field(
        description="Question used to look up travel information, preferences, or past experiences in saved memories."
    )


def build_travel_remember(context: ToolContext) -> StructuredTool:
    def _run(question: str) -> dict:
        if context.memory is None:
            return {"answer": MEMORY_DISABLED}
        logger.info("Searching travel memory: %r", question)
        with context.telemetry.track_memory_retrieval(
            context.settings.memory_backend, context.user_id
        ):
            found = context.memory.search(context.user_id, question)
        if not found:
            return {"answer": "No saved travel memories match that question."}
        return {"answer": "\n".join(found)}

    return StructuredTool.from_function(
        name="travel_remember",
        description=(
            "Remember travel preferences, past trips, and user information that you've "
            "previously saved using the travel_memorize tool."
        ),
        func=_run,
        args_schema=TravelRememberInput,
    )


tool = ToolSpec(
    name="travel_remember",
    builder=build_travel_remember,
    intent="Recall saved travel preferences for personalized recommendations.",
    schema_notes="Takes 'question'. Returns 'answer' with matching memories, newest first on ties.",
)
