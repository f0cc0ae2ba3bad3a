import logging

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.definitions.travel.travel_remember import MEMORY_DISABLED
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)


class TravelMemorizeInput(BaseModel):
    statement: str = Field(
        description="Travel-related information to save into memory (preferences, past trips, destinations, etc.)"
    )


def build_travel_memorize(context: ToolContext) -> StructuredTool:
    def _run(statement: str) -> dict:
        if context.memory is None:
            return {"success": False, "message": MEMORY_DISABLED}
        logger.info("Creating travel memory: %r", statement)
        with context.telemetry.track_memory_retrieval(
            context.settings.memory_backend, context.user_id
        ):
            context.memory.remember(context.user_id, statement)
        return {"success": True}

    return StructuredTool.from_function(
        name="travel_memorize",
        description=(
            "Save travel preferences, destinations, experiences, or user information to "
            "memory so you can remember it later using the travel_remember tool."
        ),
        func=_run,
        args_schema=TravelMemorizeInput,
    )


tool = ToolSpec(
    name="travel_memorize",
    builder=build_travel_memorize,
    intent="Persist travel facts the user shares for later conversations.",
    schema_notes="Takes 'statement'. Returns 'success'.",
)
