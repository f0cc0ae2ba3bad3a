import logging

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.definitions.travel.travel_remember import MEMORY_DISABLED
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)


class UpdateWorkingMemoryInput(BaseModel):
    content: str = Field(
        description="The full updated working-memory profile, keeping the template headings."
    )


def build_update_working_memory(context: ToolContext) -> StructuredTool:
    def _run(content: str) -> dict:
        if context.memory is None:
            return {"success": False, "message": MEMORY_DISABLED}
        logger.info("Updating working memory for %s", context.user_id)
        context.memory.update_working_memory(context.user_id, content)
        return {"success": True}

    return StructuredTool.from_function(
        name="update_working_memory",
        description=(
            "Replace the user's working-memory profile with an updated version when you "
            "learn something new about them."
        ),
        func=_run,
        args_schema=UpdateWorkingMemoryInput,
    )


tool = ToolSpec(
    name="update_working_memory",
    builder=build_update_working_memory,
    intent="Keep the per-user profile the agent sees at the start of every run current.",
    schema_notes="Takes the whole profile as 'content'; the previous profile is overwritten.",
)
