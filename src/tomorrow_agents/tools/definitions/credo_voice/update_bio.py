from typing import Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class UpdateBioInput(BaseModel):
    bio: str
    style: Literal["professional", "creative", "executive"] | None = None


def build_update_bio(context: ToolContext) -> StructuredTool:
    def _run(bio: str, style: str | None = None) -> dict:
        profile = context.profiles.get(context.user_id)
        profile.bio = bio
        profile.bio_style = style
        suffix = f" with {style} style" if style else ""
        return {"success": True, "message": f"Bio updated successfully{suffix}"}

    return StructuredTool.from_function(
        name="update_bio",
        description="Update the user bio",
        func=_run,
        args_schema=UpdateBioInput,
    )


tool = ToolSpec(
    name="update_bio",
    builder=build_update_bio,
    intent="Replace the profile bio.",
    schema_notes="Returns success and a confirmation message.",
)
