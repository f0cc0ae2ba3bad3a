from typing import Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class ReorderLinksInput(BaseModel):
    link_title: str
    position: Literal["top", "up", "down", "bottom"]


def build_reorder_links(context: ToolContext) -> StructuredTool:
    def _run(link_title: str, position: str) -> dict:
        profile = context.profiles.get(context.user_id)
        index = profile.find_link(link_title)
        if index is None:
            return {"success": False, "message": f'No link titled "{link_title}" on your profile'}

        link = profile.links.pop(index)
        targets = {
            "top": 0,
            "up": max(index - 1, 0),
            "down": min(index + 1, len(profile.links)),
            "bottom": len(profile.links),
        }
        profile.links.insert(targets[position], link)
        where = "to the top" if position == "top" else position
        return {"success": True, "message": f'Moved "{link.title}" {where}'}

    return StructuredTool.from_function(
        name="reorder_links",
        description="Reorder links on the profile",
        func=_run,
        args_schema=ReorderLinksInput,
    )


tool = ToolSpec(
    name="reorder_links",
    builder=build_reorder_links,
    intent="Move a link by title to the top, bottom, or one step up or down.",
    schema_notes="Matches titles case-insensitively, exact match first, then substring.",
)
