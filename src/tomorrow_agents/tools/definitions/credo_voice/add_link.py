import logging

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.profiles import ProfileLink
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)


class AddLinkInput(BaseModel):
    url: str
    title: str | None = None
    description: str | None = None


def build_add_link(context: ToolContext) -> StructuredTool:
    def _run(url: str, title: str | None = None, description: str | None = None) -> dict:
        profile = context.profiles.get(context.user_id)
        link = ProfileLink(url=url, title=title or url, description=description)
        profile.links.append(link)
        logger.info("Added link %s for %s", url, context.user_id)
        return {
            "success": True,
            "link_id": link.id,
            "message": f"Added link: {title or url}",
        }

    return StructuredTool.from_function(
        name="add_link",
        description="Add a new link to the user profile",
        func=_run,
        args_schema=AddLinkInput,
    )


tool = ToolSpec(
    name="add_link",
    builder=build_add_link,
    intent="Append a link to the user's profile.",
    schema_notes="Returns success, link_id and a confirmation message.",
)
