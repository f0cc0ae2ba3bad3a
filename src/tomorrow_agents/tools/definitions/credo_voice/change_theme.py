from typing import Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel

from tomorrow_agents.heuristics.credo import THEME_DESCRIPTIONS
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class ChangeThemeInput(BaseModel):
    theme: Literal["apex", "mineral", "lunar", "ocean", "forest", "sunset", "default"]


def build_change_theme(context: ToolContext) -> StructuredTool:
    def _run(theme: str) -> dict:
        profile = context.profiles.get(context.user_id)
        previous = profile.theme
        profile.theme = theme
        return {
            "success": True,
            "previous_theme": previous,
            "new_theme": theme,
            "message": f"Theme changed to {theme}: {THEME_DESCRIPTIONS[theme]}",
        }

    return StructuredTool.from_function(
        name="change_theme",
        description="Change the profile theme",
        func=_run,
        args_schema=ChangeThemeInput,
    )


tool = ToolSpec(
    name="change_theme",
    builder=build_change_theme,
    intent="Switch the profile's visual theme.",
    schema_notes="Returns previous_theme and new_theme with the theme's description.",
)
