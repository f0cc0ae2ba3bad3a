from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.credo import recommend_theme
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec


class RecommendThemeInput(BaseModel):
    bio: str = Field(description="The user's current bio.")
    topics: list[str] = Field(default_factory=list, description="Topics of the user's links.")
    content_types: list[str] = Field(
        default_factory=list, description="Link content types, e.g. article, video, code."
    )


def build_recommend_theme(context: ToolContext) -> StructuredTool:
    def _run(bio: str, topics: list[str] | None = None, content_types: list[str] | None = None) -> dict:
        return recommend_theme(bio, topics or [], content_types or []).model_dump(mode="json")

    return StructuredTool.from_function(
        name="recommend_theme",
        description="Recommend a profile theme (apex, mineral, lunar, ocean, forest, sunset) from bio and link content",
        func=_run,
        args_schema=RecommendThemeInput,
    )


tool = ToolSpec(
    name="recommend_theme",
    builder=build_recommend_theme,
    intent="Suggest a visual theme that fits the user's voice and content.",
    schema_notes="Returns theme, reasoning and confidence.",
)
