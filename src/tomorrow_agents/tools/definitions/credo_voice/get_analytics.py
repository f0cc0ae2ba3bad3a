from typing import Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_models import ToolSpec

# No click tracking exists yet, so analytics are a fixed sample.
SAMPLE_ANALYTICS = {
    "total_views": 1250,
    "total_clicks": 342,
    "top_link": "My Latest Blog Post",
    "conversion_rate": 27.4,
}


class GetAnalyticsInput(BaseModel):
    time_range: Literal["today", "week", "month", "all"] | None = None


def build_get_analytics(context: ToolContext) -> StructuredTool:
    def _run(time_range: str | None = None) -> dict:
        a = SAMPLE_ANALYTICS
        summary = (
            f"In the last {time_range or 'month'}, you had {a['total_views']} views and "
            f"{a['total_clicks']} clicks. Your top performing link is \"{a['top_link']}\" "
            f"with a {a['conversion_rate']}% conversion rate."
        )
        return {**a, "summary": summary}

    return StructuredTool.from_function(
        name="get_analytics",
        description="Get profile analytics and performance metrics",
        func=_run,
        args_schema=GetAnalyticsInput,
    )


tool = ToolSpec(
    name="get_analytics",
    builder=build_get_analytics,
    intent="Answer 'how is my profile doing' questions.",
    schema_notes="Returns totals, top_link, conversion_rate and a spoken summary.",
)
