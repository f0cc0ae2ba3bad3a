from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.heuristics.credo import suggest_title_style
from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_factory.web.scraper import scrape_page
from tomorrow_agents.tools.tool_models import ToolSpec


class SuggestLinkTitlesInput(BaseModel):
    url: str = Field(description="Link URL.")
    current_title: str | None = Field(default=None, description="Title the link has today, if any.")


def build_suggest_link_titles(context: ToolContext) -> StructuredTool:
    def _run(url: str, current_title: str | None = None) -> dict:
        title = current_title
        scraped = None
        if not title:
            page = scrape_page(url, timeout_seconds=context.settings.default_api_timeout_seconds)
            title = page.title or page.h1
            scraped = {"title": page.title, "description": page.meta_description}
        suggestion = suggest_title_style(url, title)
        return {**suggestion.model_dump(mode="json"), "scraped_data": scraped}

    return StructuredTool.from_function(
        name="suggest_link_titles",
        description="Suggest a title style and three titles for a profile link",
        func=_run,
        args_schema=SuggestLinkTitlesInput,
    )


tool = ToolSpec(
    name="suggest_link_titles",
    builder=build_suggest_link_titles,
    intent="Give three compelling titles in a style that fits the link.",
    schema_notes="Scrapes the page only when current_title is empty. Returns style, reasoning, suggestions.",
)
