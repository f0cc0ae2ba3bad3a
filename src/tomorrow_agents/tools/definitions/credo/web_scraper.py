from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_factory.web.scraper import scrape_page
from tomorrow_agents.tools.tool_models import ToolSpec


class WebScraperInput(BaseModel):
    url: str = Field(description="The URL to scrape")


def build_web_scraper(context: ToolContext) -> StructuredTool:
    def _run(url: str) -> dict:
        page = scrape_page(url, timeout_seconds=context.settings.default_api_timeout_seconds)
        return page.model_dump(exclude={"text"})

    return StructuredTool.from_function(
        name="web_scraper",
        description="Scrapes a URL to extract title, H1 tag, and meta description",
        func=_run,
        args_schema=WebScraperInput,
    )


tool = ToolSpec(
    name="web_scraper",
    builder=build_web_scraper,
    intent="Understand what a profile link points to.",
    schema_notes="Returns title, h1, meta_description; 'error' is set when the fetch failed.",
)
