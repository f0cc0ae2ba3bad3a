import re

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tomorrow_agents.tools.context import ToolContext
from tomorrow_agents.tools.tool_factory.web.scraper import PageMetadata, scrape_page
from tomorrow_agents.tools.tool_models import ToolSpec

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")
MIN_POINT_CHARS = 40
MAX_POINTS = 3
DEFAULT_POINTS = ["Key insight from the article", "Important takeaway"]


class ArticleFetcherInput(BaseModel):
    url: str = Field(description="Article URL")


def main_points(page: PageMetadata) -> list[str]:
    """First few substantial sentences of the page body."""
    points: list[str] = []
    for line in page.text.splitlines():
        for sentence in _SENTENCE_END.split(line):
            sentence = sentence.strip()
            if len(sentence) >= MIN_POINT_CHARS and sentence not in points:
                points.append(sentence)
            if len(points) == MAX_POINTS:
                return points
    return points or list(DEFAULT_POINTS)


def build_article_fetcher(context: ToolContext) -> StructuredTool:
    def _run(url: str) -> dict:
        page = scrape_page(url, timeout_seconds=context.settings.default_api_timeout_seconds)
        return {
            "title": page.title or page.h1 or "Article",
            "summary": page.meta_description or "Interesting content worth exploring",
            "main_points": main_points(page),
        }

    return StructuredTool.from_function(
        name="article_fetcher",
        description="Fetches and extracts key content from an article URL",
        func=_run,
        args_schema=ArticleFetcherInput,
    )


tool = ToolSpec(
    name="article_fetcher",
    builder=build_article_fetcher,
    intent="Summarise an article the user links to.",
    schema_notes="Returns title, summary and up to three main_points.",
)
