from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)
MAX_TEXT_CHARS = 4000


class PageMetadata(BaseModel):
    title: str | None = None
    h1: str | None = None
    meta_description: str | None = None
    text: str = ""
    error: str | None = None


def parse_page(html: str) -> PageMetadata:
    """Extract title, first H1, meta description and readable text from HTML."""
    soup = BeautifulSoup(html, "html.parser")

    title = soup.title.get_text(strip=True) if soup.title else None
    h1_tag = soup.find("h1")
    h1 = h1_tag.get_text(strip=True) if h1_tag else None
    meta_tag = soup.find("meta", attrs={"name": "description"})
    meta_description = meta_tag.get("content") if meta_tag else None

    for tag in soup(["script", "style", "nav", "footer"]):
        tag.decompose()
    lines = (line.strip() for line in soup.get_text().splitlines())
    chunks = (phrase.strip() for line in lines for phrase in line.split("  "))
    text = "\n".join(chunk for chunk in chunks if chunk)
    if len(text) > MAX_TEXT_CHARS:
        text = text[:MAX_TEXT_CHARS] + "..."

    return PageMetadata(
        title=title or None,
        h1=h1 or None,
        meta_description=meta_description or None,
        text=text,
    )


def scrape_page(url: str, timeout_seconds: float = 10.0) -> PageMetadata:
    """Fetch a page and parse it. Network and HTTP errors come back in ``error``."""
    try:
        response = httpx.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=timeout_seconds,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Scraping %s failed: %s", url, exc)
        return PageMetadata(error=f"Failed to scrape URL: {exc}")
    return parse_page(response.text)
