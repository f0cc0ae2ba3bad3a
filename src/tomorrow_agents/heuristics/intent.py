from __future__ import annotations

import re

from pydantic import BaseModel

from tomorrow_agents.errors import require_text
from tomorrow_agents.heuristics.rules import unique_in_order

_PHRASE_END = r"(?:\s|$|,|\.|!|\?)"

# Location patterns are tried before budget patterns and each list is tried
# in order. The order is historical, not a statement about which reading is
# more correct when both match the same words.
LOCATION_PATTERNS = (
    re.compile(rf"(?:go to|visit|travel to|trip to)\s+([a-zA-Z\s,]+?){_PHRASE_END}"),
    re.compile(rf"(?:in|at)\s+([a-zA-Z\s,]+?){_PHRASE_END}"),
)

BUDGET_PATTERNS = (
    re.compile(r"budget.*?(\$[\d,]+)"),
    re.compile(r"(\$[\d,]+).*?budget"),
    re.compile(r"(cheap|affordable|budget|expensive|luxury)"),
)

TIMEFRAME_PATTERNS = (
    re.compile(r"(next week|this week|weekend|tomorrow|today)"),
    re.compile(
        r"(january|february|march|april|may|june|july|august|september|october|november|december)"
    ),
    re.compile(r"(spring|summer|fall|autumn|winter)"),
    re.compile(r"(\d+\s*days?|\d+\s*weeks?|\d+\s*months?)"),
)

ACTIVITY_KEYWORDS = (
    "beach", "swimming", "surfing", "snorkeling", "diving",
    "hiking", "mountain", "skiing", "snowboarding",
    "museum", "art", "culture", "history", "sightseeing",
    "food", "restaurant", "dining", "cuisine",
    "shopping", "nightlife", "bars", "clubs",
    "family", "kids", "children", "playground",
    "adventure", "extreme", "sports", "outdoor",
    "relaxation", "spa", "wellness", "peaceful",
)

STYLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "luxury": ("luxury", "premium", "high-end", "expensive", "fancy"),
    "budget": ("budget", "cheap", "affordable", "economical"),
    "adventure": ("adventure", "extreme", "active", "outdoor"),
    "cultural": ("cultural", "history", "art", "museum", "heritage"),
    "family": ("family", "kids", "children", "family-friendly"),
    "romantic": ("romantic", "honeymoon", "couple", "intimate"),
    "business": ("business", "work", "conference", "meeting"),
}


class TravelIntent(BaseModel):
    """Fields pulled out of one spoken request. ``None`` means not detected."""

    location: str | None = None
    budget: str | None = None
    activities: list[str] | None = None
    timeframe: str | None = None
    travel_style: str | None = None


def _first_capture(patterns: tuple[re.Pattern[str], ...], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def extract_intent(transcript: str) -> TravelIntent:
    """Extract location, budget, activities, timeframe and style from a transcript."""
    text = require_text(transcript, "transcript").lower()

    location = _first_capture(LOCATION_PATTERNS, text)
    if location is not None:
        location = location.strip()

    activities = unique_in_order(k for k in ACTIVITY_KEYWORDS if k in text)

    travel_style = next(
        (
            style
            for style, keywords in STYLE_KEYWORDS.items()
            if any(keyword in text for keyword in keywords)
        ),
        None,
    )

    return TravelIntent(
        location=location,
        budget=_first_capture(BUDGET_PATTERNS, text),
        activities=activities or None,
        timeframe=_first_capture(TIMEFRAME_PATTERNS, text),
        travel_style=travel_style,
    )
