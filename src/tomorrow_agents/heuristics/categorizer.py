from __future__ import annotations

from enum import Enum

from tomorrow_agents.errors import require_text
from tomorrow_agents.heuristics.rules import Rule, contains_any, first_match


class TravelCategory(str, Enum):
    BEACH = "beach_travel"
    MOUNTAIN = "mountain_travel"
    CITY = "city_travel"
    BUDGET = "budget_travel"
    LUXURY = "luxury_travel"
    FAMILY = "family_travel"
    GENERAL = "general_travel"


# Priority order is significant: a query mentioning both "beach" and "cheap"
# is a beach query.
CATEGORY_RULES: list[Rule[str, TravelCategory]] = [
    Rule(contains_any("beach", "ocean", "coast"), TravelCategory.BEACH, "beach"),
    Rule(contains_any("mountain", "hiking", "ski"), TravelCategory.MOUNTAIN, "mountain"),
    Rule(contains_any("city", "urban", "museum"), TravelCategory.CITY, "city"),
    Rule(contains_any("budget", "cheap", "affordable"), TravelCategory.BUDGET, "budget"),
    Rule(contains_any("luxury", "premium", "expensive"), TravelCategory.LUXURY, "luxury"),
    Rule(contains_any("family", "kids", "children"), TravelCategory.FAMILY, "family"),
]


def categorize(query: str) -> TravelCategory:
    """Map a free-text travel query to one of the fixed travel categories."""
    text = require_text(query, "query").lower()
    return first_match(CATEGORY_RULES, text, TravelCategory.GENERAL)
