from __future__ import annotations

from tomorrow_agents.errors import require_text

BASE_SCORE = 0.5
TRAVEL_KEYWORDS = (
    "destination",
    "weather",
    "activity",
    "recommend",
    "visit",
    "travel",
    "trip",
)
# (needles, bonus) checked against the response as written, case-sensitive.
ADVICE_BONUSES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("temperature", "weather"), 0.05),
    (("budget", "cost", "price"), 0.05),
    (("activity", "activities"), 0.05),
)


def score_response(response: str, query: str) -> float:
    """Heuristic 0-1 quality proxy for a travel answer.

    Rewards length, travel vocabulary, coverage of the query's longer words
    and concrete advice markers. This is not a validated metric; it only
    feeds the ``recommendation_quality_score`` telemetry series.
    """
    response = require_text(response, "response")
    query = require_text(query, "query")
    lowered = response.lower()

    score = BASE_SCORE
    if len(response) > 100:
        score += 0.1
    if len(response) > 300:
        score += 0.1

    keyword_matches = sum(1 for keyword in TRAVEL_KEYWORDS if keyword in lowered)
    score += min(keyword_matches * 0.05, 0.2)

    query_words = [word for word in query.lower().split(" ") if len(word) > 3]
    if query_words:
        addressed = sum(1 for word in query_words if word in lowered)
        score += (addressed / len(query_words)) * 0.2

    for needles, bonus in ADVICE_BONUSES:
        if any(needle in response for needle in needles):
            score += bonus

    return max(0.0, min(1.0, score))
