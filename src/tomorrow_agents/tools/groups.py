# Central registry of tool groups.
# Tools may also join a group through ToolSpec.groups; both sources are merged.
TOOL_GROUPS: dict[str, list[str]] = {
    "travel": [
        "weather",
        "travel_remember",
        "travel_memorize",
        "travel_knowledge_search",
    ],
    "travel_heuristics": [
        "categorize_travel_query",
        "score_travel_response",
        "format_travel_recommendation",
    ],
    "voice": [
        "format_for_speech",
        "validate_voice_input",
        "extract_travel_intent",
    ],
    "credo": [
        "web_scraper",
        "tone_analyzer",
        "article_fetcher",
        "recommend_theme",
        "suggest_link_titles",
    ],
    "credo_voice": [
        "add_link",
        "change_theme",
        "update_bio",
        "get_analytics",
        "reorder_links",
    ],
}
