"""
Tests for the travel heuristics: categorization, quality scoring, speech
formatting, voice input validation and intent extraction.
"""

import pytest

from tomorrow_agents.errors import InvalidArgumentError
from tomorrow_agents.heuristics.categorizer import TravelCategory, categorize
from tomorrow_agents.heuristics.intent import TravelIntent, extract_intent
from tomorrow_agents.heuristics.quality import score_response
from tomorrow_agents.heuristics.rules import Rule, contains_any, first_match, unique_in_order
from tomorrow_agents.heuristics.speech import (
    WeatherSnapshot,
    format_travel_recommendation,
    to_speech_text,
    validate_voice_input,
)


class TestRules:
    def test_first_match_returns_first_holding_rule(self):
        rules = [
            Rule(contains_any("a"), "first"),
            Rule(contains_any("a", "b"), "second"),
        ]
        assert first_match(rules, "ab", "none") == "first"
        assert first_match(rules, "b", "none") == "second"
        assert first_match(rules, "c", "none") == "none"

    def test_unique_in_order_keeps_first_occurrence(self):
        assert unique_in_order(["x", "y", "x", "z", "y"]) == ["x", "y", "z"]


class TestCategorize:
    @pytest.mark.parametrize(
        "query,expected",
        [
            ("Best beach towns in Portugal", TravelCategory.BEACH),
            ("Hiking trips in the Alps", TravelCategory.MOUNTAIN),
            ("Museum weekend in Vienna", TravelCategory.CITY),
            ("Cheap flights to Rome", TravelCategory.BUDGET),
            ("A premium spa resort", TravelCategory.LUXURY),
            ("Things to do with kids", TravelCategory.FAMILY),
            ("Where should I go next?", TravelCategory.GENERAL),
        ],
    )
    def test_categories(self, query, expected):
        assert categorize(query) is expected

    def test_empty_query_is_general(self):
        assert categorize("") is TravelCategory.GENERAL

    def test_earlier_rule_wins(self):
        """A beach query on a budget is still a beach query."""
        assert categorize("cheap beach holiday") is TravelCategory.BEACH

    def test_case_insensitive(self):
        assert categorize("SKI resorts") is TravelCategory.MOUNTAIN

    def test_rejects_non_string(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            categorize(None)
        assert exc_info.value.field == "query"


class TestScoreResponse:
    def test_short_unrelated_answer_scores_base(self):
        assert score_response("ok", "hi") == pytest.approx(0.5)

    def test_rich_answer_is_clamped_to_one(self):
        response = (
            "For your trip I recommend this destination. Check the weather and the "
            "temperature before you travel, plan each activity, and visit the old town. "
            "The budget is modest and the cost of activities is low. " * 3
        )
        assert score_response(response, "recommend a destination for my trip") == 1.0

    def test_query_coverage_raises_score(self):
        plain = score_response("Lisbon is lovely.", "lisbon seafood restaurants")
        covered = score_response(
            "Lisbon has great seafood restaurants.", "lisbon seafood restaurants"
        )
        assert covered > plain

    def test_advice_bonus_is_case_sensitive(self):
        lower = score_response("the budget is fine", "hi")
        upper = score_response("the BUDGET is fine", "hi")
        assert lower == pytest.approx(upper + 0.05)

    @pytest.mark.parametrize(
        "response",
        ["", "x" * 1000, "travel trip visit weather destination activity recommend"],
    )
    def test_score_is_bounded(self, response):
        assert 0.0 <= score_response(response, "travel weather plans") <= 1.0

    def test_rejects_missing_query(self):
        with pytest.raises(InvalidArgumentError):
            score_response("fine", None)


class TestSpeechText:
    def test_strips_bold_and_italic(self):
        assert to_speech_text("**Bold** and *italic*") == "Bold and italic"

    def test_strips_links_and_headers(self):
        assert to_speech_text("## Guide\n[Lisbon](https://x.test) `now`") == "Guide Lisbon now"

    def test_unpaired_markers_are_removed(self):
        text = to_speech_text("Multiply 5 * 3 and run `ls, see #4")
        assert text == "Multiply 5 3 and run ls, see 4"
        assert not set("*`#") & set(text)

    def test_lists_become_spoken_sequence(self):
        text = to_speech_text("- pack light\n1. book early")
        assert text == "First, pack light Next, book early"

    def test_expands_symbols(self):
        assert "degrees Celsius" in to_speech_text("Temp: 22°C")
        assert to_speech_text("Save 20% & relax") == "Save 20percent and relax"

    def test_expands_abbreviations_on_word_boundaries(self):
        assert to_speech_text("Fly from NY to the UK") == (
            "Fly from New York to the United Kingdom"
        )
        assert to_speech_text("CASA") == "CASA"

    def test_inserts_pauses(self):
        assert to_speech_text("Pack light. Enjoy!") == "Pack light. ... Enjoy!"

    def test_not_idempotent(self):
        once = to_speech_text("Pack light. Enjoy it")
        assert to_speech_text(once) != once


class TestValidateVoiceInput:
    def test_clean_travel_request(self):
        result = validate_voice_input("I want to travel to Lisbon")
        assert result.is_valid is True
        assert result.confidence == 1.0
        assert result.issues == []

    def test_audio_problems_and_no_travel_content(self):
        result = validate_voice_input("hmm [inaudible]")
        assert result.is_valid is False
        assert result.confidence == pytest.approx(0.4)
        assert result.issues == [
            "Audio quality issues detected",
            "No travel-related content detected",
        ]

    def test_short_transcript(self):
        result = validate_voice_input("trip")
        assert "Transcript too short" in result.issues
        assert result.confidence == pytest.approx(0.7)
        assert result.is_valid is True


class TestFormatTravelRecommendation:
    def test_warm_weather_with_interests_and_budget(self):
        text = format_travel_recommendation(
            "Lisbon",
            WeatherSnapshot(temperature=28, description="sunny skies"),
            ["beach", "hiking"],
            "budget",
        )
        assert text.startswith("Great choice! Lisbon is currently 28 degrees with sunny skies.")
        assert "perfect weather for outdoor activities" in text
        assert "interests in beach and hiking" in text
        assert "local beaches" in text
        assert "hiking trails" in text
        assert "budget-friendly options" in text
        assert text.endswith("particular aspect of your trip?")

    def test_cold_weather_suggests_indoors(self):
        text = format_travel_recommendation(
            "Oslo", WeatherSnapshot(temperature=2), ["museum"], "luxury"
        )
        assert "indoor activities" in text
        assert "museums and cultural sites" in text
        assert "luxury experience" in text

    def test_rejects_non_list_activities(self):
        with pytest.raises(InvalidArgumentError):
            format_travel_recommendation("Oslo", WeatherSnapshot(temperature=2), "museum")


class TestExtractIntent:
    def test_full_request(self):
        intent = extract_intent(
            "I want to visit Paris next week on a budget of $2000 for museum and food"
        )
        assert intent == TravelIntent(
            location="paris",
            budget="$2000",
            activities=["museum", "food"],
            timeframe="next week",
            travel_style="budget",
        )

    def test_amount_before_budget_word(self):
        intent = extract_intent(
            "I want to go to Paris with a $2000 budget for hiking and museums"
        )
        assert intent == TravelIntent(
            location="paris",
            budget="$2000",
            activities=["hiking", "museum"],
            timeframe=None,
            travel_style="budget",
        )

    def test_nothing_detected(self):
        assert extract_intent("hello there") == TravelIntent()

    def test_style_follows_mapping_order(self):
        intent = extract_intent("a romantic luxury escape")
        assert intent.travel_style == "luxury"

    def test_duration_timeframe(self):
        assert extract_intent("a trip to rome for 5 days").timeframe == "5 days"
