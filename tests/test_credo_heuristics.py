import pytest

from tomorrow_agents.errors import InvalidArgumentError
from tomorrow_agents.heuristics.credo import (
    INSIGHT_LINK_TYPES,
    MAX_TITLE_LENGTH,
    ONBOARDING_LINK_TYPES,
    ThemeId,
    TitleStyle,
    Tone,
    analyze_tone,
    content_type_for_url,
    recommend_theme,
    suggest_title_style,
    synthesize_theme,
    topics_from_title,
)


class TestAnalyzeTone:
    @pytest.mark.parametrize(
        "bio,tone,confidence",
        [
            ("Creative director who loves design", Tone.CREATIVE, 0.85),
            ("CEO focused on leadership", Tone.PROFESSIONAL, 0.9),
            ("I write code every day", Tone.TECHNICAL, 0.88),
            ("Here to inspire your next dream", Tone.INSPIRATIONAL, 0.82),
            ("Good vibes only", Tone.CASUAL, 0.75),
            ("Hello world", Tone.PROFESSIONAL, 0.8),
        ],
    )
    def test_tone_rules(self, bio, tone, confidence):
        result = analyze_tone(bio)
        assert result.primary_tone is tone
        assert result.confidence == pytest.approx(confidence)

    @pytest.mark.parametrize(
        "text",
        [
            "They manage a hedge fund in London",
            "Building functional dashboards",
            "Senior engineer at a bank",
        ],
    )
    def test_keywords_inside_other_words_do_not_match(self, text):
        result = analyze_tone(text)
        assert result.primary_tone is Tone.PROFESSIONAL
        assert result.confidence == pytest.approx(0.8)

    def test_inspirational_word_forms(self):
        assert analyze_tone("Motivated by travel").primary_tone is Tone.INSPIRATIONAL

    def test_keywords_are_long_words(self):
        result = analyze_tone("Designer building beautiful products for wonderful people daily always")
        assert result.keywords == ["designer", "building", "beautiful", "products", "wonderful"]


class TestRecommendTheme:
    def test_creative_bio_gets_apex(self):
        result = recommend_theme("Creative designer", [], [])
        assert result.theme is ThemeId.APEX
        assert result.confidence == pytest.approx(0.92)

    def test_technical_bio_gets_mineral(self):
        result = recommend_theme("Software developer building tools", [], [])
        assert result.theme is ThemeId.MINERAL

    def test_engineer_bio_gets_mineral(self):
        result = recommend_theme("Engineer", [], [])
        assert result.theme is ThemeId.MINERAL
        assert result.confidence == pytest.approx(0.90)

    def test_professional_with_articles_gets_lunar(self):
        result = recommend_theme("Writing about markets", ["business"], ["article"])
        assert result.theme is ThemeId.LUNAR

    def test_travel_content_gets_ocean(self):
        result = recommend_theme("Surf and travel every summer", [], [])
        assert result.theme is ThemeId.OCEAN

    def test_topics_count_towards_keywords(self):
        result = recommend_theme("Weekend notes", ["gardening", "nature"], [])
        assert result.theme is ThemeId.FOREST

    def test_neutral_bio_falls_back_to_apex(self):
        result = recommend_theme("Hello world", [], [])
        assert result.theme is ThemeId.APEX
        assert result.confidence == pytest.approx(0.75)

    def test_rejects_bad_topics(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            recommend_theme("bio", ["ok", 3], [])
        assert exc_info.value.field == "topics[1]"


class TestSynthesizeTheme:
    def test_needs_tone_and_topic(self):
        assert synthesize_theme("creative", ["design"], []).theme is ThemeId.APEX
        assert synthesize_theme("technical", ["technology"], []).theme is ThemeId.MINERAL
        assert synthesize_theme("professional", [], ["article"]).theme is ThemeId.LUNAR

    def test_default_is_confident_apex(self):
        result = synthesize_theme("technical", ["design"], [])
        assert result.theme is ThemeId.APEX
        assert result.confidence == pytest.approx(0.85)


class TestLinks:
    def test_content_types(self):
        assert content_type_for_url("https://youtube.com/watch?v=1") == "video"
        assert content_type_for_url("https://github.com/me/repo") == "code"
        assert content_type_for_url("https://example.com/product/1") == "article"
        assert content_type_for_url("https://example.com/product/1", INSIGHT_LINK_TYPES) == "product"
        assert content_type_for_url("https://linkedin.com/in/me", ONBOARDING_LINK_TYPES) == "professional"

    def test_topics_from_title_in_table_order(self):
        assert topics_from_title("Design tips for Tech Business") == [
            "technology",
            "business",
            "design",
        ]
        assert topics_from_title("Holiday photos") == []

    def test_video_titles_are_action_oriented(self):
        result = suggest_title_style("https://youtube.com/watch?v=1", "My vlog")
        assert result.style is TitleStyle.ACTION_ORIENTED
        assert result.suggestions == ["Watch: My vlog", "Watch now - My vlog", "See My vlog"]

    def test_title_falls_back_to_host(self):
        result = suggest_title_style("https://www.example.com/about")
        assert result.style is TitleStyle.MINIMALIST
        assert result.suggestions == ["example.com", "Visit example.com", "More: example.com"]

    def test_suggestions_are_truncated(self):
        result = suggest_title_style("https://myblog.substack.com/p/1", "x" * 100)
        assert result.style is TitleStyle.DESCRIPTIVE
        assert all(len(s) <= MAX_TITLE_LENGTH for s in result.suggestions)
