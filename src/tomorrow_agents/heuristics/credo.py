"""Rule tables for the Credo link-in-bio assistant.

These are kept separate from the travel tables on purpose: the keyword sets
overlap in spirit but the two assistants have different defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, Field

from tomorrow_agents.errors import require_text, require_text_list
from tomorrow_agents.heuristics.rules import (
    Rule,
    contains_any,
    contains_word,
    first_match,
    unique_in_order,
)


class ThemeId(str, Enum):
    APEX = "apex"
    MINERAL = "mineral"
    LUNAR = "lunar"
    OCEAN = "ocean"
    FOREST = "forest"
    SUNSET = "sunset"


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    CASUAL = "casual"
    TECHNICAL = "technical"
    INSPIRATIONAL = "inspirational"


class TitleStyle(str, Enum):
    ACTION_ORIENTED = "action-oriented"
    DESCRIPTIVE = "descriptive"
    MINIMALIST = "minimalist"


THEME_DESCRIPTIONS: dict[str, str] = {
    "apex": "Bold gradients with floating elements",
    "mineral": "Brutalist design with strong blocks",
    "lunar": "Glassmorphism with cosmic elements",
    "ocean": "Calm blues with flowing wave shapes",
    "forest": "Earthy greens with organic textures",
    "sunset": "Warm oranges with soft golden light",
    "default": "Classic clean design",
}


# ---------------------------------------------------------------- tone


class ToneAnalysis(BaseModel):
    primary_tone: Tone
    confidence: float = Field(ge=0, le=1)
    keywords: list[str] = Field(default_factory=list)


TONE_RULES: list[Rule[str, tuple[Tone, float]]] = [
    Rule(contains_any("innovation", "creative", "design"), (Tone.CREATIVE, 0.85), "creative"),
    Rule(contains_any("ceo", "executive", "leadership"), (Tone.PROFESSIONAL, 0.9), "professional"),
    Rule(
        contains_any("code", "engineering", "technical"),
        (Tone.TECHNICAL, 0.88),
        "technical",
    ),
    # Whole-word match: "fund" and "they" are not casual.
    Rule(
        contains_word(
            "inspire", "inspired", "inspiring", "inspiration",
            "motivate", "motivated", "motivating", "motivation",
            "empower", "empowering", "dream", "dreams",
        ),
        (Tone.INSPIRATIONAL, 0.82),
        "inspirational",
    ),
    Rule(contains_word("hey", "fun", "chill", "vibes"), (Tone.CASUAL, 0.75), "casual"),
]
DEFAULT_TONE = (Tone.PROFESSIONAL, 0.8)


def analyze_tone(text: str) -> ToneAnalysis:
    """Classify the tone of a bio or post and pick up to five long words as keywords."""
    lowered = require_text(text, "text").lower()
    tone, confidence = first_match(TONE_RULES, lowered, DEFAULT_TONE)
    keywords = [word for word in lowered.split() if len(word) > 5][:5]
    return ToneAnalysis(primary_tone=tone, confidence=confidence, keywords=keywords)


# ---------------------------------------------------------------- theme


class ThemeRecommendation(BaseModel):
    theme: ThemeId
    reasoning: str
    confidence: float = Field(ge=0, le=1)


@dataclass(frozen=True)
class ThemeContext:
    text: str
    tone: Tone
    content_types: frozenset[str] = field(default_factory=frozenset)


def _text_has(*keywords: str):
    has = contains_any(*keywords)
    return lambda ctx: has(ctx.text)


THEME_RULES: list[Rule[ThemeContext, ThemeRecommendation]] = [
    Rule(
        lambda ctx: ctx.tone is Tone.CREATIVE
        or contains_any("design", "artist", "illustrat")(ctx.text),
        ThemeRecommendation(
            theme=ThemeId.APEX,
            reasoning=(
                "Based on your creative bio and design-focused content, Apex's bold "
                "gradients and floating elements will showcase your artistic vision perfectly."
            ),
            confidence=0.92,
        ),
        "apex",
    ),
    Rule(
        lambda ctx: ctx.tone is Tone.TECHNICAL
        or contains_any("technology", "software", "developer", "engineer")(ctx.text),
        ThemeRecommendation(
            theme=ThemeId.MINERAL,
            reasoning=(
                "Your technical expertise and tech-focused links align perfectly with "
                "Mineral's brutalist design - clean, efficient, and impactful."
            ),
            confidence=0.90,
        ),
        "mineral",
    ),
    Rule(
        lambda ctx: ctx.tone is Tone.PROFESSIONAL
        and (
            "article" in ctx.content_types
            or contains_any("executive", "ceo", "leadership", "founder", "consult")(ctx.text)
        ),
        ThemeRecommendation(
            theme=ThemeId.LUNAR,
            reasoning=(
                "The Lunar theme's sophisticated glassmorphism matches your professional "
                "tone while the cosmic elements add a forward-thinking touch to your content."
            ),
            confidence=0.88,
        ),
        "lunar",
    ),
    Rule(
        _text_has("travel", "ocean", "beach", "surf", "wellness", "yoga"),
        ThemeRecommendation(
            theme=ThemeId.OCEAN,
            reasoning=(
                "Your travel and wellness content pairs naturally with Ocean's calm blues "
                "and flowing shapes."
            ),
            confidence=0.86,
        ),
        "ocean",
    ),
    Rule(
        _text_has("nature", "sustainab", "outdoor", "environment", "garden", "hiking"),
        ThemeRecommendation(
            theme=ThemeId.FOREST,
            reasoning=(
                "Forest's earthy greens and organic textures reflect your focus on nature "
                "and the outdoors."
            ),
            confidence=0.86,
        ),
        "forest",
    ),
    Rule(
        _text_has("music", "lifestyle", "fashion", "photograph", "food", "film"),
        ThemeRecommendation(
            theme=ThemeId.SUNSET,
            reasoning=(
                "Sunset's warm golden palette gives your lifestyle content an inviting, "
                "personal feel."
            ),
            confidence=0.85,
        ),
        "sunset",
    ),
]

DEFAULT_THEME = ThemeRecommendation(
    theme=ThemeId.APEX,
    reasoning=(
        "Apex offers the perfect balance of modern aesthetics and versatility for your "
        "diverse content and style."
    ),
    confidence=0.75,
)


def recommend_theme(
    bio: str, topics: list[str], content_types: list[str]
) -> ThemeRecommendation:
    """Pick a profile theme from bio wording, link topics and link content types."""
    bio = require_text(bio, "bio")
    topics = require_text_list(topics, "topics")
    content_types = require_text_list(content_types, "content_types")

    context = ThemeContext(
        text=" ".join([bio, *topics]).lower(),
        tone=analyze_tone(bio).primary_tone,
        content_types=frozenset(t.lower() for t in content_types),
    )
    return first_match(THEME_RULES, context, DEFAULT_THEME)


@dataclass(frozen=True)
class SynthesisContext:
    tone: str
    topics: frozenset[str]
    content_types: frozenset[str]


# Used by the theme workflow once tone and link topics are already known.
# Stricter than THEME_RULES: both the tone and a matching topic are needed.
SYNTHESIS_RULES: list[Rule[SynthesisContext, ThemeRecommendation]] = [
    Rule(
        lambda ctx: ctx.tone == Tone.CREATIVE.value and "design" in ctx.topics,
        THEME_RULES[0].result,
        "creative-design",
    ),
    Rule(
        lambda ctx: ctx.tone == Tone.TECHNICAL.value and "technology" in ctx.topics,
        THEME_RULES[1].result,
        "technical-technology",
    ),
    Rule(
        lambda ctx: ctx.tone == Tone.PROFESSIONAL.value and "article" in ctx.content_types,
        THEME_RULES[2].result,
        "professional-article",
    ),
]

DEFAULT_SYNTHESIS = DEFAULT_THEME.model_copy(update={"confidence": 0.85})


def synthesize_theme(
    bio_tone: str, topics: list[str], content_types: list[str]
) -> ThemeRecommendation:
    context = SynthesisContext(
        tone=require_text(bio_tone, "bio_tone"),
        topics=frozenset(require_text_list(topics, "topics")),
        content_types=frozenset(require_text_list(content_types, "content_types")),
    )
    return first_match(SYNTHESIS_RULES, context, DEFAULT_SYNTHESIS)


# ---------------------------------------------------------------- links

TOPIC_KEYWORDS: dict[str, str] = {
    "tech": "technology",
    "business": "business",
    "design": "design",
}

THEME_LINK_TYPES: list[Rule[str, str]] = [
    Rule(contains_any("youtube"), "video"),
    Rule(contains_any("github"), "code"),
]

INSIGHT_LINK_TYPES: list[Rule[str, str]] = [
    Rule(contains_any("youtube"), "video"),
    Rule(contains_any("github"), "code"),
    Rule(contains_any("product"), "product"),
]

ONBOARDING_LINK_TYPES: list[Rule[str, str]] = [
    Rule(contains_any("youtube"), "video"),
    Rule(contains_any("github"), "code"),
    Rule(contains_any("linkedin"), "professional"),
]


def content_type_for_url(url: str, rules: list[Rule[str, str]] = THEME_LINK_TYPES) -> str:
    return first_match(rules, require_text(url, "url"), "article")


def topics_from_title(title: str) -> list[str]:
    """All topics whose keyword appears in a page title, in table order."""
    lowered = require_text(title, "title").lower()
    return unique_in_order(topic for key, topic in TOPIC_KEYWORDS.items() if key in lowered)


class TitleSuggestion(BaseModel):
    style: TitleStyle
    reasoning: str
    suggestions: list[str] = Field(min_length=3, max_length=3)


@dataclass(frozen=True)
class _TitleRule:
    style: TitleStyle
    reasoning: str
    templates: tuple[str, str, str]


TITLE_RULES: list[Rule[str, _TitleRule]] = [
    Rule(
        contains_any("youtube", "vimeo", "tiktok"),
        _TitleRule(
            TitleStyle.ACTION_ORIENTED,
            "Video links convert best with a clear call to watch.",
            ("Watch: {title}", "Watch now - {title}", "See {title}"),
        ),
        "video",
    ),
    Rule(
        contains_any("shop", "store", "product", "gumroad"),
        _TitleRule(
            TitleStyle.ACTION_ORIENTED,
            "Product links perform better when the title asks for the click.",
            ("Get {title}", "Shop {title}", "Grab {title} today"),
        ),
        "product",
    ),
    Rule(
        contains_any("github", "docs", "gitlab"),
        _TitleRule(
            TitleStyle.DESCRIPTIVE,
            "Technical visitors want to know exactly what they will find.",
            ("{title} (source code)", "Explore the {title} repository", "{title} on GitHub"),
        ),
        "code",
    ),
    Rule(
        contains_any("blog", "medium.com", "substack", "article", "post"),
        _TitleRule(
            TitleStyle.DESCRIPTIVE,
            "Articles earn clicks when the title previews the takeaway.",
            ("Read: {title}", "{title}: the full story", "New post - {title}"),
        ),
        "article",
    ),
    Rule(
        contains_any("linkedin"),
        _TitleRule(
            TitleStyle.MINIMALIST,
            "Profile links are recognised instantly; keep them short.",
            ("{title}", "Connect on LinkedIn", "LinkedIn"),
        ),
        "profile",
    ),
]

DEFAULT_TITLE_RULE = _TitleRule(
    TitleStyle.MINIMALIST,
    "A short, clean title keeps the page scannable.",
    ("{title}", "Visit {title}", "More: {title}"),
)

MAX_TITLE_LENGTH = 60


def _title_from_url(url: str) -> str:
    host = urlparse(url).netloc or url
    return host.removeprefix("www.")


def suggest_title_style(url: str, title: str | None = None) -> TitleSuggestion:
    """Choose a link-title style for a URL and fill three title suggestions."""
    url = require_text(url, "url")
    if title is not None:
        title = require_text(title, "title")
    base_title = (title or "").strip() or _title_from_url(url)

    rule = first_match(TITLE_RULES, url.lower(), DEFAULT_TITLE_RULE)
    suggestions = [
        template.format(title=base_title)[:MAX_TITLE_LENGTH] for template in rule.templates
    ]
    return TitleSuggestion(style=rule.style, reasoning=rule.reasoning, suggestions=suggestions)
