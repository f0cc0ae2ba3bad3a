"""Speech-oriented text helpers for the voice travel assistant.

``to_speech_text`` rewrites markdown-heavy model output into text a TTS
engine can read naturally. Steps run in a fixed order and each one sees the
previous step's output, so reordering them changes results. The transform
is not idempotent: running it twice inserts pause markers after pauses.
The output never contains ``*``, backticks or ``#``, even when the input
has unpaired markers.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from tomorrow_agents.errors import require_text, require_text_list

_MARKDOWN_STEPS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),  # bold
    (re.compile(r"\*(.*?)\*"), r"\1"),  # italic
    (re.compile(r"`(.*?)`"), r"\1"),  # inline code
    (re.compile(r"#{1,6}\s"), ""),  # headers
    (re.compile(r"\[(.*?)\]\(.*?\)"), r"\1"),  # links
)

_LIST_STEPS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^\s*[-*+]\s", re.MULTILINE), "First, "),
    (re.compile(r"^\s*\d+\.\s", re.MULTILINE), "Next, "),
)

# Unpaired markers left over once the markdown and list steps have run.
_RESIDUAL_MARKUP = re.compile(r"[*`#]")

_PAUSE_STEPS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\. "), ". ... "),
    (re.compile(r"\? "), "? ... "),
    (re.compile(r"! "), "! ... "),
)

ABBREVIATIONS: dict[str, str] = {
    "US": "United States",
    "UK": "United Kingdom",
    "NY": "New York",
    "CA": "California",
    "FL": "Florida",
    "TX": "Texas",
}

SYMBOLS: tuple[tuple[str, str], ...] = (
    ("&", "and"),
    ("@", "at"),
    ("%", "percent"),
    ("$", "dollars"),
    ("°C", "degrees Celsius"),
    ("°F", "degrees Fahrenheit"),
)

_WHITESPACE = re.compile(r"\s+")

TRAVEL_INPUT_KEYWORDS = ("travel", "trip", "visit", "go", "destination", "vacation", "holiday")


def to_speech_text(text: str) -> str:
    """Convert markdown model output into speech-friendly plain text."""
    out = require_text(text, "text")
    for pattern, replacement in _MARKDOWN_STEPS + _LIST_STEPS:
        out = pattern.sub(replacement, out)
    out = _RESIDUAL_MARKUP.sub("", out)
    for pattern, replacement in _PAUSE_STEPS:
        out = pattern.sub(replacement, out)
    for abbreviation, expansion in ABBREVIATIONS.items():
        out = re.sub(rf"\b{abbreviation}\b", expansion, out)
    for symbol, spoken in SYMBOLS:
        out = out.replace(symbol, spoken)
    return _WHITESPACE.sub(" ", out).strip()


class VoiceInputValidation(BaseModel):
    is_valid: bool
    confidence: float
    issues: list[str] = Field(default_factory=list)


def validate_voice_input(transcript: str) -> VoiceInputValidation:
    """Score a speech-to-text transcript for length, audio issues and travel content."""
    transcript = require_text(transcript, "transcript")
    issues: list[str] = []
    confidence = 1.0

    if len(transcript) < 5:
        issues.append("Transcript too short")
        confidence -= 0.3

    if "[inaudible]" in transcript or "[unclear]" in transcript:
        issues.append("Audio quality issues detected")
        confidence -= 0.4

    lowered = transcript.lower()
    if not any(keyword in lowered for keyword in TRAVEL_INPUT_KEYWORDS):
        issues.append("No travel-related content detected")
        confidence -= 0.2

    confidence = round(confidence, 2)
    return VoiceInputValidation(
        is_valid=confidence > 0.5, confidence=confidence, issues=issues
    )


class WeatherSnapshot(BaseModel):
    temperature: float = Field(description="Current temperature in degrees Celsius")
    description: str = Field(default="clear skies")


def format_travel_recommendation(
    location: str,
    weather: WeatherSnapshot,
    activities: list[str],
    budget: str | None = None,
) -> str:
    """Build a spoken recommendation from current weather, interests and budget."""
    location = require_text(location, "location")
    activities = require_text_list(activities, "activities")
    temp = weather.temperature

    parts = [
        f"Great choice! {location} is currently {temp:g} degrees with {weather.description}. "
    ]

    if temp > 25:
        parts.append("It's perfect weather for outdoor activities. ")
    elif temp < 10:
        parts.append("It's quite cool, so indoor activities might be more comfortable. ")
    else:
        parts.append("The temperature is pleasant for both indoor and outdoor activities. ")

    if activities:
        parts.append(
            f"Based on your interests in {' and '.join(activities[:2])}, I'd suggest "
        )
        if "beach" in activities and temp > 20:
            parts.append("visiting the local beaches for swimming or sunbathing. ")
        if "hiking" in activities and 5 < temp < 30:
            parts.append("exploring hiking trails in the area. ")
        if "museum" in activities or "culture" in activities:
            parts.append("checking out the local museums and cultural sites. ")

    if budget:
        if "budget" in budget or "cheap" in budget:
            parts.append(
                "For budget-friendly options, look for local markets, free walking tours, "
                "and public parks. "
            )
        elif "luxury" in budget:
            parts.append(
                "For a luxury experience, consider high-end restaurants, premium hotels, "
                "and exclusive tours. "
            )

    parts.append(
        "Would you like more specific recommendations for any particular aspect of your trip?"
    )
    return "".join(parts)
