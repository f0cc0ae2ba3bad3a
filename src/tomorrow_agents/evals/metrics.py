"""LLM-judged quality metrics for travel recommendations.

Each metric asks the judge model for a single number between 0 and 1. The
leading number of the reply is used and clamped; a reply without one scores
0, and so does a failed model call.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone

from langchain_core.language_models import BaseChatModel
from pydantic import BaseModel, Field

from tomorrow_agents.orchestrator.messages import message_text

logger = logging.getLogger(__name__)

EVALUATION_ERROR = "Error during evaluation"

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


class MetricResult(BaseModel):
    score: float = Field(ge=0.0, le=1.0)
    reason: str


def parse_score(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return 0.0
    return max(0.0, min(1.0, float(match.group(1))))


@dataclass(frozen=True)
class JudgeMetric:
    name: str
    label: str
    task: str
    considerations: tuple[str, ...]
    scale: tuple[tuple[str, str], ...]

    def prompt(self, query: str, response: str) -> str:
        considerations = "\n".join(f"- {item}" for item in self.considerations)
        scale = "\n".join(f"- {score} = {meaning}" for score, meaning in self.scale)
        return (
            f"{self.task} on a scale of 0-1.\n\n"
            f'User Query: "{query}"\n'
            f'Agent Response: "{response}"\n\n'
            f"Consider:\n{considerations}\n\n"
            f"Return only a number between 0 and 1, where:\n{scale}\n\n"
            "Score:"
        )

    def measure(self, model: BaseChatModel, query: str, response: str) -> MetricResult:
        try:
            reply = model.invoke(self.prompt(query, response))
        except Exception:  # noqa: BLE001
            logger.exception("%s metric failed", self.name)
            return MetricResult(score=0.0, reason=EVALUATION_ERROR)
        score = parse_score(message_text(reply))
        return MetricResult(
            score=score,
            reason=f"{self.label} evaluation completed with score: {score:g}",
        )


DESTINATION_RELEVANCE = JudgeMetric(
    name="destination_relevance",
    label="Destination relevance",
    task="Evaluate how well this travel recommendation matches the user's query",
    considerations=(
        "Does the destination match the requested type (beach, city, mountain, etc.)?",
        "Are the suggested activities aligned with the user's interests?",
        "Is the recommendation specific and actionable?",
    ),
    scale=(
        ("1.0", "Perfect match, highly relevant recommendation"),
        ("0.8", "Good match with minor misalignments"),
        ("0.6", "Adequate match but missing some key elements"),
        ("0.4", "Poor match with significant issues"),
        ("0.2", "Very poor match, mostly irrelevant"),
        ("0.0", "Completely irrelevant or no useful recommendation"),
    ),
)

WEATHER_ACTIVITY_ALIGNMENT = JudgeMetric(
    name="weather_activity_alignment",
    label="Weather-activity alignment",
    task=(
        "Evaluate how well the travel recommendations align weather conditions with "
        "suggested activities"
    ),
    considerations=(
        "Are outdoor activities suggested only when weather is suitable?",
        "Are indoor alternatives provided for poor weather?",
        "Does the agent consider seasonal weather patterns?",
        "Are weather-dependent activities (beach, skiing, hiking) appropriately matched?",
    ),
    scale=(
        ("1.0", "Perfect weather-activity alignment"),
        ("0.8", "Good alignment with minor issues"),
        ("0.6", "Adequate alignment but some mismatches"),
        ("0.4", "Poor alignment, weather not well considered"),
        ("0.2", "Very poor alignment, inappropriate suggestions"),
        ("0.0", "No weather consideration or completely inappropriate"),
    ),
)

BUDGET_APPROPRIATENESS = JudgeMetric(
    name="budget_appropriateness",
    label="Budget appropriateness",
    task=(
        "Evaluate how well the travel recommendations align with the user's budget "
        "constraints"
    ),
    considerations=(
        "Are suggested destinations within the stated budget range?",
        "Are recommended activities and accommodations budget-appropriate?",
        "Does the agent provide budget-conscious alternatives?",
        "Are cost considerations mentioned and addressed?",
    ),
    scale=(
        ("1.0", "Perfect budget alignment, cost-conscious recommendations"),
        ("0.8", "Good budget consideration with minor oversights"),
        ("0.6", "Adequate budget awareness but some expensive suggestions"),
        ("0.4", "Poor budget consideration, some inappropriate costs"),
        ("0.2", "Very poor budget alignment, mostly expensive options"),
        ("0.0", "No budget consideration or completely unaffordable"),
    ),
)

TRAVEL_METRICS: tuple[JudgeMetric, ...] = (
    DESTINATION_RELEVANCE,
    WEATHER_ACTIVITY_ALIGNMENT,
    BUDGET_APPROPRIATENESS,
)


class EvaluationReport(BaseModel):
    agent_name: str
    query: str
    response: str
    results: dict[str, MetricResult]
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


def run_evaluations(
    model: BaseChatModel,
    query: str,
    response: str,
    agent_name: str,
    metrics: tuple[JudgeMetric, ...] = TRAVEL_METRICS,
) -> EvaluationReport:
    logger.info("Running %d evaluations for %s", len(metrics), agent_name)
    results = {metric.name: metric.measure(model, query, response) for metric in metrics}
    for name, result in results.items():
        logger.info("Evaluation %s: %.2f", name, result.score)
    return EvaluationReport(
        agent_name=agent_name, query=query, response=response, results=results
    )
