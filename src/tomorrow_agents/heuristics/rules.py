from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Sequence, TypeVar

C = TypeVar("C")
R = TypeVar("R")


@dataclass(frozen=True)
class Rule(Generic[C, R]):
    """One row of an ordered rule table.

    Attributes:
        predicate: Test applied to the rule context.
        result: Value returned when the predicate holds.
        name: Label used in logs and tests to identify the rule.
    """

    predicate: Callable[[C], bool]
    result: R
    name: str = ""


def first_match(rules: Sequence[Rule[C, R]], context: C, default: R) -> R:
    """Return the result of the first rule whose predicate holds, else ``default``."""
    for rule in rules:
        if rule.predicate(context):
            return rule.result
    return default


def contains_any(*keywords: str) -> Callable[[str], bool]:
    """Predicate factory: substring membership of any keyword in lower-cased text."""

    def _predicate(text: str) -> bool:
        return any(keyword in text for keyword in keywords)

    return _predicate


def contains_word(*words: str) -> Callable[[str], bool]:
    """Predicate factory: any keyword present as a whole word in lower-cased text."""
    pattern = re.compile(r"\b(?:" + "|".join(map(re.escape, words)) + r")\b")

    def _predicate(text: str) -> bool:
        return pattern.search(text) is not None

    return _predicate


def unique_in_order(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))
