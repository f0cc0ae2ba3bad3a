"""Backend-independent helpers for ranking remembered statements."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Sequence

_WORD = re.compile(r"[a-z0-9$']+")

STOP_WORDS = frozenset(
    {
        "the", "and", "for", "are", "was", "what", "where", "when", "which", "who",
        "how", "does", "did", "has", "have", "had", "you", "your", "with", "about",
        "that", "this", "there", "they", "them", "from", "into", "any", "all",
        "user", "user's", "like", "likes", "know", "remember",
    }
)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def terms(text: str) -> set[str]:
    return {
        word
        for word in _WORD.findall(text.lower())
        if len(word) > 2 and word not in STOP_WORDS
    }


def rank_statements(statements: Sequence[str], question: str, limit: int) -> list[str]:
    """Order statements by shared terms with the question, newest first on ties.

    ``statements`` must be oldest first. Statements that share no term with
    the question are dropped.
    """
    wanted = terms(question)
    if not wanted:
        return list(reversed(statements))[:limit]

    scored = []
    for position, statement in enumerate(statements):
        overlap = len(wanted & terms(statement))
        if overlap:
            scored.append((overlap, position, statement))
    scored.sort(key=lambda item: (item[0], item[1]), reverse=True)
    return [statement for _, _, statement in scored[:limit]]
