from __future__ import annotations

from typing import Protocol


class MemoryStore(Protocol):
    """Shared contract for long-term user memory backends."""

    def remember(self, user_id: str, statement: str) -> None:
        ...

    def search(self, user_id: str, question: str, limit: int = 5) -> list[str]:
        ...

    def working_memory(self, user_id: str) -> str:
        ...

    def update_working_memory(self, user_id: str, content: str) -> None:
        ...
