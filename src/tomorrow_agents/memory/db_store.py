from __future__ import annotations

from sqlalchemy import select

from tomorrow_agents.database.init_db import init_database
from tomorrow_agents.database.session import session_scope
from tomorrow_agents.memory import record_ops
from tomorrow_agents.models.memory_record import MemoryRecord, WorkingMemoryRecord


class DbMemoryStore:
    """SQL-backed memory with the same contract as FileMemoryStore."""

    def __init__(
        self,
        *,
        url: str | None = None,
        working_memory_template: str = "",
        auto_init: bool = True,
    ) -> None:
        self._url = url
        self._template = working_memory_template
        if auto_init:
            init_database(url)

    def remember(self, user_id: str, statement: str) -> None:
        with session_scope(self._url) as db:
            db.add(MemoryRecord(user_id=user_id, statement=statement))

    def search(self, user_id: str, question: str, limit: int = 5) -> list[str]:
        with session_scope(self._url) as db:
            statements = list(
                db.scalars(
                    select(MemoryRecord.statement)
                    .where(MemoryRecord.user_id == user_id)
                    .order_by(MemoryRecord.id)
                )
            )
        return record_ops.rank_statements(statements, question, limit)

    def working_memory(self, user_id: str) -> str:
        with session_scope(self._url) as db:
            row = db.get(WorkingMemoryRecord, user_id)
            return row.content if row is not None else self._template

    def update_working_memory(self, user_id: str, content: str) -> None:
        with session_scope(self._url) as db:
            row = db.get(WorkingMemoryRecord, user_id)
            if row is None:
                db.add(WorkingMemoryRecord(user_id=user_id, content=content))
            else:
                row.content = content
