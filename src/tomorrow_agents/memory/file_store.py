from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tomorrow_agents.memory import record_ops

logger = logging.getLogger(__name__)


class FileMemoryStore:
    """One JSON document per user with atomic writes."""

    def __init__(self, base_dir: str | Path, working_memory_template: str = "") -> None:
        self._base = Path(base_dir)
        self._base.mkdir(parents=True, exist_ok=True)
        self._template = working_memory_template

    def _path(self, user_id: str) -> Path:
        safe = user_id.replace("/", "_").replace("..", "_")
        return self._base / f"{safe}.json"

    def _load(self, user_id: str) -> dict[str, Any]:
        path = self._path(user_id)
        if path.exists():
            try:
                return json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                logger.warning("Ignoring unreadable memory file %s", path)
        now = record_ops.now_iso()
        return {
            "user_id": user_id,
            "created_at": now,
            "updated_at": now,
            "memories": [],
            "working_memory": None,
        }

    def _save(self, record: dict[str, Any]) -> None:
        record["updated_at"] = record_ops.now_iso()
        path = self._path(record["user_id"])
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(record, ensure_ascii=True, indent=2), encoding="utf-8")
        tmp_path.replace(path)

    def remember(self, user_id: str, statement: str) -> None:
        record = self._load(user_id)
        record["memories"].append({"statement": statement, "created_at": record_ops.now_iso()})
        self._save(record)

    def search(self, user_id: str, question: str, limit: int = 5) -> list[str]:
        statements = [m["statement"] for m in self._load(user_id)["memories"]]
        return record_ops.rank_statements(statements, question, limit)

    def working_memory(self, user_id: str) -> str:
        return self._load(user_id).get("working_memory") or self._template

    def update_working_memory(self, user_id: str, content: str) -> None:
        record = self._load(user_id)
        record["working_memory"] = content
        self._save(record)
