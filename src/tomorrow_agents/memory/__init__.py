"""Pluggable long-term memory backends for the agents."""

from __future__ import annotations

from tomorrow_agents.config.settings import Settings, get_settings
from tomorrow_agents.memory.file_store import FileMemoryStore
from tomorrow_agents.memory.interface import MemoryStore


def build_memory_store(
    settings: Settings | None = None, working_memory_template: str = ""
) -> MemoryStore | None:
    """Build the configured backend, or ``None`` when memory is disabled."""
    settings = settings or get_settings()
    backend = settings.memory_backend.strip().lower()
    if backend == "none":
        return None
    if backend == "file":
        return FileMemoryStore(settings.memory_store_dir, working_memory_template)
    if backend == "db":
        from tomorrow_agents.memory.db_store import DbMemoryStore

        return DbMemoryStore(
            url=settings.database_url,
            working_memory_template=working_memory_template,
            auto_init=settings.database_auto_migrate,
        )
    raise ValueError(
        f"Unsupported MEMORY_BACKEND={settings.memory_backend!r}. "
        "Use 'none', 'file' or 'db'."
    )


__all__ = ["MemoryStore", "FileMemoryStore", "build_memory_store"]
