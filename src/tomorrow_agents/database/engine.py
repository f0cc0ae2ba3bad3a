from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from tomorrow_agents.config.database import get_database_config


@lru_cache
def get_engine(url: str | None = None) -> Engine:
    """Build and cache one SQLAlchemy engine per database URL."""
    config = get_database_config()
    url = url or config.url
    kwargs: dict[str, object] = {
        "echo": config.echo,
        "pool_pre_ping": True,
    }

    # SQLite needs this for multithreaded app servers.
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}

    return create_engine(url, **kwargs)
