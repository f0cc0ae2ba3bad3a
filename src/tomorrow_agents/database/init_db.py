from tomorrow_agents.database.base import Base
from tomorrow_agents.database.engine import get_engine
from tomorrow_agents.models import MemoryRecord, WorkingMemoryRecord  # noqa: F401


def init_database(url: str | None = None) -> None:
    """Create tables for local/dev usage. Migrations should be preferred in production."""
    Base.metadata.create_all(bind=get_engine(url))
