from tomorrow_agents.database.base import Base
from tomorrow_agents.database.engine import get_engine
from tomorrow_agents.database.session import get_session_factory, session_scope

__all__ = ["Base", "get_engine", "get_session_factory", "session_scope"]
