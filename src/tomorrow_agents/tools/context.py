from __future__ import annotations

from dataclasses import dataclass, field

from tomorrow_agents.config.settings import Settings, get_settings
from tomorrow_agents.knowledge.base import TravelKnowledgeBase, build_knowledge_base
from tomorrow_agents.memory import MemoryStore, build_memory_store
from tomorrow_agents.profiles import ProfileStore, get_profile_store
from tomorrow_agents.telemetry.travel_metrics import TravelAgentTelemetry, get_telemetry


@dataclass
class ToolContext:
    """Collaborators handed to every tool builder.

    Optional capabilities are ``None`` when they are not configured; tools
    that need them report that instead of failing.
    """

    settings: Settings
    telemetry: TravelAgentTelemetry
    user_id: str
    memory: MemoryStore | None = None
    knowledge: TravelKnowledgeBase | None = None
    profiles: ProfileStore = field(default_factory=ProfileStore)


def build_tool_context(
    settings: Settings | None = None,
    *,
    user_id: str | None = None,
    working_memory_template: str = "",
) -> ToolContext:
    settings = settings or get_settings()
    return ToolContext(
        settings=settings,
        telemetry=get_telemetry(),
        user_id=user_id or settings.memory_default_user_id,
        memory=build_memory_store(settings, working_memory_template),
        knowledge=build_knowledge_base(settings),
        profiles=get_profile_store(),
    )
