from tomorrow_agents.knowledge.base import (
    KnowledgeHit,
    TravelKnowledgeBase,
    build_knowledge_base,
    fallback_advice,
)

__all__ = ["KnowledgeHit", "TravelKnowledgeBase", "build_knowledge_base", "fallback_advice"]
