from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentSpec:
    """Formal specification for an AI agent.

    Attributes:
        name: Unique ID of the agent.
        description: High-level summary used for listings and the API.
        role: Formal operational definition of the agent's persona.
        backstory: Historical/context framing for behavior shaping.
        goals: Ordered objective list to bias execution priorities.
        boundary: Explicit constraints on what the agent should NOT do.
        system_prompt: The actual instruction set used by the LLM.
        tool_names: Explicit tool IDs assigned to this agent.
        tool_groups: Pre-defined group IDs assigned to this agent.
        memory_template: Working-memory skeleton; empty means the agent keeps none.
        memory_prompt: Instructions appended only when a memory store is configured.
        no_memory_prompt: Instructions appended when memory is unavailable.
        uses_voice: Whether the agent speaks and listens through the speech capability.
        quality_scoring: Whether answers are scored and recorded as recommendation quality.
    """

    name: str
    description: str
    role: str
    boundary: str
    system_prompt: str
    backstory: str = ""
    goals: list[str] = field(default_factory=list)
    tool_names: list[str] = field(default_factory=list)
    tool_groups: list[str] = field(default_factory=list)
    memory_template: str = ""
    memory_prompt: str = ""
    no_memory_prompt: str = ""
    uses_voice: bool = False
    quality_scoring: bool = False

    def runtime_system_prompt(
        self, *, memory_enabled: bool = False, working_memory: str = ""
    ) -> str:
        """Build the final runtime prompt from structured identity + base prompt."""
        sections: list[str] = []
        if self.role:
            sections.append(f"** Role **: {self.role}")
        if self.backstory:
            sections.append(f"** Backstory **: {self.backstory}")
        if self.goals:
            goals_text = "\n".join([f"- {goal}" for goal in self.goals if goal.strip()])
            if goals_text:
                sections.append(f"** Goals **:\n{goals_text}")
        if self.boundary:
            sections.append(f"** Operating boundaries **: {self.boundary}")
        if self.system_prompt:
            sections.append(f"** Core instructions **: {self.system_prompt}")

        memory_notes = self.memory_prompt if memory_enabled else self.no_memory_prompt
        if memory_notes:
            sections.append(f"** Memory **: {memory_notes}")
        if memory_enabled and working_memory.strip():
            sections.append(f"** Working memory **:\n{working_memory.strip()}")
        return "\n\n".join(sections).strip()


from tomorrow_agents.agents import definitions  # noqa: E402


class AgentRegistry:
    """Central registry that dynamically discovers agents in the 'definitions' package."""

    _cached_agents: dict[str, AgentSpec] | None = None

    @classmethod
    def _discover_agents(cls) -> dict[str, AgentSpec]:
        if cls._cached_agents is not None:
            return cls._cached_agents

        agents: dict[str, AgentSpec] = {}
        for _, name, is_pkg in pkgutil.iter_modules(definitions.__path__):
            if is_pkg:
                continue

            module = importlib.import_module(f"tomorrow_agents.agents.definitions.{name}")

            agent_spec = getattr(module, "agent", None)
            if isinstance(agent_spec, AgentSpec):
                agents[agent_spec.name] = agent_spec

        cls._cached_agents = agents
        return agents

    @classmethod
    def list_agents(cls) -> list[AgentSpec]:
        return list(cls._discover_agents().values())

    @classmethod
    def get_agent(cls, name: str) -> AgentSpec:
        agents = cls._discover_agents()
        if name not in agents:
            logger.warning("Unknown agent requested: %s", name)
            raise ValueError(f"Unknown agent: {name}")
        return agents[name]

    @classmethod
    def descriptions(cls) -> dict[str, str]:
        return {name: spec.description for name, spec in cls._discover_agents().items()}
