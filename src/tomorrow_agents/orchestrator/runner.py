from __future__ import annotations

import logging
from dataclasses import replace
from typing import TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langgraph.prebuilt import create_react_agent
from pydantic import BaseModel, Field

from tomorrow_agents.agents.registry import AgentRegistry, AgentSpec
from tomorrow_agents.config.settings import Settings, get_settings
from tomorrow_agents.errors import require_text
from tomorrow_agents.evals.metrics import run_evaluations
from tomorrow_agents.heuristics.categorizer import categorize
from tomorrow_agents.heuristics.quality import score_response
from tomorrow_agents.orchestrator.llm_factory import LLMFactory
from tomorrow_agents.orchestrator.messages import final_text, tools_used
from tomorrow_agents.tools.context import ToolContext, build_tool_context
from tomorrow_agents.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

WORKING_MEMORY_TOOL = "update_working_memory"

T = TypeVar("T", bound=BaseModel)


class AgentResult(BaseModel):
    agent: str
    response: str
    user_id: str
    query_type: str
    quality_score: float | None = None
    tools_used: list[str] = Field(default_factory=list)
    evaluations: dict[str, float] | None = None


class AgentRunner:
    """Runs one agent definition as a LangGraph ReAct agent.

    Every call is wrapped in the agent-response tracker. Agents that opt into
    quality scoring also get their answer scored and recorded as a
    recommendation-quality measurement.
    """

    def __init__(
        self,
        spec: AgentSpec,
        *,
        settings: Settings | None = None,
        llm: BaseChatModel | None = None,
        tool_context: ToolContext | None = None,
        eval_model: BaseChatModel | None = None,
    ) -> None:
        self.spec = spec
        self.settings = settings or get_settings()
        self._llm = llm
        self._eval_model = eval_model
        self.context = tool_context or build_tool_context(
            self.settings, working_memory_template=spec.memory_template
        )

    @classmethod
    def for_agent(cls, name: str, **kwargs) -> "AgentRunner":
        return cls(AgentRegistry.get_agent(name), **kwargs)

    @property
    def memory_enabled(self) -> bool:
        return self.context.memory is not None

    def tool_names(self) -> list[str]:
        names = ToolRegistry.resolve_tool_names(self.spec.tool_names, self.spec.tool_groups)
        if self.memory_enabled and self.spec.memory_template and WORKING_MEMORY_TOOL not in names:
            names.append(WORKING_MEMORY_TOOL)
        return names

    def _llm_or_default(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = LLMFactory.create_chat_model(settings=self.settings)
        return self._llm

    def _build_worker(
        self, context: ToolContext, response_format: type[BaseModel] | None = None
    ):
        tools = ToolRegistry.get_tools(self.tool_names(), context=context)
        if response_format is None:
            return create_react_agent(self._llm_or_default(), tools)
        return create_react_agent(
            self._llm_or_default(), tools, response_format=response_format
        )

    def _messages(self, prompt: str, user_id: str) -> dict:
        return {
            "messages": [
                SystemMessage(content=self._system_prompt(user_id)),
                HumanMessage(content=prompt),
            ]
        }

    def _system_prompt(self, user_id: str) -> str:
        working_memory = ""
        if self.memory_enabled and self.spec.memory_template:
            working_memory = self.context.memory.working_memory(user_id)
        return self.spec.runtime_system_prompt(
            memory_enabled=self.memory_enabled, working_memory=working_memory
        )

    def generate(self, prompt: str, user_id: str | None = None) -> AgentResult:
        prompt = require_text(prompt, "prompt")
        user = user_id or self.context.user_id
        context = replace(self.context, user_id=user)
        telemetry = context.telemetry
        query_type = categorize(prompt).value

        with telemetry.track_agent_response(prompt, user):
            worker = self._build_worker(context)
            raw = worker.invoke(self._messages(prompt, user))
            response = final_text(raw)
            quality_score = None
            if self.spec.quality_scoring:
                quality_score = score_response(response, prompt)
                telemetry.record_recommendation_quality(quality_score, query_type, user)

        logger.info(
            "Agent %s answered %s query for %s (%d chars)",
            self.spec.name,
            query_type,
            user,
            len(response),
        )
        return AgentResult(
            agent=self.spec.name,
            response=response,
            user_id=user,
            query_type=query_type,
            quality_score=quality_score,
            tools_used=tools_used(raw),
        )

    def generate_with_evaluations(
        self, prompt: str, user_id: str | None = None
    ) -> AgentResult:
        """``generate`` followed by the LLM-judged travel metrics on the answer."""
        result = self.generate(prompt, user_id)
        if self._eval_model is None:
            self._eval_model = LLMFactory.create_eval_model(self.settings)
        report = run_evaluations(
            self._eval_model, prompt, result.response, self.spec.name
        )
        return result.model_copy(
            update={
                "evaluations": {
                    name: metric.score for name, metric in report.results.items()
                }
            }
        )

    def generate_structured(
        self, prompt: str, schema: type[T], user_id: str | None = None
    ) -> T:
        """Run the agent with its tools and return its final answer as ``schema``."""
        prompt = require_text(prompt, "prompt")
        user = user_id or self.context.user_id
        context = replace(self.context, user_id=user)

        with context.telemetry.track_agent_response(prompt, user):
            worker = self._build_worker(context, response_format=schema)
            raw = worker.invoke(self._messages(prompt, user))
        return raw["structured_response"]
