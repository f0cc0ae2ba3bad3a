from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from langchain_core.tools import BaseTool

if TYPE_CHECKING:
    from tomorrow_agents.tools.context import ToolContext


@dataclass(frozen=True)
class ToolSpec:
    """Static definition of a tool and its builder function.

    Attributes:
        name: The unique identifier for the tool.
        builder: Callable that receives the shared ToolContext and returns the tool.
        intent: Formal semantic purpose of the tool for developer clarity.
        schema_notes: Expected input/output patterns and semantic constraints.
        groups: Tool groups this tool joins in addition to the central table.
    """

    name: str
    builder: Callable[["ToolContext"], BaseTool]
    intent: str = ""
    schema_notes: str = ""
    groups: list[str] = field(default_factory=list)
