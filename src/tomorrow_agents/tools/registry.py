import importlib
import logging
import pkgutil

from langchain_core.tools import BaseTool

from tomorrow_agents.tools import definitions
from tomorrow_agents.tools.context import ToolContext, build_tool_context
from tomorrow_agents.tools.groups import TOOL_GROUPS
from tomorrow_agents.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Central tool registry that dynamically discovers tools in the 'definitions' package."""

    _cached_tools: dict[str, ToolSpec] | None = None

    @classmethod
    def _discover_tools(cls) -> dict[str, ToolSpec]:
        if cls._cached_tools is not None:
            return cls._cached_tools

        tools: dict[str, ToolSpec] = {}
        # Walk recursively so tools can be organized by domain folders.
        for _, module_name, is_pkg in pkgutil.walk_packages(
            definitions.__path__, prefix="tomorrow_agents.tools.definitions."
        ):
            if is_pkg:
                continue

            module = importlib.import_module(module_name)

            # Look for a 'tool' attribute that is a ToolSpec.
            tool_spec = getattr(module, "tool", None)
            if isinstance(tool_spec, ToolSpec):
                if tool_spec.name in tools:
                    raise ValueError(
                        f"Duplicate tool name detected: {tool_spec.name} "
                        f"(module {module_name})"
                    )
                tools[tool_spec.name] = tool_spec

        logger.debug("Discovered %d tools", len(tools))
        cls._cached_tools = tools
        return tools

    @classmethod
    def _get_dynamic_groups(cls) -> dict[str, list[str]]:
        """Central groups merged with the groups each ToolSpec declares."""
        groups = {name: list(members) for name, members in TOOL_GROUPS.items()}
        for spec in cls._discover_tools().values():
            for group_name in spec.groups:
                members = groups.setdefault(group_name, [])
                if spec.name not in members:
                    members.append(spec.name)
        return groups

    @classmethod
    def resolve_tool_names(
        cls, tool_names: list[str], group_names: list[str]
    ) -> list[str]:
        merged: list[str] = []
        dynamic_groups = cls._get_dynamic_groups()
        for group_name in group_names:
            if group_name not in dynamic_groups:
                raise ValueError(f"Unknown tool group: {group_name}")
            merged.extend(dynamic_groups[group_name])
        merged.extend(tool_names)
        # Keep deterministic order while de-duplicating.
        return list(dict.fromkeys(merged))

    @classmethod
    def get_spec(cls, name: str) -> ToolSpec:
        tools_map = cls._discover_tools()
        if name not in tools_map:
            raise ValueError(f"Unknown tool(s): {name}")
        return tools_map[name]

    @classmethod
    def get_tools(
        cls,
        tool_names: list[str],
        group_names: list[str] | None = None,
        context: ToolContext | None = None,
    ) -> list[BaseTool]:
        groups = group_names or []
        resolved = cls.resolve_tool_names(tool_names, groups)
        tools_map = cls._discover_tools()
        missing = [name for name in resolved if name not in tools_map]
        if missing:
            raise ValueError(f"Unknown tool(s): {', '.join(missing)}")
        context = context or build_tool_context()
        return [tools_map[name].builder(context) for name in resolved]

    @classmethod
    def get_tool(cls, name: str, context: ToolContext | None = None) -> BaseTool:
        return cls.get_tools([name], context=context)[0]

    @classmethod
    def list_groups(cls) -> dict[str, list[str]]:
        return cls._get_dynamic_groups()

    @classmethod
    def list_all_tools(cls) -> list[str]:
        return list(cls._discover_tools().keys())
