import pytest
from langchain_core.tools import BaseTool

from tomorrow_agents.agents.registry import AgentRegistry, AgentSpec
from tomorrow_agents.tools.registry import ToolRegistry

EXPECTED_TOOLS = {
    "weather",
    "travel_remember",
    "travel_memorize",
    "travel_knowledge_search",
    "categorize_travel_query",
    "score_travel_response",
    "format_travel_recommendation",
    "format_for_speech",
    "validate_voice_input",
    "extract_travel_intent",
    "web_scraper",
    "tone_analyzer",
    "article_fetcher",
    "recommend_theme",
    "suggest_link_titles",
    "add_link",
    "change_theme",
    "update_bio",
    "get_analytics",
    "reorder_links",
    "update_working_memory",
}


class TestToolRegistry:
    def test_discovers_every_tool(self):
        assert set(ToolRegistry.list_all_tools()) == EXPECTED_TOOLS

    def test_groups_only_reference_known_tools(self):
        known = set(ToolRegistry.list_all_tools())
        for group, members in ToolRegistry.list_groups().items():
            assert set(members) <= known, group

    def test_resolve_merges_groups_then_names_without_duplicates(self):
        names = ToolRegistry.resolve_tool_names(["weather", "format_for_speech"], ["travel"])
        assert names[0] == "weather"
        assert names.count("weather") == 1
        assert names[-1] == "format_for_speech"

    def test_unknown_group(self):
        with pytest.raises(ValueError, match="Unknown tool group"):
            ToolRegistry.resolve_tool_names([], ["nope"])

    def test_unknown_tool(self, tool_context):
        with pytest.raises(ValueError, match="Unknown tool"):
            ToolRegistry.get_tools(["nope"], context=tool_context)

    def test_builds_tools_with_context(self, tool_context):
        tools = ToolRegistry.get_tools([], ["voice"], context=tool_context)
        assert [tool.name for tool in tools] == [
            "format_for_speech",
            "validate_voice_input",
            "extract_travel_intent",
        ]
        assert all(isinstance(tool, BaseTool) for tool in tools)

    def test_every_spec_has_intent(self):
        for name in ToolRegistry.list_all_tools():
            assert ToolRegistry.get_spec(name).intent, name


class TestAgentRegistry:
    def test_discovers_agents(self):
        assert set(AgentRegistry.descriptions()) == {
            "tomorrow_travel_agent",
            "credo_agent",
            "credo_voice_agent",
        }

    def test_unknown_agent(self):
        with pytest.raises(ValueError, match="Unknown agent"):
            AgentRegistry.get_agent("nope")

    def test_agent_tools_resolve(self):
        for spec in AgentRegistry.list_agents():
            names = ToolRegistry.resolve_tool_names(spec.tool_names, spec.tool_groups)
            assert set(names) <= set(ToolRegistry.list_all_tools())

    def test_travel_agent_scores_quality(self):
        spec = AgentRegistry.get_agent("tomorrow_travel_agent")
        assert spec.quality_scoring is True
        assert spec.memory_template


class TestRuntimeSystemPrompt:
    @pytest.fixture
    def spec(self):
        return AgentSpec(
            name="demo",
            description="Demo agent",
            role="Guide",
            boundary="Stay on topic",
            system_prompt="Answer briefly",
            goals=["Be useful", "  "],
            memory_prompt="Use memory",
            no_memory_prompt="No memory available",
        )

    def test_sections_in_order(self, spec):
        prompt = spec.runtime_system_prompt()
        assert prompt.index("** Role **") < prompt.index("** Goals **")
        assert prompt.index("** Goals **") < prompt.index("** Operating boundaries **")
        assert "- Be useful" in prompt
        assert "** Memory **: No memory available" in prompt

    def test_working_memory_only_with_memory(self, spec):
        with_memory = spec.runtime_system_prompt(memory_enabled=True, working_memory="# Profile")
        assert "** Memory **: Use memory" in with_memory
        assert "** Working memory **:\n# Profile" in with_memory

        without = spec.runtime_system_prompt(memory_enabled=False, working_memory="# Profile")
        assert "Working memory" not in without
