from __future__ import annotations

import argparse
import json
import os

from tomorrow_agents.config.logging_setup import configure_logging
from tomorrow_agents.config.settings import get_settings
from tomorrow_agents.telemetry.setup import configure_telemetry


def _configure_langsmith() -> None:
    # LangSmith relies on environment variables; this function keeps behavior explicit.
    settings = get_settings()
    os.environ.setdefault(
        "LANGCHAIN_TRACING_V2", "true" if settings.langsmith_tracing else "false"
    )
    if settings.langsmith_api_key:
        os.environ.setdefault("LANGCHAIN_API_KEY", settings.langsmith_api_key)
    if settings.langsmith_project:
        os.environ.setdefault("LANGCHAIN_PROJECT", settings.langsmith_project)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Tomorrow travel and Credo agents")
    parser.add_argument("prompt", nargs="?", help="User request to process")
    parser.add_argument(
        "--agent",
        default="tomorrow_travel_agent",
        help="Agent that answers the prompt",
    )
    parser.add_argument("--user-id", help="User whose memory and profile are used")
    parser.add_argument(
        "--evaluate",
        action="store_true",
        help="Score the answer with the LLM-judged travel metrics",
    )
    parser.add_argument(
        "--list-agents", action="store_true", help="List available agents"
    )
    parser.add_argument(
        "--list-tools", action="store_true", help="List available tools"
    )
    parser.add_argument(
        "--list-tool-groups", action="store_true", help="List available tool groups"
    )
    parser.add_argument("--tool", help="Invoke a single tool instead of an agent")
    parser.add_argument(
        "--input",
        default="{}",
        help="JSON object passed to --tool",
    )
    parser.add_argument(
        "--populate-knowledge",
        action="store_true",
        help="Load the bundled travel guides into the vector store",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create the memory tables for the db backend",
    )
    parser.add_argument("--server", action="store_true", help="Start the API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument(
        "--port", type=int, default=8000, help="Port to run the server on"
    )
    parser.add_argument("--reload", action="store_true", help="Enable hot reloading")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    configure_logging(settings.log_level)
    configure_telemetry(settings)
    _configure_langsmith()

    if args.list_agents:
        from tomorrow_agents.agents.registry import AgentRegistry

        for name, description in AgentRegistry.descriptions().items():
            print(f"- {name}: {description}")
        return

    if args.list_tools:
        from tomorrow_agents.tools.registry import ToolRegistry

        for name in ToolRegistry.list_all_tools():
            print(f"- {name}: {ToolRegistry.get_spec(name).intent}")
        return

    if args.list_tool_groups:
        from tomorrow_agents.tools.registry import ToolRegistry

        for group_name, tools in ToolRegistry.list_groups().items():
            print(f"- {group_name}: {', '.join(tools)}")
        return

    if args.server:
        import uvicorn

        print(
            f"Starting server on {args.host}:{args.port} (reload={'on' if args.reload else 'off'})"
        )
        if args.reload:
            # When reloading, pass the import string instead of the app object
            uvicorn.run(
                "tomorrow_agents.api:app", host=args.host, port=args.port, reload=True
            )
        else:
            from tomorrow_agents.api import app

            uvicorn.run(app, host=args.host, port=args.port)
        return

    if args.init_db:
        from tomorrow_agents.database.init_db import init_database

        init_database()
        print(f"Memory tables ready at {settings.database_url}")
        return

    if args.populate_knowledge:
        from tomorrow_agents.knowledge import build_knowledge_base

        knowledge = build_knowledge_base(settings)
        if not knowledge.available:
            raise SystemExit("POSTGRES_CONNECTION_STRING is not set; nothing to populate")
        print(f"Stored {knowledge.populate()} knowledge chunks")
        return

    if args.tool:
        from tomorrow_agents.tools.context import build_tool_context
        from tomorrow_agents.tools.registry import ToolRegistry

        try:
            payload = json.loads(args.input)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"--input is not valid JSON: {exc}")
        context = build_tool_context(settings, user_id=args.user_id)
        result = ToolRegistry.get_tool(args.tool, context=context).invoke(payload)
        print(json.dumps(result, indent=2, default=str))
        return

    if not args.prompt:
        raise SystemExit(
            "Provide a prompt or use --list-agents / --list-tools / --tool / --server"
        )

    from tomorrow_agents.orchestrator.runner import AgentRunner

    runner = AgentRunner.for_agent(args.agent, settings=settings)
    if args.evaluate:
        result = runner.generate_with_evaluations(args.prompt, args.user_id)
    else:
        result = runner.generate(args.prompt, args.user_id)

    print(result.response)
    print(f"\n[agent] {result.agent} (user={result.user_id}, query_type={result.query_type})")
    if result.tools_used:
        print(f"[tools] {', '.join(result.tools_used)}")
    if result.quality_score is not None:
        print(f"[quality] {result.quality_score:.2f}")
    if result.evaluations:
        print("[evaluations]")
        print(json.dumps(result.evaluations, indent=2))


if __name__ == "__main__":
    main()
