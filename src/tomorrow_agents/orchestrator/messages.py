from __future__ import annotations

from typing import Any

from langchain_core.messages import AIMessage, ToolMessage


def message_text(message: Any) -> str:
    """Plain text of a message or chunk whose content may be a list of parts."""
    content = getattr(message, "content", message)

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            if isinstance(item, dict):
                text = item.get("text")
                if isinstance(text, str):
                    parts.append(text)
            elif isinstance(item, str):
                parts.append(item)
        return "".join(parts)

    if isinstance(content, dict):
        text = content.get("text")
        if isinstance(text, str):
            return text

    return ""


def final_text(result: dict[str, Any]) -> str:
    messages = result.get("messages") or []
    if not messages:
        return ""
    return message_text(messages[-1])


def tools_used(result: dict[str, Any]) -> list[str]:
    """Tool names called during a ReAct run, in call order without repeats."""
    names: list[str] = []
    for message in result.get("messages") or []:
        if isinstance(message, AIMessage):
            names.extend(call["name"] for call in message.tool_calls)
        elif isinstance(message, ToolMessage) and message.name:
            names.append(message.name)
    return list(dict.fromkeys(names))
