from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a heuristic receives a missing or non-string argument."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def require_text(value: Any, field: str) -> str:
    if value is None:
        raise InvalidArgumentError(field, "is required")
    if not isinstance(value, str):
        raise InvalidArgumentError(
            field, f"expected a string, got {type(value).__name__}"
        )
    return value


def require_text_list(value: Any, field: str) -> list[str]:
    if value is None:
        raise InvalidArgumentError(field, "is required")
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidArgumentError(
            field, f"expected a list of strings, got {type(value).__name__}"
        )
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise InvalidArgumentError(
                f"{field}[{idx}]", f"expected a string, got {type(item).__name__}"
            )
    return list(value)


class VoiceUnavailableError(RuntimeError):
    """Raised when audio input arrives but no speech capability is configured."""
