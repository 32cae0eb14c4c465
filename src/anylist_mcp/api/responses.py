from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import orjson


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: JSON text on success, a plain message on error."""

    text: str
    is_error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            payload["isError"] = True
        return payload


def success_response(data: Any) -> ToolResult:
    return ToolResult(text=orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8"))


def error_response(message: str) -> ToolResult:
    return ToolResult(text=message, is_error=True)
