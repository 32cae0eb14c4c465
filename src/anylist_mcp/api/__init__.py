"""Tool surface: registry, dispatch and the tool modules."""

from __future__ import annotations

from .dispatch import call_tool
from .registry import ToolSpec, get_handler, get_tools, register_tool, tool_handlers, tool_schemas
from .responses import ToolResult
from .state import api_state

# Import tool modules so decorators run at module import time.
from . import labels, meal_planning, recipes, shopping_lists  # noqa: F401

__all__ = [
    "ToolResult",
    "ToolSpec",
    "api_state",
    "call_tool",
    "get_handler",
    "get_tools",
    "register_tool",
    "tool_handlers",
    "tool_schemas",
]
