from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .registry import get_handler
from .responses import ToolResult, error_response

logger = logging.getLogger(__name__)


def call_tool(name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
    handler = get_handler(name)
    if handler is None:
        logger.warning("Unknown tool requested: %s", name)
        return error_response(f"Unknown tool: {name}")
    try:
        result = handler(arguments or {})
    except Exception as exc:  # noqa: BLE001
        logger.exception("Tool %s failed", name)
        return error_response(f"Tool error: {exc}")
    logger.debug("Tool %s finished (error=%s)", name, result.is_error)
    return result
