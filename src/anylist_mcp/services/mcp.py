from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as McpToolResult
from mcp.types import TextContent

from ..api import api_state, call_tool, get_tools

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "AnyList tools for the meal planning calendar, calendar labels, recipes and shopping lists. "
    "Dates use YYYY-MM-DD. Look up identifiers with the get_* tools before updating or deleting."
)


class RegistryTool(Tool):
    """MCP tool whose calls are routed through the tool dispatcher."""

    async def run(self, arguments: Dict[str, Any]) -> McpToolResult:
        result = await asyncio.to_thread(call_tool, self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return McpToolResult(content=[TextContent(type="text", text=result.text)])


def registry_tools() -> List[RegistryTool]:
    tools = []
    for spec in get_tools():
        logger.debug("Registering MCP tool: %s", spec.name)
        tools.append(
            RegistryTool(
                name=spec.name,
                description=spec.description,
                parameters=spec.input_schema,
                tags={spec.category, *spec.tags},
            )
        )
    return tools


def build_mcp_server() -> FastMCP:
    return FastMCP(name="anylist", instructions=INSTRUCTIONS, tools=registry_tools())


def run_mcp_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8765) -> None:
    server = build_mcp_server()
    logger.info("anylist-mcp server starting (%s transport)", transport)
    try:
        if transport == "stdio":
            server.run()
        else:
            server.run("streamable-http", host=host, port=port)
    finally:
        api_state.accessor.disconnect()
