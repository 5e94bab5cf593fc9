"""MCP tool catalog and dispatch."""

from sevalla_mcp.tools.catalog import TOOL_NAMES, TOOLS, list_tools
from sevalla_mcp.tools.dispatcher import HANDLERS, ToolDispatcher, ToolHandler
from sevalla_mcp.tools.errors import InvalidArgumentsError, ToolError, UnknownToolError

__all__ = [
    "HANDLERS",
    "InvalidArgumentsError",
    "TOOLS",
    "TOOL_NAMES",
    "ToolDispatcher",
    "ToolError",
    "ToolHandler",
    "UnknownToolError",
    "list_tools",
]
