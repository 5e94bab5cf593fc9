"""MCP server wiring.

Binds the tool catalog and dispatcher to an `mcp` low-level Server and runs
it over stdio.
"""

from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from sevalla_mcp import __version__
from sevalla_mcp.client import SevallaClient
from sevalla_mcp.config.models import ClientConfig
from sevalla_mcp.observability.logging import get_logger
from sevalla_mcp.tools.catalog import list_tools
from sevalla_mcp.tools.dispatcher import ToolDispatcher

logger = get_logger(__name__)

SERVER_NAME = "sevalla"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create an MCP server exposing the Sevalla tools."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        return list_tools()

    # Argument validation belongs to the dispatcher so failures come back as envelopes
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        result = await dispatcher.dispatch(name, arguments)
        return [item for item in result.content if isinstance(item, TextContent)]

    return server


async def serve_stdio(config: ClientConfig) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    async with SevallaClient(config) as client:
        server = create_server(ToolDispatcher(client))
        logger.info("server_started", name=SERVER_NAME, version=__version__)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
