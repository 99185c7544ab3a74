"""MCP binding.

Exposes the tool registry and dispatcher through the MCP SDK's low-level
``Server`` and runs it over stdio.
"""

from collections.abc import Mapping
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from amplitude_mcp.core.container import Container
from amplitude_mcp.core.logging import logger
from amplitude_mcp.domains.tools.types import ToolDefinition, ToolResult

server_logger = logger.with_prefix("MCP: ").with_context(component="server")


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    """Convert a registry entry to the SDK's tool listing type."""
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema(),
    )


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert a result envelope to the SDK's call result type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def create_server(container: Container) -> Server:
    """Build an MCP server bound to the container's registry and dispatcher.

    SDK-side input validation is turned off: the dispatcher owns argument
    checks so that every failure comes back in the same envelope.
    """
    settings = container.settings
    server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        server_logger.debug("Received list_tools request")
        return [to_mcp_tool(tool) for tool in container.tool_registry.list_all()]

    @server.call_tool(validate_input=False)
    async def call_tool(
        name: str, arguments: Optional[Mapping[str, Any]]
    ) -> types.CallToolResult:
        result = await container.dispatcher.dispatch(name, arguments)
        return to_call_tool_result(result)

    return server


async def run_stdio(server: Server) -> None:
    """Serve ``server`` over stdin/stdout until the input stream closes."""
    async with stdio_server() as (read_stream, write_stream):
        server_logger.debug("Amplitude MCP Server is running via stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
