"""Tests for the MCP binding.

Drives the registered request handlers directly instead of opening a stdio
session.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import mcp.types as types
import pytest

from amplitude_mcp.core.container import create_container
from amplitude_mcp.domains.tools.types import ToolResult
from amplitude_mcp.server import create_server, to_call_tool_result, to_mcp_tool

_PATCH_CLIENT = "amplitude_mcp.adapters.ingestion.amplitude.httpx.AsyncClient"


async def _list_tools(server) -> list[types.Tool]:
    handler = server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    return result.root.tools


async def _call_tool(server, name, arguments) -> types.CallToolResult:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


def test_to_mcp_tool(tool_registry):
    definition = tool_registry.get("track_revenue")

    tool = to_mcp_tool(definition)

    assert tool.name == "track_revenue"
    assert tool.description == definition.description
    assert tool.inputSchema == definition.input_schema()


@pytest.mark.parametrize(
    "result, is_error",
    [(ToolResult.success("done"), False), (ToolResult.failure("nope"), True)],
    ids=["success", "failure"],
)
def test_to_call_tool_result(result, is_error):
    converted = to_call_tool_result(result)

    assert converted.isError is is_error
    assert len(converted.content) == 1
    assert converted.content[0].type == "text"
    assert converted.content[0].text == result.text


@pytest.mark.asyncio
async def test_list_tools_advertises_registry(test_container):
    server = create_server(test_container)

    tools = await _list_tools(server)

    assert [t.name for t in tools] == [
        "track_event",
        "track_pageview",
        "track_signup",
        "set_user_properties",
        "track_revenue",
    ]
    assert all(t.inputSchema["type"] == "object" for t in tools)


@pytest.mark.asyncio
async def test_call_tool_routes_to_dispatcher(test_container, fake_ingestion_client):
    server = create_server(test_container)

    result = await _call_tool(server, "track_pageview", {"page_name": "Home", "user_id": "u-1"})

    assert result.isError is False
    assert result.content[0].text == "Successfully tracked page view for 'Home'"
    assert fake_ingestion_client.event_types() == ["Page View"]


@pytest.mark.asyncio
async def test_call_tool_schema_violation_uses_error_envelope(test_container):
    server = create_server(test_container)

    result = await _call_tool(
        server, "track_revenue", {"user_id": "u-1", "product_id": "p", "price": "ten"}
    )

    assert result.isError is True
    assert result.content[0].text.startswith("Error: Invalid arguments for track_revenue")


@pytest.mark.asyncio
async def test_call_tool_unknown_name(test_container):
    server = create_server(test_container)

    result = await _call_tool(server, "drop_table", {})

    assert result.isError is True
    assert result.content[0].text == "Error: Unknown tool: drop_table"


@pytest.mark.asyncio
async def test_provider_rejection_reaches_caller_with_status(settings):
    """Full path through the real HTTP adapter with the network patched out."""
    server = create_server(create_container(settings))
    response = MagicMock()
    response.status_code = 500
    response.json = MagicMock(return_value={"code": 500, "error": "internal"})
    response.text = json.dumps({"code": 500, "error": "internal"})

    with patch(_PATCH_CLIENT) as mock_cls:
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(return_value=response)
        mock_cls.return_value.__aenter__ = AsyncMock(return_value=mock_client)
        mock_cls.return_value.__aexit__ = AsyncMock(return_value=False)

        result = await _call_tool(server, "track_event", {"event_name": "x", "user_id": "u"})

    assert result.isError is True
    assert "500" in result.content[0].text
