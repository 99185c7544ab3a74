"""Protocols for the tools domain."""

from collections.abc import Mapping
from typing import Any, Optional, Protocol

from amplitude_mcp.core.protocols.registry import RegistryProtocol
from amplitude_mcp.domains.tools.types import ToolDefinition, ToolResult


class ToolRegistryProtocol(RegistryProtocol[ToolDefinition], Protocol):
    """Tool registry protocol."""

    pass


class ToolDispatcherProtocol(Protocol):
    """Turns a tool call into a result envelope. Never raises."""

    async def dispatch(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolResult:
        """Run ``tool_name`` with ``arguments`` and return its envelope."""
        ...
