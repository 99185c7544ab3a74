"""Tool registry: in-memory catalog built once at startup from TOOL_DEFINITIONS."""

from typing import Iterable, Optional

from amplitude_mcp.core.logging import logger
from amplitude_mcp.domains.tools.definitions import TOOL_DEFINITIONS
from amplitude_mcp.domains.tools.protocols import ToolRegistryProtocol
from amplitude_mcp.domains.tools.types import ToolDefinition

registry_logger = logger.with_prefix("ToolRegistry: ").with_context(component="tool_registry")


class ToolRegistry(ToolRegistryProtocol):
    """In-memory tool registry. Read-only after ``build()``."""

    def __init__(self, definitions: Optional[Iterable[ToolDefinition]] = None) -> None:
        """Initialize the registry.

        Args:
            definitions: Tool definitions to register. Defaults to the
                server's built-in catalog.
        """
        self._definitions = tuple(TOOL_DEFINITIONS if definitions is None else definitions)
        self._entries: dict[str, ToolDefinition] = {}

    def get(self, name: str) -> ToolDefinition:
        """Get a tool definition by name.

        Raises:
            KeyError: If no tool with the given name is registered.
        """
        return self._entries[name]

    def list_all(self) -> list[ToolDefinition]:
        """List all tool definitions in declaration order."""
        return list(self._entries.values())

    def build(self) -> None:
        """Index the definitions by name.

        Called once at startup. After this, all lookups are dict reads.

        Raises:
            ValueError: If two definitions share a name.
        """
        entries: dict[str, ToolDefinition] = {}
        for definition in self._definitions:
            if definition.name in entries:
                raise ValueError(f"Duplicate tool name '{definition.name}'")
            entries[definition.name] = definition

        self._entries = entries
        registry_logger.debug(f"Built registry with {len(self._entries)} tools.")
