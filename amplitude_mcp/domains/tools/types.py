"""Tool domain types.

``ToolDefinition`` is the registry entry advertised to the calling agent;
``ToolResult`` is the envelope every dispatched call returns.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from amplitude_mcp.core.protocols.registry import BaseRegistryEntry

ArgumentType = Literal["string", "number", "object"]


class ArgumentSpec(BaseModel):
    """One argument of a tool, as advertised in its JSON schema."""

    model_config = ConfigDict(frozen=True)

    type: ArgumentType
    description: str
    required: bool = False


class ToolDefinition(BaseRegistryEntry):
    """Static descriptor of a callable tool. Built once at startup."""

    arguments: dict[str, ArgumentSpec]
    arguments_model: type[BaseModel]
    # Tools that need at least one of user_id/device_id, checked separately
    # from the per-argument required flags.
    requires_identifier: bool = False

    @property
    def required_arguments(self) -> list[str]:
        """Names of required arguments, in declaration order."""
        return [name for name, spec in self.arguments.items() if spec.required]

    def input_schema(self) -> dict[str, Any]:
        """Render the JSON Schema object advertised to the protocol layer."""
        return {
            "type": "object",
            "properties": {
                name: {"type": spec.type, "description": spec.description}
                for name, spec in self.arguments.items()
            },
            "required": self.required_arguments,
        }


class ToolResult(BaseModel):
    """Uniform success/failure envelope of a tool call."""

    model_config = ConfigDict(frozen=True)

    text: str
    is_error: bool = False
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, text: str, **data: Any) -> "ToolResult":
        """Build a success envelope echoing ``data``."""
        return cls(text=text, data=data)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        """Build a failure envelope for ``message``."""
        return cls(text=f"Error: {message}", is_error=True)

    def to_content(self) -> dict[str, Any]:
        """Render the protocol-level ``{content, isError}`` shape."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
