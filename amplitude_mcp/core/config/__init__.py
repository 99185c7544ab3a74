"""Configuration module for the Amplitude MCP server.

Usage:
    from amplitude_mcp.core.config import Settings

    settings = Settings(AMPLITUDE_API_KEY="...", DEBUG=True)

There is no module-level settings singleton: the process builds one instance
at startup and passes it to the container factory.
"""

from amplitude_mcp.core.config.settings import Settings

__all__ = ["Settings"]
