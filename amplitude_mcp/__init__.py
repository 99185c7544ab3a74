"""MCP server exposing Amplitude analytics tracking as tools."""

__version__ = "1.0.0"
