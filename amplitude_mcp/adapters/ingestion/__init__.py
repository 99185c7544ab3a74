"""Ingestion adapters."""

from amplitude_mcp.adapters.ingestion.amplitude import AmplitudeIngestionClient

__all__ = ["AmplitudeIngestionClient"]
