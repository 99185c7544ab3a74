"""Core protocols for dependency injection.

Domain-specific protocols live in their respective domains/ directories.
This module keeps cross-cutting infrastructure protocols only.
"""

from amplitude_mcp.core.protocols.ingestion import IngestionClient
from amplitude_mcp.core.protocols.registry import BaseRegistryEntry, RegistryProtocol

__all__ = [
    "BaseRegistryEntry",
    "IngestionClient",
    "RegistryProtocol",
]
