"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.

Usage:
    # Production: build once at startup
    container = create_container(settings)
    result = await container.dispatcher.dispatch("track_event", {...})

    # Testing: construct directly with fakes
    client = FakeIngestionClient()
    analytics = AnalyticsService(client)
    test_container = Container(
        settings=settings,
        ingestion_client=client,
        analytics=analytics,
        tool_registry=registry,
        dispatcher=ToolDispatcher(registry, analytics),
    )
"""

from dataclasses import dataclass

from amplitude_mcp.core.config import Settings
from amplitude_mcp.core.protocols import IngestionClient
from amplitude_mcp.domains.events.protocols import AnalyticsServiceProtocol
from amplitude_mcp.domains.tools.protocols import ToolDispatcherProtocol, ToolRegistryProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding all protocol implementations."""

    settings: Settings

    # Delivers events to the provider
    ingestion_client: IngestionClient

    # The five tracking operations
    analytics: AnalyticsServiceProtocol

    # Read-only tool catalog advertised to the caller
    tool_registry: ToolRegistryProtocol

    # Tool call -> result envelope
    dispatcher: ToolDispatcherProtocol
