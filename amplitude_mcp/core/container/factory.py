"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container. Broken wiring fails at startup, not on the first tool call.
"""

from amplitude_mcp.adapters.ingestion.amplitude import AmplitudeIngestionClient
from amplitude_mcp.core.config import Settings
from amplitude_mcp.core.container.container import Container
from amplitude_mcp.core.logging import logger
from amplitude_mcp.domains.events.service import AnalyticsService
from amplitude_mcp.domains.tools.dispatcher import ToolDispatcher
from amplitude_mcp.domains.tools.registry import ToolRegistry


def create_container(settings: Settings) -> Container:
    """Build the container from settings.

    Args:
        settings: Process settings (API key, endpoint, timeout).

    Returns:
        Fully constructed Container ready for use

    Example:
        settings = Settings()
        container = create_container(settings)
    """
    # -----------------------------------------------------------------
    # Ingestion (Amplitude HTTP V2)
    # -----------------------------------------------------------------
    ingestion_client = AmplitudeIngestionClient(settings)
    logger.debug(
        f"Initializing Amplitude client with API key: {settings.api_key_hint} "
        f"(endpoint={settings.AMPLITUDE_ENDPOINT}, timeout={settings.HTTP_TIMEOUT:g}s)"
    )

    analytics = AnalyticsService(ingestion_client)

    # -----------------------------------------------------------------
    # Tools
    # Registry is built once; the dispatcher checks every tool has a handler
    # -----------------------------------------------------------------
    tool_registry = ToolRegistry()
    tool_registry.build()

    dispatcher = ToolDispatcher(registry=tool_registry, analytics=analytics)

    return Container(
        settings=settings,
        ingestion_client=ingestion_client,
        analytics=analytics,
        tool_registry=tool_registry,
        dispatcher=dispatcher,
    )
