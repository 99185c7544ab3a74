"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and amplitude_mcp/), making its fixtures
available to centralized tests AND colocated domain tests.
"""

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

TEST_API_KEY = "test-amplitude-key-0123456789"
TEST_ENDPOINT = "https://ingest.example.test/2/httpapi"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    """Settings built from explicit values only, never from env or .env."""
    from amplitude_mcp.core.config import Settings

    return Settings(
        _env_file=None,
        AMPLITUDE_API_KEY=TEST_API_KEY,
        AMPLITUDE_ENDPOINT=TEST_ENDPOINT,
        HTTP_TIMEOUT=5.0,
    )


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_ingestion_client():
    """Fake IngestionClient that records every batch."""
    from amplitude_mcp.adapters.ingestion.fake import FakeIngestionClient

    return FakeIngestionClient()


@pytest.fixture
def analytics_service(fake_ingestion_client):
    """AnalyticsService wired to the fake ingestion client."""
    from amplitude_mcp.domains.events.service import AnalyticsService

    return AnalyticsService(fake_ingestion_client)


@pytest.fixture
def tool_registry():
    """ToolRegistry built from the default catalog."""
    from amplitude_mcp.domains.tools.registry import ToolRegistry

    registry = ToolRegistry()
    registry.build()
    return registry


@pytest.fixture
def dispatcher(tool_registry, analytics_service):
    """ToolDispatcher over the real registry and the fake-backed service."""
    from amplitude_mcp.domains.tools.dispatcher import ToolDispatcher

    return ToolDispatcher(registry=tool_registry, analytics=analytics_service)


@pytest.fixture
def test_container(settings, fake_ingestion_client, analytics_service, tool_registry, dispatcher):
    """Container assembled from fakes."""
    from amplitude_mcp.core.container import Container

    return Container(
        settings=settings,
        ingestion_client=fake_ingestion_client,
        analytics=analytics_service,
        tool_registry=tool_registry,
        dispatcher=dispatcher,
    )
