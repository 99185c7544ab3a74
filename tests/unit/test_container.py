"""Tests for container construction."""

import dataclasses

import pytest

from amplitude_mcp.adapters.ingestion.amplitude import AmplitudeIngestionClient
from amplitude_mcp.core.container import Container, create_container
from amplitude_mcp.core.protocols import IngestionClient
from amplitude_mcp.domains.events.service import AnalyticsService
from amplitude_mcp.domains.tools.dispatcher import ToolDispatcher
from amplitude_mcp.domains.tools.registry import ToolRegistry


def test_create_container_wires_real_components(settings):
    container = create_container(settings)

    assert isinstance(container, Container)
    assert container.settings is settings
    assert isinstance(container.ingestion_client, AmplitudeIngestionClient)
    assert isinstance(container.ingestion_client, IngestionClient)
    assert isinstance(container.analytics, AnalyticsService)
    assert isinstance(container.tool_registry, ToolRegistry)
    assert isinstance(container.dispatcher, ToolDispatcher)


def test_registry_is_built_at_startup(settings):
    container = create_container(settings)

    assert len(container.tool_registry.list_all()) == 5


def test_containers_do_not_share_state(settings):
    first = create_container(settings)
    second = create_container(settings)

    assert first.dispatcher is not second.dispatcher
    assert first.ingestion_client is not second.ingestion_client


def test_container_is_frozen(test_container):
    with pytest.raises(dataclasses.FrozenInstanceError):
        test_container.settings = None


@pytest.mark.asyncio
async def test_test_container_uses_fake(test_container, fake_ingestion_client):
    await test_container.dispatcher.dispatch(
        "set_user_properties", {"user_id": "u-1", "properties": {"plan": "pro"}}
    )

    assert test_container.ingestion_client is fake_ingestion_client
    assert fake_ingestion_client.event_types() == ["$identify"]
