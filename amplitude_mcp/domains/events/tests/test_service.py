"""Unit tests for AnalyticsService against FakeIngestionClient."""

import pytest

from amplitude_mcp.core.exceptions import (
    IngestionError,
    PartialFailureError,
    TransportError,
    ValidationError,
)


@pytest.mark.asyncio
async def test_track_event_sends_one_event(analytics_service, fake_ingestion_client):
    response = await analytics_service.track_event(
        "Clicked", user_id="u-1", event_properties={"button": "buy"}
    )

    assert response.code == 200
    assert len(fake_ingestion_client.batches) == 1
    event = fake_ingestion_client.events[0]
    assert event.event_type == "Clicked"
    assert event.event_properties == {"button": "buy"}


@pytest.mark.asyncio
async def test_track_page_view_sends_page_view(analytics_service, fake_ingestion_client):
    await analytics_service.track_page_view("Pricing", device_id="d-1")

    assert fake_ingestion_client.event_types() == ["Page View"]
    assert fake_ingestion_client.events[0].event_properties == {"page_name": "Pricing"}


@pytest.mark.asyncio
async def test_set_user_properties_sends_identify(analytics_service, fake_ingestion_client):
    await analytics_service.set_user_properties("u-1", {"plan": "pro"})

    event = fake_ingestion_client.events[0]
    assert event.event_type == "$identify"
    assert event.user_properties == {"$set": {"plan": "pro"}}


@pytest.mark.asyncio
async def test_validation_error_sends_nothing(analytics_service, fake_ingestion_client):
    with pytest.raises(ValidationError):
        await analytics_service.track_event("Clicked")

    assert fake_ingestion_client.attempts == 0


# ---------------------------------------------------------------------------
# Signup
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_signup_sends_two_events_in_order(analytics_service, fake_ingestion_client):
    user_id = await analytics_service.track_signup("Ann", "ann@x.com")

    assert user_id == "user_ann_x_com"
    assert fake_ingestion_client.event_types() == ["Sign Up", "$identify"]
    assert [len(batch) for batch in fake_ingestion_client.batches] == [1, 1]
    assert all(e.user_id == "user_ann_x_com" for e in fake_ingestion_client.events)


@pytest.mark.asyncio
async def test_signup_passes_plan(analytics_service, fake_ingestion_client):
    await analytics_service.track_signup("Bo", "bo@y.io", plan="team")

    signup_event, identify_event = fake_ingestion_client.events
    assert signup_event.event_properties == {"plan": "team"}
    assert identify_event.user_properties["$set"]["plan"] == "team"


@pytest.mark.asyncio
async def test_signup_first_failure_propagates_without_second_send(
    analytics_service, fake_ingestion_client
):
    fake_ingestion_client.fail_on_call(1, TransportError("Could not connect"))

    with pytest.raises(TransportError):
        await analytics_service.track_signup("Ann", "ann@x.com")

    assert fake_ingestion_client.attempts == 1
    assert fake_ingestion_client.events == []


@pytest.mark.asyncio
async def test_signup_second_failure_is_partial(analytics_service, fake_ingestion_client):
    cause = IngestionError("HTTP Error: 500 - {}", status_code=500)
    fake_ingestion_client.fail_on_call(2, cause)

    with pytest.raises(PartialFailureError) as exc_info:
        await analytics_service.track_signup("Ann", "ann@x.com")

    assert exc_info.value.user_id == "user_ann_x_com"
    assert exc_info.value.cause is cause
    assert "user_ann_x_com" in exc_info.value.message
    assert "HTTP Error: 500" in exc_info.value.message
    # First event stays sent; nothing is rolled back.
    assert fake_ingestion_client.event_types() == ["Sign Up"]


# ---------------------------------------------------------------------------
# Revenue
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_track_revenue_returns_computed_revenue(analytics_service, fake_ingestion_client):
    revenue = await analytics_service.track_revenue("u-1", "sku-1", 2.5, quantity=4)

    assert revenue == 10.0
    assert fake_ingestion_client.events[0].event_properties["revenue"] == 10.0


@pytest.mark.asyncio
async def test_track_revenue_error_propagates(analytics_service, fake_ingestion_client):
    fake_ingestion_client.fail_on_call(1, IngestionError("HTTP Error: 400", status_code=400))

    with pytest.raises(IngestionError) as exc_info:
        await analytics_service.track_revenue("u-1", "sku-1", 5)

    assert exc_info.value.status_code == 400
