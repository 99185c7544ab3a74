"""Analytics service.

Composes the event builders with an ingestion client. Each public method
builds its event(s) and sends them, one request per event, in order.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from amplitude_mcp.core.exceptions import AmplitudeMcpError, PartialFailureError
from amplitude_mcp.core.logging import logger
from amplitude_mcp.core.protocols import IngestionClient
from amplitude_mcp.domains.events import builders
from amplitude_mcp.domains.events.protocols import AnalyticsServiceProtocol
from amplitude_mcp.domains.events.types import AnalyticsEvent, IngestionResponse

service_logger = logger.with_prefix("AnalyticsService: ").with_context(component="analytics")


class AnalyticsService(AnalyticsServiceProtocol):
    """Tracks events, page views, signups, profile updates and revenue."""

    def __init__(self, ingestion_client: IngestionClient) -> None:
        """Store the client used to deliver events."""
        self._client = ingestion_client

    async def track_event(
        self,
        event_type: str,
        user_id: Any = None,
        device_id: Any = None,
        event_properties: Optional[Mapping[str, Any]] = None,
        user_properties: Optional[Mapping[str, Any]] = None,
    ) -> IngestionResponse:
        """Track a custom event."""
        event = builders.build_event(
            event_type,
            user_id=user_id,
            device_id=device_id,
            event_properties=event_properties,
            user_properties=user_properties,
        )
        return await self._send(event)

    async def track_page_view(
        self,
        page_name: str,
        user_id: Any = None,
        device_id: Any = None,
        properties: Optional[Mapping[str, Any]] = None,
    ) -> IngestionResponse:
        """Track a ``Page View`` event."""
        event = builders.page_view(
            page_name, user_id=user_id, device_id=device_id, properties=properties
        )
        return await self._send(event)

    async def set_user_properties(
        self, user_id: Any, properties: Mapping[str, Any]
    ) -> IngestionResponse:
        """Merge ``properties`` into the user's profile."""
        return await self._send(builders.identify(user_id, properties))

    async def track_signup(
        self, user_name: str, email: str, plan: str = builders.DEFAULT_PLAN
    ) -> str:
        """Track a signup and create the matching profile.

        Sends the ``Sign Up`` event first, then the ``$identify`` event. A
        failure of the first send propagates unchanged and nothing else is
        sent. A failure of the second is raised as ``PartialFailureError``;
        the first event is not rolled back because the provider has no
        delete.

        Returns:
            The derived user id.
        """
        events = builders.signup(user_name, email, plan)
        await self._send(events.signup_event)

        try:
            await self._send(events.identify_event)
        except AmplitudeMcpError as e:
            service_logger.warning(
                f"Profile update failed after signup for '{events.user_id}': {e.message}"
            )
            raise PartialFailureError(events.user_id, e) from e

        return events.user_id

    async def track_revenue(
        self,
        user_id: Any,
        product_id: str,
        price: Real,
        quantity: Real = 1,
        revenue_type: Optional[str] = None,
    ) -> Real:
        """Track a ``Purchase`` event.

        Returns:
            The computed revenue (``price * quantity``).
        """
        event = builders.revenue(user_id, product_id, price, quantity, revenue_type)
        await self._send(event)
        return event.event_properties["revenue"]

    async def _send(self, event: AnalyticsEvent) -> IngestionResponse:
        service_logger.debug(
            f"Sending '{event.event_type}' for '{event.user_id or event.device_id}' "
            f"(insert_id={event.insert_id})"
        )
        return await self._client.send([event])
