"""Protocols for the events domain."""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional, Protocol

from amplitude_mcp.domains.events.types import IngestionResponse


class AnalyticsServiceProtocol(Protocol):
    """The five tracking operations exposed as tools."""

    async def track_event(
        self,
        event_type: str,
        user_id: Any = None,
        device_id: Any = None,
        event_properties: Optional[Mapping[str, Any]] = None,
        user_properties: Optional[Mapping[str, Any]] = None,
    ) -> IngestionResponse:
        """Track a custom event."""
        ...

    async def track_page_view(
        self,
        page_name: str,
        user_id: Any = None,
        device_id: Any = None,
        properties: Optional[Mapping[str, Any]] = None,
    ) -> IngestionResponse:
        """Track a page view."""
        ...

    async def set_user_properties(
        self, user_id: Any, properties: Mapping[str, Any]
    ) -> IngestionResponse:
        """Merge properties into a user profile."""
        ...

    async def track_signup(self, user_name: str, email: str, plan: str = "free") -> str:
        """Track a signup and return the derived user id."""
        ...

    async def track_revenue(
        self,
        user_id: Any,
        product_id: str,
        price: Real,
        quantity: Real = 1,
        revenue_type: Optional[str] = None,
    ) -> Real:
        """Track a purchase and return the computed revenue."""
        ...
