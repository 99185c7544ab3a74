"""Protocol for analytics ingestion adapters."""

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from amplitude_mcp.domains.events.types import AnalyticsEvent, IngestionResponse


@runtime_checkable
class IngestionClient(Protocol):
    """Deliver a batch of events to the analytics provider.

    Adapter boundary between the event model and the provider's HTTP API.
    One attempt per call; retry policy belongs to a layer above.

    Raises:
        TransportError: The endpoint could not be reached.
        IngestionError: The provider rejected the batch or returned a body
            that does not match ``IngestionResponse``.
    """

    async def send(self, events: Sequence["AnalyticsEvent"]) -> "IngestionResponse":
        """Send ``events`` in order and return the parsed provider response."""
        ...
