"""Fake ingestion client for testing."""

from typing import Optional, Sequence

from amplitude_mcp.core.exceptions import AmplitudeMcpError
from amplitude_mcp.domains.events.types import AnalyticsEvent, IngestionResponse


class FakeIngestionClient:
    """In-memory test double for IngestionClient.

    Records every batch for assertions. Failures can be scripted per call.

    Usage:
        client = FakeIngestionClient()
        client.fail_on_call(2, IngestionError("HTTP Error: 500", status_code=500))
        service = AnalyticsService(client)
        ...
        assert client.event_types() == ["Sign Up"]
    """

    def __init__(self, response: Optional[IngestionResponse] = None) -> None:
        """Initialize with an empty call log and a canned success response."""
        self.batches: list[list[AnalyticsEvent]] = []
        self.attempts = 0
        self._response = response or IngestionResponse(code=200, events_ingested=1)
        self._failures: dict[int, AmplitudeMcpError] = {}

    async def send(self, events: Sequence[AnalyticsEvent]) -> IngestionResponse:
        """Record the batch, or raise the failure scripted for this call."""
        self.attempts += 1
        failure = self._failures.get(self.attempts)
        if failure is not None:
            raise failure
        self.batches.append(list(events))
        return self._response

    # Test helpers

    def fail_on_call(self, attempt: int, error: AmplitudeMcpError) -> None:
        """Raise ``error`` on the ``attempt``-th call (1-based)."""
        self._failures[attempt] = error

    @property
    def events(self) -> list[AnalyticsEvent]:
        """All successfully sent events, flattened in send order."""
        return [event for batch in self.batches for event in batch]

    def event_types(self) -> list[str]:
        """Event types of all successfully sent events, in send order."""
        return [event.event_type for event in self.events]
