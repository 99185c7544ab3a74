"""Amplitude HTTP V2 ingestion adapter.

Posts ``{"api_key", "events"}`` to the ingestion endpoint and classifies the
outcome. Implements the IngestionClient protocol.
"""

import json
from typing import Any, Sequence

import httpx
from pydantic import ValidationError as PydanticValidationError

from amplitude_mcp.core.config import Settings
from amplitude_mcp.core.exceptions import IngestionError, TransportError, ValidationError
from amplitude_mcp.core.logging import logger
from amplitude_mcp.core.protocols import IngestionClient
from amplitude_mcp.domains.events.types import AnalyticsEvent, IngestionResponse

client_logger = logger.with_prefix("AmplitudeClient: ").with_context(component="ingestion")


class AmplitudeIngestionClient(IngestionClient):
    """Send events to Amplitude, one request per call.

    A new ``httpx.AsyncClient`` is opened per request and bounded by the
    configured timeout. There is no retry: a failed attempt is reported to
    the caller as ``TransportError`` or ``IngestionError``.
    """

    def __init__(self, settings: Settings) -> None:
        """Take the API key, endpoint and timeout from settings."""
        self._api_key = settings.AMPLITUDE_API_KEY.get_secret_value()
        self._api_key_hint = settings.api_key_hint
        self._endpoint = settings.AMPLITUDE_ENDPOINT
        self._timeout = settings.HTTP_TIMEOUT

    async def send(self, events: Sequence[AnalyticsEvent]) -> IngestionResponse:
        """Deliver ``events`` in a single request.

        Args:
            events: Events to upload, in order.

        Returns:
            The validated success body.

        Raises:
            ValidationError: If ``events`` is empty.
            TransportError: On timeouts, connection failures and other
                network-level errors.
            IngestionError: On a non-2xx status, or a 2xx body that is not a
                JSON object with a ``code`` field.
        """
        if not events:
            raise ValidationError("At least one event is required")

        payload = [event.to_payload() for event in events]
        client_logger.debug(
            "Sending request to Amplitude: "
            + json.dumps({"api_key": self._api_key_hint, "events": payload})
        )

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.post(
                    self._endpoint,
                    json={"api_key": self._api_key, "events": payload},
                    headers={"Content-Type": "application/json", "Accept": "*/*"},
                )
            except httpx.TimeoutException as exc:
                client_logger.debug(f"Request error: {exc!r}")
                raise TransportError(
                    f"Amplitude did not respond within {self._timeout:g} seconds"
                ) from exc
            except httpx.ConnectError as exc:
                client_logger.debug(f"Request error: {exc!r}")
                raise TransportError(f"Could not connect to Amplitude: {exc}") from exc
            except httpx.HTTPError as exc:
                client_logger.debug(f"Request error: {exc!r}")
                raise TransportError(f"Failed to reach Amplitude: {exc}") from exc

        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> IngestionResponse:
        status = response.status_code
        try:
            body: Any = response.json()
        except ValueError as exc:
            client_logger.debug(f"Unparseable response ({status}): {response.text!r}")
            if not 200 <= status < 300:
                raise IngestionError(
                    f"HTTP Error: {status} - {response.text}",
                    status_code=status,
                    body=response.text,
                ) from exc
            raise IngestionError(
                f"Failed to parse response: {exc}", status_code=status, body=response.text
            ) from exc

        client_logger.debug(f"Response from Amplitude ({status}): {json.dumps(body)}")

        if not 200 <= status < 300:
            raise IngestionError(
                f"HTTP Error: {status} - {json.dumps(body)}", status_code=status, body=body
            )

        try:
            return IngestionResponse.model_validate(body)
        except PydanticValidationError as exc:
            raise IngestionError(
                f"Unexpected response shape: {json.dumps(body)}", status_code=status, body=body
            ) from exc
