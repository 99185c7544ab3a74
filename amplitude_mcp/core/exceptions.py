"""Shared exceptions module.

Every error raised while handling a tool call derives from
``AmplitudeMcpError`` so the dispatcher can render it as a failure envelope.
"""

from typing import Any, Optional


class AmplitudeMcpError(Exception):
    """Base exception for the Amplitude MCP server."""

    def __init__(self, message: str):
        """Create a new AmplitudeMcpError instance.

        Args:
        ----
            message (str): Human-readable description of the failure.

        """
        self.message = message
        super().__init__(self.message)


class ConfigurationError(AmplitudeMcpError):
    """Raised at startup when required configuration is missing or invalid."""

    pass


class ValidationError(AmplitudeMcpError):
    """Raised when caller input violates a contract.

    Covers missing required fields, a missing user_id/device_id pair and
    malformed numeric fields.
    """

    pass


class TransportError(AmplitudeMcpError):
    """Raised when the ingestion endpoint cannot be reached."""

    def __init__(self, message: Optional[str] = "Failed to reach the ingestion endpoint"):
        """Create a new TransportError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        super().__init__(message)


class IngestionError(AmplitudeMcpError):
    """Raised when the provider rejects a request or returns an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        """Create a new IngestionError instance.

        Args:
        ----
            message (str): The error message.
            status_code (int, optional): HTTP status returned by the provider.
            body (Any, optional): Parsed or raw response body, kept for diagnostics.

        """
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class PartialFailureError(AmplitudeMcpError):
    """Raised when a signup was tracked but the follow-up profile update failed.

    The first event is already with the provider and cannot be deleted, so
    callers must treat ``user_id`` as created.
    """

    def __init__(self, user_id: str, cause: AmplitudeMcpError):
        """Create a new PartialFailureError instance.

        Args:
        ----
            user_id (str): The user id the signup event was tracked for.
            cause (AmplitudeMcpError): The error raised by the profile update.

        """
        self.user_id = user_id
        self.cause = cause
        super().__init__(
            f"Signup for user '{user_id}' was tracked but the profile update failed: "
            f"{cause.message}"
        )
