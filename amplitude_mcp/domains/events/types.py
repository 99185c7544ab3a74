"""Event domain types.

Pure value objects with no infrastructure dependencies. ``AnalyticsEvent``
mirrors the Amplitude HTTP V2 event shape; ``IngestionResponse`` is the body
the endpoint returns on success.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Event types emitted by the derived constructors.
PAGE_VIEW_EVENT = "Page View"
SIGN_UP_EVENT = "Sign Up"
PURCHASE_EVENT = "Purchase"
IDENTIFY_EVENT = "$identify"

# Amplitude user-property operator that merges values into the profile.
SET_OPERATOR = "$set"


def freeze(value: Any) -> Any:
    """Return a read-only copy of a JSON-like value.

    Mappings become ``MappingProxyType`` and lists become tuples, at every
    level. Scalars are returned as they are.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: plain dicts and lists, for serialization."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


class AnalyticsEvent(BaseModel):
    """A single timestamped analytics fact, ready to send.

    Build instances through ``builders.build_event`` (or one of the derived
    constructors) rather than directly: the builder owns identifier
    validation, timestamping and insert-id generation.
    """

    model_config = ConfigDict(frozen=True)

    event_type: str = Field(..., min_length=1)
    time: int = Field(..., description="Milliseconds since the epoch")
    insert_id: str = Field(..., description="Deduplication key")
    user_id: Optional[str] = None
    device_id: Optional[str] = None
    event_properties: Optional[Mapping[str, Any]] = None
    user_properties: Optional[Mapping[str, Any]] = None

    @field_validator("event_properties", "user_properties", mode="after")
    @classmethod
    def _read_only(cls, value: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        return None if value is None else freeze(value)

    @field_serializer("event_properties", "user_properties")
    def _plain(self, value: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
        return None if value is None else thaw(value)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the provider's JSON shape, leaving out absent keys."""
        return self.model_dump(mode="json", exclude_none=True)


class IngestionResponse(BaseModel):
    """Success body of the HTTP V2 API.

    Only ``code`` is required; the remaining fields are reported by the
    provider on a normal upload and kept when present.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    code: int
    events_ingested: Optional[int] = None
    payload_size_bytes: Optional[int] = None
    server_upload_time: Optional[int] = None


class SignupEvents(BaseModel):
    """Derived user id plus the two events a signup emits, in send order."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    signup_event: AnalyticsEvent
    identify_event: AnalyticsEvent
