"""Event construction.

Turns loosely typed caller input into validated ``AnalyticsEvent`` records.
Every constructor here is pure apart from reading the clock and drawing a
random insert-id suffix; nothing is sent.
"""

import copy
import re
import time
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional
from uuid import uuid4

from amplitude_mcp.core.exceptions import ValidationError
from amplitude_mcp.domains.events.types import (
    IDENTIFY_EVENT,
    PAGE_VIEW_EVENT,
    PURCHASE_EVENT,
    SET_OPERATOR,
    SIGN_UP_EVENT,
    AnalyticsEvent,
    SignupEvents,
    thaw,
)

DEFAULT_PLAN = "free"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def normalize_identifier(value: Any) -> Optional[str]:
    """Return ``value`` as a string, or None when it is absent or empty."""
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def _copy(properties: Mapping[str, Any]) -> dict[str, Any]:
    # thaw first: read-only views from another event cannot be deep-copied.
    return copy.deepcopy(thaw(properties))


def new_insert_id(time_ms: int) -> str:
    """Build a deduplication key from the timestamp and 64 random bits."""
    return f"{time_ms}-{uuid4().hex[:16]}"


def build_event(
    event_type: str,
    user_id: Any = None,
    device_id: Any = None,
    event_properties: Optional[Mapping[str, Any]] = None,
    user_properties: Optional[Mapping[str, Any]] = None,
) -> AnalyticsEvent:
    """Build an event for one user or device.

    Args:
        event_type: Name of the event, e.g. ``"Page View"``.
        user_id: User identifier. Non-string values are converted with ``str``.
        device_id: Device identifier. Same conversion as ``user_id``.
        event_properties: Properties of the occurrence. Dropped when empty.
        user_properties: Properties to apply to the user. Dropped when empty.
            Both mappings are deep-copied; the event holds read-only views.

    Returns:
        A frozen ``AnalyticsEvent`` stamped with the current time and a fresh
        insert id.

    Raises:
        ValidationError: If ``event_type`` is empty or neither identifier is
            given.
    """
    if not isinstance(event_type, str) or not event_type:
        raise ValidationError("Event type must be a non-empty string")

    user_id = normalize_identifier(user_id)
    device_id = normalize_identifier(device_id)
    if user_id is None and device_id is None:
        raise ValidationError("Either user_id or device_id must be provided")

    time_ms = int(time.time() * 1000)
    return AnalyticsEvent(
        event_type=event_type,
        time=time_ms,
        insert_id=new_insert_id(time_ms),
        user_id=user_id,
        device_id=device_id,
        event_properties=_copy(event_properties) if event_properties else None,
        user_properties=_copy(user_properties) if user_properties else None,
    )


def page_view(
    page_name: str,
    user_id: Any = None,
    device_id: Any = None,
    properties: Optional[Mapping[str, Any]] = None,
) -> AnalyticsEvent:
    """Build a ``Page View`` event.

    ``page_name`` is written first, so a ``page_name`` key in ``properties``
    wins.
    """
    return build_event(
        PAGE_VIEW_EVENT,
        user_id=user_id,
        device_id=device_id,
        event_properties={"page_name": page_name, **(properties or {})},
    )


def identify(user_id: Any, properties: Mapping[str, Any]) -> AnalyticsEvent:
    """Build an ``$identify`` event that merges ``properties`` into a profile.

    Device-only identify is not supported.
    """
    if normalize_identifier(user_id) is None:
        raise ValidationError("user_id is required to set user properties")
    return build_event(
        IDENTIFY_EVENT,
        user_id=user_id,
        user_properties={SET_OPERATOR: dict(properties)},
    )


def signup_user_id(email: str) -> str:
    """Derive a stable user id from an email address."""
    return f"user_{_NON_ALPHANUMERIC.sub('_', email)}"


def signup(user_name: str, email: str, plan: str = DEFAULT_PLAN) -> SignupEvents:
    """Build the ``Sign Up`` event and the profile ``$identify`` that follows it."""
    if not email:
        raise ValidationError("Email is required to derive a user id")

    user_id = signup_user_id(email)
    return SignupEvents(
        user_id=user_id,
        signup_event=build_event(SIGN_UP_EVENT, user_id=user_id, event_properties={"plan": plan}),
        identify_event=identify(user_id, {"name": user_name, "email": email, "plan": plan}),
    )


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {value!r}")


def revenue(
    user_id: Any,
    product_id: str,
    price: Real,
    quantity: Real = 1,
    revenue_type: Optional[str] = None,
) -> AnalyticsEvent:
    """Build a ``Purchase`` event.

    ``revenue`` is always ``price * quantity``, computed here rather than by
    the provider. ``revenueType`` is only included when given.
    """
    _require_number("price", price)
    _require_number("quantity", quantity)

    properties: dict[str, Any] = {
        "productId": product_id,
        "price": price,
        "quantity": quantity,
        "revenue": price * quantity,
    }
    if revenue_type:
        properties["revenueType"] = revenue_type

    return build_event(PURCHASE_EVENT, user_id=user_id, event_properties=properties)
