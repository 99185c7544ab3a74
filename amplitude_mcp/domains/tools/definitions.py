"""Catalog of the tools the server advertises."""

from amplitude_mcp.domains.tools.schemas import (
    SetUserPropertiesArguments,
    TrackEventArguments,
    TrackPageViewArguments,
    TrackRevenueArguments,
    TrackSignupArguments,
)
from amplitude_mcp.domains.tools.types import ArgumentSpec, ToolDefinition

TRACK_EVENT = "track_event"
TRACK_PAGEVIEW = "track_pageview"
TRACK_SIGNUP = "track_signup"
SET_USER_PROPERTIES = "set_user_properties"
TRACK_REVENUE = "track_revenue"

_USER_ID = ArgumentSpec(type="string", description="User identifier (optional)")
_DEVICE_ID = ArgumentSpec(type="string", description="Device identifier (optional)")
_EVENT_PROPERTIES = ArgumentSpec(
    type="object", description="Additional properties to track with the event (optional)"
)

TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=TRACK_EVENT,
        description=(
            "Track a custom event in Amplitude. "
            "Either user_id or device_id must be provided."
        ),
        arguments={
            "event_name": ArgumentSpec(
                type="string", description="Name of the event to track", required=True
            ),
            "user_id": _USER_ID,
            "device_id": _DEVICE_ID,
            "properties": _EVENT_PROPERTIES,
            "user_properties": ArgumentSpec(
                type="object", description="User properties to update with this event (optional)"
            ),
        },
        arguments_model=TrackEventArguments,
        requires_identifier=True,
    ),
    ToolDefinition(
        name=TRACK_PAGEVIEW,
        description=(
            "Track a page view event in Amplitude. "
            "Either user_id or device_id must be provided."
        ),
        arguments={
            "page_name": ArgumentSpec(
                type="string", description="Name of the page viewed", required=True
            ),
            "user_id": _USER_ID,
            "device_id": _DEVICE_ID,
            "properties": _EVENT_PROPERTIES,
        },
        arguments_model=TrackPageViewArguments,
        requires_identifier=True,
    ),
    ToolDefinition(
        name=TRACK_SIGNUP,
        description="Track a signup event and create a user profile",
        arguments={
            "user_name": ArgumentSpec(
                type="string", description="User's full name", required=True
            ),
            "email": ArgumentSpec(
                type="string", description="User's email address", required=True
            ),
            "plan": ArgumentSpec(
                type="string", description="Signup plan (optional, defaults to 'free')"
            ),
        },
        arguments_model=TrackSignupArguments,
    ),
    ToolDefinition(
        name=SET_USER_PROPERTIES,
        description="Update a user's profile properties in Amplitude",
        arguments={
            "user_id": ArgumentSpec(type="string", description="User identifier", required=True),
            "properties": ArgumentSpec(
                type="object", description="Profile properties to set", required=True
            ),
        },
        arguments_model=SetUserPropertiesArguments,
    ),
    ToolDefinition(
        name=TRACK_REVENUE,
        description="Track a revenue event in Amplitude",
        arguments={
            "user_id": ArgumentSpec(type="string", description="User identifier", required=True),
            "product_id": ArgumentSpec(
                type="string", description="Identifier for the product purchased", required=True
            ),
            "price": ArgumentSpec(
                type="number", description="Price of the item purchased", required=True
            ),
            "quantity": ArgumentSpec(
                type="number", description="Quantity of items purchased (defaults to 1)"
            ),
            "revenue_type": ArgumentSpec(
                type="string",
                description="Type of revenue (e.g., 'purchase', 'refund', 'subscription')",
            ),
        },
        arguments_model=TrackRevenueArguments,
    ),
)
