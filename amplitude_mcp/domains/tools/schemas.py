"""Argument models for each tool.

The dispatcher validates the raw argument bag against one of these models
before any event is built, so handlers only ever see typed values.
"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt

from amplitude_mcp.domains.events.builders import normalize_identifier

# Identifiers are accepted in any scalar form and normalized to strings;
# empty values collapse to None.
Identifier = Annotated[Optional[str], BeforeValidator(normalize_identifier)]

# Bools are rejected even though they are ints in Python.
Number = Union[StrictInt, StrictFloat]


def _product_id_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class _ToolArguments(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TrackEventArguments(_ToolArguments):
    """Arguments of ``track_event``."""

    event_name: str = Field(..., min_length=1)
    user_id: Identifier = None
    device_id: Identifier = None
    properties: Optional[dict[str, Any]] = None
    user_properties: Optional[dict[str, Any]] = None


class TrackPageViewArguments(_ToolArguments):
    """Arguments of ``track_pageview``."""

    page_name: str = Field(..., min_length=1)
    user_id: Identifier = None
    device_id: Identifier = None
    properties: Optional[dict[str, Any]] = None


class TrackSignupArguments(_ToolArguments):
    """Arguments of ``track_signup``."""

    user_name: str
    email: str = Field(..., min_length=1)
    plan: Optional[str] = None


class SetUserPropertiesArguments(_ToolArguments):
    """Arguments of ``set_user_properties``."""

    user_id: Identifier
    properties: dict[str, Any]


class TrackRevenueArguments(_ToolArguments):
    """Arguments of ``track_revenue``."""

    user_id: Identifier
    product_id: Annotated[str, BeforeValidator(_product_id_to_str)] = Field(..., min_length=1)
    price: Number
    quantity: Optional[Number] = None
    revenue_type: Optional[str] = None
