"""Tool dispatcher.

Maps a ``(tool_name, arguments)`` call onto the analytics service and renders
the outcome as a ``ToolResult``. Every failure, expected or not, is returned
as a failure envelope; nothing raises past ``dispatch``.
"""

import asyncio
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Dict, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from amplitude_mcp.core.exceptions import AmplitudeMcpError, ConfigurationError, ValidationError
from amplitude_mcp.core.logging import logger
from amplitude_mcp.domains.events.builders import DEFAULT_PLAN, normalize_identifier
from amplitude_mcp.domains.events.protocols import AnalyticsServiceProtocol
from amplitude_mcp.domains.tools import definitions
from amplitude_mcp.domains.tools.protocols import ToolDispatcherProtocol, ToolRegistryProtocol
from amplitude_mcp.domains.tools.schemas import (
    SetUserPropertiesArguments,
    TrackEventArguments,
    TrackPageViewArguments,
    TrackRevenueArguments,
    TrackSignupArguments,
)
from amplitude_mcp.domains.tools.types import ToolDefinition, ToolResult

dispatch_logger = logger.with_prefix("ToolDispatcher: ").with_context(component="dispatcher")

IDENTIFIER_REQUIRED_MESSAGE = "Either user_id or device_id must be provided"


class ToolDispatcher(ToolDispatcherProtocol):
    """Validates tool arguments and runs the matching analytics operation.

    Each ``_handle_*`` method turns one validated argument model into a
    service call and a confirmation message. Adding a tool = one definition
    in ``definitions.TOOL_DEFINITIONS`` + one entry in ``_handlers``.
    """

    def __init__(
        self,
        registry: ToolRegistryProtocol,
        analytics: AnalyticsServiceProtocol,
    ) -> None:
        """Wire the handler table to the given registry and service.

        Raises:
            ConfigurationError: If a registered tool has no handler.
        """
        self._registry = registry
        self._analytics = analytics
        # Calls run one at a time, in arrival order, including their round trip.
        self._lock = asyncio.Lock()
        self._handlers: Dict[str, Callable[[Any], Awaitable[ToolResult]]] = {
            definitions.TRACK_EVENT: self._handle_track_event,
            definitions.TRACK_PAGEVIEW: self._handle_track_pageview,
            definitions.TRACK_SIGNUP: self._handle_track_signup,
            definitions.SET_USER_PROPERTIES: self._handle_set_user_properties,
            definitions.TRACK_REVENUE: self._handle_track_revenue,
        }

        unhandled = [t.name for t in registry.list_all() if t.name not in self._handlers]
        if unhandled:
            raise ConfigurationError(f"No handler for tools: {', '.join(unhandled)}")

    async def dispatch(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolResult:
        """Run a tool call and return its envelope."""
        async with self._lock:
            return await self._dispatch(tool_name, arguments)

    async def _dispatch(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]]
    ) -> ToolResult:
        dispatch_logger.debug(f"Received call_tool request for: {tool_name}")

        try:
            tool = self._registry.get(tool_name)
        except KeyError:
            dispatch_logger.debug(f"Unknown tool: {tool_name}")
            return ToolResult.failure(f"Unknown tool: {tool_name}")

        try:
            params = self._validate_arguments(tool, arguments)
            result = await self._handlers[tool.name](params)
        except AmplitudeMcpError as e:
            dispatch_logger.debug(f"Error in call_tool '{tool_name}': {e.message}")
            return ToolResult.failure(e.message)
        except Exception as e:
            dispatch_logger.exception(f"Unexpected error in call_tool '{tool_name}': {e}")
            return ToolResult.failure(f"Unexpected error: {e}")

        dispatch_logger.debug(result.text)
        return result

    # ------------------------------------------------------------------
    # Argument validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_arguments(
        tool: ToolDefinition, arguments: Optional[Mapping[str, Any]]
    ) -> BaseModel:
        """Check the raw argument bag and convert it to the tool's model.

        Raises:
            ValidationError: On missing required arguments, a missing
                identifier pair, or values of the wrong shape.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ValidationError("Tool arguments must be an object")

        missing = [name for name in tool.required_arguments if arguments.get(name) is None]
        if missing:
            noun = "parameter" if len(missing) == 1 else "parameters"
            raise ValidationError(f"Missing required {noun}: {', '.join(missing)}")

        if tool.requires_identifier and not (
            normalize_identifier(arguments.get("user_id"))
            or normalize_identifier(arguments.get("device_id"))
        ):
            raise ValidationError(IDENTIFIER_REQUIRED_MESSAGE)

        try:
            return tool.arguments_model.model_validate(dict(arguments))
        except PydanticValidationError as e:
            errors = "; ".join(f"{_loc(err)}: {err.get('msg')}" for err in e.errors())
            raise ValidationError(f"Invalid arguments for {tool.name}: {errors}") from e

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _handle_track_event(self, args: TrackEventArguments) -> ToolResult:
        await self._analytics.track_event(
            args.event_name,
            user_id=args.user_id,
            device_id=args.device_id,
            event_properties=args.properties,
            user_properties=args.user_properties,
        )
        who = args.user_id or args.device_id
        return ToolResult.success(
            f"Successfully tracked event '{args.event_name}' for user '{who}'",
            event_name=args.event_name,
            user_id=args.user_id,
            device_id=args.device_id,
        )

    async def _handle_track_pageview(self, args: TrackPageViewArguments) -> ToolResult:
        await self._analytics.track_page_view(
            args.page_name,
            user_id=args.user_id,
            device_id=args.device_id,
            properties=args.properties,
        )
        return ToolResult.success(
            f"Successfully tracked page view for '{args.page_name}'",
            page_name=args.page_name,
            user_id=args.user_id,
            device_id=args.device_id,
        )

    async def _handle_track_signup(self, args: TrackSignupArguments) -> ToolResult:
        plan = args.plan or DEFAULT_PLAN
        user_id = await self._analytics.track_signup(args.user_name, args.email, plan)
        return ToolResult.success(
            f"Successfully tracked signup for '{args.user_name}' "
            f"and created profile with ID '{user_id}'",
            user_id=user_id,
            plan=plan,
        )

    async def _handle_set_user_properties(
        self, args: SetUserPropertiesArguments
    ) -> ToolResult:
        await self._analytics.set_user_properties(args.user_id, args.properties)
        return ToolResult.success(
            f"Successfully updated profile for user '{args.user_id}'",
            user_id=args.user_id,
            properties=sorted(args.properties),
        )

    async def _handle_track_revenue(self, args: TrackRevenueArguments) -> ToolResult:
        quantity = 1 if args.quantity is None else args.quantity
        revenue = await self._analytics.track_revenue(
            args.user_id,
            args.product_id,
            args.price,
            quantity=quantity,
            revenue_type=args.revenue_type,
        )
        return ToolResult.success(
            f"Successfully tracked revenue of {revenue} for user '{args.user_id}'",
            user_id=args.user_id,
            product_id=args.product_id,
            revenue=revenue,
        )


def _loc(err: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in err.get("loc", ())) or "arguments"
