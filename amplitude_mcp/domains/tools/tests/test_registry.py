"""Unit tests for ToolRegistry and the built-in tool catalog."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from amplitude_mcp.domains.tools.definitions import TOOL_DEFINITIONS
from amplitude_mcp.domains.tools.registry import ToolRegistry
from amplitude_mcp.domains.tools.schemas import TrackEventArguments
from amplitude_mcp.domains.tools.types import ArgumentSpec, ToolDefinition

EXPECTED_REQUIRED = {
    "track_event": ["event_name"],
    "track_pageview": ["page_name"],
    "track_signup": ["user_name", "email"],
    "set_user_properties": ["user_id", "properties"],
    "track_revenue": ["user_id", "product_id", "price"],
}

EXPECTED_OPTIONAL = {
    "track_event": {"user_id", "device_id", "properties", "user_properties"},
    "track_pageview": {"user_id", "device_id", "properties"},
    "track_signup": {"plan"},
    "set_user_properties": set(),
    "track_revenue": {"quantity", "revenue_type"},
}


def _definition(name: str) -> ToolDefinition:
    return ToolDefinition(
        name=name,
        description=f"Test {name}",
        arguments={"event_name": ArgumentSpec(type="string", description="x", required=True)},
        arguments_model=TrackEventArguments,
    )


def test_lists_exactly_the_five_tools_in_order(tool_registry):
    names = [tool.name for tool in tool_registry.list_all()]

    assert names == list(EXPECTED_REQUIRED)


@pytest.mark.parametrize("name", list(EXPECTED_REQUIRED))
def test_required_and_optional_arguments(tool_registry, name):
    tool = tool_registry.get(name)

    assert tool.required_arguments == EXPECTED_REQUIRED[name]
    optional = set(tool.arguments) - set(tool.required_arguments)
    assert optional == EXPECTED_OPTIONAL[name]


@pytest.mark.parametrize("name", list(EXPECTED_REQUIRED))
def test_input_schema_shape(tool_registry, name):
    schema = tool_registry.get(name).input_schema()

    assert schema["type"] == "object"
    assert schema["required"] == EXPECTED_REQUIRED[name]
    assert set(schema["properties"]) == set(EXPECTED_REQUIRED[name]) | EXPECTED_OPTIONAL[name]
    for prop in schema["properties"].values():
        assert prop["type"] in {"string", "number", "object"}
        assert prop["description"]


@pytest.mark.parametrize("name", list(EXPECTED_REQUIRED))
def test_argument_model_agrees_with_advertised_schema(tool_registry, name):
    tool = tool_registry.get(name)
    fields = tool.arguments_model.model_fields

    assert set(fields) == set(tool.arguments)
    required_in_model = {field for field, info in fields.items() if info.is_required()}
    assert required_in_model == set(tool.required_arguments)


def test_identifier_disjunction_flags(tool_registry):
    flagged = {tool.name for tool in tool_registry.list_all() if tool.requires_identifier}

    assert flagged == {"track_event", "track_pageview"}


def test_price_and_quantity_are_numbers(tool_registry):
    schema = tool_registry.get("track_revenue").input_schema()

    assert schema["properties"]["price"]["type"] == "number"
    assert schema["properties"]["quantity"]["type"] == "number"


def test_get_unknown_raises_key_error(tool_registry):
    with pytest.raises(KeyError):
        tool_registry.get("delete_user")


def test_empty_before_build():
    registry = ToolRegistry()

    assert registry.list_all() == []
    with pytest.raises(KeyError):
        registry.get("track_event")


def test_build_rejects_duplicate_names():
    registry = ToolRegistry([_definition("dup"), _definition("dup")])

    with pytest.raises(ValueError, match="Duplicate tool name 'dup'"):
        registry.build()


def test_custom_definitions():
    registry = ToolRegistry([_definition("only_one")])
    registry.build()

    assert [t.name for t in registry.list_all()] == ["only_one"]


def test_catalog_is_a_tuple_of_frozen_definitions():
    assert isinstance(TOOL_DEFINITIONS, tuple)
    with pytest.raises(PydanticValidationError):
        TOOL_DEFINITIONS[0].name = "renamed"
