"""Tests for the tool-call error taxonomy."""

import json

from agenttrace.tools import (
    InvalidArguments,
    InvalidNesting,
    MissingParameter,
    NullArguments,
    NullParameter,
    ToolCallError,
    TypeMismatch,
    UnknownFunction,
)


class TestToolCallErrorMessages:
    """Tests for top-level tool call error messages."""

    def test_unknown_function(self):
        error = UnknownFunction("calculate_tax")
        assert error.formatted_message == "Unknown function: 'calculate_tax'"

    def test_null_arguments(self):
        error = NullArguments("add_inventory_item")

        assert error.formatted_message == (
            "Tool call 'add_inventory_item' received null arguments - "
            "expected an object with required parameters"
        )

    def test_str_is_formatted_message(self):
        error = UnknownFunction("x")
        assert str(error) == error.formatted_message

    def test_all_variants_are_tool_call_errors(self):
        for error in (UnknownFunction("a"), NullArguments("a"), InvalidArguments("a")):
            assert isinstance(error, ToolCallError)

    def test_message_is_stable(self):
        """Same value, same message."""
        error = InvalidArguments("f", [NullParameter("p", "string")])
        assert error.formatted_message == error.formatted_message

    def test_fields_are_not_validated(self):
        """Empty names are the caller's problem, not an error."""
        assert UnknownFunction("").formatted_message == "Unknown function: ''"


class TestInvalidArguments:
    """Tests for InvalidArguments rendering."""

    def test_single_missing_parameter(self):
        error = InvalidArguments(
            "add_inventory_item",
            [MissingParameter("quantity", "number", ["item_id"])],
        )

        assert error.formatted_message == (
            "Tool call 'add_inventory_item' received invalid arguments\n"
            "  - Missing required parameter 'quantity' (expected type: number); "
            "available parameters: item_id"
        )

    def test_empty_error_list_has_no_parameter_lines(self):
        error = InvalidArguments("f", [])
        lines = error.formatted_message.split("\n")

        assert lines == ["Tool call 'f' received invalid arguments"]

    def test_three_errors_in_input_order(self):
        errors = [
            TypeMismatch("count", "integer", "string"),
            NullParameter("name", "string"),
            InvalidNesting("tags", "array", "string"),
        ]
        error = InvalidArguments("create", errors)

        param_lines = [
            line for line in error.formatted_message.split("\n") if line.startswith("  - ")
        ]
        assert param_lines == [f"  - {e.formatted_message}" for e in errors]

    def test_order_is_preserved_not_sorted(self):
        error = InvalidArguments(
            "f", [NullParameter("zeta", "string"), NullParameter("alpha", "string")]
        )
        message = error.formatted_message

        assert message.index("zeta") < message.index("alpha")

    def test_errors_stored_as_tuple(self):
        error = InvalidArguments("f", [NullParameter("p", "string")])
        assert isinstance(error.errors, tuple)


class TestParameterErrorMessages:
    """Tests for per-parameter messages."""

    def test_missing_without_siblings(self):
        error = MissingParameter("quantity", "number")
        assert error.formatted_message == (
            "Missing required parameter 'quantity' (expected type: number)"
        )

    def test_missing_lists_siblings(self):
        error = MissingParameter("quantity", "number", ["item_id", "location"])
        assert error.formatted_message.endswith(
            "available parameters: item_id, location"
        )

    def test_null_parameter(self):
        assert NullParameter("name", "string").formatted_message == (
            "Parameter 'name' is null (expected type: string)"
        )

    def test_type_mismatch(self):
        assert TypeMismatch("count", "integer", "string").formatted_message == (
            "Parameter 'count' has wrong type: expected integer, got string"
        )

    def test_invalid_nesting(self):
        assert InvalidNesting("tags", "array", "string").formatted_message == (
            "Parameter 'tags' has invalid nesting: expected array of string"
        )


class TestToJson:
    """Tests for the JSON error envelope."""

    def test_unknown_function_envelope(self):
        assert UnknownFunction("calculate_tax").to_json() == (
            '{"isError": true, "error": "Unknown function: \'calculate_tax\'"}'
        )

    def test_multiline_message_round_trips(self):
        error = InvalidArguments(
            "f",
            [
                MissingParameter("a", "string", ["b"]),
                TypeMismatch("c", "number", "string"),
            ],
        )
        parsed = json.loads(error.to_json())

        assert parsed["isError"] is True
        assert parsed["error"] == error.formatted_message
