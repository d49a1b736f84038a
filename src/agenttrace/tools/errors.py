"""
Tool-call error taxonomy.

Errors describing invalid tool invocations are data, not faults: a
tool-calling framework builds them while validating a model's tool call and
hands the rendered message back to the model. The message wording is a
contract with those consumers and must stay stable.

Example:
    ```python
    from agenttrace.tools import InvalidArguments, MissingParameter

    error = InvalidArguments(
        "add_inventory_item",
        [MissingParameter("quantity", "number", ["item_id"])],
    )
    print(error.formatted_message)
    # Tool call 'add_inventory_item' received invalid arguments
    #   - Missing required parameter 'quantity' (expected type: number); available parameters: item_id
    print(error.to_json())
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from agenttrace.observability.formatting import error_envelope


class ToolParameterError(ABC):
    """A problem with a single parameter of a tool call."""

    parameter_name: str

    @property
    @abstractmethod
    def formatted_message(self) -> str:
        """Human-readable description of the problem."""


@dataclass(frozen=True)
class MissingParameter(ToolParameterError):
    """A required parameter was not supplied.

    Attributes:
        parameter_name: Name of the missing parameter
        expected_type: JSON-schema type the parameter should have
        available_parameters: Parameter names that were supplied
    """

    parameter_name: str
    expected_type: str
    available_parameters: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "available_parameters", tuple(self.available_parameters)
        )

    @property
    def formatted_message(self) -> str:
        message = (
            f"Missing required parameter '{self.parameter_name}' "
            f"(expected type: {self.expected_type})"
        )
        if self.available_parameters:
            message += f"; available parameters: {', '.join(self.available_parameters)}"
        return message


@dataclass(frozen=True)
class NullParameter(ToolParameterError):
    """A required parameter was supplied as null."""

    parameter_name: str
    expected_type: str

    @property
    def formatted_message(self) -> str:
        return (
            f"Parameter '{self.parameter_name}' is null "
            f"(expected type: {self.expected_type})"
        )


@dataclass(frozen=True)
class TypeMismatch(ToolParameterError):
    """A parameter had a different type than the schema requires."""

    parameter_name: str
    expected_type: str
    actual_type: str

    @property
    def formatted_message(self) -> str:
        return (
            f"Parameter '{self.parameter_name}' has wrong type: "
            f"expected {self.expected_type}, got {self.actual_type}"
        )


@dataclass(frozen=True)
class InvalidNesting(ToolParameterError):
    """A container parameter held values of the wrong shape."""

    parameter_name: str
    expected_container_type: str
    leaf_type: str

    @property
    def formatted_message(self) -> str:
        return (
            f"Parameter '{self.parameter_name}' has invalid nesting: "
            f"expected {self.expected_container_type} of {self.leaf_type}"
        )


class ToolCallError(ABC):
    """An invalid tool invocation."""

    function_name: str

    @property
    @abstractmethod
    def formatted_message(self) -> str:
        """Canonical human-readable message."""

    def to_json(self) -> str:
        """Render as the `{"isError": true, "error": ...}` envelope."""
        return error_envelope(self.formatted_message)

    def __str__(self) -> str:
        return self.formatted_message


@dataclass(frozen=True)
class UnknownFunction(ToolCallError):
    """The model called a tool that is not registered."""

    function_name: str

    @property
    def formatted_message(self) -> str:
        return f"Unknown function: '{self.function_name}'"


@dataclass(frozen=True)
class NullArguments(ToolCallError):
    """The model called a tool without an arguments object."""

    function_name: str

    @property
    def formatted_message(self) -> str:
        return (
            f"Tool call '{self.function_name}' received null arguments - "
            "expected an object with required parameters"
        )


@dataclass(frozen=True)
class InvalidArguments(ToolCallError):
    """
    The arguments object failed validation.

    Parameter errors are rendered one per line in the order given.
    """

    function_name: str
    errors: tuple[ToolParameterError, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def formatted_message(self) -> str:
        lines = [f"Tool call '{self.function_name}' received invalid arguments"]
        lines.extend(f"  - {error.formatted_message}" for error in self.errors)
        return "\n".join(lines)
