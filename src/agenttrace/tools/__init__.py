"""Tool-call error taxonomy."""

from agenttrace.tools.errors import (
    InvalidArguments,
    InvalidNesting,
    MissingParameter,
    NullArguments,
    NullParameter,
    ToolCallError,
    ToolParameterError,
    TypeMismatch,
    UnknownFunction,
)

__all__ = [
    "ToolCallError",
    "UnknownFunction",
    "NullArguments",
    "InvalidArguments",
    "ToolParameterError",
    "MissingParameter",
    "NullParameter",
    "TypeMismatch",
    "InvalidNesting",
]
