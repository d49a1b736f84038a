"""
agenttrace - structured event tracing for agent and tool-calling systems.

Renders typed trace events and tool-call errors as colored console blocks or
JSON, with fixed truncation, numeric precision, and escaping rules.

    ```python
    from agenttrace import ConsoleTracing, UnknownFunction
    from agenttrace.observability.events import CacheHit

    tracing = ConsoleTracing()
    tracing.emit(CacheHit(similarity=0.91, threshold=0.8))

    print(UnknownFunction("calculate_tax").to_json())
    # {"isError": true, "error": "Unknown function: 'calculate_tax'"}
    ```
"""

from agenttrace.core import (
    ConfigError,
    EmissionError,
    FormatConfig,
    TraceError,
    TraceResult,
    TracingConfig,
    TracingMode,
    load_tracing_config,
)
from agenttrace.observability import (
    ConsoleTracing,
    NoOpTracing,
    Tracing,
    create_tracing,
)
from agenttrace.tools import (
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

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Tracing
    "Tracing",
    "ConsoleTracing",
    "NoOpTracing",
    "create_tracing",
    # Config
    "FormatConfig",
    "TracingConfig",
    "TracingMode",
    "load_tracing_config",
    # Errors
    "TraceError",
    "EmissionError",
    "ConfigError",
    "TraceResult",
    # Tool-call errors
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
