"""
Observability - styled rendering and tracing of agent events.

Quick Start:
    ```python
    from agenttrace.observability import ConsoleTracing
    from agenttrace.observability.events import CacheHit, ToolExecuted

    tracing = ConsoleTracing()
    tracing.emit(CacheHit(similarity=0.8234567, threshold=0.75))
    tracing.emit(ToolExecuted("lookup", '{"q": "x"}', "ok", 5, True))
    ```

JSON lines to a file:
    ```python
    from agenttrace.core import TracingConfig, TracingMode
    from agenttrace.observability import create_tracing

    tracing = create_tracing(
        TracingConfig(mode=TracingMode.JSON, output_path=Path("trace.jsonl"))
    )
    ```
"""

from agenttrace.observability.events import (
    AgentInitialized,
    AgentStateUpdated,
    AnyTraceEvent,
    CacheHit,
    CacheMiss,
    CompletionReceived,
    CostRecorded,
    CustomEvent,
    EmbeddingUsageRecorded,
    ErrorOccurred,
    RAGOperationCompleted,
    TokenUsageRecorded,
    ToolExecuted,
    TraceEvent,
)
from agenttrace.observability.formatters import (
    ConsoleTraceFormatter,
    Formatter,
    JSONTraceFormatter,
)
from agenttrace.observability.formatting import (
    error_envelope,
    escape_json_string,
    format_currency,
    format_ratio,
    truncate,
)
from agenttrace.observability.sinks import (
    BaseSink,
    CallbackSink,
    ConsoleSink,
    FileSink,
    Sink,
)
from agenttrace.observability.style import StyleToken, Styler, strip_style, style
from agenttrace.observability.tracing import (
    BaseTracing,
    ConsoleTracing,
    NoOpTracing,
    Tracing,
    create_tracing,
)

__all__ = [
    # Events
    "TraceEvent",
    "AnyTraceEvent",
    "AgentInitialized",
    "CompletionReceived",
    "ToolExecuted",
    "ErrorOccurred",
    "TokenUsageRecorded",
    "AgentStateUpdated",
    "CustomEvent",
    "EmbeddingUsageRecorded",
    "CostRecorded",
    "CacheHit",
    "CacheMiss",
    "RAGOperationCompleted",
    # Formatters
    "Formatter",
    "ConsoleTraceFormatter",
    "JSONTraceFormatter",
    # Formatting utilities
    "truncate",
    "format_currency",
    "format_ratio",
    "escape_json_string",
    "error_envelope",
    # Style
    "StyleToken",
    "Styler",
    "style",
    "strip_style",
    # Sinks
    "Sink",
    "BaseSink",
    "ConsoleSink",
    "FileSink",
    "CallbackSink",
    # Tracing
    "Tracing",
    "BaseTracing",
    "ConsoleTracing",
    "NoOpTracing",
    "create_tracing",
]
