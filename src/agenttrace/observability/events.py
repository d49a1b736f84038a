"""
Trace events - immutable records of agent lifecycle moments.

Each variant is a frozen dataclass with typed fields. All variants share a
keyword-only, UTC `timestamp` that defaults to the moment of construction,
a stable snake-case `event_type`, and `to_dict()` for machine-readable output.

Example:
    ```python
    from agenttrace.observability.events import CacheHit, ToolExecuted

    event = ToolExecuted("lookup", input='{"q": "x"}', output="ok", duration=5, success=True)
    print(event.event_type)   # "tool_executed"
    print(event.to_dict())    # {"event_type": "tool_executed", "timestamp": ..., ...}
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, ClassVar

from agenttrace.core.models import CacheMissReason, EmbeddingUsage, TokenUsage
from agenttrace.core.utils import format_timestamp, now_utc


@dataclass(frozen=True, slots=True, kw_only=True)
class TraceEvent:
    """
    Base class for trace events.

    Attributes:
        timestamp: When the event occurred (UTC)
    """

    event_type: ClassVar[str] = "trace_event"

    timestamp: datetime = field(default_factory=now_utc)

    def payload(self) -> dict[str, Any]:
        """Variant-specific fields as JSON-safe values."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": self.event_type,
            "timestamp": format_timestamp(self.timestamp),
            **self.payload(),
        }


@dataclass(frozen=True, slots=True)
class AgentInitialized(TraceEvent):
    """An agent was created for a query with a set of tools."""

    event_type: ClassVar[str] = "agent_initialized"

    query: str
    tools: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        tools = (self.tools,) if isinstance(self.tools, str) else tuple(self.tools)
        object.__setattr__(self, "tools", tools)

    def payload(self) -> dict[str, Any]:
        return {"query": self.query, "tools": list(self.tools)}


@dataclass(frozen=True, slots=True)
class CompletionReceived(TraceEvent):
    """The model returned a completion."""

    event_type: ClassVar[str] = "completion_received"

    id: str
    model: str
    tool_calls: int
    content: str

    def payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "model": self.model,
            "tool_calls": self.tool_calls,
            "content": self.content,
        }


@dataclass(frozen=True, slots=True)
class ToolExecuted(TraceEvent):
    """
    A tool ran.

    Attributes:
        name: Tool name
        input: Serialized tool input
        output: Serialized tool output
        duration: Execution time in milliseconds
        success: Whether the tool succeeded
    """

    event_type: ClassVar[str] = "tool_executed"

    name: str
    input: str
    output: str
    duration: int
    success: bool

    def payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "input": self.input,
            "output": self.output,
            "duration": self.duration,
            "success": self.success,
        }


@dataclass(frozen=True, slots=True)
class ErrorOccurred(TraceEvent):
    """An exception was raised somewhere in the agent run."""

    event_type: ClassVar[str] = "error_occurred"

    error: BaseException
    context: str

    @property
    def error_type(self) -> str:
        return type(self.error).__name__

    @property
    def error_message(self) -> str:
        return str(self.error)

    def payload(self) -> dict[str, Any]:
        return {
            "error_type": self.error_type,
            "error_message": self.error_message,
            "context": self.context,
        }


@dataclass(frozen=True, slots=True)
class TokenUsageRecorded(TraceEvent):
    """Token usage reported for a model call."""

    event_type: ClassVar[str] = "token_usage_recorded"

    usage: TokenUsage
    model: str
    operation: str

    def payload(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "operation": self.operation,
            **self.usage.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class AgentStateUpdated(TraceEvent):
    """The agent's status or conversation changed."""

    event_type: ClassVar[str] = "agent_state_updated"

    status: str
    message_count: int
    log_count: int

    def payload(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "message_count": self.message_count,
            "log_count": self.log_count,
        }


@dataclass(frozen=True, slots=True)
class CustomEvent(TraceEvent):
    """Application-defined event with free-form data."""

    event_type: ClassVar[str] = "custom_event"

    name: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def payload(self) -> dict[str, Any]:
        return {"name": self.name, "data": dict(self.data)}


@dataclass(frozen=True, slots=True)
class EmbeddingUsageRecorded(TraceEvent):
    """Token usage reported for an embedding call."""

    event_type: ClassVar[str] = "embedding_usage_recorded"

    usage: EmbeddingUsage
    model: str
    operation: str
    input_count: int

    def payload(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "operation": self.operation,
            "input_count": self.input_count,
            **self.usage.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class CostRecorded(TraceEvent):
    """Estimated cost of an operation in USD."""

    event_type: ClassVar[str] = "cost_recorded"

    cost_usd: float
    model: str
    operation: str
    token_count: int
    cost_type: str

    def payload(self) -> dict[str, Any]:
        return {
            "cost_usd": self.cost_usd,
            "model": self.model,
            "operation": self.operation,
            "token_count": self.token_count,
            "cost_type": self.cost_type,
        }


@dataclass(frozen=True, slots=True)
class CacheHit(TraceEvent):
    """A semantic cache lookup returned a cached response."""

    event_type: ClassVar[str] = "cache_hit"

    similarity: float
    threshold: float

    def payload(self) -> dict[str, Any]:
        return {"similarity": self.similarity, "threshold": self.threshold}


@dataclass(frozen=True, slots=True)
class CacheMiss(TraceEvent):
    """A semantic cache lookup fell through to the model."""

    event_type: ClassVar[str] = "cache_miss"

    reason: CacheMissReason

    def payload(self) -> dict[str, Any]:
        return {"reason": self.reason.value}


@dataclass(frozen=True, slots=True)
class RAGOperationCompleted(TraceEvent):
    """
    A retrieval-augmented generation step finished.

    Token and cost fields are optional; absent values are left out of both
    the console block and `to_dict()`.
    """

    event_type: ClassVar[str] = "rag_operation_completed"

    operation: str
    duration_ms: int
    embedding_tokens: int | None = None
    llm_prompt_tokens: int | None = None
    llm_completion_tokens: int | None = None
    total_cost_usd: float | None = None

    def payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "operation": self.operation,
            "duration_ms": self.duration_ms,
        }
        optional = {
            "embedding_tokens": self.embedding_tokens,
            "llm_prompt_tokens": self.llm_prompt_tokens,
            "llm_completion_tokens": self.llm_completion_tokens,
            "total_cost_usd": self.total_cost_usd,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


AnyTraceEvent = (
    AgentInitialized
    | CompletionReceived
    | ToolExecuted
    | ErrorOccurred
    | TokenUsageRecorded
    | AgentStateUpdated
    | CustomEvent
    | EmbeddingUsageRecorded
    | CostRecorded
    | CacheHit
    | CacheMiss
    | RAGOperationCompleted
)
"""Closed union of every event variant the formatters render."""
