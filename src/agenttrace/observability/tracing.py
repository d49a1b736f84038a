"""
Tracing - Main entry point for emitting trace events.

A tracing implementation accepts one event at a time, renders it with a
formatter, and writes the whole block to a sink before returning. Failures
never propagate: every call returns a TraceResult.

Example:
    ```python
    from agenttrace.observability import ConsoleTracing
    from agenttrace.observability.events import AgentInitialized

    tracing = ConsoleTracing()
    tracing.emit(AgentInitialized("What's the weather?", ["get_weather"]))
    tracing.trace_token_usage(TokenUsage(100, 50, 150), "gpt-4o", "completion")

    result = tracing.trace_error(ValueError("boom"), "tool execution")
    if not result.ok:
        ...
    ```

Thread safety: each block is written with a single `write` call, so a
thread-safe stream never interleaves lines of one event with another.
Callers that need events from several threads in a particular order must
serialize their `emit` calls themselves.
"""

from __future__ import annotations

import fnmatch
import logging
from typing import TYPE_CHECKING, Any, Protocol

from agenttrace.core.config import (
    TracingConfig,
    TracingMode,
    load_tracing_config,
)
from agenttrace.core.errors import EmissionError
from agenttrace.core.result import TraceResult
from agenttrace.observability.events import (
    AgentStateUpdated,
    CompletionReceived,
    CostRecorded,
    CustomEvent,
    EmbeddingUsageRecorded,
    ErrorOccurred,
    RAGOperationCompleted,
    TokenUsageRecorded,
    ToolExecuted,
)
from agenttrace.observability.formatters.console import ConsoleTraceFormatter
from agenttrace.observability.formatters.json import JSONTraceFormatter
from agenttrace.observability.sinks.console import ConsoleSink
from agenttrace.observability.sinks.file import FileSink

if TYPE_CHECKING:
    from agenttrace.core.models import (
        AgentState,
        Completion,
        EmbeddingUsage,
        TokenUsage,
    )
    from agenttrace.observability.events import AnyTraceEvent
    from agenttrace.observability.formatters.base import Formatter
    from agenttrace.observability.sinks.base import Sink

logger = logging.getLogger(__name__)


class Tracing(Protocol):
    """Interface shared by all tracing implementations."""

    def emit(self, event: AnyTraceEvent) -> TraceResult:
        """Render and write one event."""
        ...

    def trace_agent_state(self, state: AgentState) -> TraceResult: ...

    def trace_tool_call(self, tool_name: str, input: str, output: str) -> TraceResult: ...

    def trace_error(self, error: BaseException, context: str = "") -> TraceResult: ...

    def trace_completion(self, completion: Completion, model: str) -> TraceResult: ...

    def trace_token_usage(
        self, usage: TokenUsage, model: str, operation: str
    ) -> TraceResult: ...


class BaseTracing:
    """
    Base class providing the convenience helpers.

    Helpers only build an event from looser inputs and delegate to `emit`.
    Subclasses implement `emit`.
    """

    def emit(self, event: AnyTraceEvent) -> TraceResult:
        raise NotImplementedError

    # === Convenience helpers ===

    def trace_agent_state(self, state: AgentState) -> TraceResult:
        return self.emit(
            AgentStateUpdated(
                status=str(state.status),
                message_count=len(state.messages),
                log_count=len(state.logs),
            )
        )

    def trace_tool_call(
        self,
        tool_name: str,
        input: str,
        output: str,
        *,
        duration: int = 0,
        success: bool = True,
    ) -> TraceResult:
        return self.emit(ToolExecuted(tool_name, input, output, duration, success))

    def trace_error(self, error: BaseException, context: str = "") -> TraceResult:
        return self.emit(ErrorOccurred(error, context))

    def trace_completion(self, completion: Completion, model: str) -> TraceResult:
        return self.emit(
            CompletionReceived(
                id=completion.id,
                model=model,
                tool_calls=len(completion.message.tool_calls),
                content=completion.message.content or "",
            )
        )

    def trace_token_usage(
        self, usage: TokenUsage, model: str, operation: str
    ) -> TraceResult:
        return self.emit(TokenUsageRecorded(usage, model, operation))

    def trace_embedding_usage(
        self, usage: EmbeddingUsage, model: str, operation: str, input_count: int
    ) -> TraceResult:
        return self.emit(EmbeddingUsageRecorded(usage, model, operation, input_count))

    def trace_cost(
        self,
        cost_usd: float,
        model: str,
        operation: str,
        token_count: int,
        cost_type: str,
    ) -> TraceResult:
        return self.emit(CostRecorded(cost_usd, model, operation, token_count, cost_type))

    def trace_rag_operation(
        self,
        operation: str,
        duration_ms: int,
        *,
        embedding_tokens: int | None = None,
        llm_prompt_tokens: int | None = None,
        llm_completion_tokens: int | None = None,
        total_cost_usd: float | None = None,
    ) -> TraceResult:
        return self.emit(
            RAGOperationCompleted(
                operation,
                duration_ms,
                embedding_tokens=embedding_tokens,
                llm_prompt_tokens=llm_prompt_tokens,
                llm_completion_tokens=llm_completion_tokens,
                total_cost_usd=total_cost_usd,
            )
        )

    def trace_custom(self, name: str, **data: Any) -> TraceResult:
        return self.emit(CustomEvent(name, data))

    # === Lifecycle ===

    def close(self) -> None:
        pass

    def __enter__(self) -> BaseTracing:
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        self.close()


class ConsoleTracing(BaseTracing):
    """
    Renders events with a formatter and writes them to a sink.

    Defaults to colored console blocks on stdout. Pass a JSONTraceFormatter
    for machine-readable output, or a FileSink / CallbackSink to redirect.
    """

    def __init__(
        self,
        sink: Sink | None = None,
        formatter: Formatter | None = None,
        config: TracingConfig | None = None,
    ) -> None:
        """
        Initialize console tracing.

        Args:
            sink: Output destination (default: stdout)
            formatter: Event formatter (default: ConsoleTraceFormatter)
            config: Formatting and filter settings
        """
        self._config = config or TracingConfig()
        self._sink = sink or ConsoleSink()
        self._formatter = formatter or ConsoleTraceFormatter()

    @property
    def config(self) -> TracingConfig:
        return self._config

    @property
    def sink(self) -> Sink:
        return self._sink

    def emit(self, event: AnyTraceEvent) -> TraceResult:
        """
        Render and write one event.

        The block is fully rendered before anything is written, then written
        with a single call and flushed.

        Returns:
            Success, or a failure wrapping the formatting/write exception
        """
        event_type = getattr(event, "event_type", type(event).__name__)
        try:
            if not self._should_include(event_type):
                logger.debug("Filtered trace event %s", event_type)
                return TraceResult.success()

            output = self._formatter.format(event, self._config.format)
            self._sink.write(output)
            self._sink.flush()
        except Exception as e:
            logger.warning("Failed to emit %s trace event: %s", event_type, e)
            return TraceResult.failure(EmissionError.from_exception(e))
        return TraceResult.success()

    def close(self) -> None:
        self._sink.close()

    def _should_include(self, event_type: str) -> bool:
        """Check if event passes include/exclude filters."""
        if self._config.include and not any(
            fnmatch.fnmatch(event_type, p) for p in self._config.include
        ):
            return False

        if self._config.exclude and any(
            fnmatch.fnmatch(event_type, p) for p in self._config.exclude
        ):
            return False

        return True


class NoOpTracing(BaseTracing):
    """Accepts every event and writes nothing."""

    def emit(self, event: AnyTraceEvent) -> TraceResult:
        return TraceResult.success()


def create_tracing(config: TracingConfig | None = None) -> BaseTracing:
    """
    Build a tracing implementation from configuration.

    Args:
        config: Resolved config; loaded from env/files when omitted

    Returns:
        NoOpTracing for noop mode, otherwise a ConsoleTracing writing console
        blocks or JSON lines to stdout or the configured file
    """
    if config is None:
        config = load_tracing_config()

    if config.mode is TracingMode.NOOP:
        return NoOpTracing()

    sink: Sink = FileSink(config.output_path) if config.output_path else ConsoleSink()
    formatter: Formatter = (
        JSONTraceFormatter() if config.mode is TracingMode.JSON else ConsoleTraceFormatter()
    )
    logger.debug("Created %s tracing writing to %s", config.mode.value, type(sink).__name__)
    return ConsoleTracing(sink=sink, formatter=formatter, config=config)
