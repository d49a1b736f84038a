"""
Console Formatter - Human-readable trace blocks.

Every event renders to one block: a blank line, a header, one
`Label: value` line per field, and a trailing blank line. Significant
events (completions, errors) get a full-width header; everything else gets
a lightweight sub-header.

    --- CACHE HIT ---
    Timestamp: 2024-05-01T12:30:00+00:00
    Similarity: 0.8235
    Threshold: 0.7500
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, assert_never

from agenttrace.core.utils import format_timestamp
from agenttrace.observability.events import (
    AgentInitialized,
    AgentStateUpdated,
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
)
from agenttrace.observability.formatting import (
    format_currency,
    format_ratio,
    truncate,
)
from agenttrace.observability.style import Styler

if TYPE_CHECKING:
    from agenttrace.core.config import FormatConfig
    from agenttrace.observability.events import AnyTraceEvent


class ConsoleTraceFormatter:
    """Formats trace events as colored console blocks."""

    def format(self, event: AnyTraceEvent, config: FormatConfig) -> str:
        s = Styler(config.use_colors)
        title, significant, fields = self._describe(event, config)

        if significant:
            rule = "=" * config.header_width
            paint = s.error if isinstance(event, ErrorOccurred) else s.header
            header = [rule, paint(title), rule]
        else:
            header = [s.sub_header(f"--- {title} ---")]

        lines = ["", *header, f"Timestamp: {format_timestamp(event.timestamp)}"]
        lines.extend(f"{label}: {value}" for label, value in fields)
        lines.append("")
        return "\n".join(lines) + "\n"

    def _describe(
        self, event: AnyTraceEvent, config: FormatConfig
    ) -> tuple[str, bool, list[tuple[str, object]]]:
        """Return (title, uses full header, field lines) for an event."""
        match event:
            case AgentInitialized():
                return "AGENT INITIALIZED", False, [
                    ("Query", event.query),
                    ("Tools", ", ".join(event.tools)),
                ]

            case CompletionReceived():
                return "COMPLETION RECEIVED", True, [
                    ("Model", event.model),
                    ("ID", event.id),
                    ("Tool Calls", event.tool_calls),
                    ("Content", truncate(event.content, config.content_limit)),
                ]

            case ToolExecuted():
                return "TOOL EXECUTED", False, [
                    ("Tool", event.name),
                    ("Success", event.success),
                    ("Duration", f"{event.duration}ms"),
                    ("Input", truncate(event.input, config.tool_io_limit)),
                    ("Output", truncate(event.output, config.tool_io_limit)),
                ]

            case ErrorOccurred():
                return "ERROR OCCURRED", True, [
                    ("Type", event.error_type),
                    ("Message", event.error_message),
                    ("Context", event.context),
                ]

            case TokenUsageRecorded():
                return "TOKEN USAGE", False, [
                    ("Model", event.model),
                    ("Operation", event.operation),
                    ("Prompt Tokens", event.usage.prompt_tokens),
                    ("Completion Tokens", event.usage.completion_tokens),
                    ("Total Tokens", event.usage.total_tokens),
                ]

            case AgentStateUpdated():
                return "AGENT STATE UPDATED", False, [
                    ("Status", event.status),
                    ("Messages", event.message_count),
                    ("Logs", event.log_count),
                ]

            case CustomEvent():
                return "CUSTOM EVENT", False, [
                    ("Name", event.name),
                    ("Data", json.dumps(dict(event.data), default=str)),
                ]

            case EmbeddingUsageRecorded():
                return "EMBEDDING USAGE", False, [
                    ("Model", event.model),
                    ("Operation", event.operation),
                    ("Input Count", event.input_count),
                    ("Prompt Tokens", event.usage.prompt_tokens),
                    ("Total Tokens", event.usage.total_tokens),
                ]

            case CostRecorded():
                return "COST RECORDED", False, [
                    ("Model", event.model),
                    ("Operation", event.operation),
                    ("Token Count", event.token_count),
                    ("Cost Type", event.cost_type),
                    ("Cost (USD)", f"${format_currency(event.cost_usd)}"),
                ]

            case CacheHit():
                return "CACHE HIT", False, [
                    ("Similarity", format_ratio(event.similarity)),
                    ("Threshold", format_ratio(event.threshold)),
                ]

            case CacheMiss():
                return "CACHE MISS", False, [("Reason", event.reason.value)]

            case RAGOperationCompleted():
                fields: list[tuple[str, object]] = [
                    ("Operation", event.operation),
                    ("Duration", f"{event.duration_ms}ms"),
                ]
                if event.embedding_tokens is not None:
                    fields.append(("Embedding Tokens", event.embedding_tokens))
                if event.llm_prompt_tokens is not None:
                    fields.append(("LLM Prompt Tokens", event.llm_prompt_tokens))
                if event.llm_completion_tokens is not None:
                    fields.append(
                        ("LLM Completion Tokens", event.llm_completion_tokens)
                    )
                if event.total_cost_usd is not None:
                    fields.append(
                        ("Total Cost (USD)", f"${format_currency(event.total_cost_usd)}")
                    )
                return "RAG OPERATION COMPLETED", False, fields

            case _:
                assert_never(event)
