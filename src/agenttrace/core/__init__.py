"""
Core module - foundational types and utilities for agenttrace.
"""

from agenttrace.core.config import (
    FormatConfig,
    TracingConfig,
    TracingMode,
    load_tracing_config,
)
from agenttrace.core.errors import ConfigError, EmissionError, TraceError
from agenttrace.core.models import (
    AgentState,
    AgentStatus,
    AssistantMessage,
    CacheMissReason,
    Completion,
    EmbeddingUsage,
    TokenUsage,
    ToolCall,
)
from agenttrace.core.result import TraceResult
from agenttrace.core.utils import format_timestamp, now_utc

__all__ = [
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
    # Models
    "AgentState",
    "AgentStatus",
    "AssistantMessage",
    "CacheMissReason",
    "Completion",
    "EmbeddingUsage",
    "TokenUsage",
    "ToolCall",
    # Utilities
    "now_utc",
    "format_timestamp",
]
