"""Input types accepted by the tracing helpers.

These are the minimal shapes of the host application's objects that the
tracing convenience methods read from: token usage, completions, and agent
state. Host frameworks either use these directly or adapt their own types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class TokenUsage:
    """Token usage information from model execution.

    Attributes:
        prompt_tokens: Tokens in the prompt/input
        completion_tokens: Tokens in the completion/output
        total_tokens: Sum of prompt and completion tokens
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class EmbeddingUsage:
    """Token usage from an embedding call (no completion side)."""

    prompt_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "prompt_tokens": self.prompt_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by the model.

    Attributes:
        id: Provider-assigned call identifier
        name: Name of the requested tool
        arguments: Raw arguments as sent by the model
    """

    id: str
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AssistantMessage:
    """Assistant message carried by a completion."""

    content: str = ""
    tool_calls: tuple[ToolCall, ...] = ()


@dataclass(frozen=True)
class Completion:
    """A model completion.

    Attributes:
        id: Completion identifier
        message: The assistant message
        model: Model that produced the completion, if known
        usage: Token usage, if reported
    """

    id: str
    message: AssistantMessage
    model: str | None = None
    usage: TokenUsage | None = None


class AgentStatus(Enum):
    """Agent lifecycle states."""

    IN_PROGRESS = "in_progress"
    WAITING_FOR_TOOLS = "waiting_for_tools"
    COMPLETE = "complete"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AgentState:
    """Snapshot of an agent's progress.

    Attributes:
        status: Current lifecycle status
        messages: Conversation messages so far
        logs: Execution log lines
    """

    status: AgentStatus | str
    messages: tuple[Any, ...] = ()
    logs: tuple[str, ...] = ()


class CacheMissReason(Enum):
    """Why a semantic cache lookup did not return a cached response."""

    LOW_SIMILARITY = "low_similarity"
    TTL_EXPIRED = "ttl_expired"
    OPTIONS_MISMATCH = "options_mismatch"
