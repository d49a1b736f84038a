"""
Formatter Protocol - Interface for event formatters.

Formatters transform TraceEvent objects into formatted strings for output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from agenttrace.core.config import FormatConfig
    from agenttrace.observability.events import AnyTraceEvent


class Formatter(Protocol):
    """
    Protocol for event formatters.

    Implement this protocol to create custom formatters.

    Example:
        ```python
        class OneLineFormatter:
            def format(self, event: AnyTraceEvent, config: FormatConfig) -> str:
                return f"{event.event_type} {event.to_dict()}"
        ```
    """

    def format(self, event: AnyTraceEvent, config: FormatConfig) -> str:
        """
        Format an event to a string.

        Args:
            event: Event to format
            config: Formatting configuration

        Returns:
            The rendered block, ready to be written to a sink
        """
        ...
