"""
JSON Formatter - Structured JSON output for trace events.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agenttrace.core.config import FormatConfig
    from agenttrace.observability.events import AnyTraceEvent


class JSONTraceFormatter:
    """
    Formats events as JSON lines.

    Produces one JSON object per event (`event.to_dict()`), suitable for log
    aggregation and analysis tools. Styling settings are ignored.
    """

    def __init__(self, pretty: bool = False) -> None:
        """
        Initialize JSON formatter.

        Args:
            pretty: If True, output indented JSON (one event per multiple lines)
        """
        self.pretty = pretty

    def format(self, event: AnyTraceEvent, config: FormatConfig) -> str:
        """Format event as JSON."""
        obj = event.to_dict()
        if self.pretty:
            return json.dumps(obj, indent=2, default=str) + "\n"
        return json.dumps(obj, default=str) + "\n"
