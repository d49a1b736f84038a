"""
Console Sink - Write to stdout (or any text stream).
"""

from __future__ import annotations

import sys
from typing import TextIO

from agenttrace.observability.sinks.base import BaseSink


class ConsoleSink(BaseSink):
    """
    Writes output to a text stream.

    The stream is resolved at write time, so a default sink follows
    `sys.stdout` even if it is replaced after construction.

    Example:
        ```python
        sink = ConsoleSink()  # Default: stdout
        sink = ConsoleSink(stream=sys.stderr)

        sink.write("Hello, world!")
        ```
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        auto_newline: bool = True,
    ) -> None:
        """
        Initialize console sink.

        Args:
            stream: Output stream (default: sys.stdout)
            auto_newline: Add newline after each write if not present
        """
        self._stream = stream
        self._auto_newline = auto_newline

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def write(self, output: str) -> None:
        """Write to console stream."""
        if self._auto_newline and not output.endswith("\n"):
            output = output + "\n"
        self.stream.write(output)

    def flush(self) -> None:
        """Flush the console stream."""
        self.stream.flush()
