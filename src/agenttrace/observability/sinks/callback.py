"""
Callback Sink - Hand each rendered block to a function.
"""

from __future__ import annotations

from collections.abc import Callable

from agenttrace.observability.sinks.base import BaseSink


class CallbackSink(BaseSink):
    """
    Passes every rendered block to a callback.

    Handy for routing traces into an application's own logger, a UI panel,
    or a list in tests.

    Example:
        ```python
        blocks: list[str] = []
        tracing = ConsoleTracing(sink=CallbackSink(blocks.append))

        # Or forward to the logging module
        trace_log = logging.getLogger("myapp.trace")
        sink = CallbackSink(lambda block: trace_log.info(block.strip()))
        ```
    """

    def __init__(
        self,
        callback: Callable[[str], None],
        *,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        """
        Initialize callback sink.

        Args:
            callback: Called once per rendered block
            on_close: Optional function called when the sink is closed
        """
        self._callback = callback
        self._on_close = on_close

    def write(self, output: str) -> None:
        self._callback(output)

    def close(self) -> None:
        if self._on_close:
            self._on_close()
