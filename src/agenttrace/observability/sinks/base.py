"""
Sink Protocol - Interface for trace output destinations.

Sinks receive a fully rendered event block and write it to their
destination (console, file, callback). A block is always handed over in a
single `write` call.
"""

from __future__ import annotations

from typing import Protocol


class Sink(Protocol):
    """
    Protocol for output sinks.

    Example:
        ```python
        class ListSink:
            def __init__(self) -> None:
                self.blocks: list[str] = []

            def write(self, output: str) -> None:
                self.blocks.append(output)

            def flush(self) -> None:
                pass

            def close(self) -> None:
                pass
        ```
    """

    def write(self, output: str) -> None:
        """
        Write a rendered block to the sink.

        Args:
            output: Pre-formatted string to write
        """
        ...

    def flush(self) -> None:
        """Flush any buffered output. Called after every block."""
        ...

    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class BaseSink:
    """
    Base class for sinks with default implementations.

    Provides no-op implementations for flush and close.
    Subclasses only need to implement write.
    """

    def write(self, output: str) -> None:
        """Write output. Subclasses must implement."""
        raise NotImplementedError

    def flush(self) -> None:
        """Flush buffered output. Default: no-op."""
        pass

    def close(self) -> None:
        """Close and release resources. Default: no-op."""
        pass

    def __enter__(self) -> BaseSink:
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        self.close()
