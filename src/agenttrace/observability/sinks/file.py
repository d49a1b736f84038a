"""
File Sink - Append trace blocks to a local file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from agenttrace.observability.sinks.base import BaseSink


class FileSink(BaseSink):
    """
    Appends rendered blocks to a trace file.

    The file is opened on the first write, so constructing a sink for a
    trace that never fires leaves no empty file behind. Parent directories
    are created as needed.

    Example:
        ```python
        with FileSink("logs/trace.jsonl") as sink:
            tracing = ConsoleTracing(sink=sink, formatter=JSONTraceFormatter())
            tracing.emit(CacheMiss(CacheMissReason.TTL_EXPIRED))
        ```
    """

    def __init__(
        self,
        path: str | Path,
        *,
        mode: str = "a",
        encoding: str = "utf-8",
    ) -> None:
        """
        Initialize file sink.

        Args:
            path: File to write to
            mode: 'a' to append, 'w' to truncate on first write
            encoding: File encoding
        """
        self._path = Path(path)
        self._mode = mode
        self._encoding = encoding
        self._file: TextIO | None = None

    def _open(self) -> TextIO:
        if self._file is None or self._file.closed:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(  # noqa: SIM115 - persistent handle, closed in close()
                self._path, mode=self._mode, encoding=self._encoding
            )
            # Reopening after close must not wipe earlier blocks.
            self._mode = "a"
        return self._file

    def write(self, output: str) -> None:
        if not output.endswith("\n"):
            output = output + "\n"
        self._open().write(output)

    def flush(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.flush()
            self._file.close()

    @property
    def path(self) -> Path:
        """Path to the trace file."""
        return self._path
