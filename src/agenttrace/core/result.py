"""Result type returned by tracing operations.

Tracing never raises on emission failures. Instead every call returns a
TraceResult that callers may inspect, log, unwrap, or ignore.

Example:
    ```python
    result = tracing.emit(CacheHit(similarity=0.91, threshold=0.8))
    if not result.ok:
        print(f"trace failed: {result.error}")

    tracing.emit(event).unwrap()  # Raises EmissionError on failure
    ```
"""

from __future__ import annotations

from dataclasses import dataclass

from agenttrace.core.errors import TraceError


@dataclass(frozen=True, slots=True)
class TraceResult:
    """Outcome of a single tracing call.

    Attributes:
        error: The failure, or None when the call succeeded
    """

    error: TraceError | None = None

    @property
    def ok(self) -> bool:
        """Whether the call succeeded."""
        return self.error is None

    def unwrap(self) -> None:
        """Raise the stored error, if any."""
        if self.error is not None:
            raise self.error

    @classmethod
    def success(cls) -> TraceResult:
        return _SUCCESS

    @classmethod
    def failure(cls, error: TraceError) -> TraceResult:
        return cls(error=error)


_SUCCESS = TraceResult()
