"""Exceptions raised (or returned) by agenttrace."""

from __future__ import annotations


class TraceError(Exception):
    """Base class for all agenttrace errors."""


class EmissionError(TraceError):
    """Raised when an event could not be rendered or written to its sink.

    Attributes:
        message: Human-readable description of the failure
        cause: The original exception, if any
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """Initialize EmissionError.

        Args:
            message: Error message
            cause: The underlying exception
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    @classmethod
    def from_exception(cls, exc: BaseException) -> EmissionError:
        """Wrap an arbitrary exception, keeping its message."""
        return cls(str(exc) or type(exc).__name__, cause=exc)


class ConfigError(TraceError, ValueError):
    """Raised for invalid tracing configuration values."""
