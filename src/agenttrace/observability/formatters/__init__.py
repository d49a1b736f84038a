"""Formatters - Transform trace events into output strings."""

from agenttrace.observability.formatters.base import Formatter
from agenttrace.observability.formatters.console import ConsoleTraceFormatter
from agenttrace.observability.formatters.json import JSONTraceFormatter

__all__ = [
    "Formatter",
    "ConsoleTraceFormatter",
    "JSONTraceFormatter",
]
