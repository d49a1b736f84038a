"""Sinks - Output destinations for rendered trace blocks."""

from agenttrace.observability.sinks.base import BaseSink, Sink
from agenttrace.observability.sinks.callback import CallbackSink
from agenttrace.observability.sinks.console import ConsoleSink
from agenttrace.observability.sinks.file import FileSink

__all__ = [
    "Sink",
    "BaseSink",
    "ConsoleSink",
    "FileSink",
    "CallbackSink",
]
