"""Diagnostic output."""

from .sink import (
    DiagnosticSink,
    MemorySink,
    NullSink,
    RichSink,
    SinkRecord,
    get_default_sink,
    set_default_sink,
    sink_from_config,
)

__all__ = [
    "DiagnosticSink",
    "MemorySink",
    "NullSink",
    "RichSink",
    "SinkRecord",
    "get_default_sink",
    "set_default_sink",
    "sink_from_config",
]
