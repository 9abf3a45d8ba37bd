"""Injectable diagnostic event sinks."""

from autoreplay.core.diagnostics.models import DiagnosticLevel, DiagnosticRecord
from autoreplay.core.diagnostics.protocol import EventSink
from autoreplay.core.diagnostics.sinks import LoggingSink, NullSink, RecordingSink

__all__ = [
    "DiagnosticLevel",
    "DiagnosticRecord",
    "EventSink",
    "LoggingSink",
    "NullSink",
    "RecordingSink",
]
