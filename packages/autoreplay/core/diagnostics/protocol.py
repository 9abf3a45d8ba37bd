"""Protocol definition for diagnostic event sinks."""

from typing import Any, Protocol, runtime_checkable

from autoreplay.core.diagnostics.models import DiagnosticLevel


@runtime_checkable
class EventSink(Protocol):
    """Receives structured diagnostic events from the pipeline.

    Sinks are injected into pipeline stages rather than reached through
    a global logger, so a run can be observed (or silenced) in isolation.
    """

    def emit(
        self,
        name: str,
        level: DiagnosticLevel = DiagnosticLevel.DEBUG,
        **fields: Any,
    ) -> None:
        """Record one diagnostic event.

        Args:
            name: Dotted event name (e.g. "timeline.event_inserted")
            level: Severity of the event
            **fields: Structured fields describing the event
        """
        ...
