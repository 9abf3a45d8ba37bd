"""Event sink implementations."""

from __future__ import annotations

import logging
from typing import Any

from autoreplay.core.diagnostics.models import DiagnosticLevel, DiagnosticRecord

_LOG_LEVELS = {
    DiagnosticLevel.DEBUG: logging.DEBUG,
    DiagnosticLevel.INFO: logging.INFO,
    DiagnosticLevel.WARNING: logging.WARNING,
}


class NullSink:
    """Discards every event."""

    def emit(
        self,
        name: str,
        level: DiagnosticLevel = DiagnosticLevel.DEBUG,
        **fields: Any,
    ) -> None:
        return None


class LoggingSink:
    """Forwards events to a stdlib logger.

    Fields travel in ``extra`` so ``StructuredJSONFormatter`` writes them
    into the JSON context.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("autoreplay.diagnostics")

    def emit(
        self,
        name: str,
        level: DiagnosticLevel = DiagnosticLevel.DEBUG,
        **fields: Any,
    ) -> None:
        log_level = _LOG_LEVELS[level]
        if not self._logger.isEnabledFor(log_level):
            return
        self._logger.log(log_level, name, extra={"event": name, "fields": fields})


class RecordingSink:
    """Keeps every event in memory, in emission order."""

    def __init__(self) -> None:
        self.records: list[DiagnosticRecord] = []

    def emit(
        self,
        name: str,
        level: DiagnosticLevel = DiagnosticLevel.DEBUG,
        **fields: Any,
    ) -> None:
        self.records.append(DiagnosticRecord(name=name, level=level, fields=fields))

    def named(self, name: str) -> list[DiagnosticRecord]:
        return [record for record in self.records if record.name == name]

    def clear(self) -> None:
        self.records.clear()
