"""Data models for diagnostic events."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DiagnosticLevel(str, Enum):
    """Diagnostic level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"


class DiagnosticRecord(BaseModel):
    """One diagnostic event captured by a sink."""

    name: str
    level: DiagnosticLevel = DiagnosticLevel.DEBUG
    fields: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
