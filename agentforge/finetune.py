"""Fine-tuning dataset export types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

MIN_TRACES_FOR_EXPORT = 500
"""Minimum number of labeled traces required before export is allowed."""


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class ExportFormat(_ValueEnum):
    """Supported export formats for fine-tuning datasets."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    HUGGINGFACE = "huggingface"

    @classmethod
    def parse(cls, text: str) -> ExportFormat:
        """Return the format named by ``text`` (case-insensitive, ``hf`` allowed)."""
        name = text.lower()
        if name == "hf":
            return cls.HUGGINGFACE
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown export format: {name}") from None


class ExportStatus(_ValueEnum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETE = "complete"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FineTuneExport:
    """Persisted record of a fine-tune export."""

    id: UUID
    run_id: UUID
    format: ExportFormat
    status: ExportStatus = ExportStatus.PENDING
    row_count: int | None = None
    file_path: str | None = None
    error_message: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    completed_at: datetime | None = None