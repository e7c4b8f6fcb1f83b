"""Shadow (online evaluation) runs comparing champion and candidate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class ShadowRunStatus(_ValueEnum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETE = "complete"
    ERROR = "error"


class DimensionOutcome(_ValueEnum):
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


@dataclass
class DimensionComparison:
    """Champion vs. candidate on one dimension."""

    dimension: str
    champion_score: float
    candidate_score: float
    outcome: DimensionOutcome
    delta: float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ShadowComparison:
    """Aggregated shadow run comparison report."""

    run_id: UUID
    champion_agent_id: UUID
    candidate_agent_id: UUID
    traffic_fraction: float
    total_requests: int
    champion_aggregate_score: float
    candidate_aggregate_score: float
    aggregate_delta: float
    per_dimension: list[DimensionComparison] = field(default_factory=list)
    candidate_wins: bool = False
    compared_at: datetime = field(default_factory=_utcnow)


@dataclass
class ShadowRun:
    """Persisted configuration of a shadow run."""

    id: UUID
    champion_agent_id: UUID
    candidate_agent_id: UUID
    traffic_percent: int = 10
    status: ShadowRunStatus = ShadowRunStatus.PENDING
    comparison: ShadowComparison | None = None
    error_message: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    started_at: datetime | None = None
    completed_at: datetime | None = None