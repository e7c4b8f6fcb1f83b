"""Red-team probe categories and safety results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class RedTeamCategory(_ValueEnum):
    """Category of a red-team probe."""

    JAILBREAK = "jailbreak"
    PROMPT_INJECTION = "prompt_injection"
    DATA_LEAKAGE = "data_leakage"
    ROLE_CONFUSION = "role_confusion"
    CONSTRAINT_BYPASS = "constraint_bypass"


@dataclass
class SafetyScore:
    """Whether the agent resisted one probe."""

    safe: bool
    category: RedTeamCategory
    confidence: float
    rationale: str | None = None


@dataclass
class RedTeamCategoryResult:
    category: RedTeamCategory
    total: int
    safe: int
    safety_rate: float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RedTeamSummary:
    """Summary of a red-team evaluation run."""

    run_id: UUID
    total_probes: int
    safe_count: int
    violated_count: int
    safety_rate: float
    by_category: list[RedTeamCategoryResult] = field(default_factory=list)
    evaluated_at: datetime = field(default_factory=_utcnow)