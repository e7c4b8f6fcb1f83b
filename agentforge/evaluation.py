"""Evaluation runs, dimension scores and scorecards."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class EvalRunStatus(_ValueEnum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETE = "complete"
    ERROR = "error"
    CANCELLED = "cancelled"


class FailureCluster(_ValueEnum):
    """Root cause categories for trace failures."""

    WRONG_TOOL = "wrong_tool"
    HALLUCINATED_ARGUMENT = "hallucinated_argument"
    LOOPING = "looping"
    PREMATURE_STOP = "premature_stop"
    SCHEMA_VIOLATION = "schema_violation"
    CONSTRAINT_BREACH = "constraint_breach"
    NO_FAILURE = "no_failure"
    UNKNOWN = "unknown"


class ScoringMethod(_ValueEnum):
    DETERMINISTIC = "deterministic"
    LLM_JUDGE = "llm_judge"
    HYBRID = "hybrid"
    HEURISTIC = "heuristic"


@dataclass
class EvalWeights:
    """Weights of the six evaluation dimensions."""

    task_completion: float = 0.35
    tool_selection: float = 0.20
    argument_correctness: float = 0.20
    schema_compliance: float = 0.15
    instruction_adherence: float = 0.07
    path_efficiency: float = 0.03

    def validate(self) -> bool:
        """Return whether the weights sum to 1.0 within 0.001."""
        total = sum(getattr(self, f.name) for f in fields(self))
        return abs(total - 1.0) < 0.001


@dataclass
class DimensionScores:
    """Per-dimension score breakdown."""

    task_completion: float = 0.0
    tool_selection: float = 0.0
    argument_correctness: float = 0.0
    schema_compliance: float = 0.0
    instruction_adherence: float = 0.0
    path_efficiency: float = 0.0

    def weighted_aggregate(self, weights: EvalWeights) -> float:
        """Return the weighted sum of all dimension scores."""
        return sum(getattr(self, f.name) * getattr(weights, f.name) for f in fields(self))


@dataclass
class FailureClusterSummary:
    cluster: FailureCluster
    count: int
    percentage: float
    sample_scenarios: list[UUID] = field(default_factory=list)


@dataclass
class DimensionScore:
    """Score for a single dimension with its confidence."""

    value: float = 0.0
    confidence: float = 1.0
    method: ScoringMethod = ScoringMethod.DETERMINISTIC
    rationale: str | None = None


@dataclass
class Scorecard:
    """Aggregated scoring result of a full evaluation run."""

    run_id: UUID
    agent_id: UUID
    agent_name: str
    agent_version: str
    aggregate_score: float
    pass_rate: float
    total_scenarios: int
    passed: int
    failed: int
    errors: int
    review_needed: int
    dimension_scores: DimensionScores
    failure_clusters: list[FailureClusterSummary] = field(default_factory=list)
    duration_seconds: int = 0
    total_input_tokens: int = 0
    total_output_tokens: int = 0


@dataclass
class DimensionDeltas:
    task_completion: float
    tool_selection: float
    argument_correctness: float
    schema_compliance: float
    instruction_adherence: float
    path_efficiency: float


@dataclass
class ScorecardDiff:
    """Score changes between two agent versions."""

    version_a: str
    version_b: str
    aggregate_score_delta: float
    pass_rate_delta: float
    dimension_deltas: DimensionDeltas
    regression_count: int
    improvement_count: int
    neutral_count: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EvalRun:
    """An evaluation run of an agent version against a scenario set."""

    id: UUID
    agent_id: UUID
    scenario_set_id: UUID | None = None
    status: EvalRunStatus = EvalRunStatus.PENDING
    scenario_count: int = 0
    completed_count: int = 0
    error_count: int = 0
    aggregate_score: float | None = None
    pass_rate: float | None = None
    scores: DimensionScores | None = None
    failure_clusters: list[FailureClusterSummary] | None = None
    seed: int = 0
    concurrency: int = 0
    error_message: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def to_scorecard(self) -> Scorecard | None:
        """Build a scorecard, or return None if the run has no scores yet."""
        if self.scores is None or self.aggregate_score is None or self.pass_rate is None:
            return None
        duration = 0
        if self.completed_at is not None and self.started_at is not None:
            duration = max(0, int((self.completed_at - self.started_at).total_seconds()))
        return Scorecard(
            run_id=self.id,
            agent_id=self.agent_id,
            agent_name="",
            agent_version="",
            aggregate_score=self.aggregate_score,
            pass_rate=self.pass_rate,
            total_scenarios=self.scenario_count,
            passed=max(0, int(self.pass_rate * self.scenario_count)),
            failed=self.error_count,
            errors=0,
            review_needed=0,
            dimension_scores=DimensionScores(
                **{f.name: getattr(self.scores, f.name) for f in fields(self.scores)}
            ),
            failure_clusters=list(self.failure_clusters or []),
            duration_seconds=duration,
            total_input_tokens=0,
            total_output_tokens=0,
        )


@dataclass
class EvalRunRequest:
    """Request to start a new evaluation run."""

    agent_id: UUID
    scenario_count: int | None = None
    concurrency: int | None = None
    seed: int | None = None
    weights: EvalWeights | None = None