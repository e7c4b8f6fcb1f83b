"""Public benchmark suites, tasks, results and published baselines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class BenchmarkSuite(_ValueEnum):
    GAIA = "gaia"
    AGENT_BENCH = "agentbench"
    WEB_ARENA = "webarena"


@dataclass
class BenchmarkTask:
    """A single task loaded from a benchmark dataset."""

    id: str
    suite: BenchmarkSuite
    question: str
    difficulty_level: int | None = None
    expected_answer: str | None = None
    context_files: list[str] = field(default_factory=list)


@dataclass
class BenchmarkResult:
    """Result of running an agent on one benchmark task."""

    task_id: str
    suite: BenchmarkSuite
    agent_answer: str | None
    correct: bool
    score: float
    latency_ms: int = 0
    token_cost_usd: float = 0.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class BenchmarkRun:
    """Aggregated benchmark run of an agent against one suite."""

    id: UUID
    agent_id: UUID
    suite: BenchmarkSuite
    total_tasks: int = 0
    correct: int = 0
    accuracy: float = 0.0
    percentile_rank: float | None = None
    results: list[BenchmarkResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=_utcnow)
    completed_at: datetime | None = None


@dataclass(frozen=True)
class BenchmarkBaseline:
    """Published baseline accuracy of a reference model."""

    suite: BenchmarkSuite
    model_name: str
    accuracy: float


def published_baselines() -> list[BenchmarkBaseline]:
    """Return the published baselines used for percentile ranking."""
    return [
        BenchmarkBaseline(BenchmarkSuite.GAIA, "GPT-4o (OpenAI, 2025)", 0.53),
        BenchmarkBaseline(BenchmarkSuite.GAIA, "Claude 3.5 Sonnet (Anthropic, 2025)", 0.49),
        BenchmarkBaseline(BenchmarkSuite.AGENT_BENCH, "GPT-4 (OpenAI, 2024)", 0.45),
        BenchmarkBaseline(BenchmarkSuite.WEB_ARENA, "GPT-4o (OpenAI, 2025)", 0.39),
    ]