"""Turn benchmark tasks into scenarios and score agent answers against them."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from uuid import UUID

from ..benchmark import BenchmarkResult, BenchmarkSuite, BenchmarkTask, published_baselines
from ..scenario import (
    DifficultyTier,
    Scenario,
    ScenarioExpected,
    ScenarioInput,
    ScenarioSource,
)

_DIFFICULTY_BY_LEVEL = {
    1: DifficultyTier.EASY,
    2: DifficultyTier.MEDIUM,
    3: DifficultyTier.HARD,
}


def to_scenarios(tasks: Iterable[BenchmarkTask], agent_id: UUID) -> list[Scenario]:
    """Convert benchmark tasks into scenarios for the given agent."""
    return [_task_to_scenario(task, agent_id) for task in tasks]


def percentile_rank(suite: BenchmarkSuite, agent_accuracy: float) -> float | None:
    """Return the agent's percentile among the suite's published baselines.

    Returns None when the suite has no published baselines.
    """
    baselines = [b for b in published_baselines() if b.suite == suite]
    if not baselines:
        return None
    below = sum(1 for b in baselines if agent_accuracy > b.accuracy)
    percentile = below / len(baselines) * 100.0
    return min(max(percentile, 0.0), 100.0)


def assess_result(task: BenchmarkTask, agent_answer: str) -> BenchmarkResult:
    """Judge an answer by case-insensitive substring match on the expected answer."""
    expected = task.expected_answer
    correct = expected is not None and expected.lower() in agent_answer.lower()
    return BenchmarkResult(
        task_id=task.id,
        suite=task.suite,
        agent_answer=agent_answer,
        correct=correct,
        score=1.0 if correct else 0.0,
        latency_ms=0,
        token_cost_usd=0.0,
    )


def _task_to_scenario(task: BenchmarkTask, agent_id: UUID) -> Scenario:
    difficulty = _DIFFICULTY_BY_LEVEL.get(task.difficulty_level, DifficultyTier.MEDIUM)
    context = {"context_files": list(task.context_files)} if task.context_files else None
    if task.expected_answer is not None:
        criteria = f"The final answer must contain: {task.expected_answer}"
    else:
        criteria = "Agent completes the task."
    suite_name = str(task.suite)
    return Scenario(
        id=uuid.uuid5(uuid.NAMESPACE_DNS, task.id),
        agent_id=agent_id,
        input=ScenarioInput(
            user_message=task.question,
            conversation_history=[],
            context=context,
        ),
        expected=ScenarioExpected(
            pass_criteria=criteria,
            tool_calls=[],
            output_schema=None,
            min_turns=None,
            max_turns=10,
        ),
        difficulty=difficulty,
        source=ScenarioSource.MANUAL,
        domain=suite_name,
        tags=["benchmark", suite_name, task.id],
    )