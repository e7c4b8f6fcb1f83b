from uuid import uuid4

import pytest

from agentforge.shadow import (
    DimensionComparison,
    DimensionOutcome,
    ShadowComparison,
    ShadowRun,
    ShadowRunStatus,
)


def test_status_display():
    assert ShadowRunStatus("pending") is ShadowRunStatus.PENDING
    assert str(ShadowRunStatus("pending")) == "pending"
    assert str(ShadowRunStatus("complete")) == "complete"


def test_outcome_from_value():
    assert DimensionOutcome("tie") is DimensionOutcome.TIE
    with pytest.raises(ValueError):
        DimensionOutcome("draw")


def test_shadow_run_defaults():
    run = ShadowRun(id=uuid4(), champion_agent_id=uuid4(), candidate_agent_id=uuid4())
    assert run.status is ShadowRunStatus.PENDING
    assert str(run.status) == "pending"
    assert run.traffic_percent == 10
    assert run.comparison is None


def test_comparison_holds_dimensions():
    dim = DimensionComparison(
        dimension="task_completion",
        champion_score=0.8,
        candidate_score=0.9,
        outcome=DimensionOutcome.WIN,
        delta=0.1,
    )
    comparison = ShadowComparison(
        run_id=uuid4(),
        champion_agent_id=uuid4(),
        candidate_agent_id=uuid4(),
        traffic_fraction=0.1,
        total_requests=100,
        champion_aggregate_score=0.8,
        candidate_aggregate_score=0.9,
        aggregate_delta=0.1,
        per_dimension=[dim],
        candidate_wins=True,
    )
    assert comparison.per_dimension[0].outcome == "win"
    assert comparison.candidate_wins is True