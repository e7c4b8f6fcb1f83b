from datetime import datetime, timezone
from uuid import uuid4

import pytest

from agentforge.errors import SerializationError
from agentforge.evaluation import FailureCluster
from agentforge.trace import (
    AgentThoughtStep,
    FinalOutputStep,
    LlmCallStep,
    ToolCallStep,
    ToolResultStep,
    Trace,
    TraceStatus,
    step_from_dict,
    step_to_dict,
)

STAMP = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


def test_trace_status_display():
    assert TraceStatus("pass") is TraceStatus.PASS
    assert str(TraceStatus("pass")) == "pass"
    assert str(TraceStatus("review_needed")) == "review_needed"


@pytest.mark.parametrize(
    "step, tag",
    [
        (
            LlmCallStep(
                index=0,
                model="gpt-4o",
                messages=[{"role": "user", "content": "hi"}],
                response={"content": "hello"},
                input_tokens=10,
                output_tokens=5,
                latency_ms=120,
                timestamp=STAMP,
            ),
            "llm_call",
        ),
        (
            ToolCallStep(index=1, tool_name="search", call_id="c1", arguments={"q": "x"}, timestamp=STAMP),
            "tool_call",
        ),
        (
            ToolResultStep(
                index=2, tool_name="search", call_id="c1", result=["a"], is_error=False, timestamp=STAMP
            ),
            "tool_result",
        ),
        (AgentThoughtStep(index=3, thought="think", timestamp=STAMP), "agent_thought"),
        (FinalOutputStep(index=4, output={"response": "done"}, timestamp=STAMP), "final_output"),
    ],
)
def test_step_round_trip(step, tag):
    data = step_to_dict(step)
    assert data["type"] == tag
    assert data["timestamp"] == "2024-05-01T12:30:00+00:00"
    assert step_from_dict(data) == step


def test_step_from_dict_accepts_z_suffix_and_nanoseconds():
    step = step_from_dict(
        {"type": "agent_thought", "index": 0, "thought": "t", "timestamp": "2024-05-01T12:30:00.123456789Z"}
    )
    assert step.timestamp == datetime(2024, 5, 1, 12, 30, 0, 123456, tzinfo=timezone.utc)


def test_unknown_step_type_rejected():
    with pytest.raises(SerializationError):
        step_from_dict({"type": "dance", "index": 0})


def test_missing_field_rejected():
    with pytest.raises(SerializationError, match="thought"):
        step_from_dict({"type": "agent_thought", "index": 0, "timestamp": "2024-05-01T00:00:00Z"})


def test_invalid_timestamp_rejected():
    with pytest.raises(SerializationError):
        step_from_dict({"type": "final_output", "index": 0, "output": 1, "timestamp": "yesterday"})


def test_trace_defaults():
    trace = Trace(id=uuid4(), run_id=uuid4(), scenario_id=uuid4(), status=TraceStatus.FAIL)
    assert trace.steps == []
    assert trace.failure_cluster is FailureCluster.NO_FAILURE
    assert trace.latency_ms == 0
    assert trace.review_needed is False