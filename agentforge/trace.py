"""Execution traces and their steps."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union
from uuid import UUID

from .errors import SerializationError
from .evaluation import DimensionScores, FailureCluster


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


_TRACE_STATUS_VALUES = ("pass", "fail", "error", "review_needed")

TraceStatus = _ValueEnum(
    "TraceStatus",
    [(value.upper(), value) for value in _TRACE_STATUS_VALUES],
    module=__name__,
    qualname="TraceStatus",
)
TraceStatus.__doc__ = "Outcome of a single scenario trace."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LlmCallStep:
    index: int
    model: str
    messages: list[Any]
    response: Any
    input_tokens: int
    output_tokens: int
    latency_ms: int
    timestamp: datetime = field(default_factory=_utcnow)

    kind = "llm_call"


@dataclass
class ToolCallStep:
    index: int
    tool_name: str
    call_id: str
    arguments: Any
    timestamp: datetime = field(default_factory=_utcnow)

    kind = "tool_call"


@dataclass
class ToolResultStep:
    index: int
    tool_name: str
    call_id: str
    result: Any
    is_error: bool
    timestamp: datetime = field(default_factory=_utcnow)

    kind = "tool_result"


@dataclass
class AgentThoughtStep:
    index: int
    thought: str
    timestamp: datetime = field(default_factory=_utcnow)

    kind = "agent_thought"


@dataclass
class FinalOutputStep:
    index: int
    output: Any
    timestamp: datetime = field(default_factory=_utcnow)

    kind = "final_output"


TraceStep = Union[LlmCallStep, ToolCallStep, ToolResultStep, AgentThoughtStep, FinalOutputStep]

_STEP_TYPES: dict[str, type] = {
    cls.kind: cls
    for cls in (LlmCallStep, ToolCallStep, ToolResultStep, AgentThoughtStep, FinalOutputStep)
}

_FRACTION = re.compile(r"\.(\d+)")


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise SerializationError(f"invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise SerializationError(f"invalid timestamp: {value!r}") from None


def step_to_dict(step: TraceStep) -> dict[str, Any]:
    """Return a mapping of the step tagged with its ``type``."""
    data: dict[str, Any] = {"type": step.kind}
    for f in fields(step):
        value = getattr(step, f.name)
        data[f.name] = value.isoformat() if isinstance(value, datetime) else value
    return data


def step_from_dict(data: dict[str, Any]) -> TraceStep:
    """Build a step from a tagged mapping; raise SerializationError if malformed."""
    if not isinstance(data, dict):
        raise SerializationError(f"expected an object, got {type(data).__name__}")
    kind = data.get("type")
    step_cls = _STEP_TYPES.get(kind)
    if step_cls is None:
        raise SerializationError(f"unknown variant `{kind}` for TraceStep")
    kwargs: dict[str, Any] = {}
    for f in fields(step_cls):
        if f.name not in data:
            raise SerializationError(f"missing field `{f.name}`")
        value = data[f.name]
        kwargs[f.name] = _parse_timestamp(value) if f.name == "timestamp" else value
    return step_cls(**kwargs)


@dataclass
class Trace:
    """A complete execution trace of a single scenario run."""

    id: UUID
    run_id: UUID
    scenario_id: UUID
    status: TraceStatus
    steps: list[TraceStep] = field(default_factory=list)
    final_output: Any = None
    scores: DimensionScores | None = None
    aggregate_score: float | None = None
    failure_cluster: FailureCluster = FailureCluster.NO_FAILURE
    failure_reason: str | None = None
    review_needed: bool = False
    llm_calls: int = 0
    tool_invocations: int = 0
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0
    retry_count: int = 0
    seed: int = 0
    created_at: datetime = field(default_factory=_utcnow)