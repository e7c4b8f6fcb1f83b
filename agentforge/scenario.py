"""Test scenarios generated for an agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class ConversationRole(_ValueEnum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


class DifficultyTier(_ValueEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EDGE = "edge"


class ScenarioSource(_ValueEnum):
    SCHEMA_DERIVED = "schema_derived"
    ADVERSARIAL = "adversarial"
    DOMAIN_SEEDED = "domain_seeded"
    MANUAL = "manual"


@dataclass
class ConversationTurn:
    role: ConversationRole
    content: str


@dataclass
class ScenarioInput:
    """The input side of a scenario."""

    user_message: str
    conversation_history: list[ConversationTurn] = field(default_factory=list)
    context: Any = None


@dataclass
class ExpectedToolCall:
    tool_name: str
    required: bool = True
    argument_schema: Any = None


@dataclass
class ScenarioExpected:
    """The expected outcomes of a scenario."""

    pass_criteria: str
    tool_calls: list[ExpectedToolCall] = field(default_factory=list)
    output_schema: Any = None
    min_turns: int | None = None
    max_turns: int | None = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Scenario:
    """A single test scenario generated for an agent."""

    id: UUID
    agent_id: UUID
    input: ScenarioInput
    expected: ScenarioExpected
    difficulty: DifficultyTier
    source: ScenarioSource
    domain: str | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)