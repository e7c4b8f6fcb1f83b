"""Compare two stored agent versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from .agent import AgentVersion


@dataclass
class AgentSummary:
    """Identifying details of one agent version."""

    id: UUID
    name: str
    version: str
    sha: str
    is_champion: bool

    @classmethod
    def from_version(cls, version: AgentVersion) -> AgentSummary:
        return cls(
            id=version.id,
            name=version.name,
            version=version.version,
            sha=version.sha,
            is_champion=version.is_champion,
        )


@dataclass
class ToolChanges:
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)


@dataclass
class ConstraintChanges:
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


@dataclass
class DiffResponse:
    """Differences between two agent versions."""

    v1: AgentSummary
    v2: AgentSummary
    system_prompt_diff: str | None
    tool_changes: ToolChanges
    constraint_changes: ConstraintChanges


def _missing_from(items: list[str], other: list[str]) -> list[str]:
    return [item for item in items if item not in other]


def compute_diff(v1: AgentVersion, v2: AgentVersion) -> DiffResponse:
    """Report prompt, tool and constraint changes from ``v1`` to ``v2``."""
    if v1.file_content.system_prompt != v2.file_content.system_prompt:
        prompt_diff = f"- Version {v1.version} prompt differs from version {v2.version}"
    else:
        prompt_diff = None

    tools1 = [t.name for t in v1.file_content.tools]
    tools2 = [t.name for t in v2.file_content.tools]
    constraints1 = list(v1.file_content.constraints)
    constraints2 = list(v2.file_content.constraints)

    return DiffResponse(
        v1=AgentSummary.from_version(v1),
        v2=AgentSummary.from_version(v2),
        system_prompt_diff=prompt_diff,
        tool_changes=ToolChanges(
            added=_missing_from(tools2, tools1),
            removed=_missing_from(tools1, tools2),
            modified=[],
        ),
        constraint_changes=ConstraintChanges(
            added=_missing_from(constraints2, constraints1),
            removed=_missing_from(constraints1, constraints2),
        ),
    )