"""Agent file schema and related types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

from .errors import InvalidFormatError, SerializationError


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class ModelProvider(_ValueEnum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"
    BEDROCK = "bedrock"
    NVIDIA_NIM = "nvidia_nim"
    CUSTOM = "custom"


class AgentFileFormat(_ValueEnum):
    """Supported agent file input formats."""

    NATIVE_YAML = "native_yaml"
    OPENAI_JSON = "openai_json"
    ANTHROPIC_JSON = "anthropic_json"
    LANGCHAIN_YAML = "langchain_yaml"
    CREWAI_YAML = "crewai_yaml"
    COPILOT_AGENT_MD = "copilot_agent_md"

    @classmethod
    def parse(cls, text: str) -> AgentFileFormat:
        """Return the format named by ``text``; raise InvalidFormatError otherwise."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidFormatError(text) from None


class LintSeverity(_ValueEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ModelConfig:
    provider: ModelProvider
    model_id: str
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None


@dataclass
class ToolDefinition:
    name: str
    description: str
    parameters: Any


@dataclass
class EvalHints:
    domain: str | None = None
    typical_turns: int | None = 3
    critical_tools: list[str] = field(default_factory=list)
    pass_threshold: float | None = 0.85
    scenario_count: int | None = 100


def _require(data: dict, key: str) -> Any:
    if not isinstance(data, dict):
        raise SerializationError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise SerializationError(f"missing field `{key}`") from None


def _enum_value(enum_cls: type[Enum], value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise SerializationError(
            f"unknown variant `{value}` for {enum_cls.__name__}"
        ) from None


@dataclass
class AgentFile:
    """The normalized agent specification."""

    agentforge_schema_version: str
    name: str
    version: str
    model: ModelConfig
    system_prompt: str
    tools: list[ToolDefinition] = field(default_factory=list)
    output_schema: Any = None
    constraints: list[str] = field(default_factory=list)
    eval_hints: EvalHints | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of this agent file."""
        hints = self.eval_hints
        return {
            "agentforge_schema_version": self.agentforge_schema_version,
            "name": self.name,
            "version": self.version,
            "model": {
                "provider": self.model.provider.value,
                "model_id": self.model.model_id,
                "temperature": self.model.temperature,
                "max_tokens": self.model.max_tokens,
                "top_p": self.model.top_p,
            },
            "system_prompt": self.system_prompt,
            "tools": [
                {"name": t.name, "description": t.description, "parameters": t.parameters}
                for t in self.tools
            ],
            "output_schema": self.output_schema,
            "constraints": list(self.constraints),
            "eval_hints": None
            if hints is None
            else {
                "domain": hints.domain,
                "typical_turns": hints.typical_turns,
                "critical_tools": list(hints.critical_tools),
                "pass_threshold": hints.pass_threshold,
                "scenario_count": hints.scenario_count,
            },
            "metadata": None if self.metadata is None else dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AgentFile:
        """Build an agent file from a mapping; raise SerializationError if malformed."""
        model_data = _require(data, "model")
        model = ModelConfig(
            provider=_enum_value(ModelProvider, _require(model_data, "provider")),
            model_id=_require(model_data, "model_id"),
            temperature=model_data.get("temperature"),
            max_tokens=model_data.get("max_tokens"),
            top_p=model_data.get("top_p"),
        )
        tools = [
            ToolDefinition(
                name=_require(t, "name"),
                description=_require(t, "description"),
                parameters=_require(t, "parameters"),
            )
            for t in _require(data, "tools")
        ]
        hints_data = data.get("eval_hints")
        hints = None
        if hints_data is not None:
            hints = EvalHints(
                domain=hints_data.get("domain"),
                typical_turns=hints_data.get("typical_turns"),
                critical_tools=list(_require(hints_data, "critical_tools")),
                pass_threshold=hints_data.get("pass_threshold"),
                scenario_count=hints_data.get("scenario_count"),
            )
        metadata = data.get("metadata")
        return cls(
            agentforge_schema_version=_require(data, "agentforge_schema_version"),
            name=_require(data, "name"),
            version=_require(data, "version"),
            model=model,
            system_prompt=_require(data, "system_prompt"),
            tools=tools,
            output_schema=data.get("output_schema"),
            constraints=list(_require(data, "constraints")),
            eval_hints=hints,
            metadata=None if metadata is None else dict(metadata),
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AgentVersion:
    """A parsed, versioned agent file as stored."""

    id: UUID
    name: str
    version: str
    sha: str
    file_content: AgentFile
    raw_content: str
    format: AgentFileFormat
    promoted: bool = False
    is_champion: bool = False
    changelog: str | None = None
    parent_sha: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)


@dataclass
class LintError:
    """A problem found while validating an agent file."""

    field: str
    message: str
    severity: LintSeverity