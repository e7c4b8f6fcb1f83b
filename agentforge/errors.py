"""Error types raised throughout the package."""

from __future__ import annotations


class AgentForgeError(Exception):
    """Base class for every error raised by the package."""


class _DetailError(AgentForgeError):
    """An error whose message is a fixed prefix followed by a detail text."""

    prefix = "Error"

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


class ParseError(_DetailError):
    prefix = "Parse error"


class ValidationError(_DetailError):
    prefix = "Validation error"


class InvalidFormatError(_DetailError):
    prefix = "Invalid format"


class DatabaseError(_DetailError):
    prefix = "Database error"


class ScoringError(_DetailError):
    prefix = "Scoring error"


class OptimizationError(_DetailError):
    prefix = "Optimization error"


class ConfigError(_DetailError):
    prefix = "Configuration error"


class IoError(_DetailError):
    prefix = "IO error"


class SerializationError(_DetailError):
    prefix = "Serialization error"


class HttpError(_DetailError):
    prefix = "HTTP error"


class LlmError(AgentForgeError):
    """A language-model provider reported a failure."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        self.message = message
        super().__init__(f"LLM error: {provider} - {message}")


class CircularBiasError(AgentForgeError):
    """The judge model is the same model as the agent under test."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(
            f"LLM error: judge model and agent model must differ (both are {model})"
        )


class PromotionFailed(AgentForgeError):
    """Promotion of an agent version was refused."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Promotion failed: {reason}")


class ScoreGateFailed(AgentForgeError):
    """The challenger did not beat the champion by the required margin."""

    def __init__(self, current: float, champion: float, required: float) -> None:
        self.current = current
        self.champion = champion
        self.required = required
        super().__init__(
            "Gatekeeper failed - score gate: "
            f"current={current:.3f} champion={champion:.3f} required_delta={required:.3f}"
        )


class RegressionGateFailed(AgentForgeError):
    """Too many previously passing scenarios regressed."""

    def __init__(self, pass_rate: float, required: float) -> None:
        self.pass_rate = pass_rate
        self.required = required
        super().__init__(
            "Gatekeeper failed - regression gate: "
            f"pass_rate={pass_rate:.3f} required={required:.3f}"
        )


class StabilityGateFailed(AgentForgeError):
    """Not enough seeds were run to judge stability."""

    def __init__(self, seeds: int, required: int) -> None:
        self.seeds = seeds
        self.required = required
        super().__init__(
            f"Gatekeeper failed - stability gate: only {seeds} seeds run, need {required}"
        )


class NotFoundError(AgentForgeError):
    """A requested resource does not exist."""

    def __init__(self, resource: str, resource_id: object) -> None:
        self.resource = resource
        self.resource_id = str(resource_id)
        super().__init__(f"Not found: {resource} with id {self.resource_id}")


class TimeoutExceeded(AgentForgeError):
    """An operation took longer than allowed."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds
        super().__init__(f"Timeout after {seconds}s")


class RateLimitExceeded(AgentForgeError):
    """A provider refused a request because of rate limiting."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Rate limit exceeded for provider {provider}")