"""Token usage and cost accounting types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TokenUsage:
    """Token usage for a single trace or model call."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass
class CostBreakdown:
    """USD cost breakdown for a trace."""

    total_usd: float = 0.0
    input_usd: float = 0.0
    output_usd: float = 0.0
    model: str = ""
    provider: str = ""


@dataclass
class CostRecommendation:
    """A suggestion to move to a cheaper model."""

    current_model: str
    recommended_model: str
    estimated_savings_usd: float
    equivalent_score_fraction: float
    candidate_aggregate_score: float
    current_aggregate_score: float