"""Core scoring engine components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .scoring import ScoreResult, ScoringEngine, ScoringReport
from .recommendation import Recommendation, RecommendationConfig, Recommender, get_recommendation
from .evaluators import (
    AlternativesEvaluator,
    CompletenessEvaluator,
    CrisisEvaluator,
    FinancialEvaluator,
)


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for computing one category sub-score."""

    method: str
    max_score: int

    def evaluate(self, submission: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        """Return the category score, detail text and metadata for a submission."""


__all__ = [
    "Evaluator",
    "ScoringEngine",
    "ScoringReport",
    "ScoreResult",
    "Recommendation",
    "RecommendationConfig",
    "Recommender",
    "get_recommendation",
    "CompletenessEvaluator",
    "FinancialEvaluator",
    "CrisisEvaluator",
    "AlternativesEvaluator",
]
