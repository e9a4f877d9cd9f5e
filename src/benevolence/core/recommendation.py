"""Recommendation bracket derived from the automatic sub-score total."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

BracketCode = Literal["high_need", "moderate_need", "borderline", "low_indicators"]

BRACKETS: dict[BracketCode, tuple[str, str]] = {
    "high_need": (
        "LIKELY HIGH NEED (30-35 range possible)",
        "Strong preliminary case. Even with conservative scoring on Past Assistance & "
        "Verification, likely qualifies for approval or partial approval.",
    ),
    "moderate_need": (
        "LIKELY MODERATE NEED (20-29 range)",
        "Preliminary data supports moderate need. Final recommendation depends heavily on "
        "Past Assistance record and document verification (Categories 5-6).",
    ),
    "borderline": (
        "BORDERLINE (10-19 range possible)",
        "Preliminary data shows limited need indicators. Reviewer should carefully evaluate "
        "crisis explanation and verify all documentation before scoring.",
    ),
    "low_indicators": (
        "LOW INDICATORS (below 10 likely)",
        "Preliminary data does not strongly indicate need based on submitted information. "
        "Reviewer should confirm all data and check for extenuating circumstances not "
        "captured in form fields.",
    ),
}


@dataclass(slots=True)
class Recommendation:
    """Estimated full-scale range and guidance for the reviewer."""

    auto_total: int
    max_auto_points: int
    low_estimate: int
    mid_estimate: int
    high_estimate: int
    bracket_code: BracketCode
    bracket: str
    recommendation: str


@dataclass
class RecommendationConfig:
    """Points assumed for the two reviewer-scored categories."""

    max_auto_points: int = 25
    mid_offset: int = 5
    high_offset: int = 10


class Recommender:
    """Classify an automatic total into a need bracket."""

    def __init__(self, *, config: RecommendationConfig | None = None) -> None:
        self._config = config or RecommendationConfig()

    def recommend(self, auto_total: int) -> Recommendation:
        low = auto_total
        mid = auto_total + self._config.mid_offset
        high = auto_total + self._config.high_offset

        code = self._classify(low, mid)
        bracket, guidance = BRACKETS[code]
        return Recommendation(
            auto_total=auto_total,
            max_auto_points=self._config.max_auto_points,
            low_estimate=low,
            mid_estimate=mid,
            high_estimate=high,
            bracket_code=code,
            bracket=bracket,
            recommendation=guidance,
        )

    @staticmethod
    def _classify(low: int, mid: int) -> BracketCode:
        if low >= 20:
            return "high_need"
        if 20 <= mid < 30:
            return "moderate_need"
        if mid >= 10:
            return "borderline"
        return "low_indicators"


def get_recommendation(auto_total: int) -> Recommendation:
    """Recommendation with the default reviewer-category offsets."""
    return Recommender().recommend(auto_total)
