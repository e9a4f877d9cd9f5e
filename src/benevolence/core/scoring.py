"""Scoring engine orchestration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Mapping

from ..schemas import ApplicationForm, UploadedFile
from .evaluators import (
    AlternativesEvaluator,
    CompletenessEvaluator,
    CrisisEvaluator,
    FinancialEvaluator,
)
from .recommendation import Recommendation, Recommender


@dataclass(slots=True)
class ScoreResult:
    """Normalized evaluator output for one category."""

    method: str
    score: int
    max_score: int
    detail: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScoringReport:
    """All automatic sub-scores with the derived recommendation."""

    completeness: ScoreResult
    financial: ScoreResult
    crisis: ScoreResult
    alternatives: ScoreResult
    recommendation: Recommendation

    @property
    def results(self) -> list[ScoreResult]:
        return [self.completeness, self.financial, self.crisis, self.alternatives]

    @property
    def auto_total(self) -> int:
        return sum(result.score for result in self.results)

    def summary(self) -> str:
        """Plain-text breakdown stored with the application record."""
        lines = [
            f"1. Completeness: {self.completeness.score}/{self.completeness.max_score} - {self.completeness.detail}",
            f"2. Financial: {self.financial.score}/{self.financial.max_score} - {self.financial.detail}",
            f"3. Crisis: {self.crisis.score}/{self.crisis.max_score} - {self.crisis.detail}",
            f"4. Alternatives: {self.alternatives.score}/{self.alternatives.max_score} - {self.alternatives.detail}",
            f"Auto Total: {self.auto_total}/{self.recommendation.max_auto_points}"
            f" | Bracket: {self.recommendation.bracket}",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["auto_total"] = self.auto_total
        payload["summary"] = self.summary()
        return payload


class ScoringEngine:
    """Runs the four category evaluators and synthesizes a recommendation."""

    def __init__(
        self,
        *,
        completeness: Any | None = None,
        financial: Any | None = None,
        crisis: Any | None = None,
        alternatives: Any | None = None,
        recommender: Recommender | None = None,
    ) -> None:
        self._completeness = completeness or CompletenessEvaluator()
        self._financial = financial or FinancialEvaluator()
        self._crisis = crisis or CrisisEvaluator()
        self._alternatives = alternatives or AlternativesEvaluator()
        self._recommender = recommender or Recommender()

    def score(
        self,
        fields: Mapping[str, Any],
        files: Iterable[UploadedFile | Mapping[str, Any]] | None = None,
        *,
        as_of: Any | None = None,
    ) -> ScoringReport:
        """Score a raw field mapping and its uploaded file descriptors."""
        return self.score_form(ApplicationForm.from_fields(fields), files, as_of=as_of)

    def score_form(
        self,
        form: ApplicationForm,
        files: Iterable[UploadedFile | Mapping[str, Any]] | None = None,
        *,
        as_of: Any | None = None,
    ) -> ScoringReport:
        serialized_form = form.model_dump(mode="python")
        context: dict[str, Any] = {
            "files": [
                item.model_dump(mode="python") if isinstance(item, UploadedFile) else dict(item)
                for item in files or []
            ],
        }
        if as_of is not None:
            context["as_of"] = as_of

        completeness = self._run(self._completeness, serialized_form, context)
        financial = self._run(self._financial, serialized_form, context)
        crisis = self._run(self._crisis, serialized_form, context)
        alternatives = self._run(self._alternatives, serialized_form, context)

        auto_total = completeness.score + financial.score + crisis.score + alternatives.score
        return ScoringReport(
            completeness=completeness,
            financial=financial,
            crisis=crisis,
            alternatives=alternatives,
            recommendation=self._recommender.recommend(auto_total),
        )

    def _run(self, evaluator: Any, submission: dict[str, Any], context: dict[str, Any]) -> ScoreResult:
        raw_result = evaluator.evaluate(submission, context)
        return self._normalize_evaluation_result(raw_result, max_score=evaluator.max_score)

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any], *, max_score: int) -> ScoreResult:
        method = payload.get("method")
        score = payload.get("score")
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(score, (int, float)) or isinstance(score, bool):
            raise ValueError(f"Evaluator {method!r} returned a non-numeric score.")
        return ScoreResult(
            method=str(method),
            score=max(0, min(max_score, int(score))),
            max_score=max_score,
            detail=str(payload.get("detail") or ""),
            metadata=dict(metadata),
        )
