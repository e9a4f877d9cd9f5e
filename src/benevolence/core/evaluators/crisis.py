"""Crisis severity and deadline urgency evaluation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import pendulum

from ...schemas import ApplicationForm


def _default_severity_weights() -> dict[str, int]:
    return {
        "assist_rent": 5,
        "assist_utilities": 4,
        "assist_medical": 5,
        "assist_food": 4,
        "assist_transportation": 3,
        "assist_home_repair": 3,
        "assist_other": 2,
    }


@dataclass
class CrisisConfig:
    """Severity weights per assistance type and urgency windows in days."""

    severity_weights: dict[str, int] = field(default_factory=_default_severity_weights)
    severity_multiplier: float = 0.6
    critical_days: int = 3
    urgent_days: int = 7
    moderate_days: int = 14
    critical_bonus: int = 2
    urgent_bonus: int = 1


class CrisisEvaluator:
    """Score how severe and how urgent the request is (0-5)."""

    method = "crisis"
    max_score = 5

    def __init__(
        self,
        *,
        config: CrisisConfig | None = None,
        now_provider: Any | None = None,
    ) -> None:
        self._config = config or CrisisConfig()
        self._now_provider = now_provider or pendulum.now

    def evaluate(self, submission: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        form = ApplicationForm.model_validate(submission)
        as_of = self._resolve_as_of(context)

        max_severity = 0
        assistance_types: list[str] = []
        for name, severity in self._config.severity_weights.items():
            if getattr(form, name, False) is True:
                max_severity = max(max_severity, severity)
                assistance_types.append(name.removeprefix("assist_").replace("_", " "))

        days_until = self._days_until(form.funds_deadline, as_of)
        urgency_label = self._urgency_label(form.funds_deadline, days_until)
        urgency_bonus = self._urgency_bonus(days_until)

        base_severity = _round_half_up(max_severity * self._config.severity_multiplier)
        score = min(self.max_score, base_severity + urgency_bonus)
        if not assistance_types:
            score = 0

        types_text = ", ".join(assistance_types) if assistance_types else "None selected"
        return {
            "method": self.method,
            "score": score,
            "detail": f"Type: {types_text} | Urgency: {urgency_label}",
            "metadata": {
                "days_until_deadline": days_until,
                "urgency_label": urgency_label,
                "urgency_bonus": urgency_bonus,
                "max_severity": max_severity,
                "assistance_types": assistance_types,
                "as_of": as_of.to_date_string(),
            },
        }

    def _urgency_label(self, raw_deadline: str, days_until: int | None) -> str:
        if days_until is None:
            if raw_deadline.strip():
                return f"Unrecognized deadline ({raw_deadline.strip()})"
            return "No deadline provided"
        if days_until < 0:
            return f"PAST DUE ({abs(days_until)} days ago)"
        if days_until <= self._config.critical_days:
            return f"CRITICAL ({days_until} days)"
        if days_until <= self._config.urgent_days:
            return f"URGENT ({days_until} days)"
        if days_until <= self._config.moderate_days:
            return f"MODERATE ({days_until} days)"
        return f"STANDARD ({days_until} days)"

    def _urgency_bonus(self, days_until: int | None) -> int:
        if days_until is None:
            return 0
        if days_until <= self._config.critical_days:
            return self._config.critical_bonus
        if days_until <= self._config.urgent_days:
            return self._config.urgent_bonus
        return 0

    def _days_until(self, raw_deadline: str, as_of: pendulum.DateTime) -> int | None:
        deadline = self._parse_date(raw_deadline)
        if deadline is None:
            return None
        return deadline.toordinal() - as_of.date().toordinal()

    @staticmethod
    def _parse_date(value: str | None) -> pendulum.Date | None:
        """Read a calendar date written as YYYY-MM-DD; anything else is unusable."""
        if not value or not value.strip():
            return None
        try:
            return pendulum.from_format(value.strip(), "YYYY-MM-DD").date()
        except ValueError:
            return None

    def _resolve_as_of(self, context: dict[str, Any]) -> pendulum.DateTime:
        as_of = context.get("as_of")
        default_now = self._now_provider()
        if as_of is None:
            return default_now
        if isinstance(as_of, pendulum.DateTime):
            return as_of
        parsed = self._parse_date(str(as_of))
        if parsed is None:
            return default_now
        return pendulum.datetime(parsed.year, parsed.month, parsed.day)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
