"""Evaluation of other help the applicant has already looked for."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import ApplicationForm


@dataclass
class AlternativesConfig:
    """Explanation length cut-offs."""

    detailed_min_length: int = 50
    partial_min_length: int = 15
    preview_length: int = 80


class AlternativesEvaluator:
    """Score whether alternatives to this request were explored (0-5)."""

    method = "alternatives"
    max_score = 5

    def __init__(self, *, config: AlternativesConfig | None = None) -> None:
        self._config = config or AlternativesConfig()

    def evaluate(self, submission: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        form = ApplicationForm.model_validate(submission)
        sought_help = form.other_assistance
        details = form.other_assistance_details.strip()
        services = form.services_list.strip()

        if not sought_help or sought_help == "No":
            if form.receives_services == "Yes" and services:
                score, detail = 2, f"No other assistance sought, but receives services ({services})"
            else:
                score, detail = 1, "No attempt to seek other help documented"
        elif len(details) > self._config.detailed_min_length:
            preview = details[: self._config.preview_length]
            suffix = "..." if len(details) > self._config.preview_length else ""
            score, detail = 5, f"Detailed alternatives documented: {preview}{suffix}"
        elif len(details) > self._config.partial_min_length:
            score, detail = 4, f"Alternatives explored with some detail: {details}"
        elif details:
            score, detail = 3, f"Some alternatives noted: {details}"
        else:
            score, detail = 2, "Indicated yes to other assistance but no details provided"

        return {
            "method": self.method,
            "score": score,
            "detail": detail,
            "metadata": {
                "sought_other_assistance": bool(sought_help) and sought_help != "No",
                "details_length": len(details),
                "receives_services": form.receives_services == "Yes",
            },
        }
