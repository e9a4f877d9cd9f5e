"""Application completeness and documentation evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ...schemas import ApplicationForm, UploadedFile


@dataclass
class CompletenessConfig:
    """Required answers and documents with the blend weights."""

    required_fields: tuple[str, ...] = (
        "full_name",
        "date_of_birth",
        "primary_phone",
        "email",
        "address",
        "city",
        "state",
        "zip",
        "employer",
        "monthly_gross_income",
        "monthly_net_income",
        "total_monthly_income",
        "amount_requested",
        "funds_deadline",
        "explanation",
        "signature",
    )
    required_choices: tuple[str, ...] = ("receives_services", "other_assistance")
    required_files: tuple[str, ...] = ("photo_id", "proof_of_income", "bill_statement")
    field_weight: float = 0.6
    file_weight: float = 0.4


# (minimum combined ratio, score, label), checked in order.
_BANDS: tuple[tuple[float, int, str], ...] = (
    (0.95, 5, "Fully complete"),
    (0.80, 4, "Mostly complete with minor gaps"),
    (0.65, 3, "Some gaps"),
    (0.45, 2, "Key items missing"),
    (0.25, 1, "Incomplete"),
)


class CompletenessEvaluator:
    """Score how much of the form and required paperwork was provided (0-5)."""

    method = "completeness"
    max_score = 5

    def __init__(self, *, config: CompletenessConfig | None = None) -> None:
        self._config = config or CompletenessConfig()

    def evaluate(self, submission: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        form = ApplicationForm.model_validate(submission)
        files = [UploadedFile.model_validate(item) for item in context.get("files") or []]

        missing_fields = [name for name in self._config.required_fields if not form.answered(name)]
        # Radio answers count as soon as anything was chosen.
        missing_fields.extend(
            name for name in self._config.required_choices if not getattr(form, name, "")
        )
        total_fields = len(self._config.required_fields) + len(self._config.required_choices)
        filled_count = total_fields - len(missing_fields)

        missing_files = self._missing_documents(files)
        total_files = len(self._config.required_files)
        files_uploaded = total_files - len(missing_files)

        field_ratio = filled_count / total_fields if total_fields else 1.0
        file_ratio = files_uploaded / total_files if total_files else 1.0
        combined = field_ratio * self._config.field_weight + file_ratio * self._config.file_weight

        score, label = self._band(combined)
        tag = f"({filled_count}/{total_fields} fields, {files_uploaded}/{total_files} docs)"

        return {
            "method": self.method,
            "score": score,
            "detail": f"{label} {tag}",
            "metadata": {
                "filled_fields": filled_count,
                "required_fields": total_fields,
                "uploaded_documents": files_uploaded,
                "required_documents": total_files,
                "combined_ratio": combined,
                "missing_fields": missing_fields,
                "missing_documents": missing_files,
            },
        }

    def _missing_documents(self, files: Iterable[UploadedFile]) -> list[str]:
        present = {item.field_name for item in files}
        return [name for name in self._config.required_files if name not in present]

    @staticmethod
    def _band(combined: float) -> tuple[int, str]:
        for minimum, score, label in _BANDS:
            if combined >= minimum:
                return score, label
        return 0, "Missing major documents"
