"""Application record assembly and persistence ports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Protocol, runtime_checkable

import pendulum

from .core import ScoringReport
from .schemas import ApplicationForm, UploadedFile

_OPTIONAL_TEXT_FIELDS: tuple[str, ...] = (
    "secondary_phone",
    "date_of_birth",
    "preferred_name",
    "community_duration",
    "application_date",
    "receives_services",
    "services_list",
    "employer",
    "employer_phone",
    "employer_address",
    "other_income_source_1",
    "other_income_source_2",
    "assets",
    "assist_other_detail",
    "funds_deadline",
    "payee_name",
    "payee_phone",
    "payee_address",
    "explanation",
    "other_assistance",
    "other_assistance_details",
    "highest_priority",
    "signature",
    "signature_date",
    "needs_accommodation",
    "accommodation_details",
)

_AMOUNT_FIELDS: tuple[str, ...] = (
    "monthly_gross_income",
    "monthly_net_income",
    "other_income_amount_1",
    "other_income_amount_2",
    "total_monthly_income",
    "liquid_savings",
    "expense_rent",
    "expense_utilities",
    "expense_food",
    "expense_transportation",
    "expense_insurance",
    "expense_childcare",
    "expense_other",
    "amount_requested",
)

_FLAG_FIELDS: tuple[str, ...] = (
    "assist_rent",
    "assist_utilities",
    "assist_medical",
    "assist_food",
    "assist_transportation",
    "assist_home_repair",
    "assist_other",
)


class PersistenceError(RuntimeError):
    """Raised when an application record could not be saved."""


@runtime_checkable
class ApplicationRepository(Protocol):
    """Destination for finished application records."""

    def save(self, record: dict[str, Any]) -> None:
        """Persist a single application record."""


def storage_path(application_id: str, upload: UploadedFile) -> str:
    return f"applications/{application_id}/{upload.field_name}/{upload.file_name}"


class ApplicationRecordBuilder:
    """Flatten applicant answers and scores into one storable record."""

    def build(
        self,
        *,
        application_id: str,
        form: ApplicationForm,
        report: ScoringReport,
        uploaded_files: Iterable[UploadedFile] = (),
        received_at: pendulum.DateTime | None = None,
    ) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": application_id,
            "full_name": form.full_name,
            "email": form.email,
            "phone": form.primary_phone or form.phone,
            "address": form.address,
            "city": form.city,
            "state": form.state,
            "zip": form.zip,
            "household_members": [member.model_dump() for member in form.household_members],
        }
        for name in _OPTIONAL_TEXT_FIELDS:
            record[name] = getattr(form, name) or None
        for name in _AMOUNT_FIELDS:
            record[name] = form.amount(name)
        for name in _FLAG_FIELDS:
            record[name] = bool(getattr(form, name))

        record["uploaded_files"] = [
            upload.model_copy(
                update={"storage_path": upload.storage_path or storage_path(application_id, upload)}
            ).model_dump()
            for upload in uploaded_files
        ]

        recommendation = report.recommendation
        for result in report.results:
            record[f"score_{result.method}"] = result.score
            record[f"score_{result.method}_detail"] = result.detail
        record.update(
            {
                "score_auto_total": report.auto_total,
                "score_bracket": recommendation.bracket,
                "score_recommendation": recommendation.recommendation,
                "score_summary": report.summary(),
                "computed_total_expenses": report.financial.metadata.get("total_expenses", 0.0),
                "computed_monthly_gap": report.financial.metadata.get("monthly_gap", 0.0),
                "status": "submitted",
                "received_at": (received_at or pendulum.now()).to_iso8601_string(),
            }
        )
        return record


class JsonlApplicationStore:
    """Append-only JSON lines store for application records."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def save(self, record: dict[str, Any]) -> None:
        try:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(record, ensure_ascii=False))
                handle.write("\n")
        except OSError as exc:
            raise PersistenceError(f"Failed to write {self._path}: {exc}") from exc

    def load_all(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            return []
        with self._path.open("r", encoding="utf-8") as handle:
            return [json.loads(line) for line in handle if line.strip()]
