"""Form intake: field normalization, required-field checks and submission loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from .schemas import UploadedFile

REQUIRED_IDENTITY_FIELDS: tuple[str, ...] = ("full_name", "email", "address", "city", "state", "zip")


class IntakeValidationError(ValueError):
    """Raised when identity fields needed to file an application are blank."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Missing required fields: {', '.join(missing)}")
        self.missing = missing


class SubmissionLoadError(ValueError):
    """Raised when a submission document cannot be read."""


def normalize_fields(fields: Mapping[str, Any]) -> dict[str, str]:
    """Return a string-valued copy with ``primary_phone``/``phone`` mirrored."""
    normalized: dict[str, str] = {}
    for name, value in fields.items():
        if value is None:
            continue
        normalized[str(name)] = value if isinstance(value, str) else str(value)

    if not normalized.get("primary_phone") and normalized.get("phone"):
        normalized["primary_phone"] = normalized["phone"]
    if not normalized.get("phone") and normalized.get("primary_phone"):
        normalized["phone"] = normalized["primary_phone"]
    return normalized


def validate_required(
    fields: Mapping[str, str],
    required: tuple[str, ...] = REQUIRED_IDENTITY_FIELDS,
) -> None:
    missing = [name for name in required if not (fields.get(name) or "").strip()]
    if missing:
        raise IntakeValidationError(missing)


class SubmissionLoader:
    """Load ``{"fields": {...}, "files": [...]}`` submission documents."""

    def load(self, path: Path) -> tuple[dict[str, str], list[UploadedFile]]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise SubmissionLoadError(f"Invalid submission JSON: {exc}") from exc
        return self.parse(data)

    def parse(self, data: Any) -> tuple[dict[str, str], list[UploadedFile]]:
        if not isinstance(data, dict):
            raise SubmissionLoadError("Submission must be a JSON object.")
        raw_fields = data.get("fields", {})
        raw_files = data.get("files", [])
        if not isinstance(raw_fields, dict):
            raise SubmissionLoadError("Submission 'fields' must be an object.")
        if not isinstance(raw_files, list):
            raise SubmissionLoadError("Submission 'files' must be a list.")

        files: list[UploadedFile] = []
        for idx, item in enumerate(raw_files):
            try:
                files.append(UploadedFile.model_validate(item))
            except ValidationError as exc:
                raise SubmissionLoadError(f"files[{idx}]: {exc}") from exc
        return normalize_fields(raw_fields), files
