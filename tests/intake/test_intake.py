from __future__ import annotations

import json
from pathlib import Path

import pytest

from benevolence.intake import (
    IntakeValidationError,
    SubmissionLoadError,
    SubmissionLoader,
    normalize_fields,
    validate_required,
)


def test_normalize_fields_mirrors_phone_aliases():
    assert normalize_fields({"phone": "555-0100"})["primary_phone"] == "555-0100"
    assert normalize_fields({"primary_phone": "555-0101"})["phone"] == "555-0101"

    both = normalize_fields({"phone": "555-0100", "primary_phone": "555-0199"})
    assert both["phone"] == "555-0100"
    assert both["primary_phone"] == "555-0199"


def test_normalize_fields_stringifies_and_drops_nulls():
    normalized = normalize_fields({"zip": 40509, "employer": None})

    assert normalized == {"zip": "40509"}


def test_validate_required_reports_missing_in_order(complete_fields):
    fields = dict(complete_fields, email="  ", zip="")

    with pytest.raises(IntakeValidationError) as excinfo:
        validate_required(fields)

    assert excinfo.value.missing == ["email", "zip"]
    assert str(excinfo.value) == "Missing required fields: email, zip"


def test_validate_required_accepts_complete_identity(complete_fields):
    validate_required(complete_fields)


def test_loader_reads_fields_and_files(tmp_path: Path, complete_fields, required_files):
    path = tmp_path / "submission.json"
    path.write_text(
        json.dumps({"fields": complete_fields, "files": required_files}),
        encoding="utf-8",
    )

    fields, files = SubmissionLoader().load(path)

    assert fields["full_name"] == "Jordan Avery"
    assert fields["phone"] == "859-555-0134"
    assert [upload.field_name for upload in files] == ["photo_id", "proof_of_income", "bill_statement"]


def test_loader_rejects_invalid_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SubmissionLoadError, match="Invalid submission JSON"):
        SubmissionLoader().load(path)


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "must be a JSON object"),
        ({"fields": []}, "'fields' must be an object"),
        ({"files": {}}, "'files' must be a list"),
        ({"files": [{"field_name": "photo_id"}]}, r"files\[0\]"),
    ],
)
def test_loader_rejects_malformed_documents(payload, message):
    with pytest.raises(SubmissionLoadError, match=message):
        SubmissionLoader().parse(payload)
