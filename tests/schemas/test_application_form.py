from __future__ import annotations

import math

import pytest

from benevolence.schemas import ApplicationForm, UploadedFile, parse_amount, parse_flag


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("   ", None),
        ("1400", 1400.0),
        (" 12.50 per week", 12.5),
        ("1,200", 1.0),
        ("-20", -20.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("$100", 0.0),
        ("abc", 0.0),
        (250, 250.0),
        (math.nan, 0.0),
        ("\u0661\u0662\u0663", 0.0),
        ("12\u0663", 12.0),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("Yes", True), ("yes", False), ("Y", False), ("", False), (None, False), (True, True)],
)
def test_parse_flag(raw, expected):
    assert parse_flag(raw) is expected


def test_from_fields_collects_household_rows():
    form = ApplicationForm.from_fields(
        {
            "hh_name_1": "Riley Avery",
            "hh_relation_1": "Child",
            "hh_age_1": "9",
            "hh_name_2": "   ",
            "hh_relation_2": "Spouse",
            "hh_name_3": " Sam Avery ",
            "hh_name_21": "Out Of Range",
        }
    )

    assert [member.name for member in form.household_members] == ["Riley Avery", "Sam Avery"]
    assert form.household_members[0].relation == "Child"
    assert form.household_members[1].relation == ""


def test_unknown_fields_are_ignored_and_values_coerced():
    form = ApplicationForm.from_fields({"full_name": 42, "favorite_color": "green"})

    assert form.full_name == "42"
    assert not hasattr(form, "favorite_color")


def test_answered_and_amount_helpers():
    form = ApplicationForm.from_fields(
        {"email": "  ", "city": "Lexington", "liquid_savings": "none", "expense_rent": ""}
    )

    assert form.answered("city") is True
    assert form.answered("email") is False
    assert form.answered("liquid_savings") is True
    assert form.answered("expense_rent") is False
    assert form.amount("liquid_savings") == 0.0
    assert form.amount("expense_rent") == 0.0


def test_text_answers_are_kept_as_entered():
    form = ApplicationForm.from_fields({"explanation": "  spaced out  "})

    assert form.explanation == "  spaced out  "


def test_uploaded_file_requires_names():
    upload = UploadedFile.model_validate(
        {"field_name": "photo_id", "file_name": "id.png", "checksum": "ignored"}
    )

    assert upload.storage_path is None
    with pytest.raises(ValueError):
        UploadedFile.model_validate({"field_name": "photo_id"})
