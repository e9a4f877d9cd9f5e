"""Typed boundary record for submitted benevolence applications."""

from __future__ import annotations

import math
import re
from typing import Annotated, Any, Mapping

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

HOUSEHOLD_SLOTS = 20


def parse_amount(value: Any) -> float | None:
    """Leniently parse a user-entered money value.

    Blank or missing input yields ``None``. Otherwise the leading numeric
    prefix is used (``"12.50 per week"`` -> ``12.5``) and text without one
    parses as ``0.0``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    text = str(value).strip()
    if not text:
        return None
    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def parse_flag(value: Any) -> bool:
    """Checkbox/radio answers count only when they are exactly ``"Yes"``."""
    if isinstance(value, bool):
        return value
    return value == "Yes"


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


Text = Annotated[str, BeforeValidator(_coerce_text)]
Amount = Annotated[float | None, BeforeValidator(parse_amount)]
Flag = Annotated[bool, BeforeValidator(parse_flag)]


class UploadedFile(BaseModel):
    """Descriptor for a document uploaded alongside the form."""

    field_name: str
    file_name: str
    size_bytes: int | None = None
    content_type: str | None = None
    storage_path: str | None = None

    model_config = ConfigDict(extra="ignore")


class HouseholdMember(BaseModel):
    """One row of the household members table."""

    name: str
    relation: str = ""
    age: str = ""
    employment: str = ""

    model_config = ConfigDict(extra="forbid")


class ApplicationForm(BaseModel):
    """Applicant answers, validated once before scoring.

    Text answers are kept as entered. Money answers are ``None`` when left
    blank and ``0.0`` when they cannot be read as a number.
    """

    # Applicant
    full_name: Text = ""
    preferred_name: Text = ""
    date_of_birth: Text = ""
    email: Text = ""
    primary_phone: Text = ""
    phone: Text = ""
    secondary_phone: Text = ""
    address: Text = ""
    city: Text = ""
    state: Text = ""
    zip: Text = ""
    community_duration: Text = ""
    application_date: Text = ""

    # Household
    household_members: list[HouseholdMember] = Field(default_factory=list)
    receives_services: Text = ""
    services_list: Text = ""

    # Employment and income
    employer: Text = ""
    employer_phone: Text = ""
    employer_address: Text = ""
    monthly_gross_income: Amount = None
    monthly_net_income: Amount = None
    other_income_source_1: Text = ""
    other_income_amount_1: Amount = None
    other_income_source_2: Text = ""
    other_income_amount_2: Amount = None
    total_monthly_income: Amount = None
    liquid_savings: Amount = None
    assets: Text = ""

    # Expenses
    expense_rent: Amount = None
    expense_utilities: Amount = None
    expense_food: Amount = None
    expense_transportation: Amount = None
    expense_insurance: Amount = None
    expense_childcare: Amount = None
    expense_other: Amount = None

    # Request
    assist_rent: Flag = False
    assist_utilities: Flag = False
    assist_medical: Flag = False
    assist_food: Flag = False
    assist_transportation: Flag = False
    assist_home_repair: Flag = False
    assist_other: Flag = False
    assist_other_detail: Text = ""
    amount_requested: Amount = None
    funds_deadline: Text = ""
    payee_name: Text = ""
    payee_phone: Text = ""
    payee_address: Text = ""
    explanation: Text = ""

    # Alternatives and acknowledgement
    other_assistance: Text = ""
    other_assistance_details: Text = ""
    highest_priority: Text = ""
    signature: Text = ""
    signature_date: Text = ""
    needs_accommodation: Text = ""
    accommodation_details: Text = ""

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "ApplicationForm":
        """Build a form from a flat field mapping, collecting household rows."""
        payload = dict(fields)
        if "household_members" not in payload:
            payload["household_members"] = assemble_household_members(fields)
        return cls.model_validate(payload)

    def answered(self, name: str) -> bool:
        """Return True when the named answer holds something other than whitespace."""
        value = getattr(self, name, None)
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        return True

    def amount(self, name: str) -> float:
        value = getattr(self, name, None)
        return float(value) if value else 0.0


def assemble_household_members(fields: Mapping[str, Any]) -> list[HouseholdMember]:
    """Collect ``hh_*_N`` columns into household members, skipping unnamed rows."""
    members: list[HouseholdMember] = []
    for index in range(1, HOUSEHOLD_SLOTS + 1):
        name = _coerce_text(fields.get(f"hh_name_{index}")).strip()
        if not name:
            continue
        members.append(
            HouseholdMember(
                name=name,
                relation=_coerce_text(fields.get(f"hh_relation_{index}")).strip(),
                age=_coerce_text(fields.get(f"hh_age_{index}")).strip(),
                employment=_coerce_text(fields.get(f"hh_employment_{index}")).strip(),
            )
        )
    return members
