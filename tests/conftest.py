from __future__ import annotations

import pendulum
import pytest


@pytest.fixture
def complete_fields() -> dict[str, str]:
    return {
        "full_name": "Jordan Avery",
        "date_of_birth": "1984-03-12",
        "primary_phone": "859-555-0134",
        "email": "jordan@example.org",
        "address": "12 Elm St",
        "city": "Lexington",
        "state": "KY",
        "zip": "40509",
        "employer": "Bluegrass Grocers",
        "monthly_gross_income": "2400",
        "monthly_net_income": "1950",
        "total_monthly_income": "2100",
        "liquid_savings": "120",
        "expense_rent": "1400",
        "expense_utilities": "260",
        "expense_food": "450",
        "expense_transportation": "180",
        "expense_insurance": "90",
        "expense_childcare": "0",
        "expense_other": "40",
        "assist_rent": "Yes",
        "assist_utilities": "Yes",
        "amount_requested": "650",
        "funds_deadline": "2026-10-20",
        "explanation": "Hours were cut after a store remodel and rent is due.",
        "signature": "Jordan Avery",
        "receives_services": "Yes",
        "services_list": "SNAP",
        "other_assistance": "Yes",
        "other_assistance_details": (
            "Applied to the county emergency rental fund and asked two local churches for help"
        ),
        "hh_name_1": "Riley Avery",
        "hh_relation_1": "Child",
        "hh_age_1": "9",
    }


@pytest.fixture
def required_files() -> list[dict[str, str]]:
    return [
        {"field_name": "photo_id", "file_name": "license.jpg"},
        {"field_name": "proof_of_income", "file_name": "paystub.pdf"},
        {"field_name": "bill_statement", "file_name": "lease.pdf"},
    ]


@pytest.fixture
def fixed_today() -> pendulum.DateTime:
    return pendulum.datetime(2026, 10, 18)
