from __future__ import annotations

import pendulum
import pytest

from benevolence.core.evaluators import CrisisEvaluator
from benevolence.schemas import ApplicationForm


@pytest.fixture
def evaluator(fixed_today: pendulum.DateTime) -> CrisisEvaluator:
    return CrisisEvaluator(now_provider=lambda: fixed_today)


def build_submission(**fields: str) -> dict:
    return ApplicationForm.from_fields(fields).model_dump(mode="python")


def test_single_flag_without_deadline(evaluator):
    result = evaluator.evaluate(build_submission(assist_utilities="Yes"), {})

    assert result["metadata"]["urgency_label"] == "No deadline provided"
    assert result["metadata"]["urgency_bonus"] == 0
    assert result["metadata"]["days_until_deadline"] is None
    assert result["score"] == 2
    assert result["detail"] == "Type: utilities | Urgency: No deadline provided"


def test_no_assistance_type_forces_zero(evaluator):
    result = evaluator.evaluate(build_submission(funds_deadline="2026-10-19"), {})

    assert result["score"] == 0
    assert result["detail"] == "Type: None selected | Urgency: CRITICAL (1 days)"


def test_past_due_rent_hits_the_cap(evaluator):
    result = evaluator.evaluate(
        build_submission(assist_rent="Yes", funds_deadline="2026-10-16"),
        {},
    )

    assert result["metadata"]["days_until_deadline"] == -2
    assert result["metadata"]["urgency_label"] == "PAST DUE (2 days ago)"
    assert result["score"] == 5


@pytest.mark.parametrize(
    ("deadline", "label", "bonus"),
    [
        ("2026-10-18", "CRITICAL (0 days)", 2),
        ("2026-10-21", "CRITICAL (3 days)", 2),
        ("2026-10-22", "URGENT (4 days)", 1),
        ("2026-10-25", "URGENT (7 days)", 1),
        ("2026-10-26", "MODERATE (8 days)", 0),
        ("2026-11-01", "MODERATE (14 days)", 0),
        ("2026-11-17", "STANDARD (30 days)", 0),
    ],
)
def test_urgency_windows(evaluator, deadline, label, bonus):
    result = evaluator.evaluate(
        build_submission(assist_transportation="Yes", funds_deadline=deadline),
        {},
    )

    assert result["metadata"]["urgency_label"] == label
    assert result["metadata"]["urgency_bonus"] == bonus
    # transportation severity 3 -> round(1.8) == 2
    assert result["score"] == min(5, 2 + bonus)


def test_max_severity_wins_and_types_are_listed(evaluator):
    result = evaluator.evaluate(
        build_submission(
            assist_home_repair="Yes",
            assist_rent="Yes",
            funds_deadline="2026-10-23",
        ),
        {},
    )

    assert result["metadata"]["max_severity"] == 5
    assert result["metadata"]["assistance_types"] == ["rent", "home repair"]
    assert result["score"] == 4


def test_only_exact_yes_counts(evaluator):
    result = evaluator.evaluate(
        build_submission(assist_rent="yes", assist_food="true"),
        {},
    )

    assert result["score"] == 0
    assert result["metadata"]["assistance_types"] == []


def test_context_as_of_overrides_clock(evaluator):
    result = evaluator.evaluate(
        build_submission(assist_medical="Yes", funds_deadline="2026-10-18"),
        {"as_of": "2026-10-01"},
    )

    assert result["metadata"]["days_until_deadline"] == 17
    assert result["metadata"]["as_of"] == "2026-10-01"
    assert result["score"] == 3


def test_unreadable_deadline_earns_no_bonus(evaluator):
    result = evaluator.evaluate(
        build_submission(assist_food="Yes", funds_deadline="next friday"),
        {},
    )

    assert result["metadata"]["days_until_deadline"] is None
    assert result["metadata"]["urgency_label"] == "Unrecognized deadline (next friday)"
    assert result["score"] == 2


def test_score_is_bounded_with_every_flag(evaluator):
    fields = {
        name: "Yes"
        for name in (
            "assist_rent",
            "assist_utilities",
            "assist_medical",
            "assist_food",
            "assist_transportation",
            "assist_home_repair",
            "assist_other",
        )
    }
    result = evaluator.evaluate(build_submission(funds_deadline="2026-01-01", **fields), {})

    assert result["score"] == 5
    assert len(result["metadata"]["assistance_types"]) == 7


@pytest.mark.parametrize("deadline", ["now", "10:00", "2026", "10/20/2026", "2026-02-30"])
def test_non_calendar_deadlines_earn_no_bonus(evaluator, deadline):
    result = evaluator.evaluate(
        build_submission(assist_transportation="Yes", funds_deadline=deadline),
        {},
    )

    assert result["metadata"]["days_until_deadline"] is None
    assert result["metadata"]["urgency_bonus"] == 0
    assert result["metadata"]["urgency_label"] == f"Unrecognized deadline ({deadline})"
    assert result["score"] == 2
