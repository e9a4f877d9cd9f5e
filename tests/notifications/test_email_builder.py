from __future__ import annotations

import json
from pathlib import Path

import pytest

from benevolence.core import ScoringEngine
from benevolence.notifications import (
    ON_TRACK_COLOR,
    PAST_DUE_COLOR,
    URGENT_COLOR,
    NotificationConfig,
    NotificationEmailBuilder,
    OutboxNotifier,
    urgency_color,
)
from benevolence.schemas import ApplicationForm


@pytest.fixture
def scored(complete_fields, required_files):
    form = ApplicationForm.from_fields(complete_fields)
    report = ScoringEngine().score_form(form, required_files, as_of="2026-10-18")
    return form, report


@pytest.mark.parametrize(
    ("label", "color"),
    [
        ("PAST DUE (2 days ago)", PAST_DUE_COLOR),
        ("CRITICAL (1 days)", PAST_DUE_COLOR),
        ("URGENT (6 days)", URGENT_COLOR),
        ("MODERATE (10 days)", ON_TRACK_COLOR),
        ("No deadline provided", ON_TRACK_COLOR),
    ],
)
def test_urgency_color(label, color):
    assert urgency_color(label) == color


def test_message_headers(scored):
    form, report = scored
    builder = NotificationEmailBuilder(
        config=NotificationConfig(review_base_url="https://review.example.org/apps/", recipients=["a@example.org"])
    )

    message = builder.build(application_id="APP-1", form=form, report=report)

    assert message.subject == "Benevolence Application - Jordan Avery - LIKELY HIGH NEED (30-35 range possible)"
    assert message.recipients == ["a@example.org"]
    assert builder.review_url("APP-1") == "https://review.example.org/apps/APP-1"
    assert 'href="https://review.example.org/apps/APP-1"' in message.html


def test_subject_falls_back_to_unknown(scored):
    _, report = scored
    form = ApplicationForm.from_fields({"full_name": "   "})

    assert NotificationEmailBuilder.subject(form, report).startswith("Benevolence Application - Unknown - ")


def test_html_shows_scores_and_financial_snapshot(scored):
    form, report = scored

    html = NotificationEmailBuilder().html(application_id="APP-1", form=form, report=report)

    assert "8/10" in html
    assert "23/25" in html
    assert "23 to 33 out of 35" in html
    assert "$-320.00 (DEFICIT)" in html
    assert "$2,420.00" in html
    assert "CRITICAL (2 days)" in html
    assert PAST_DUE_COLOR in html


def test_html_escapes_applicant_text(complete_fields, required_files):
    form = ApplicationForm.from_fields(dict(complete_fields, full_name="<b>Jo & Co</b>"))
    report = ScoringEngine().score_form(form, required_files, as_of="2026-10-18")

    html = NotificationEmailBuilder().html(application_id="APP-1", form=form, report=report)

    assert "&lt;b&gt;Jo &amp; Co&lt;/b&gt;" in html
    assert "<b>Jo" not in html


def test_outbox_notifier_writes_body_and_headers(tmp_path: Path, scored):
    form, report = scored
    message = NotificationEmailBuilder().build(application_id="APP-1", form=form, report=report)

    OutboxNotifier(tmp_path / "outbox").send(message)

    html_path = tmp_path / "outbox" / "APP-1.html"
    headers = json.loads((tmp_path / "outbox" / "APP-1.json").read_text(encoding="utf-8"))
    assert html_path.read_text(encoding="utf-8") == message.html
    assert headers["subject"] == message.subject
    assert headers["recipients"] == ["info@thepfsa.org"]
    assert headers["body_path"] == "APP-1.html"
    assert "html" not in headers
