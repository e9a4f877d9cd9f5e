"""Reviewer notification rendering and delivery ports."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from html import escape
from pathlib import Path
from typing import Protocol, runtime_checkable

from .core import ScoringReport
from .schemas import ApplicationForm

PAST_DUE_COLOR = "#9B1C1C"
URGENT_COLOR = "#B8860B"
ON_TRACK_COLOR = "#2E6B3A"


@dataclass
class NotificationConfig:
    """Sender, reviewer inbox and review link settings."""

    review_base_url: str = "https://app.thepfsa.org/benevolence"
    sender: str = "The PFSA, Inc. <noreply@thepfsa.org>"
    recipients: list[str] = field(default_factory=lambda: ["info@thepfsa.org"])


@dataclass(slots=True)
class EmailMessage:
    application_id: str
    sender: str
    recipients: list[str]
    subject: str
    html: str


@runtime_checkable
class Notifier(Protocol):
    """Delivery channel for reviewer notifications."""

    def send(self, message: EmailMessage) -> None:
        """Deliver the message or raise on failure."""


def urgency_color(urgency_label: str) -> str:
    if urgency_label.startswith(("PAST DUE", "CRITICAL")):
        return PAST_DUE_COLOR
    if urgency_label.startswith("URGENT"):
        return URGENT_COLOR
    return ON_TRACK_COLOR


class NotificationEmailBuilder:
    """Render the reviewer email for a scored application."""

    def __init__(self, *, config: NotificationConfig | None = None) -> None:
        self._config = config or NotificationConfig()

    def build(self, *, application_id: str, form: ApplicationForm, report: ScoringReport) -> EmailMessage:
        return EmailMessage(
            application_id=application_id,
            sender=self._config.sender,
            recipients=list(self._config.recipients),
            subject=self.subject(form, report),
            html=self.html(application_id=application_id, form=form, report=report),
        )

    @staticmethod
    def subject(form: ApplicationForm, report: ScoringReport) -> str:
        applicant = form.full_name.strip() or "Unknown"
        return f"Benevolence Application - {applicant} - {report.recommendation.bracket}"

    def review_url(self, application_id: str) -> str:
        return f"{self._config.review_base_url.rstrip('/')}/{application_id}"

    def html(self, *, application_id: str, form: ApplicationForm, report: ScoringReport) -> str:
        financial = report.financial.metadata
        gap = float(financial.get("monthly_gap", 0.0))
        urgency_label = str(report.crisis.metadata.get("urgency_label", ""))
        recommendation = report.recommendation
        gap_color = PAST_DUE_COLOR if gap < 0 else ON_TRACK_COLOR
        deficit = " (DEFICIT)" if gap < 0 else ""

        summary_rows = "".join(
            _row(label, value)
            for label, value in (
                ("Name", form.full_name or "N/A"),
                ("Email", form.email or "N/A"),
                ("Phone", form.primary_phone or form.phone or "N/A"),
                ("Amount Requested", _money(financial.get("request_amount", 0.0))),
            )
        )
        summary_rows += _row("Deadline", urgency_label, color=urgency_color(urgency_label))

        score_rows = "".join(
            f'<tr><td style="padding:8px 12px;font-size:13px;color:#64748b;">{index}. {escape(title)}</td>'
            f'<td style="padding:8px 12px;font-size:14px;font-weight:bold;color:#1B3A5C;text-align:right;">'
            f"{result.score}/{result.max_score}</td></tr>"
            f'<tr><td colspan="2" style="padding:4px 12px 8px;font-size:12px;color:#64748b;'
            f'border-bottom:1px solid #e2e8f0;">{escape(result.detail)}</td></tr>'
            for index, (title, result) in enumerate(
                (
                    ("Completeness & Documentation", report.completeness),
                    ("Financial Assessment", report.financial),
                    ("Crisis Severity & Urgency", report.crisis),
                    ("Alternatives Explored", report.alternatives),
                ),
                start=1,
            )
        )

        snapshot_rows = (
            _row("Monthly Income", _money(financial.get("total_income", 0.0)))
            + _row("Monthly Expenses", _money(financial.get("total_expenses", 0.0)))
            + _row("Monthly Gap", f"{_money(gap)}{deficit}", color=gap_color)
            + _row("Liquid Savings", _money(financial.get("savings", 0.0)))
        )
        full_scale = recommendation.max_auto_points + (recommendation.high_estimate - recommendation.low_estimate)
        total_rows = _row(
            "Auto-Score Subtotal",
            f"{recommendation.auto_total}/{recommendation.max_auto_points}",
            color="#ffffff",
        ) + _row(
            "Estimated Full Range",
            f"{recommendation.low_estimate} to {recommendation.high_estimate} out of {full_scale}",
            color="#ffffff",
        )
        review_url = escape(self.review_url(application_id))

        return f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1.0"></head>
<body style="margin:0;padding:0;background-color:#f8fafc;font-family:Arial,Helvetica,sans-serif;">
  <table width="600" cellpadding="0" cellspacing="0" style="max-width:600px;width:100%;margin:0 auto;">
    <tr><td style="background-color:#1B3A5C;padding:32px 40px;text-align:center;">
      <h1 style="color:#ffffff;font-size:18px;margin:0;">Benevolence Application Received</h1>
    </td></tr>
    <tr><td style="background-color:#ffffff;padding:40px;">
      <h2 style="color:#1B3A5C;font-size:18px;">Applicant Summary</h2>
      <table width="100%" cellpadding="0" cellspacing="0">{summary_rows}</table>
      <h2 style="color:#1B3A5C;font-size:18px;">Auto-Score Breakdown</h2>
      <table width="100%" cellpadding="0" cellspacing="0">{score_rows}</table>
      <table width="100%" cellpadding="0" cellspacing="0" style="background-color:#1B3A5C;margin:16px 0;">
        {total_rows}
        <tr><td colspan="2" style="padding:8px 0;color:#B8860B;font-weight:bold;">{escape(recommendation.bracket)}</td></tr>
      </table>
      <h2 style="color:#1B3A5C;font-size:18px;">Financial Snapshot</h2>
      <table width="100%" cellpadding="0" cellspacing="0">{snapshot_rows}</table>
      <div style="border-left:3px solid #B8860B;padding:12px 16px;margin:24px 0;background-color:#fffbeb;">
        <p style="color:#333;font-size:13px;margin:0;"><strong>Recommendation:</strong> {escape(recommendation.recommendation)}</p>
      </div>
      <p style="text-align:center;"><a href="{review_url}" style="background-color:#B8860B;color:#ffffff;padding:12px 32px;text-decoration:none;">Review Application</a></p>
      <p style="color:#64748b;font-size:12px;text-align:center;">Reviewer must score Category 5 (Past Assistance) and Category 6 (Verification) to finalize.</p>
    </td></tr>
  </table>
</body>
</html>"""


class OutboxNotifier:
    """Write rendered notifications to a directory for a mail relay to pick up."""

    def __init__(self, directory: Path):
        self._directory = directory
        self._directory.mkdir(parents=True, exist_ok=True)

    def send(self, message: EmailMessage) -> None:
        html_path = self._directory / f"{message.application_id}.html"
        html_path.write_text(message.html, encoding="utf-8")
        headers = asdict(message)
        headers.pop("html")
        headers["body_path"] = html_path.name
        (self._directory / f"{message.application_id}.json").write_text(
            json.dumps(headers, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


def _money(value: object) -> str:
    return f"${float(value):,.2f}"


def _row(label: str, value: str, *, color: str = "#333") -> str:
    return (
        f'<tr><td style="color:#64748b;font-size:13px;padding:4px 0;">{escape(label)}:</td>'
        f'<td style="color:{color};font-size:13px;padding:4px 0;font-weight:bold;text-align:right;">'
        f"{escape(value)}</td></tr>"
    )
