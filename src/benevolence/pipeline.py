"""Application intake pipeline assembly and execution."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

import pendulum
import structlog

from .core import ScoringEngine, ScoringReport
from .intake import normalize_fields, validate_required
from .notifications import NotificationEmailBuilder, Notifier
from .records import ApplicationRecordBuilder, ApplicationRepository, PersistenceError
from .schemas import ApplicationForm, UploadedFile


@dataclass(slots=True)
class SubmissionOutcome:
    """Result handed back to the caller after a successful submission."""

    application_id: str
    report: ScoringReport
    record: dict[str, Any]
    notified: bool


class ApplicationProcessor:
    """End-to-end intake: validate, score, persist and notify."""

    def __init__(
        self,
        *,
        engine: ScoringEngine,
        repository: ApplicationRepository,
        notifier: Notifier | None = None,
        record_builder: ApplicationRecordBuilder | None = None,
        email_builder: NotificationEmailBuilder | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._engine = engine
        self._repository = repository
        self._notifier = notifier
        self._records = record_builder or ApplicationRecordBuilder()
        self._emails = email_builder or NotificationEmailBuilder()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._logger = structlog.get_logger(__name__)

    def process(
        self,
        fields: Mapping[str, Any],
        files: Iterable[UploadedFile | Mapping[str, Any]] = (),
        *,
        as_of: Any | None = None,
    ) -> SubmissionOutcome:
        normalized = normalize_fields(fields)
        validate_required(normalized)

        uploads = [
            item if isinstance(item, UploadedFile) else UploadedFile.model_validate(item)
            for item in files
        ]
        form = ApplicationForm.from_fields(normalized)
        application_id = self._id_factory()

        report = self._engine.score_form(form, uploads, as_of=as_of)
        self._logger.info(
            "application.scored",
            application_id=application_id,
            auto_total=report.auto_total,
            bracket=report.recommendation.bracket_code,
            scores={result.method: result.score for result in report.results},
        )

        record = self._records.build(
            application_id=application_id,
            form=form,
            report=report,
            uploaded_files=uploads,
            received_at=pendulum.now(),
        )
        try:
            self._repository.save(record)
        except PersistenceError:
            self._logger.error("application.save_failed", application_id=application_id)
            raise
        except OSError as exc:
            self._logger.error("application.save_failed", application_id=application_id, error=str(exc))
            raise PersistenceError(f"Failed to save application {application_id}") from exc
        self._logger.info("application.saved", application_id=application_id)

        notified = self._notify(application_id, form, report)
        return SubmissionOutcome(
            application_id=application_id,
            report=report,
            record=record,
            notified=notified,
        )

    def _notify(self, application_id: str, form: ApplicationForm, report: ScoringReport) -> bool:
        if self._notifier is None:
            return False
        message = self._emails.build(application_id=application_id, form=form, report=report)
        try:
            self._notifier.send(message)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning("notification.failed", application_id=application_id, error=str(exc))
            return False
        self._logger.info("notification.sent", application_id=application_id, recipients=message.recipients)
        return True
