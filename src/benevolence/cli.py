"""Typer CLI entrypoint for scoring and filing applications."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .intake import IntakeValidationError, SubmissionLoadError, SubmissionLoader
from .logging import configure_logging
from .notifications import OutboxNotifier
from .records import JsonlApplicationStore, PersistenceError
from .schemas.config import load_config

app = typer.Typer(help="Benevolence application pre-scoring CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_name="config") from exc


def _load_submission(path: Path):
    try:
        return SubmissionLoader().load(path)
    except SubmissionLoadError as exc:
        raise typer.BadParameter(str(exc), param_name="submission") from exc


@app.command()
def score(
    submission: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Submission JSON path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write the report here instead of stdout."),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM-DD) for deadline urgency."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score a submission without filing it."""
    settings = _load_settings(config)
    configure_logging(log_level)

    fields, files = _load_submission(submission)
    engine = create_container(settings=settings).scoring_engine()
    report = engine.score(fields, files, as_of=as_of)

    rendered = json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        recommendation = report.recommendation
        typer.echo(
            f"Auto total {report.auto_total}/{recommendation.max_auto_points} ({recommendation.bracket}). "
            f"Report saved to {output}."
        )
    else:
        typer.echo(rendered)


@app.command()
def submit(
    submission: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Submission JSON path."),
    store: Path = typer.Option(..., dir_okay=False, help="Application records JSONL path."),
    outbox: Optional[Path] = typer.Option(None, file_okay=False, help="Directory for reviewer notifications."),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM-DD) for deadline urgency."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Validate, score, store and notify for one submission."""
    settings = _load_settings(config)
    configure_logging(log_level)

    fields, files = _load_submission(submission)
    container = create_container(settings=settings)
    processor = container.processor(
        repository=JsonlApplicationStore(store),
        notifier=OutboxNotifier(outbox) if outbox else None,
    )

    try:
        outcome = processor.process(fields, files, as_of=as_of)
    except IntakeValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except PersistenceError as exc:
        typer.echo(f"Failed to save application: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    typer.echo(
        f"Application {outcome.application_id} filed: "
        f"{outcome.report.auto_total}/{outcome.report.recommendation.max_auto_points}, "
        f"{outcome.report.recommendation.bracket}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
