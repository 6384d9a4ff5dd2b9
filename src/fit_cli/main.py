"""CLI entrypoint using typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, TypeVar

import structlog
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.table import Table

from fit_core.config.settings import Settings
from fit_core.constants import ALGORITHM_VERSION
from fit_core.exceptions import FitScoreError, InvalidCalibrationError, ProfileLoadError
from fit_core.models.breakdown import CalibrationModel
from fit_core.models.candidate import CandidateProfile
from fit_core.models.job import JobRequirements
from fit_core.models.report import FitResult, ScoreResult
from fit_engine.engine import FitScoreEngine
from fit_engine.observability import configure_logging, configure_tracing

T = TypeVar("T", bound=BaseModel)

app = typer.Typer(
    name="fit-score",
    help="Weighted, calibrated and explainable candidate/job fit scoring",
)
console = Console()
logger = structlog.get_logger()


@app.command()
def score(
    breakdown_file: Path = typer.Argument(..., help="JSON file with category sub-scores"),
    a: float | None = typer.Option(None, "--a", help="Logistic calibration slope"),
    b: float | None = typer.Option(None, "--b", help="Logistic calibration intercept"),
    reject_out_of_range: bool = typer.Option(
        False, "--reject-out-of-range", help="Fail instead of clamping sub-scores"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Score a breakdown of category sub-scores."""
    settings = _load_settings(verbose)
    if reject_out_of_range:
        settings.out_of_range_policy = "reject"

    try:
        model = _calibration_from_options(a, b)
        raw = _read_json(breakdown_file)
        result = FitScoreEngine(settings, calibration_model=model).score(raw)
    except FitScoreError as exc:
        _fail(exc)

    if as_json:
        console.print_json(result.model_dump_json())
        return
    _print_score(result)


@app.command()
def match(
    candidate_file: Path = typer.Argument(..., help="JSON file with the candidate profile"),
    job_file: Path = typer.Argument(..., help="JSON file with the job requirements"),
    report: bool = typer.Option(False, "--report", help="Include the explainability report"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Evaluate a candidate profile against a job."""
    settings = _load_settings(verbose)

    try:
        candidate = _load_model(candidate_file, CandidateProfile)
        job = _load_model(job_file, JobRequirements)
        engine = FitScoreEngine(settings)
        result = engine.evaluate(candidate, job)
    except FitScoreError as exc:
        _fail(exc)

    explainability = engine.explainability_report(result) if report else None

    if as_json:
        payload: dict[str, object] = {"result": result.model_dump(mode="json")}
        if explainability is not None:
            payload["report"] = explainability.model_dump(mode="json")
        console.print_json(json.dumps(payload))
        return

    _print_score(result)
    _print_evaluation(result)
    if explainability is not None:
        console.print("\n[bold]Recommendations:[/bold]")
        for line in explainability.recommendations or ["None"]:
            console.print(f"  {line}")
        console.print(
            f"\n[dim]{explainability.transparency.algorithm} "
            f"v{explainability.transparency.version}[/dim]"
        )


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"proof-of-fit v{ALGORITHM_VERSION}")


def _load_settings(verbose: bool) -> Settings:
    """Build settings from the environment and configure observability."""
    try:
        settings = Settings()
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings)
    configure_tracing(settings)
    return settings


def _calibration_from_options(a: float | None, b: float | None) -> CalibrationModel | None:
    """Build a calibration model when both coefficients are given."""
    if a is None and b is None:
        return None
    if a is None or b is None:
        msg = "--a and --b must be given together"
        raise InvalidCalibrationError(msg)
    try:
        return CalibrationModel(a=a, b=b)
    except ValidationError as exc:
        raise InvalidCalibrationError(str(exc)) from exc


def _read_json(path: Path) -> dict[str, object]:
    """Read a JSON object from disk."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"cannot read {path}: {exc}"
        raise ProfileLoadError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object"
        raise ProfileLoadError(msg)
    return data


def _load_model(path: Path, model: type[T]) -> T:
    """Read and validate a JSON file into a pydantic model."""
    data = _read_json(path)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        msg = f"invalid {model.__name__} in {path}: {exc}"
        raise ProfileLoadError(msg) from exc


def _fail(exc: Exception) -> NoReturn:
    """Report an error and exit with code 1."""
    logger.debug("cli_command_failed", error_type=type(exc).__name__)
    console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1) from exc


def _print_score(result: ScoreResult) -> None:
    console.print(f"[bold]Fit score:[/bold] {result.score}/100")
    console.print(f"  Probability: {result.probability:.3f}")
    if result.explanations:
        console.print("\n[bold]Observations:[/bold]")
        for line in result.explanations:
            console.print(f"  {line}")


def _print_evaluation(result: FitResult) -> None:
    table = Table(title="Breakdown")
    table.add_column("Category")
    table.add_column("Score", justify="right")
    for category, value in result.breakdown.present_items():
        table.add_row(category, f"{value:.0f}")
    console.print(table)

    console.print(f"  Confidence: {result.confidence:.2f}")
    console.print(f"  Reliability: {result.reliability.score}/100")
    for factor in result.reliability.factors:
        console.print(f"    [dim]{factor}[/dim]")

    if result.bias_check.passed:
        console.print("  [green]Bias check passed[/green]")
    else:
        console.print(f"  [yellow]Bias check failed ({result.bias_check.score}/100)[/yellow]")
    for warning in result.bias_check.warnings:
        console.print(f"    [yellow]{warning}[/yellow]")


if __name__ == "__main__":
    app()
