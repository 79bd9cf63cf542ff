"""CLI interface for profile-health."""

import json
import logging
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from profile_health.consts import SCORE_COLOR_BANDS, SCORE_COLOR_FLOOR, STATUS_COLORS
from profile_health.evaluators.registry import EvaluatorRegistry
from profile_health.models.model_eval import Category, ScoringConfig
from profile_health.models.model_score import HealthStatus, OverallResult
from profile_health.models.model_storage import AuditRecord
from profile_health.pipeline import (
    SnapshotLoadError,
    build_audit_record,
    load_snapshot,
    run_scoring_pipeline,
)

app = typer.Typer(
    name="profile-health",
    help="profile-health - Score business directory profiles for completeness and health",
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _get_score_color(score: float) -> str:
    """Get color for score display."""
    for threshold, color in SCORE_COLOR_BANDS:
        if score >= threshold:
            return color
    return SCORE_COLOR_FLOOR


def _get_status_color(status: HealthStatus) -> str:
    """Get color for status badge."""
    return STATUS_COLORS.get(status.value, "white")


def _category_label(category: Category) -> str:
    if category == Category.Q_AND_A:
        return "Q&A"
    return category.value.replace("_", " ").title()


def _parse_now(now: str | None) -> datetime | None:
    if now is None:
        return None
    try:
        return datetime.fromisoformat(now)
    except ValueError:
        console.print(
            f"[red]Error:[/red] Invalid --now '{escape(now)}'. "
            "Use ISO 8601, e.g. 2024-06-01T12:00:00+00:00"
        )
        raise typer.Exit(1)


def _render_result(title: str, result: OverallResult, config: ScoringConfig) -> None:
    """Print the category table, status badge, issues and recommendations."""
    table = Table(title=escape(title))
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Percent", justify="right")
    table.add_column("Weight", justify="right", style="magenta")
    table.add_column("Issues", justify="right", style="yellow")

    for category, section in result.breakdown.items():
        pct = section.percentage
        color = _get_score_color(pct)
        table.add_row(
            _category_label(category),
            f"{section.score}/{section.max_score}",
            f"[{color}]{pct:.0f}%[/{color}]",
            str(config.weights.for_category(category)),
            str(len(section.issues)),
        )

    console.print(table)

    score_color = _get_score_color(result.overall_score)
    status_color = _get_status_color(result.status)
    console.print(
        f"\n[bold]Overall:[/bold] [{score_color}]{result.overall_score}/100[/{score_color}]  "
        f"[bold {status_color}]{result.status.value.upper()}[/bold {status_color}]"
    )

    if result.issues:
        console.print("\n[bold]Issues[/bold]")
        for category, section in result.breakdown.items():
            for issue in section.issues:
                console.print(f"  [red]-[/red] [dim]{_category_label(category)}:[/dim] {escape(issue)}")

    if result.recommendations:
        console.print("\n[bold]Recommendations[/bold]")
        for recommendation in result.recommendations:
            console.print(f"  [green]+[/green] {escape(recommendation)}")


def _print_records_json(records: list[AuditRecord]) -> None:
    payload = [record.model_dump(mode="json") for record in records]
    # Plain print: output must stay valid JSON
    print(json.dumps(payload if len(payload) != 1 else payload[0], indent=2))


@app.command()
def score(
    snapshots: list[Path] = typer.Argument(..., help="Snapshot JSON file(s) to score"),
    now: str = typer.Option(None, "--now", help="Reference time (ISO 8601), defaults to now"),
    business_id: str = typer.Option(None, "--business-id", help="Business ID for the audit record"),
    as_json: bool = typer.Option(False, "--json", help="Print audit records as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Score one or more profile snapshots."""
    _configure_logging(verbose)

    registry = EvaluatorRegistry()
    context = registry.build_context(_parse_now(now))

    records: list[AuditRecord] = []
    for path in snapshots:
        try:
            snapshot = load_snapshot(path)
        except SnapshotLoadError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

        result = registry.evaluate(snapshot, now=context.now)
        records.append(
            build_audit_record(
                result,
                evaluated_at=context.now,
                business_id=business_id or path.stem,
            )
        )

        if not as_json:
            _render_result(snapshot.name or path.name, result, registry.config)

    if as_json:
        _print_records_json(records)


@app.command()
def batch(
    directory: Path = typer.Argument(..., help="Directory of snapshot JSON files"),
    now: str = typer.Option(None, "--now", help="Reference time (ISO 8601), defaults to now"),
    as_json: bool = typer.Option(False, "--json", help="Print audit records as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Score every snapshot in a directory, skipping files that fail to load."""
    _configure_logging(verbose)

    if not directory.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {directory}")
        raise typer.Exit(1)

    paths = sorted(directory.glob("*.json"))
    if not paths:
        console.print(f"[yellow]No snapshot files found in {directory}.[/yellow]")
        return

    records = run_scoring_pipeline(paths, now=_parse_now(now))

    if as_json:
        _print_records_json(records)
        return

    table = Table(title=f"Profile Health ({len(records)}/{len(paths)} scored)")
    table.add_column("Business", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")
    table.add_column("Issues", justify="right", style="yellow")

    for record in sorted(records, key=lambda r: r.score, reverse=True):
        score_color = _get_score_color(record.score)
        status_color = _get_status_color(record.status)
        table.add_row(
            escape(record.business_id or "-"),
            f"[{score_color}]{record.score}[/{score_color}]",
            f"[{status_color}]{record.status.value}[/{status_color}]",
            str(len(record.audit_data.issues)),
        )

    console.print(table)

    skipped = len(paths) - len(records)
    if skipped:
        console.print(f"\n[yellow]{skipped} file(s) skipped (see warnings).[/yellow]")


@app.command()
def weights() -> None:
    """Show category weights and status thresholds."""
    config = ScoringConfig()

    table = Table(title="Category Weights")
    table.add_column("Category", style="cyan")
    table.add_column("Weight", justify="right", style="magenta")
    for category in Category:
        table.add_row(_category_label(category), str(config.weights.for_category(category)))
    table.add_row("[bold]Total[/bold]", f"[bold]{config.weights.total}[/bold]")
    console.print(table)

    thresholds = config.status_thresholds
    status_table = Table(title="Status Thresholds")
    status_table.add_column("Status")
    status_table.add_column("Minimum Score", justify="right")
    for status, minimum in [
        (HealthStatus.EXCELLENT, thresholds.excellent),
        (HealthStatus.GOOD, thresholds.good),
        (HealthStatus.NEEDS_WORK, thresholds.needs_work),
        (HealthStatus.POOR, 0),
    ]:
        color = _get_status_color(status)
        status_table.add_row(f"[{color}]{status.value}[/{color}]", str(minimum))
    console.print(status_table)
    console.print(f"\nRecency window: {config.recency_window_days} days")


if __name__ == "__main__":
    app()
