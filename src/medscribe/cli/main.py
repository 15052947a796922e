"""CLI for medscribe: extract / export / print commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from medscribe.core.config import AppSettings, ObservabilityConfig
from medscribe.core.logging_config import setup_logging
from medscribe.extraction.fields import extract as extract_fields
from medscribe.exceptions import MedscribeError
from medscribe.formatters.html_snapshot import SnapshotRenderer, StaticMarkupSource
from medscribe.services.export_service import DEFAULT_FORMATS, ReportExporter

app = typer.Typer(name="medscribe", help="Clinical report field extraction and export")
console = Console()

_FRAGMENT_ID = "report-content"


def _configure_logging(verbose: bool) -> None:
    setup_logging(ObservabilityConfig(log_level="DEBUG" if verbose else "WARNING"))


def _read_report(report_file: Path) -> str:
    try:
        return report_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {report_file}: {exc}") from exc


def _fail(exc: MedscribeError) -> None:
    console.print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


@app.command()
def extract(
    report_file: Path = typer.Argument(..., help="Generated report text file"),
    specialty: Optional[str] = typer.Option(None, help="Specialty selected by the user"),
    as_json: bool = typer.Option(False, "--json", help="Print the storage record as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Extract structured clinical fields from a report."""
    _configure_logging(verbose)
    fields = extract_fields(_read_report(report_file), specialty)

    if as_json:
        typer.echo(json.dumps(fields.to_record(), indent=2))
        return

    table = Table(title="Extracted Fields")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for name, value in fields.to_record().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(name, "" if value is None else str(value))
    console.print(table)


@app.command()
def export(
    report_file: Path = typer.Argument(..., help="Generated report text file"),
    fmt: str = typer.Option("pdf", "--format", "-f", help="pdf, docx, txt or all"),
    out: Path = typer.Option(Path("."), "--out", "-o", help="Output directory"),
    specialty: Optional[str] = typer.Option(None, help="Specialty selected by the user"),
    patient_name: Optional[str] = typer.Option(None, "--patient-name", help="Override the extracted name"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a report to PDF, DOCX and/or plain text."""
    _configure_logging(verbose)
    text = _read_report(report_file)
    exporter = ReportExporter(AppSettings())
    formats = list(DEFAULT_FORMATS) if fmt.lower() == "all" else [fmt]

    overrides = {"patient_name": patient_name} if patient_name else {}
    try:
        artifacts = exporter.export_all(text, specialty, formats=formats, **overrides)
    except MedscribeError as exc:
        _fail(exc)
        return

    table = Table(title="Exported Artifacts")
    table.add_column("Kind", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Bytes", justify="right")
    for artifact in artifacts.values():
        path = artifact.write_to(out)
        table.add_row(artifact.kind.value, str(path), str(artifact.size))
    console.print(table)


@app.command(name="print")
def print_snapshot(
    markup_file: Path = typer.Argument(..., help="HTML fragment rendered for the report"),
    save: Optional[Path] = typer.Option(None, help="Also save the snapshot to this directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Wrap a rendered report fragment in a print document and open it."""
    _configure_logging(verbose)
    source = StaticMarkupSource({_FRAGMENT_ID: _read_report(markup_file)})
    renderer = SnapshotRenderer(AppSettings().snapshot)
    try:
        artifact = renderer.render_printable(source, _FRAGMENT_ID)
    except MedscribeError as exc:
        _fail(exc)
        return

    if save:
        path = artifact.write_to(save)
        console.print(f"[green]Snapshot saved to {path}[/green]")
    console.print("[bold]Print document opened[/bold]")


if __name__ == "__main__":
    app()
