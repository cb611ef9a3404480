"""pfreporter CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pfreporter import __version__
from pfreporter._constants import DEFAULT_CONFIG
from pfreporter._logging import setup_logging, uvicorn_log_config
from pfreporter.config import (
    ConfigError,
    OutputFormat,
    ReporterConfig,
    generate_example_config_yaml,
    load_config,
)
from pfreporter.extract import ExtractedRecord, ExtractionError, extract_report
from pfreporter.fetch import ReportClient, ReportSourceError
from pfreporter.reports import records_to_csv, records_to_json_text

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pfreporter",
    help="Fetch performance farm reports and serve them as JSON, CSV or HTML",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    epilog="[dim]Workflow: init -> validate -> serve[/dim]",
)

console = Console()


# =============================================================================
# Helper Functions
# =============================================================================


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]OK[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]ERROR[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]...[/blue] {message}")


def _load_config_or_exit(config_file: Path | None) -> ReporterConfig:
    """Load configuration, printing the error and exiting 1 on failure."""
    try:
        return load_config(config_file)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904


def _print_records(records: list[ExtractedRecord], output_format: OutputFormat) -> None:
    """Print records in the requested format."""
    if output_format == OutputFormat.JSON:
        console.print_json(records_to_json_text(records))
        return

    if output_format == OutputFormat.CSV:
        # Plain print keeps rich from wrapping or styling the CSV
        print(records_to_csv(records), end="")
        return

    if not records:
        print_info("No records found")
        return

    table = Table()
    table.add_column("Scale", style="cyan")
    table.add_column("Branch")
    table.add_column("Commit Date")
    table.add_column("Commit")
    table.add_column("Metric", justify="right")
    for r in records:
        table.add_row(r.scale, r.branch, r.commit_date, r.commit, f"{r.metric:.2f}")
    console.print(table)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"pfreporter version {__version__}")


@app.command()
def init(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path for configuration",
        ),
    ] = Path(DEFAULT_CONFIG),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Write a starter configuration file."""
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        print_info("Use --force to overwrite")
        raise typer.Exit(1)

    output.write_text(generate_example_config_yaml())
    print_success(f"Configuration written to {output}")


@app.command()
def validate(
    config_file: Annotated[
        Path | None,
        typer.Argument(help=f"Path to configuration file (default: ./{DEFAULT_CONFIG})"),
    ] = None,
) -> None:
    """Validate a configuration file."""
    path = config_file or Path(DEFAULT_CONFIG)
    if not path.exists():
        print_error(f"Configuration file not found: {path}")
        raise typer.Exit(1)

    cfg = _load_config_or_exit(path)
    console.print(
        Panel(
            f"Upstream: {cfg.upstream.base_url} (timeout {cfg.upstream.timeout_seconds:g}s)\n"
            f"Server:   {cfg.server.host}:{cfg.server.port}\n"
            f"Markers:  scale=<{cfg.markers.scale}> branch=<{cfg.markers.branch}> "
            f"table=<{cfg.markers.table}>",
            title=str(path),
            expand=False,
        )
    )
    print_success("Configuration is valid")


@app.command()
def serve(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help=f"Path to configuration file (default: ./{DEFAULT_CONFIG} if present)",
        ),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", help="Address to bind (overrides config)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (overrides config)"),
    ] = None,
) -> None:
    """Run the report web server."""
    import uvicorn

    from pfreporter.server import create_app

    cfg = _load_config_or_exit(config_file)
    level = cfg.logging.level.value
    setup_logging(level, rich=False)

    bind_host = host or cfg.server.host
    bind_port = port or cfg.server.port
    logger.info(f"Server starting at http://{bind_host}:{bind_port}")

    uvicorn.run(
        create_app(cfg),
        host=bind_host,
        port=bind_port,
        log_config=uvicorn_log_config(level),
    )


@app.command()
def extract(
    test: Annotated[str, typer.Argument(help="Test name, e.g. dbt2")],
    plant: Annotated[str, typer.Argument(help="Plant name, e.g. fireweed")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format"),
    ] = OutputFormat.TABLE,
    raw_scale: Annotated[
        bool,
        typer.Option("--raw-scale", help="Keep full scale headings, e.g. '100 Warehouses'"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Fetch a report from the performance farm and print its records."""
    cfg = _load_config_or_exit(config_file)
    setup_logging("DEBUG" if verbose else cfg.logging.level.value)

    client = ReportClient(
        base_url=cfg.upstream.base_url,
        timeout_seconds=cfg.upstream.timeout_seconds,
    )
    try:
        html = client.fetch_report(test, plant)
        records = extract_report(
            html,
            markers=cfg.markers.to_markers(),
            clean_scale=not raw_scale,
        )
    except (ReportSourceError, ExtractionError) as e:
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904

    _print_records(records, output_format)


@app.command()
def parse(
    file: Annotated[Path, typer.Argument(help="Saved report page (HTML)")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format"),
    ] = OutputFormat.TABLE,
    raw_scale: Annotated[
        bool,
        typer.Option("--raw-scale", help="Keep full scale headings, e.g. '100 Warehouses'"),
    ] = False,
) -> None:
    """Extract records from a saved report page."""
    if not file.exists():
        print_error(f"File not found: {file}")
        raise typer.Exit(1)

    cfg = _load_config_or_exit(config_file)
    try:
        records = extract_report(
            file.read_text(errors="replace"),
            markers=cfg.markers.to_markers(),
            clean_scale=not raw_scale,
        )
    except ExtractionError as e:
        print_error(str(e))
        raise typer.Exit(1)  # noqa: B904

    _print_records(records, output_format)


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
