"""
Credit Risk Scorer — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Execute action (score a batch, show a report, validate config).
  4. Report result to stdout; errors go to stderr with exit code 1.

Install and run::

    pip install -e .
    credit-risk --help
    credit-risk score --input customers.json --output report.json
    credit-risk show-report --file report.json
    credit-risk validate-config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="credit-risk",
    help="Credit Risk Scorer — score customers and report their risk tier.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from credit_risk.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from credit_risk.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("score")
def score(
    input_file: Optional[str] = typer.Option(
        None,
        "--input",
        "-i",
        help="Customer JSON file. Defaults to config.io.input_file.",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Report JSON destination. Defaults to config.io.output_file.",
    ),
    csv_file: Optional[str] = typer.Option(
        None,
        "--csv",
        help="Also write a flat CSV report to this path.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score every customer in the input file and write the report.

    \b
    Exit codes:
      0  report written, or the input had no customers
      1  input not found, input malformed, or unexpected failure
    """
    from credit_risk.ingestion.customer_json import SourceMalformedError, SourceNotFoundError
    from credit_risk.pipeline.score import ScoreStage
    from credit_risk.reporting.formatters import (
        format_credit_report,
        format_empty_notice,
        format_run_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    stage = ScoreStage(config=config)
    try:
        run = stage.run(
            input_path=Path(input_file) if input_file else None,
            output_path=Path(output_file) if output_file else None,
            csv_path=Path(csv_file) if csv_file else None,
        )
    except SourceNotFoundError as exc:
        typer.echo(f"[ERROR] Input file not found: {exc}", err=True)
        raise typer.Exit(code=1)
    except SourceMalformedError as exc:
        typer.echo(f"[ERROR] Invalid input format: {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Unexpected failure: {exc}", err=True)
        raise typer.Exit(code=1)

    result = stage.result
    if result is None or result.is_empty:
        typer.echo(format_empty_notice())
    else:
        typer.echo(format_credit_report(result.reports, result.summary))
        typer.echo("")
        for path in stage.written:
            typer.echo(f"Report saved to {path}")

    if config.debug:
        typer.echo(f"[DEBUG] {format_run_summary(run)}", err=True)


@app.command("show-report")
def show_report(
    report_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Report JSON to display. Defaults to config.io.output_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Print a previously written report JSON as a table."""
    from credit_risk.pipeline.batch import summarize_reports
    from credit_risk.reporting.formatters import format_credit_report
    from credit_risk.reporting.reader import load_report

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    path = Path(report_file) if report_file else Path(config.io.output_file)
    reports = load_report(path)
    if reports is None:
        typer.echo(
            f"[ERROR] No readable report at {path}; run 'credit-risk score' first.",
            err=True,
        )
        raise typer.Exit(code=1)

    typer.echo(format_credit_report(reports, summarize_reports(reports)))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Input file:   {config.io.input_file}")
    typer.echo(f"  Search dirs:  {', '.join(config.io.search_dirs) or '(none)'}")
    typer.echo(f"  Output file:  {config.io.output_file}")
    typer.echo(f"  CSV file:     {config.io.csv_file or '(disabled)'}")
    typer.echo(f"  Log level:    {config.logging.level}")
    typer.echo(f"  Debug mode:   {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
