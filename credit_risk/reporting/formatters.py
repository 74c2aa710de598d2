"""
ASCII terminal formatters for CLI reporting commands.

All formatters return plain multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Layout of the credit report::

  === Credit Risk Management Report ===

  Name                 Credit Score    Risk Status
  --------------------------------------------------
  Alice                56              Low Risk
  --------------------------------------------------
  Total Customers: 1
  High Risk Customers: 0
  Low Risk Customers: 1

Columns are left-aligned and padded (20 / 15 / 15); long names are not
truncated and simply push the row wider.
"""

from __future__ import annotations

from credit_risk.models.meta import RunMetadata
from credit_risk.models.report import BatchSummary, CustomerReport

NAME_WIDTH = 20
SCORE_WIDTH = 15
STATUS_WIDTH = 15
RULE = "-" * 50

EMPTY_INPUT_NOTICE = "No customers found in the input file."


def format_report_row(name: str, score: object, status: object) -> str:
    """Return one padded table row (also used for the header)."""
    return f"{name:<{NAME_WIDTH}} {str(score):<{SCORE_WIDTH}} {str(status):<{STATUS_WIDTH}}"


def format_summary_lines(summary: BatchSummary) -> list[str]:
    return [
        f"Total Customers: {summary.total}",
        f"High Risk Customers: {summary.high_risk_count}",
        f"Low Risk Customers: {summary.low_risk_count}",
    ]


def format_credit_report(reports: list[CustomerReport], summary: BatchSummary) -> str:
    """Format reports and their summary as an ASCII table.

    Args:
        reports: Reports in display order.
        summary: Aggregate counts for the trailing lines.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Credit Risk Management Report ===")
    lines.append("")
    lines.append(format_report_row("Name", "Credit Score", "Risk Status"))
    lines.append(RULE)
    for r in reports:
        lines.append(format_report_row(r.name, r.credit_score, r.risk_status.value))
    lines.append(RULE)
    lines.extend(format_summary_lines(summary))
    return "\n".join(lines)


def format_empty_notice() -> str:
    return EMPTY_INPUT_NOTICE


def format_run_summary(run: RunMetadata) -> str:
    """One-line audit summary of a finished stage run.

    Example::

        run 3f2c... | stage=score | status=success | rows=3 | elapsed=0.004s
    """
    parts = [
        f"run {run.run_slug}",
        f"stage={run.pipeline_stage}",
        f"status={run.status}",
        f"rows={run.rows_processed}",
    ]
    if run.finished_at is not None:
        elapsed = (run.finished_at - run.started_at).total_seconds()
        parts.append(f"elapsed={elapsed:.3f}s")
    if run.error_message:
        parts.append(f"error={run.error_message}")
    return " | ".join(parts)
