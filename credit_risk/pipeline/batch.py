"""
Batch pipeline: scores a sequence of customers into reports.

Each customer goes through the score engine and then the risk classifier,
producing exactly one ``CustomerReport``.  Reports keep the input order; there
is no reordering, deduplication, or skipping.

A ``None`` entry in the input aborts the whole batch with
``NullInputError``.  A missing record is never replaced with a default score.

An empty input produces a ``BatchResult`` with ``status="empty"``.  Callers
must treat that as the explicit "no records" outcome (print a notice, write
nothing) rather than as an empty successful report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional

from credit_risk.models.customer import Customer
from credit_risk.models.report import BatchSummary, CustomerReport
from credit_risk.scoring.classifier import risk_label
from credit_risk.scoring.engine import compute_score
from credit_risk.taxonomy.risk_taxonomy import RiskTier

BatchStatus = Literal["success", "empty"]


@dataclass
class BatchResult:
    """Outcome of scoring one batch.

    Attributes:
        status:  ``"success"`` when at least one report was produced,
                 ``"empty"`` when the input had no customers.
        reports: One report per input customer, in input order.
        summary: Aggregate tier counts over ``reports``.
    """

    status: BatchStatus
    reports: list[CustomerReport] = field(default_factory=list)
    summary: BatchSummary = field(default_factory=BatchSummary)

    @property
    def is_empty(self) -> bool:
        return self.status == "empty"


def build_report(customer: Optional[Customer]) -> CustomerReport:
    """Score one customer and attach its risk tier.

    Raises:
        NullInputError: If ``customer`` is ``None``.
    """
    score = compute_score(customer)
    return CustomerReport(
        name=customer.name,
        credit_score=score,
        risk_status=risk_label(score),
    )


def generate_reports(customers: Iterable[Optional[Customer]]) -> list[CustomerReport]:
    """Map every customer to a report, preserving order."""
    return [build_report(customer) for customer in customers]


def summarize_reports(reports: list[CustomerReport]) -> BatchSummary:
    """Count reports per risk tier."""
    high = sum(1 for r in reports if r.risk_status == RiskTier.HIGH_RISK)
    low = sum(1 for r in reports if r.risk_status == RiskTier.LOW_RISK)
    return BatchSummary(total=len(reports), high_risk_count=high, low_risk_count=low)


def build_batch(customers: Iterable[Optional[Customer]]) -> BatchResult:
    """Score a whole batch.

    Args:
        customers: Input customers (any iterable; consumed once).

    Returns:
        ``BatchResult``; ``status="empty"`` when there were no customers.

    Raises:
        NullInputError: If any entry is ``None``; no partial result is returned.
    """
    reports = generate_reports(customers)
    if not reports:
        return BatchResult(status="empty")
    return BatchResult(status="success", reports=reports, summary=summarize_reports(reports))
