"""
Report writers: structured JSON and flat CSV.

All functions write to disk and return the written ``Path``.  Parent
directories are created when missing.

The JSON file is the durable, re-readable form of a run (see
``credit_risk.reporting.reader.load_report``)::

    [
      {"Name": "Alice", "CreditScore": 56, "RiskStatus": "Low Risk"},
      ...
    ]

The CSV file has the same three columns and loads directly in Excel or
pandas without any pre-processing step.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path

from credit_risk.models.report import REPORT_FIELDS, CustomerReport

logger = logging.getLogger(__name__)


def export_reports_to_json(reports: list[CustomerReport], path: Path) -> Path:
    """Write ``reports`` to a pretty-printed JSON array.

    Args:
        reports: Reports in the order they should appear.
        path:    Destination file path.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.to_record() for r in reports]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Report JSON written: %s (%d rows)", path, len(reports))
    return path


def export_reports_to_csv(reports: list[CustomerReport], path: Path) -> Path:
    """Write ``reports`` to a UTF-8 CSV file with a header row.

    Args:
        reports: Reports in the order they should appear.
        path:    Destination file path.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(REPORT_FIELDS))
        writer.writeheader()
        writer.writerows(r.to_record() for r in reports)
    logger.info("Report CSV written: %s (%d rows)", path, len(reports))
    return path
