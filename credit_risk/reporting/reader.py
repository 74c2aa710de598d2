"""
Report reader: loads a previously written report JSON back into models.

Loaders return ``None`` rather than raising when the file is missing or
unreadable, so CLI commands can emit a friendly "no report yet" message
without try/except at the call site.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from credit_risk.models.report import CustomerReport

logger = logging.getLogger(__name__)


def load_report(path: Path) -> list[CustomerReport] | None:
    """Load a report JSON written by ``export_reports_to_json``.

    Keys are matched case-insensitively, like the customer input.

    Args:
        path: Report file path.

    Returns:
        Reports in file order, or None if the file is missing, is not a JSON
        array, or any record fails validation.
    """
    if not path.is_file():
        logger.debug("No report found at %s", path)
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8-sig"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Failed to load report %s: %s", path, exc)
        return None

    if not isinstance(raw, list):
        logger.warning("Report %s is not a JSON array", path)
        return None

    try:
        return [CustomerReport.model_validate(_normalize_keys(r)) for r in raw]
    except (ValidationError, TypeError) as exc:
        logger.warning("Report %s has invalid records: %s", path, exc)
        return None


def _normalize_keys(record: dict) -> dict:
    """Map any casing of the report keys onto their canonical aliases."""
    if not isinstance(record, dict):
        raise TypeError(f"Expected a JSON object, got {type(record).__name__}.")
    canonical = {
        alias.lower(): alias
        for alias in (f.alias for f in CustomerReport.model_fields.values())
        if alias
    }
    return {canonical.get(str(k).lower(), k): v for k, v in record.items()}
