"""
ScoreStage — load customers, score them, export the report.

Steps:
  1. Resolve the input file (explicit path, else ``config.io.input_file``
     looked up via ``config.io.search_dirs``) and load customers.
  2. ``build_batch()`` — score engine + risk classifier per customer.
  3. Empty batch → mark the run ``skipped`` and write nothing.
  4. Otherwise write the report JSON (and the CSV when configured).

The batch result and the written paths stay on the stage instance
(``stage.result``, ``stage.written``) for the caller to display.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from credit_risk.config import AppConfig
from credit_risk.ingestion.customer_json import load_customers, resolve_input_path
from credit_risk.models.meta import RunMetadata
from credit_risk.pipeline.base import PipelineStage
from credit_risk.pipeline.batch import BatchResult, build_batch
from credit_risk.reporting.export import export_reports_to_csv, export_reports_to_json

logger = logging.getLogger(__name__)


class ScoreStage(PipelineStage):
    """Score every customer in the input file and write the report."""

    stage_name = "score"

    def __init__(self, config: AppConfig) -> None:
        super().__init__(config)
        self.result: Optional[BatchResult] = None
        self.written: list[Path] = []

    def _execute(
        self,
        run: RunMetadata,
        input_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
        csv_path: Optional[Path] = None,
        **kwargs,
    ) -> int:
        io = self.config.io
        self.written = []

        source = resolve_input_path(input_path or io.input_file, io.search_dirs)
        customers = load_customers(source)

        self.result = build_batch(customers)
        if self.result.is_empty:
            logger.warning("No customers in %s; nothing written", source)
            run.status = "skipped"
            return 0

        reports = self.result.reports
        self.written.append(
            export_reports_to_json(reports, Path(output_path or io.output_file))
        )

        csv_target = csv_path or (Path(io.csv_file) if io.csv_file else None)
        if csv_target is not None:
            self.written.append(export_reports_to_csv(reports, Path(csv_target)))

        summary = self.result.summary
        logger.info(
            "Scored %d customers | high_risk=%d | low_risk=%d",
            summary.total, summary.high_risk_count, summary.low_risk_count,
        )
        return len(reports)
