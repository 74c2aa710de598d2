"""
Abstract base class for pipeline stages.

Every stage follows the same contract:
  1. Receive ``AppConfig`` at construction.
  2. ``run(**kwargs)`` is the sole public API.
  3. ``run()`` creates a ``RunMetadata`` record, calls ``_execute()``,
     and finalizes the record with its end status.
  4. ``_execute()`` is the stage-specific implementation (overridden by subclasses).

Run records are kept in memory and logged; nothing is persisted.
Stages never swallow exceptions: failures are recorded, logged and re-raised
so the CLI can turn them into a user-facing message.

Usage::

    class MyStage(PipelineStage):
        stage_name = "score"

        def _execute(self, run: RunMetadata, **kwargs) -> int:
            # Do work, return row count
            return 42

    stage = MyStage(config=app_config)
    run = stage.run(input_path=Path("customers.json"))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from uuid import uuid4

from credit_risk.config import AppConfig
from credit_risk.models.meta import RunMetadata

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(tz=timezone.utc)


class PipelineStage(ABC):
    """Abstract base for pipeline stages.

    Subclasses must:
      1. Set ``stage_name`` class variable.
      2. Implement ``_execute(run, **kwargs) -> int``.

    ``_execute`` may set ``run.status = "skipped"`` itself when there was
    nothing to do; ``run()`` only promotes a still-``"started"`` run to
    ``"success"``.

    Attributes:
        stage_name: String identifier matching a valid ``RunMetadata.pipeline_stage``.
        config: The application configuration for this run.
    """

    stage_name: str  # Override in subclass

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.last_run: RunMetadata | None = None

    def run(self, **kwargs) -> RunMetadata:
        """Execute this pipeline stage.

        Args:
            **kwargs: Stage-specific keyword arguments passed to ``_execute()``.

        Returns:
            ``RunMetadata`` with final ``status``, ``rows_processed``,
            and ``finished_at`` set.

        Raises:
            Exception: Re-raises any exception from ``_execute()`` after
                recording ``status='failed'`` in the run record.
        """
        run = RunMetadata(
            run_slug=str(uuid4()),
            pipeline_stage=self.stage_name,
            config_snapshot=self.config.model_dump(),
            started_at=utcnow(),
        )
        self.last_run = run
        logger.info("Stage [%s] starting | run_slug=%s", self.stage_name, run.run_slug)

        try:
            rows = self._execute(run=run, **kwargs)
        except Exception as exc:
            run.status = "failed"
            run.error_message = str(exc)
            run.finished_at = utcnow()
            logger.error(
                "Stage [%s] FAILED: %s | run_slug=%s",
                self.stage_name, exc, run.run_slug,
            )
            raise

        if run.status == "started":
            run.status = "success"
        run.rows_processed = rows
        run.finished_at = utcnow()
        logger.info(
            "Stage [%s] %s | rows=%d | run_slug=%s",
            self.stage_name, run.status, rows, run.run_slug,
        )
        return run

    @abstractmethod
    def _execute(self, run: RunMetadata, **kwargs) -> int:
        """Stage-specific implementation.

        Args:
            run: The in-progress ``RunMetadata`` record (mutable).
            **kwargs: Stage-specific parameters.

        Returns:
            Integer count of records processed.
        """
        ...
