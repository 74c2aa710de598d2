"""
Logging setup for the Credit Risk Scorer.

``configure_logging()`` is called once by each CLI command, after the config
is loaded and before any scoring work.  Library modules only ever use
``logging.getLogger(__name__)``; the scoring core does not log at all.

Log lines go to stderr so that stdout carries nothing but the report table.
With ``json_format = true`` each line is a JSON object::

    {"ts": "2026-02-24T15:00:00Z", "level": "INFO", "logger": "...", "msg": "..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from credit_risk.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class _JsonFormatter(logging.Formatter):
    """One JSON object per line with ``ts``, ``level``, ``logger``, ``msg``.

    ``exc`` is added when the record carries a traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def resolve_level(config: "LoggingConfig", debug: bool = False) -> int:
    """Numeric log level for ``config``; ``debug`` forces ``DEBUG``."""
    if debug:
        return logging.DEBUG
    return logging.getLevelName(config.level.upper())


def _attach(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(config: "LoggingConfig", debug: bool = False) -> None:
    """Configure the root logger from a ``LoggingConfig`` instance.

    Args:
        config: Logging section of ``AppConfig``.
        debug:  ``AppConfig.debug``; lowers the level to ``DEBUG`` regardless
            of ``config.level``.
    """
    level = resolve_level(config, debug)
    formatter = (
        _JsonFormatter()
        if config.json_format
        else logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    handlers = [_attach(logging.StreamHandler(sys.stderr), level, formatter)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _attach(logging.FileHandler(log_path, encoding="utf-8"), level, formatter)
        )

    logging.basicConfig(level=level, handlers=handlers, force=True)
