"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``CREDIT_RISK_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

Scoring weights and the risk threshold are NOT configurable; they are
constants in ``credit_risk.scoring``.  Configuration only covers where
records are read from and written to, and how logging behaves.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class IOConfig(BaseModel):
    """Input source and output sinks for a scoring run.

    ``input_file`` is looked up as given first, then inside each of
    ``search_dirs`` in order.  ``csv_file`` is optional; an empty string
    disables the CSV export.
    """

    model_config = ConfigDict(frozen=True)

    input_file: str = "customers.json"
    output_file: str = "report.json"
    csv_file: str = ""
    search_dirs: list[str] = ["data"]

    @field_validator("input_file", "output_file")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("File name must not be empty.")
        return v.strip()


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    All pipeline stages and CLI commands receive an ``AppConfig`` instance.
    It is constructed by ``load_config()`` which merges TOML + .env.
    """

    model_config = ConfigDict(frozen=True)

    io: IOConfig = IOConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False  # DEBUG logging plus the run summary line on `score`


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file
            is absent the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = root / "config" / "default.toml"

    if config_path.exists():
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)

        # Also merge local.toml if present (gitignored local overrides)
        local_config_path = config_path.parent / "local.toml"
        if local_config_path.exists():
            with open(local_config_path, "rb") as f:
                local_raw: dict[str, Any] = tomllib.load(f)
            raw = _deep_merge(raw, local_raw)

    # 3. Apply CREDIT_RISK_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply CREDIT_RISK_* env vars to the raw config dict.

    Supported overrides:
      CREDIT_RISK_INPUT_FILE   → raw["io"]["input_file"]
      CREDIT_RISK_OUTPUT_FILE  → raw["io"]["output_file"]
      CREDIT_RISK_LOG_LEVEL    → raw["logging"]["level"]
      CREDIT_RISK_DEBUG        → raw["debug"]
    """
    if input_file := os.environ.get("CREDIT_RISK_INPUT_FILE"):
        raw.setdefault("io", {})["input_file"] = input_file

    if output_file := os.environ.get("CREDIT_RISK_OUTPUT_FILE"):
        raw.setdefault("io", {})["output_file"] = output_file

    if log_level := os.environ.get("CREDIT_RISK_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("CREDIT_RISK_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        io=IOConfig(**raw.get("io", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
