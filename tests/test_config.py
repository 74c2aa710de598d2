"""Tests for credit_risk.config — TOML loading, local overrides, env vars."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from credit_risk.config import AppConfig, IOConfig, LoggingConfig, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for var in (
        "CREDIT_RISK_INPUT_FILE",
        "CREDIT_RISK_OUTPUT_FILE",
        "CREDIT_RISK_LOG_LEVEL",
        "CREDIT_RISK_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)


def _write_toml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    cfg = AppConfig()
    assert cfg.io.input_file == "customers.json"
    assert cfg.io.output_file == "report.json"
    assert cfg.io.search_dirs == ["data"]
    assert cfg.logging.level == "WARNING"
    assert cfg.debug is False


def test_loads_explicit_toml(tmp_path: Path):
    p = _write_toml(
        tmp_path / "cfg.toml",
        '[io]\ninput_file = "in.json"\noutput_file = "out.json"\n'
        '[logging]\nlevel = "debug"\n'
        "[project]\ndebug = true\n",
    )
    cfg = load_config(p)
    assert cfg.io.input_file == "in.json"
    assert cfg.io.output_file == "out.json"
    assert cfg.logging.level == "DEBUG"
    assert cfg.debug is True


def test_local_toml_overrides(tmp_path: Path):
    p = _write_toml(tmp_path / "default.toml", '[io]\ninput_file = "a.json"\noutput_file = "b.json"\n')
    _write_toml(tmp_path / "local.toml", '[io]\ninput_file = "local.json"\n')
    cfg = load_config(p)
    assert cfg.io.input_file == "local.json"
    assert cfg.io.output_file == "b.json"


def test_env_overrides(tmp_path: Path, monkeypatch):
    p = _write_toml(tmp_path / "cfg.toml", '[io]\ninput_file = "a.json"\n')
    monkeypatch.setenv("CREDIT_RISK_INPUT_FILE", "env.json")
    monkeypatch.setenv("CREDIT_RISK_OUTPUT_FILE", "env_out.json")
    monkeypatch.setenv("CREDIT_RISK_LOG_LEVEL", "error")
    monkeypatch.setenv("CREDIT_RISK_DEBUG", "yes")
    cfg = load_config(p)
    assert cfg.io.input_file == "env.json"
    assert cfg.io.output_file == "env_out.json"
    assert cfg.logging.level == "ERROR"
    assert cfg.debug is True


def test_missing_explicit_path_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_invalid_log_level_raises():
    with pytest.raises(ValidationError, match="Log level"):
        LoggingConfig(level="LOUD")


def test_blank_input_file_raises():
    with pytest.raises(ValidationError, match="must not be empty"):
        IOConfig(input_file="  ")


def test_config_is_frozen():
    cfg = AppConfig()
    with pytest.raises(ValidationError):
        cfg.debug = True  # type: ignore[misc]


def test_scoring_weights_are_not_configurable():
    assert "weights" not in AppConfig.model_fields
    assert "threshold" not in AppConfig.model_fields
