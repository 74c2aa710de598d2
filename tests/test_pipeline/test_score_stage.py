"""Tests for the PipelineStage base and ScoreStage."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from credit_risk.config import AppConfig, IOConfig
from credit_risk.ingestion.customer_json import SourceMalformedError, SourceNotFoundError
from credit_risk.models.meta import RunMetadata
from credit_risk.pipeline.base import PipelineStage
from credit_risk.pipeline.score import ScoreStage


class TestPipelineStageABC:
    def test_cannot_instantiate_base_directly(self):
        with pytest.raises(TypeError):
            PipelineStage(config=AppConfig())  # type: ignore[abstract]

    def test_failure_is_recorded_and_reraised(self):
        class BoomStage(PipelineStage):
            stage_name = "score"

            def _execute(self, run: RunMetadata, **kwargs) -> int:
                raise RuntimeError("boom")

        stage = BoomStage(config=AppConfig())
        with pytest.raises(RuntimeError, match="boom"):
            stage.run()
        assert stage.last_run is not None
        assert stage.last_run.status == "failed"
        assert stage.last_run.error_message == "boom"
        assert stage.last_run.finished_at is not None

    def test_success_records_rows(self):
        class CountStage(PipelineStage):
            stage_name = "score"

            def _execute(self, run: RunMetadata, **kwargs) -> int:
                return kwargs["n"]

        run = CountStage(config=AppConfig()).run(n=7)
        assert run.status == "success"
        assert run.rows_processed == 7
        assert run.config_snapshot["io"]["input_file"] == "customers.json"


class TestScoreStage:
    def test_writes_report(self, tmp_config, write_customers_json, sample_records):
        write_customers_json(sample_records)
        stage = ScoreStage(config=tmp_config)
        run = stage.run()

        assert run.status == "success"
        assert run.rows_processed == 3
        out = Path(tmp_config.io.output_file)
        assert stage.written == [out]
        payload = json.loads(out.read_text(encoding="utf-8"))
        assert payload[0] == {"Name": "Alice", "CreditScore": 56, "RiskStatus": "Low Risk"}
        assert [p["CreditScore"] for p in payload] == [56, 34, 73]

    def test_explicit_paths_override_config(
        self, tmp_path, tmp_config, write_customers_json, sample_records
    ):
        src = write_customers_json(sample_records, name="other.json")
        out = tmp_path / "explicit.json"
        csv_out = tmp_path / "explicit.csv"

        stage = ScoreStage(config=tmp_config)
        stage.run(input_path=src, output_path=out, csv_path=csv_out)

        assert stage.written == [out, csv_out]
        assert csv_out.read_text(encoding="utf-8").splitlines()[0] == "Name,CreditScore,RiskStatus"

    def test_csv_from_config(self, tmp_path, write_customers_json, sample_records):
        src = write_customers_json(sample_records)
        config = AppConfig(
            io=IOConfig(
                input_file=str(src),
                output_file=str(tmp_path / "r.json"),
                csv_file=str(tmp_path / "r.csv"),
                search_dirs=[],
            )
        )
        stage = ScoreStage(config=config)
        stage.run()
        assert (tmp_path / "r.csv").exists()

    def test_empty_input_is_skipped(self, tmp_config, write_customers_json):
        write_customers_json([])
        stage = ScoreStage(config=tmp_config)
        run = stage.run()

        assert run.status == "skipped"
        assert run.rows_processed == 0
        assert stage.result is not None and stage.result.is_empty
        assert stage.written == []
        assert not Path(tmp_config.io.output_file).exists()

    def test_missing_input(self, tmp_config):
        stage = ScoreStage(config=tmp_config)
        with pytest.raises(SourceNotFoundError):
            stage.run()
        assert stage.last_run.status == "failed"

    def test_malformed_input(self, tmp_config, tmp_path):
        (tmp_path / "customers.json").write_text("{{", encoding="utf-8")
        with pytest.raises(SourceMalformedError):
            ScoreStage(config=tmp_config).run()
