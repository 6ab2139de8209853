"""Tests for configuration models and loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from grobid_batch.config import GrobidBatchConfig, GrobidConfig, RunConfiguration, load_config
from grobid_batch.config.loader import find_config_file, merge_cli_overrides
from grobid_batch.models.enums import GrobidService


class TestGrobidConfig:
    """Tests for GrobidConfig."""

    def test_defaults(self):
        config = GrobidConfig()
        assert config.host == "localhost"
        assert config.port == "8070"
        assert config.base_url == "http://localhost:8070/api/"

    def test_integer_port(self):
        assert GrobidConfig(port=9000).port == "9000"

    def test_no_timeout(self):
        assert GrobidConfig(timeout=None).timeout is None

    def test_frozen(self):
        with pytest.raises(ValidationError):
            GrobidConfig().host = "elsewhere"


class TestRunConfiguration:
    """Tests for RunConfiguration."""

    def test_defaults(self, tmp_path):
        config = RunConfiguration(input_dir=tmp_path, output_dir=tmp_path / "out")
        assert config.service == GrobidService.FULLTEXT
        assert config.worker_count == 10

    @pytest.mark.parametrize("name", ["fulltext", "FULLTEXT", "processFulltextDocument"])
    def test_service_by_name(self, tmp_path, name):
        config = RunConfiguration(input_dir=tmp_path, output_dir=tmp_path, service=name)
        assert config.service is GrobidService.FULLTEXT

    def test_unknown_service(self, tmp_path):
        with pytest.raises(ValidationError, match="Unknown GROBID service"):
            RunConfiguration(input_dir=tmp_path, output_dir=tmp_path, service="translate")

    def test_worker_count_positive(self, tmp_path):
        with pytest.raises(ValidationError):
            RunConfiguration(input_dir=tmp_path, output_dir=tmp_path, worker_count=0)

    def test_immutable(self, tmp_path):
        config = RunConfiguration(input_dir=tmp_path, output_dir=tmp_path)
        with pytest.raises(ValidationError):
            config.worker_count = 3

    def test_from_config(self, tmp_path):
        cfg = GrobidBatchConfig.model_validate(
            {"batch": {"workers": 4, "service": "header"}}
        )
        run = RunConfiguration.from_config(cfg, tmp_path, tmp_path / "out")
        assert run.worker_count == 4
        assert run.service is GrobidService.HEADER


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self):
        config = load_config(environ={})
        assert config.grobid.base_url == "http://localhost:8070/api/"
        assert config.batch.workers == 10
        assert config.batch.service is GrobidService.FULLTEXT

    def test_environment(self):
        config = load_config(
            environ={"GROBID_HOST": "grobid", "GROBID_PORT": "8080", "GROBID_BATCH_WORKERS": "3"}
        )
        assert config.grobid.base_url == "http://grobid:8080/api/"
        assert config.batch.workers == 3

    def test_cli_beats_environment(self):
        config = load_config(environ={"GROBID_HOST": "grobid"}, host="cli-host", workers=2)
        assert config.grobid.host == "cli-host"
        assert config.batch.workers == 2

    def test_config_file(self, tmp_path: Path):
        path = tmp_path / "grobid-batch.config.json"
        path.write_text(
            json.dumps(
                {
                    "grobid": {"host": "file-host", "port": 1234, "timeout": 60},
                    "batch": {"workers": 6, "service": "references"},
                    "unknown": True,
                }
            )
        )

        config = load_config(config_path=path, environ={"GROBID_PORT": "9999"})

        assert config.grobid.host == "file-host"
        assert config.grobid.port == "9999"
        assert config.grobid.timeout == 60
        assert config.batch.workers == 6
        assert config.batch.service is GrobidService.REFERENCES

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_config_file(tmp_path / "missing.json")

    def test_search_path(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text("{}")
        monkeypatch.setattr("grobid_batch.config.loader.CONFIG_SEARCH_PATHS", [path])
        assert find_config_file() == path

    def test_none_overrides_ignored(self):
        config = load_config(environ={}, host=None, workers=None)
        assert config.grobid.host == "localhost"

    def test_merge_does_not_mutate(self):
        base = GrobidBatchConfig()
        merged = merge_cli_overrides(base, workers=2, verbose=3)
        assert base.batch.workers == 10
        assert merged.batch.workers == 2
        assert merged.logging.verbosity == 3
