"""CLI surface tests using typer.testing.CliRunner.

No network access: the upstream client is patched wherever a command
would fetch a report.
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pfreporter import __version__
from pfreporter.cli import app
from pfreporter.fetch import ReportFetchError
from tests.conftest import SAMPLE_REPORT

pytestmark = pytest.mark.unit

runner = CliRunner()


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "report.html"
    path.write_text(SAMPLE_REPORT)
    return path


# =============================================================================
# version / init / validate
# =============================================================================


class TestVersionCommand:
    """Tests for 'pfreporter version'."""

    def test_version_output(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInitCommand:
    """Tests for 'pfreporter init'."""

    def test_init_creates_file(self, tmp_path):
        output = tmp_path / "pf.yaml"
        result = runner.invoke(app, ["init", "--output", str(output)])
        assert result.exit_code == 0
        assert "upstream:" in output.read_text()

    def test_init_default_name(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / "pfreporter.yaml").exists()

    def test_init_refuses_overwrite(self, tmp_path):
        output = tmp_path / "pf.yaml"
        output.write_text("keep me")
        result = runner.invoke(app, ["init", "-o", str(output)])
        assert result.exit_code == 1
        assert output.read_text() == "keep me"

    def test_init_force(self, tmp_path):
        output = tmp_path / "pf.yaml"
        output.write_text("replace me")
        result = runner.invoke(app, ["init", "-o", str(output), "--force"])
        assert result.exit_code == 0
        assert "replace me" not in output.read_text()


class TestValidateCommand:
    """Tests for 'pfreporter validate'."""

    def test_valid_file(self, tmp_path):
        path = tmp_path / "pf.yaml"
        runner.invoke(app, ["init", "-o", str(path)])
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "pf.yaml"
        path.write_text("server:\n  port: -1\n")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "server.port" in result.output


# =============================================================================
# parse / extract
# =============================================================================


class TestParseCommand:
    """Tests for 'pfreporter parse'."""

    def test_json_raw_scale(self, report_file):
        result = runner.invoke(app, ["parse", str(report_file), "--format", "json", "--raw-scale"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 4
        assert data[0]["scale"] == "10 Warehouses"
        assert data[-1]["metric"] == 1250.7

    def test_json_clean_scale(self, report_file):
        result = runner.invoke(app, ["parse", str(report_file), "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["scale"] == "10"

    def test_csv(self, report_file):
        result = runner.invoke(app, ["parse", str(report_file), "--format", "csv"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "branch,revision,scale,ctime,metric"
        assert lines[1] == "master,abc123,10,2024-01-01,95.5"

    def test_table(self, report_file):
        result = runner.invoke(app, ["parse", str(report_file)])
        assert result.exit_code == 0
        assert "abc123" in result.output
        assert "1250.70" in result.output

    def test_no_records(self, tmp_path):
        path = tmp_path / "empty.html"
        path.write_text("<html><body><p>nothing</p></body></html>")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 0
        assert "No records found" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "nope.html")])
        assert result.exit_code == 1

    def test_invalid_format(self, report_file):
        result = runner.invoke(app, ["parse", str(report_file), "--format", "xml"])
        assert result.exit_code != 0


class TestExtractCommand:
    """Tests for 'pfreporter extract'."""

    def test_fetches_and_prints(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("pfreporter.cli.ReportClient") as mock_cls:
            mock_cls.return_value.fetch_report.return_value = SAMPLE_REPORT
            result = runner.invoke(app, ["extract", "dbt2", "fireweed", "--format", "csv"])

        assert result.exit_code == 0
        assert "master,abc123,10,2024-01-01,95.5" in result.output
        mock_cls.return_value.fetch_report.assert_called_once_with("dbt2", "fireweed")
        mock_cls.assert_called_once_with(
            base_url="http://140.211.11.131:8080", timeout_seconds=30.0
        )

    def test_upstream_from_config(self, tmp_path):
        path = tmp_path / "pf.yaml"
        path.write_text("upstream:\n  base_url: http://farm:9000\n  timeout_seconds: 5\n")
        with patch("pfreporter.cli.ReportClient") as mock_cls:
            mock_cls.return_value.fetch_report.return_value = SAMPLE_REPORT
            result = runner.invoke(app, ["extract", "dbt2", "fireweed", "-c", str(path)])

        assert result.exit_code == 0
        mock_cls.assert_called_once_with(base_url="http://farm:9000", timeout_seconds=5.0)

    def test_fetch_failure(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("pfreporter.cli.ReportClient") as mock_cls:
            mock_cls.return_value.fetch_report.side_effect = ReportFetchError("refused")
            result = runner.invoke(app, ["extract", "dbt2", "fireweed"])

        assert result.exit_code == 1
        assert "refused" in result.output

    def test_missing_body(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("pfreporter.cli.ReportClient") as mock_cls:
            mock_cls.return_value.fetch_report.return_value = (
                "<frameset><frame src='a.html'></frameset>"
            )
            result = runner.invoke(app, ["extract", "dbt2", "fireweed"])

        assert result.exit_code == 1

    def test_plain_text_page_has_no_records(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("pfreporter.cli.ReportClient") as mock_cls:
            mock_cls.return_value.fetch_report.return_value = "not html"
            result = runner.invoke(app, ["extract", "dbt2", "fireweed"])

        assert result.exit_code == 0
        assert "No records found" in result.output


class TestServeCommand:
    """Tests for 'pfreporter serve'."""

    def test_runs_uvicorn_with_config(self, tmp_path):
        path = tmp_path / "pf.yaml"
        path.write_text("server:\n  host: 127.0.0.1\n  port: 9191\n")
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "-c", str(path)])

        assert result.exit_code == 0
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9191
        assert kwargs["log_config"]["loggers"]["uvicorn"]["level"] == "INFO"

    def test_cli_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--host", "localhost", "-p", "8000"])

        assert result.exit_code == 0
        _, kwargs = mock_run.call_args
        assert (kwargs["host"], kwargs["port"]) == ("localhost", 8000)

    def test_bad_config(self, tmp_path):
        path = tmp_path / "pf.yaml"
        path.write_text("nope: 1\n")
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "-c", str(path)])

        assert result.exit_code == 1
        mock_run.assert_not_called()
