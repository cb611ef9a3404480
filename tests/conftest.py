"""Shared fixtures for pfreporter test suite."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from pfreporter.config import ReporterConfig
from pfreporter.fetch import ReportClient

# Two scales, three branches, header rows and inter-element whitespace,
# shaped like the performance farm's /pf/{test}/{plant} pages.
SAMPLE_REPORT = """<!DOCTYPE html>
<html>
<head><title>dbt2 fireweed</title></head>
<body>
<h1>dbt2 on fireweed</h1>
<h2>10 Warehouses</h2>
<h3>master</h3>
<table>
  <tr><th>Commit Date</th><th>Commit</th><th>NOTPM</th></tr>
  <tr><td>2024-01-01</td><td>abc123</td><td>95.5</td></tr>
  <tr><td>2024-01-02</td><td>def456</td><td>98.2</td></tr>
</table>
<h3>REL_17_STABLE</h3>
<table>
  <tr><th>Commit Date</th><th>Commit</th><th>NOTPM</th></tr>
  <tr><td>2024-01-03</td><td>aaa111</td><td>101.0</td></tr>
</table>
<h2>100 Warehouses</h2>
<h3>master</h3>
<table>
  <tr><th>Commit Date</th><th>Commit</th><th>NOTPM</th></tr>
  <tr><td>2024-01-04</td><td>bbb222</td><td>1250.7</td></tr>
</table>
</body>
</html>
"""


def wrap_body(fragment: str) -> str:
    """Wrap a body fragment in a complete HTML document."""
    return f"<html><head></head><body>{fragment}</body></html>"


def make_config(**overrides) -> ReporterConfig:
    """Create a ReporterConfig for tests, with section overrides as dicts."""
    return ReporterConfig.model_validate(overrides)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo handler changes made by setup_logging so caplog keeps working."""
    yield
    logger = logging.getLogger("pfreporter")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_report() -> str:
    """Report page with two scales and three branches."""
    return SAMPLE_REPORT


@pytest.fixture
def default_config() -> ReporterConfig:
    """A default ReporterConfig for tests that don't care about specifics."""
    return make_config()


@pytest.fixture
def mock_report_client():
    """ReportClient double that returns SAMPLE_REPORT for every request."""
    client = MagicMock(spec=ReportClient)
    client.fetch_report.return_value = SAMPLE_REPORT
    return client
