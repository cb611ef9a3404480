"""Simulated report data for the demo dashboard."""

from __future__ import annotations

from datetime import datetime, timezone

from pfreporter.extract import ExtractedRecord

DEMO_TEST = "my_dbt2_simulation"
DEMO_PLANT = "local_plant"
DEMO_TITLE = "DBT-2 Simulated Performance"
DEMO_METRIC_NAME = "Transactions per Second"
DEMO_UNIT = "Warehouses"

# (scale, branch, revision, commit unix time, metric)
_DEMO_ROWS = [
    ("10", "master", "revA1", 1725000000, 95.5),
    ("10", "master", "revA2", 1725010000, 98.2),
    ("10", "feature-branch-x", "revB1", 1725020000, 101.0),
    ("100", "master", "revC1", 1725100000, 1250.7),
    ("100", "master", "revC2", 1725110000, 1245.1),
    ("100", "master", "revC3", 1725120000, 1300.0),
    ("100", "development-branch", "revD1", 1725115000, 1100.3),
]


def _format_ctime(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def demo_records() -> list[ExtractedRecord]:
    """Return a fixed set of records covering two scales and three branches."""
    return [
        ExtractedRecord(
            scale=scale,
            branch=branch,
            commit_date=_format_ctime(ctime),
            commit=revision,
            metric=metric,
        )
        for scale, branch, revision, ctime, metric in _DEMO_ROWS
    ]
