"""JSON and CSV serialization of extracted records."""

from __future__ import annotations

import csv
import io
import json
import math
from collections.abc import Iterable
from typing import Any

from pfreporter._constants import CSV_HEADER
from pfreporter.extract import ExtractedRecord


def records_to_json(records: Iterable[ExtractedRecord]) -> list[dict[str, Any]]:
    """Convert records to JSON-ready dictionaries.

    Non-finite metrics become ``None`` so the output stays valid JSON.
    """
    rows: list[dict[str, Any]] = []
    for record in records:
        row: dict[str, Any] = record.to_dict()
        if not math.isfinite(record.metric):
            row["metric"] = None
        rows.append(row)
    return rows


def records_to_json_text(records: Iterable[ExtractedRecord], indent: int | None = None) -> str:
    """Serialize records as a JSON array string."""
    return json.dumps(records_to_json(records), indent=indent, allow_nan=False)


def csv_row(record: ExtractedRecord) -> dict[str, Any]:
    """Map a record onto the CSV column names."""
    return {
        "branch": record.branch,
        "revision": record.commit,
        "scale": record.scale,
        "ctime": record.commit_date,
        "metric": record.metric,
    }


def records_to_csv(records: Iterable[ExtractedRecord]) -> str:
    """Serialize records as CSV text with a ``branch,revision,scale,ctime,metric`` header."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_HEADER, lineterminator="\n")
    writer.writeheader()
    writer.writerows(csv_row(r) for r in records)
    return buf.getvalue()
