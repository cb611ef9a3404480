"""Reports module for pfreporter.

Serializes extracted records as JSON or CSV and renders them as HTML pages.
"""

from .demo import DEMO_METRIC_NAME, DEMO_PLANT, DEMO_TEST, DEMO_TITLE, DEMO_UNIT, demo_records
from .export import csv_row, records_to_csv, records_to_json, records_to_json_text
from .grouping import BranchSeries, group_records, scale_sort_key
from .renderer import (
    RenderError,
    ReportRenderer,
    build_csv_page_context,
    build_report_context,
)

__all__ = [
    # Serialization
    "csv_row",
    "records_to_csv",
    "records_to_json",
    "records_to_json_text",
    # Grouping
    "BranchSeries",
    "group_records",
    "scale_sort_key",
    # Demo data
    "demo_records",
    "DEMO_TEST",
    "DEMO_PLANT",
    "DEMO_TITLE",
    "DEMO_METRIC_NAME",
    "DEMO_UNIT",
    # Rendering
    "ReportRenderer",
    "RenderError",
    "build_report_context",
    "build_csv_page_context",
]
