"""Report extraction module for pfreporter.

Turns performance farm report pages into typed measurement records.
"""

from .extractor import (
    ExtractionError,
    MissingBodyError,
    extract_records,
    extract_report,
    parse_document,
    row_cells,
)
from .model import ExtractedRecord, ExtractionStats, HeadingState, ReportMarkers
from .normalizer import METRIC_FALLBACK, clean_scale_label, normalize_row, parse_metric

__all__ = [
    # Types
    "ExtractedRecord",
    "ExtractionStats",
    "HeadingState",
    "ReportMarkers",
    # Extraction
    "extract_records",
    "extract_report",
    "parse_document",
    "row_cells",
    # Normalization
    "METRIC_FALLBACK",
    "clean_scale_label",
    "normalize_row",
    "parse_metric",
    # Exceptions
    "ExtractionError",
    "MissingBodyError",
]
