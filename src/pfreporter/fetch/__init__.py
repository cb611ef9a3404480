"""Upstream fetch module for pfreporter."""

from .client import (
    ReportClient,
    ReportFetchError,
    ReportReadError,
    ReportSourceError,
)

__all__ = [
    "ReportClient",
    "ReportSourceError",
    "ReportFetchError",
    "ReportReadError",
]
