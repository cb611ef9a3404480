"""Heading-tracking extraction of performance farm report pages.

A report page body is a flat run of elements::

    <h2>10 Warehouses</h2>
    <h3>master</h3>
    <table> ...rows of (commit date, commit, metric)... </table>
    <h3>REL_17_STABLE</h3>
    <table> ... </table>
    <h2>100 Warehouses</h2>
    ...

The scale/branch grouping exists only through the order of those
elements, so extraction walks the body's direct children once and tags
every qualifying table row with the headings seen last.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from .model import ExtractedRecord, ExtractionStats, HeadingState, ReportMarkers
from .normalizer import normalize_row

logger = logging.getLogger(__name__)

# HTML5 tree construction: implied end tags, synthesized <body>
HTML_PARSER = "html5lib"


class ExtractionError(Exception):
    """Base exception for report extraction errors."""

    pass


class MissingBodyError(ExtractionError):
    """Raised when a report document has no body element."""

    pass


def _element_text(element: Tag) -> str:
    return element.get_text().strip()


def parse_document(html: str) -> Tag:
    """Parse a report page and return its body element.

    Missing <html>, <head> and <body> tags are implied, so only documents
    that are not body-based (a frameset page) have no body.

    Raises:
        MissingBodyError: If the document has no body element
    """
    soup = BeautifulSoup(html, HTML_PARSER)
    body = soup.body
    if body is None:
        raise MissingBodyError("Report document has no <body> element")
    return body


def row_cells(row: Tag) -> list[str]:
    """Return the trimmed text of every data cell below a table row."""
    return [_element_text(cell) for cell in row.find_all("td")]


def extract_records(
    body: Tag,
    markers: ReportMarkers | None = None,
    clean_scale: bool = False,
) -> list[ExtractedRecord]:
    """Extract measurement records from a report body.

    Tables seen before both a scale and a branch heading are skipped, as
    are rows that do not have exactly three data cells.

    Args:
        body: The document's body element
        markers: Tag names for headings and tables (default: h2/h3/table)
        clean_scale: Reduce scale headings to their leading token

    Returns:
        Records in document order
    """
    markers = markers or ReportMarkers()
    state = HeadingState()
    stats = ExtractionStats()
    records: list[ExtractedRecord] = []

    for node in body.children:
        if not isinstance(node, Tag):
            continue

        if node.name == markers.scale:
            state.set_scale(_element_text(node))
        elif node.name == markers.branch:
            state.set_branch(_element_text(node))
        elif node.name == markers.table:
            if not state.ready:
                stats.tables_skipped += 1
                continue
            for row in node.find_all("tr"):
                cells = row_cells(row)
                if len(cells) != 3:
                    stats.rows_skipped += 1
                    continue
                records.append(normalize_row(cells, state.scale, state.branch, clean_scale))

    stats.records = len(records)
    logger.debug(
        f"Extracted {stats.records} records "
        f"({stats.tables_skipped} tables and {stats.rows_skipped} rows skipped)"
    )
    return records


def extract_report(
    html: str,
    markers: ReportMarkers | None = None,
    clean_scale: bool = False,
) -> list[ExtractedRecord]:
    """Parse a report page and extract its records.

    Raises:
        MissingBodyError: If the document has no body element
    """
    return extract_records(parse_document(html), markers=markers, clean_scale=clean_scale)
