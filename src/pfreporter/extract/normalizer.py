"""Per-row normalization of report table cells."""

from __future__ import annotations

from .model import ExtractedRecord

# Fallback for metric cells that are not numbers
METRIC_FALLBACK = 0.0


def parse_metric(text: str) -> float:
    """Parse a metric cell as a float.

    Returns ``METRIC_FALLBACK`` when the text is not a number. Digit group
    underscores ("1_000") and non-ASCII digits ("١٢") are rejected even
    though ``float()`` accepts them.
    """
    if "_" in text or not text.isascii():
        return METRIC_FALLBACK
    try:
        return float(text)
    except ValueError:
        return METRIC_FALLBACK


def clean_scale_label(label: str) -> str:
    """Reduce a scale heading to its leading token.

    "100 Warehouses" -> "100". A label without whitespace is returned as is.
    """
    parts = label.split()
    return parts[0] if parts else label


def normalize_row(
    cells: list[str],
    scale: str,
    branch: str,
    clean_scale: bool = False,
) -> ExtractedRecord:
    """Build a record from the three cells of a measurement row.

    Args:
        cells: Trimmed cell texts: commit date, commit id, metric
        scale: Scale heading in effect for the row
        branch: Branch heading in effect for the row
        clean_scale: Keep only the leading token of the scale heading

    Raises:
        ValueError: If the row does not have exactly three cells
    """
    if len(cells) != 3:
        raise ValueError(f"Expected 3 cells, got {len(cells)}")

    commit_date, commit, metric_text = cells
    return ExtractedRecord(
        scale=clean_scale_label(scale) if clean_scale else scale,
        branch=branch,
        commit_date=commit_date,
        commit=commit,
        metric=parse_metric(metric_text),
    )
