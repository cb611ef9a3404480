"""Scale and branch grouping of records for dashboard pages."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from pfreporter.extract import ExtractedRecord

_LEADING_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")


@dataclass
class BranchSeries:
    """Records of one branch at one scale.

    ``sorted`` keeps report order, ``reversed`` is newest-first for tables.
    """

    sorted: list[ExtractedRecord] = field(default_factory=list)

    @property
    def reversed(self) -> list[ExtractedRecord]:
        return list(reversed(self.sorted))


def scale_sort_key(scale: str) -> tuple[int, float, str]:
    """Sort numeric scales by value, then everything else by name."""
    match = _LEADING_NUMBER_RE.match(scale)
    if match:
        return (0, float(match.group(1)), scale)
    return (1, 0.0, scale)


def group_records(
    records: Iterable[ExtractedRecord],
) -> dict[str, dict[str, BranchSeries]]:
    """Nest records as scale -> branch -> series."""
    grouped: dict[str, dict[str, BranchSeries]] = {}
    for record in records:
        branches = grouped.setdefault(record.scale, {})
        branches.setdefault(record.branch, BranchSeries()).sorted.append(record)

    return {
        scale: dict(sorted(grouped[scale].items()))
        for scale in sorted(grouped, key=scale_sort_key)
    }
