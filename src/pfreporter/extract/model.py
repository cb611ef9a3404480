"""Record types produced by report extraction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedRecord:
    """One measurement row from a performance farm report."""

    scale: str
    branch: str
    commit_date: str
    commit: str
    metric: float

    def to_dict(self) -> dict[str, str | float]:
        """Convert to dictionary for JSON serialization."""
        return {
            "scale": self.scale,
            "branch": self.branch,
            "commit_date": self.commit_date,
            "commit": self.commit,
            "metric": self.metric,
        }


@dataclass
class HeadingState:
    """Scale and branch labels in effect at the current scan position.

    A heading replaces the previous label of its kind; there is no nesting.
    """

    scale: str | None = None
    branch: str | None = None

    @property
    def ready(self) -> bool:
        """True once both a scale and a branch heading have been seen."""
        return bool(self.scale) and bool(self.branch)

    def set_scale(self, text: str) -> None:
        self.scale = text or None

    def set_branch(self, text: str) -> None:
        self.branch = text or None


@dataclass(frozen=True)
class ReportMarkers:
    """Tag names that mark scale headings, branch headings and tables."""

    scale: str = "h2"
    branch: str = "h3"
    table: str = "table"


@dataclass
class ExtractionStats:
    """Counters for a single extraction pass."""

    records: int = 0
    tables_skipped: int = 0
    rows_skipped: int = 0
