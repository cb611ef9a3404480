"""HTML rendering of report pages."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from pfreporter.config import LinksConfig, PresentationConfig
from pfreporter.extract import ExtractedRecord

from .export import records_to_csv
from .grouping import group_records

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when a page template fails to render."""

    pass


class ReportRenderer:
    """Renders Jinja2 page templates."""

    def __init__(self, template_dir: Path | None = None):
        """Initialize page renderer.

        Args:
            template_dir: Path to templates directory. Defaults to package templates.
        """
        if template_dir is None:
            from pfreporter._resources import get_templates_dir

            template_dir = get_templates_dir()

        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context.

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed to render {template_name}: {e}") from e


def build_report_context(
    records: Sequence[ExtractedRecord],
    test: str,
    plant: str,
    presentation: PresentationConfig,
    links: LinksConfig,
    title: str | None = None,
) -> dict[str, Any]:
    """Build the template context for a report page.

    The page title defaults to the test name.
    """
    return {
        "title": title or test,
        "test": test,
        "plant": plant,
        "records": list(records),
        "scales": group_records(records),
        "metric_name": presentation.metric_name,
        "unit": presentation.unit,
        "buildbot_url": links.buildbot_url,
        "postgres_commit_url": links.postgres_commit_url,
    }


def build_csv_page_context(
    records: Sequence[ExtractedRecord],
    test: str,
    plant: str,
    presentation: PresentationConfig,
    links: LinksConfig,
) -> dict[str, Any]:
    """Build the context for a page that embeds the records as CSV."""
    context = build_report_context(records, test, plant, presentation, links)
    context["csv_data"] = records_to_csv(records)
    return context
