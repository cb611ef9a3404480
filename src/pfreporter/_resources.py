"""Resource path resolution for pfreporter.

Templates and static assets ship inside the package, both in the source
tree and in site-packages.
"""

from __future__ import annotations

from pathlib import Path


def _package_dir() -> Path:
    """Return the pfreporter package directory."""
    return Path(__file__).parent


def get_templates_dir() -> Path:
    """Return path to Jinja2 templates directory."""
    return _package_dir() / "templates"


def get_static_dir() -> Path:
    """Return path to the static assets served under /static."""
    return _package_dir() / "static"
