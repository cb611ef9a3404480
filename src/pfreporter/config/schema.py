"""Pydantic models for pfreporter configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pfreporter._constants import (
    DEFAULT_BUILDBOT_URL,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_POSTGRES_COMMIT_URL,
    DEFAULT_UPSTREAM_URL,
)
from pfreporter.extract import ReportMarkers

# =============================================================================
# Enums
# =============================================================================


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class OutputFormat(str, Enum):
    """Record output formats for the command line."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


# =============================================================================
# Sections
# =============================================================================


class UpstreamConfig(BaseModel):
    """Performance farm the reports are fetched from."""

    base_url: str = DEFAULT_UPSTREAM_URL
    timeout_seconds: float = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


class ServerConfig(BaseModel):
    """Listening address of the web server."""

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class LinksConfig(BaseModel):
    """External links rendered into report pages."""

    buildbot_url: str = DEFAULT_BUILDBOT_URL
    postgres_commit_url: str = DEFAULT_POSTGRES_COMMIT_URL


class PresentationConfig(BaseModel):
    """Labels shown on rendered report pages."""

    metric_name: str = "New Orders per Minute"
    unit: str = "Warehouse"


class MarkersConfig(BaseModel):
    """Tag names that structure a report page."""

    scale: str = "h2"
    branch: str = "h3"
    table: str = "table"

    @model_validator(mode="after")
    def validate_distinct(self) -> MarkersConfig:
        tags = [self.scale.lower(), self.branch.lower(), self.table.lower()]
        if len(set(tags)) != 3:
            raise ValueError("scale, branch and table markers must be distinct tags")
        return self

    def to_markers(self) -> ReportMarkers:
        """Return the extractor's marker set."""
        return ReportMarkers(
            scale=self.scale.lower(),
            branch=self.branch.lower(),
            table=self.table.lower(),
        )


class LoggingConfig(BaseModel):
    """Log output settings."""

    level: LogLevel = LogLevel.INFO


# =============================================================================
# Root
# =============================================================================


class ReporterConfig(BaseModel):
    """Root configuration for pfreporter.

    Every section has defaults, so an empty file is a valid configuration.
    """

    model_config = ConfigDict(extra="forbid")

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    links: LinksConfig = Field(default_factory=LinksConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)
    markers: MarkersConfig = Field(default_factory=MarkersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
