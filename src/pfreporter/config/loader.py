"""Configuration loader for pfreporter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pfreporter._constants import DEFAULT_CONFIG

from .schema import ReporterConfig


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """Raised when configuration file is not found."""

    pass


class ConfigParseError(ConfigError):
    """Raised when configuration file cannot be parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dictionary.

    Raises:
        ConfigFileNotFoundError: If file doesn't exist
        ConfigParseError: If YAML parsing fails or the top level is not a mapping
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Failed to parse YAML: {e}")  # noqa: B904

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigParseError(f"Configuration must be a mapping, got {type(content).__name__}")
    return content


def load_config(path: str | Path | None = None) -> ReporterConfig:
    """Load and validate pfreporter configuration.

    With no path, ``./pfreporter.yaml`` is used when present and built-in
    defaults otherwise.

    Raises:
        ConfigFileNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If YAML parsing fails
        ConfigValidationError: If validation fails
    """
    if path is None:
        default = Path(DEFAULT_CONFIG)
        if not default.exists():
            return ReporterConfig()
        path = default

    data = load_yaml(Path(path))

    try:
        return ReporterConfig.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        error_messages = []
        for err in errors:
            loc = ".".join(str(x) for x in err["loc"])
            error_messages.append(f"  - {loc}: {err['msg']}")

        raise ConfigValidationError(  # noqa: B904
            "Configuration validation failed:\n" + "\n".join(error_messages),
            errors=[dict(e) for e in errors],  # type: ignore[call-overload]
        )


def save_config(config: ReporterConfig, path: str | Path) -> None:
    """Save configuration to YAML file."""
    data = config.model_dump(mode="json", exclude_defaults=False)

    with open(Path(path), "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, indent=2)


def generate_example_config_yaml() -> str:
    """Return a commented starter configuration."""
    defaults = ReporterConfig()
    body = yaml.safe_dump(
        defaults.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
        indent=2,
    )
    header = (
        "# pfreporter configuration\n"
        "#\n"
        "# upstream:      performance farm serving /pf/{test}/{plant}\n"
        "# server:        address the web server listens on\n"
        "# links:         buildbot and commit links shown on report pages\n"
        "# presentation:  metric and unit labels shown on report pages\n"
        "# markers:       tags marking scale headings, branch headings and tables\n"
        "\n"
    )
    return header + body
