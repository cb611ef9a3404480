"""pfreporter configuration module."""

from .loader import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    generate_example_config_yaml,
    load_config,
    load_yaml,
    save_config,
)
from .schema import (
    LinksConfig,
    LoggingConfig,
    LogLevel,
    MarkersConfig,
    OutputFormat,
    PresentationConfig,
    ReporterConfig,
    ServerConfig,
    UpstreamConfig,
)

__all__ = [
    # Config classes
    "ReporterConfig",
    "UpstreamConfig",
    "ServerConfig",
    "LinksConfig",
    "PresentationConfig",
    "MarkersConfig",
    "LoggingConfig",
    # Enums
    "LogLevel",
    "OutputFormat",
    # Loader functions
    "load_config",
    "load_yaml",
    "save_config",
    "generate_example_config_yaml",
    # Exceptions
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
