"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import (
    AppConfig,
    CatalogConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
)

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "OutputConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    "ConfigurationManager",
    "get_config_manager",
]
