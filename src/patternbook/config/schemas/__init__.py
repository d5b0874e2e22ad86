"""Configuration schemas."""

from .app_schema import AppConfig
from .catalog_schema import OUTPUT_FORMATS, CatalogConfig, OutputConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "OutputConfig",
    "OUTPUT_FORMATS",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
]
