"""Main application configuration schema."""
from pydantic import BaseModel, Field

from .catalog_schema import CatalogConfig, OutputConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
