"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.STDOUT,
        description="Where log records go; the console destination writes to stderr",
    )
    file_path: str = Field("logs/patternbook.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Rotate the log file at this size")
    backup_count: int = Field(3, ge=0, description="Number of rotated files to keep")
    json_format: bool = Field(False, description="Render log records as JSON")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
