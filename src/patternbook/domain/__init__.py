"""Domain layer - catalog types and exceptions."""

from patternbook.domain.catalog import (
    DemoResult,
    PatternCategory,
    PatternEntry,
    Transcript,
    validate_slug,
)
from patternbook.domain.exceptions import (
    ConfigurationError,
    DemoExecutionError,
    DomainException,
    DuplicatePatternError,
    PatternNotFoundError,
    RenderingError,
    ValidationError,
)

__all__ = [
    "PatternCategory",
    "PatternEntry",
    "Transcript",
    "DemoResult",
    "validate_slug",
    "DomainException",
    "ValidationError",
    "PatternNotFoundError",
    "DuplicatePatternError",
    "DemoExecutionError",
    "ConfigurationError",
    "RenderingError",
]
