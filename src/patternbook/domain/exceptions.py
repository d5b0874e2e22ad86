# src/patternbook/domain/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern is not in the catalog."""
    def __init__(self, slug: str, available: Optional[Iterable[str]] = None):
        self.slug = slug
        self.available = sorted(available or [])
        message = f"Pattern '{slug}' not found"
        if self.available:
            message += f". Available patterns: {', '.join(self.available)}"
        super().__init__(message)


class DuplicatePatternError(DomainException):
    """Raised when a pattern slug is registered twice."""
    def __init__(self, slug: str):
        super().__init__(f"Pattern '{slug}' is already registered")
        self.slug = slug


class DemoExecutionError(DomainException):
    """Raised when a pattern demonstration fails."""
    def __init__(self, slug: str, cause: Exception):
        super().__init__(f"Demo for pattern '{slug}' failed: {cause}")
        self.slug = slug
        self.cause = cause


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class RenderingError(DomainException):
    """Raised when the catalog document cannot be rendered."""
    pass
