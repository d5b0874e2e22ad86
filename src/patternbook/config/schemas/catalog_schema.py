"""Catalog and output configuration schemas."""
from typing import List

from pydantic import BaseModel, Field, field_validator

from patternbook.domain.catalog import PatternCategory

OUTPUT_FORMATS = ("json", "yaml", "table", "list")


class CatalogConfig(BaseModel):
    """Which patterns the catalog exposes and how the document is rendered."""

    categories: List[PatternCategory] = Field(
        default_factory=lambda: list(PatternCategory),
        description="Categories enabled in listings and the rendered document",
    )
    include_source: bool = Field(True, description="Embed snippet source in the document")
    include_output: bool = Field(True, description="Embed demo output in the document")
    document_title: str = Field("Design Patterns", description="Rendered document title")

    @field_validator("categories", mode="before")
    @classmethod
    def normalize_categories(cls, value):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            # Let the list type check report the field
            return value
        return [v.lower() if isinstance(v, str) else v for v in value]

    @field_validator("categories")
    @classmethod
    def require_categories(cls, value: List[PatternCategory]) -> List[PatternCategory]:
        if not value:
            raise ValueError("at least one category must be enabled")
        # De-duplicate, keep textbook order
        return sorted(set(value), key=lambda c: c.order)


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: str = Field("table", description="Default output format")

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(f"format must be one of {list(OUTPUT_FORMATS)}")
        return value
