"""Catalog value objects - pattern categories, entries and demo transcripts."""
import re
from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from patternbook.domain.exceptions import ValidationError

SLUG_PATTERN = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


class PatternCategory(str, Enum):
    """The three textbook categories of design patterns."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def order(self) -> int:
        return list(PatternCategory).index(self)

    @classmethod
    def parse(cls, value: str) -> "PatternCategory":
        """Resolve a category from its name, case-insensitively."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = [c.value for c in cls]
            raise ValidationError(
                f"Invalid category '{value}'. Must be one of: {valid}",
                {"category": value},
            )


def validate_slug(slug: str) -> str:
    if not SLUG_PATTERN.match(slug):
        raise ValidationError(
            f"Invalid pattern slug '{slug}': use lower-case kebab-case", {"slug": slug}
        )
    return slug


class PatternEntry(BaseModel):
    """Catalog metadata for a single design pattern."""
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    category: PatternCategory
    intent: str
    participants: List[str] = Field(default_factory=list)
    module: str = ""

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        # Raises the domain ValidationError, which pydantic does not wrap
        return validate_slug(value)

    @field_validator("name", "intent")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class Transcript:
    """
    Ordered collector for the lines a demonstration prints.

    Demonstrations write to a transcript instead of stdout so the output can be
    asserted on, rendered into the catalog document, or echoed by the CLI.
    """

    def __init__(self, slug: Optional[str] = None):
        self.slug = slug
        self._lines: List[str] = []

    def emit(self, line: object) -> None:
        self._lines.append(str(line))

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def __repr__(self) -> str:
        return f"Transcript(slug={self.slug!r}, lines={len(self._lines)})"


class DemoResult(BaseModel):
    """Outcome of running one pattern demonstration."""
    model_config = ConfigDict(frozen=True)

    slug: str
    lines: List[str] = Field(default_factory=list)
    duration_ms: float = 0.0
    succeeded: bool = True
    error: Optional[str] = None
