"""Document rendering infrastructure."""

from patternbook.infrastructure.rendering.markdown_renderer import (
    MarkdownCatalogRenderer,
    PatternSection,
)

__all__ = ["MarkdownCatalogRenderer", "PatternSection"]
