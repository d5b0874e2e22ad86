"""Catalog application service - list, describe, run and render patterns."""
import importlib
import inspect
import time
from typing import Any, Dict, List, Optional, Sequence

from patternbook.config.schemas import CatalogConfig
from patternbook.domain.catalog import DemoResult, PatternCategory, PatternEntry, Transcript
from patternbook.domain.exceptions import DemoExecutionError, RenderingError
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry
from patternbook.infrastructure.rendering.markdown_renderer import (
    MarkdownCatalogRenderer,
    PatternSection,
)


class CatalogService:
    """
    Application service over the pattern registry.

    The catalog configuration decides which categories are visible; patterns
    in disabled categories behave as if they were not registered when listed,
    but can still be looked up by slug.
    """

    def __init__(
        self,
        registry: PatternRegistry,
        logger: Any,
        config: Optional[CatalogConfig] = None,
        renderer: Optional[MarkdownCatalogRenderer] = None,
    ):
        self.registry = registry
        self.logger = logger
        self.config = config or CatalogConfig()
        self.renderer = renderer or MarkdownCatalogRenderer(logger)

    def _enabled(self, category: Optional[PatternCategory]) -> List[PatternCategory]:
        if category is None:
            return list(self.config.categories)
        return [category] if category in self.config.categories else []

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternEntry]:
        enabled = self._enabled(category)
        return [entry for entry in self.registry.list() if entry.category in enabled]

    def get_source(self, slug: str) -> str:
        """Get the source code of the module that implements ``slug``."""
        entry = self.registry.get(slug)
        module = importlib.import_module(entry.module)
        return inspect.getsource(module)

    def describe(self, slug: str) -> Dict[str, Any]:
        entry = self.registry.get(slug)
        details = entry.model_dump(mode="json")
        details["source"] = self.get_source(slug)
        return details

    def run_demo(self, slug: str, strict: bool = True) -> DemoResult:
        """
        Run one pattern's demonstration and capture its transcript.

        Args:
            slug: Pattern to run
            strict: Raise on failure instead of returning a failed result

        Raises:
            PatternNotFoundError: If the pattern is not registered
            DemoExecutionError: If the demo fails and ``strict`` is set
        """
        demo = self.registry.get_demo(slug)
        transcript = Transcript(slug)
        self.logger.debug("Running demo", slug=slug)

        start_time = time.perf_counter()
        try:
            demo(transcript)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.error("Demo failed", slug=slug, error=str(e), duration_ms=round(duration_ms, 3))
            if strict:
                raise DemoExecutionError(slug, e) from e
            return DemoResult(
                slug=slug,
                lines=transcript.lines,
                duration_ms=duration_ms,
                succeeded=False,
                error=f"{type(e).__name__}: {e}",
            )

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info("Demo completed", slug=slug, lines=len(transcript), duration_ms=round(duration_ms, 3))
        return DemoResult(slug=slug, lines=transcript.lines, duration_ms=duration_ms)

    def run_all(self, category: Optional[PatternCategory] = None) -> List[DemoResult]:
        """Run every enabled demo; failures are reported in the results."""
        return [self.run_demo(entry.slug, strict=False) for entry in self.list_patterns(category)]

    def build_sections(
        self,
        include_source: Optional[bool] = None,
        include_output: Optional[bool] = None,
    ) -> List[PatternSection]:
        if include_source is None:
            include_source = self.config.include_source
        if include_output is None:
            include_output = self.config.include_output

        sections = []
        for entry in self.list_patterns():
            source = self.get_source(entry.slug) if include_source else None
            output = None
            if include_output:
                result = self.run_demo(entry.slug, strict=False)
                if not result.succeeded:
                    raise RenderingError(f"Cannot render output of '{entry.slug}': {result.error}")
                output = result.lines
            sections.append(PatternSection(entry=entry, source=source, output=output))
        return sections

    def render_document(
        self,
        include_source: Optional[bool] = None,
        include_output: Optional[bool] = None,
    ) -> str:
        """Render the catalog as a markdown document."""
        sections = self.build_sections(include_source, include_output)
        return self.renderer.render(sections, title=self.config.document_title)

    def summary(self) -> Dict[str, Any]:
        counts = {category.value: 0 for category in self.config.categories}
        for entry in self.list_patterns():
            counts[entry.category.value] += 1
        return {"categories": counts, "total": sum(counts.values())}


def results_to_dict(results: Sequence[DemoResult]) -> Dict[str, Any]:
    return {
        "results": [result.model_dump(mode="json") for result in results],
        "passed": sum(1 for r in results if r.succeeded),
        "failed": sum(1 for r in results if not r.succeeded),
    }
