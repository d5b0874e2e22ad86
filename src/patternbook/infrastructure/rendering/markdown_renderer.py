"""Jinja2 renderer for the pattern catalog document."""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from patternbook.domain.catalog import PatternCategory, PatternEntry
from patternbook.domain.exceptions import RenderingError

DEFAULT_INTRO = (
    "Classic object-oriented design patterns, grouped into creational, "
    "structural and behavioral categories. Each section shows a minimal "
    "snippet and the output it prints when run."
)


@dataclass
class PatternSection:
    """Everything the document shows for one pattern."""

    entry: PatternEntry
    source: Optional[str] = None
    output: Optional[List[str]] = None

    @property
    def anchor(self) -> str:
        return re.sub(r"[^a-z0-9-]", "", self.entry.name.lower().replace(" ", "-"))


class MarkdownCatalogRenderer:
    """
    Renders catalog sections into a markdown document.

    Sections are grouped by category in textbook order; categories without
    sections are left out.
    """

    def __init__(self, logger: Any, template_name: str = "catalog.md.j2"):
        self.logger = logger
        self.template_name = template_name
        self._env = Environment(
            loader=PackageLoader("patternbook.infrastructure.rendering", "templates"),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._env.filters["code"] = lambda value: f"`{value}`"

    @staticmethod
    def group_sections(sections: Sequence[PatternSection]) -> List[Dict[str, Any]]:
        groups = []
        for category in PatternCategory:
            members = [s for s in sections if s.entry.category == category]
            if members:
                groups.append({"category": category, "sections": members})
        return groups

    def render(
        self,
        sections: Sequence[PatternSection],
        title: str = "Design Patterns",
        intro: str = DEFAULT_INTRO,
    ) -> str:
        """
        Render the document.

        Raises:
            RenderingError: If the template cannot be loaded or rendered
        """
        groups = self.group_sections(sections)
        try:
            template = self._env.get_template(self.template_name)
            document = template.render(title=title, intro=intro, groups=groups)
        except TemplateError as e:
            self.logger.error("Failed to render catalog document", template=self.template_name, error=str(e))
            raise RenderingError(f"Failed to render {self.template_name}: {e}") from e

        self.logger.debug("Rendered catalog document", sections=len(sections))
        return document.rstrip("\n") + "\n"
