"""
Application Layer Decorators for the pattern catalog.

Pattern modules mark their demonstration function with ``@catalog_pattern``.
Importing a pattern module is enough to record it; the infrastructure registry
consumes the recorded table when it is first built.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from patternbook.domain.catalog import PatternCategory, PatternEntry, Transcript, validate_slug
from patternbook.domain.exceptions import DuplicatePatternError

DemoFunction = Callable[[Transcript], None]

# Pattern registration table (application-level abstraction)
_pattern_registry: Dict[str, Tuple[PatternEntry, DemoFunction]] = {}


def catalog_pattern(
    slug: str,
    name: str,
    category: Union[PatternCategory, str],
    intent: str,
    participants: Optional[Sequence[str]] = None,
):
    """
    Mark a function as the demonstration of a catalog pattern.

    Usage:
        @catalog_pattern(
            slug="observer",
            name="Observer",
            category=PatternCategory.BEHAVIORAL,
            intent="Notify dependents automatically when a subject changes.",
            participants=["Subject", "Observer"],
        )
        def demo(out: Transcript) -> None:
            ...

    Args:
        slug: Unique kebab-case identifier
        name: Display name
        category: Creational, structural or behavioral
        intent: One-sentence intent of the pattern
        participants: Names of the classes the snippet defines

    Returns:
        The undecorated demo function, tagged with its catalog entry

    Raises:
        DuplicatePatternError: If the slug is already registered
    """
    validate_slug(slug)
    if not isinstance(category, PatternCategory):
        category = PatternCategory.parse(category)

    def decorator(demo: DemoFunction) -> DemoFunction:
        if slug in _pattern_registry:
            raise DuplicatePatternError(slug)

        entry = PatternEntry(
            slug=slug,
            name=name,
            category=category,
            intent=intent,
            participants=list(participants or []),
            module=demo.__module__,
        )
        _pattern_registry[slug] = (entry, demo)

        # Tag the demo with its entry
        demo._pattern_entry = entry

        return demo

    return decorator


def get_registered_patterns() -> Dict[str, Tuple[PatternEntry, DemoFunction]]:
    """Get all registered patterns (for infrastructure consumption)."""
    return _pattern_registry.copy()


def unregister_pattern(slug: str) -> None:
    """Remove a pattern from the registration table if present."""
    _pattern_registry.pop(slug, None)


def get_registration_stats() -> Dict[str, int]:
    """Get the number of registered patterns per category."""
    stats = {category.value: 0 for category in PatternCategory}
    for entry, _ in _pattern_registry.values():
        stats[entry.category.value] += 1
    stats["total"] = len(_pattern_registry)
    return stats
