"""Pattern Registry - thread-safe store of catalog entries and their demos.

The registry only knows entries and callables; it has no knowledge of how a
demo is executed or rendered.
"""
import threading
from typing import Callable, Dict, List, Optional, Tuple

from patternbook.domain.catalog import PatternCategory, PatternEntry, Transcript
from patternbook.domain.exceptions import DuplicatePatternError, PatternNotFoundError
from patternbook.infrastructure.logging.logger import get_logger
from patternbook.infrastructure.patterns import get_singleton

DemoFunction = Callable[[Transcript], None]


class PatternRegistration:
    """Container for pattern registration information."""

    def __init__(self, entry: PatternEntry, demo: DemoFunction, sequence: int):
        self.entry = entry
        self.demo = demo
        self.sequence = sequence

    def __repr__(self) -> str:
        return f"PatternRegistration(slug='{self.entry.slug}')"


class PatternRegistry:
    """Registry for catalog patterns."""

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternRegistration] = {}
        self._sequence = 0
        self._lock = threading.RLock()
        self.logger = get_logger(__name__)

    def register(self, entry: PatternEntry, demo: DemoFunction) -> None:
        """
        Register a pattern with its demonstration.

        Raises:
            DuplicatePatternError: If the slug is already registered
        """
        with self._lock:
            if entry.slug in self._registrations:
                raise DuplicatePatternError(entry.slug)

            self._registrations[entry.slug] = PatternRegistration(entry, demo, self._sequence)
            self._sequence += 1

        self.logger.debug("Registered pattern", slug=entry.slug, category=entry.category.value)

    def _get_registration(self, slug: str) -> PatternRegistration:
        with self._lock:
            registration = self._registrations.get(slug)
            if registration is None:
                raise PatternNotFoundError(slug, list(self._registrations))
            return registration

    def get(self, slug: str) -> PatternEntry:
        """Get the catalog entry for ``slug``."""
        return self._get_registration(slug).entry

    def get_demo(self, slug: str) -> DemoFunction:
        """Get the demonstration callable for ``slug``."""
        return self._get_registration(slug).demo

    def list(self, category: Optional[PatternCategory] = None) -> List[PatternEntry]:
        """
        List entries in textbook order.

        Entries are ordered by category (creational, structural, behavioral),
        then by registration order within a category.
        """
        with self._lock:
            registrations = sorted(
                self._registrations.values(),
                key=lambda r: (r.entry.category.order, r.sequence),
            )
        return [
            r.entry for r in registrations
            if category is None or r.entry.category == category
        ]

    def slugs(self) -> List[str]:
        return [entry.slug for entry in self.list()]

    def is_registered(self, slug: str) -> bool:
        with self._lock:
            return slug in self._registrations

    def clear(self) -> None:
        """Remove all registrations."""
        with self._lock:
            self._registrations.clear()
            self._sequence = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)


def load_discovered_patterns(registry: PatternRegistry) -> int:
    """
    Copy patterns recorded by ``@catalog_pattern`` into ``registry``.

    Patterns already present in the registry are skipped. Returns the number
    of newly registered patterns.
    """
    # Importing the patterns package triggers every module's registration
    import patternbook.patterns  # noqa: F401
    from patternbook.application.decorators import get_registered_patterns

    loaded = 0
    discovered: Dict[str, Tuple[PatternEntry, DemoFunction]] = get_registered_patterns()
    with registry._lock:
        for slug, (entry, demo) in discovered.items():
            if registry.is_registered(slug):
                continue
            registry.register(entry, demo)
            loaded += 1

    registry.logger.debug("Loaded discovered patterns", count=loaded)
    return loaded


def get_pattern_registry() -> PatternRegistry:
    """Get the process-wide pattern registry, populated on first use."""
    import patternbook.patterns  # noqa: F401

    registry = get_singleton(PatternRegistry)
    # Check and populate atomically
    with registry._lock:
        if not len(registry):
            load_discovered_patterns(registry)
    return registry
