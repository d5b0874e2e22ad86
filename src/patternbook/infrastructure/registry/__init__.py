"""Registry infrastructure."""

from patternbook.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    get_pattern_registry,
    load_discovered_patterns,
)

__all__ = ["PatternRegistry", "get_pattern_registry", "load_discovered_patterns"]
