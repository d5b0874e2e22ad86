import threading
import time
from unittest.mock import patch

import pytest

from patternbook.domain.catalog import PatternCategory, PatternEntry
from patternbook.domain.exceptions import DuplicatePatternError, PatternNotFoundError
from patternbook.infrastructure.patterns import SingletonRegistry
from patternbook.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    get_pattern_registry,
    load_discovered_patterns,
)


def make_entry(slug, category):
    return PatternEntry(slug=slug, name=slug.title(), category=category, intent="Test entry.")


def noop(out):
    pass


class TestPatternRegistry:
    def setup_method(self):
        self.registry = PatternRegistry()

    def test_register_and_get(self):
        entry = make_entry("adapter", "structural")
        self.registry.register(entry, noop)

        assert self.registry.get("adapter") == entry
        assert self.registry.get_demo("adapter") is noop
        assert self.registry.is_registered("adapter")
        assert len(self.registry) == 1

    def test_duplicate_registration(self):
        self.registry.register(make_entry("adapter", "structural"), noop)
        with pytest.raises(DuplicatePatternError):
            self.registry.register(make_entry("adapter", "structural"), noop)

    def test_unknown_slug_lists_available(self):
        self.registry.register(make_entry("adapter", "structural"), noop)
        with pytest.raises(PatternNotFoundError) as exc_info:
            self.registry.get("bridge")
        assert exc_info.value.available == ["adapter"]

    def test_list_orders_by_category_then_registration(self):
        self.registry.register(make_entry("command", "behavioral"), noop)
        self.registry.register(make_entry("facade", "structural"), noop)
        self.registry.register(make_entry("singleton", "creational"), noop)
        self.registry.register(make_entry("adapter", "structural"), noop)

        assert self.registry.slugs() == ["singleton", "facade", "adapter", "command"]
        assert [e.slug for e in self.registry.list(PatternCategory.STRUCTURAL)] == ["facade", "adapter"]

    def test_clear(self):
        self.registry.register(make_entry("adapter", "structural"), noop)
        self.registry.clear()
        assert len(self.registry) == 0
        assert self.registry.list() == []

    def test_concurrent_registration(self):
        def worker(i):
            self.registry.register(make_entry(f"pattern-{i}", "behavioral"), noop)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(self.registry) == 20


def test_load_discovered_patterns_skips_existing():
    registry = PatternRegistry()
    first = load_discovered_patterns(registry)
    second = load_discovered_patterns(registry)

    assert first >= 9
    assert second == 0


def test_get_pattern_registry_is_process_wide():
    SingletonRegistry.get_instance().reset(PatternRegistry)
    try:
        registry = get_pattern_registry()
        assert registry is get_pattern_registry()
        assert registry.is_registered("observer")
    finally:
        SingletonRegistry.get_instance().reset(PatternRegistry)


def test_concurrent_first_access_loads_once():
    SingletonRegistry.get_instance().reset(PatternRegistry)
    original_is_registered = PatternRegistry.is_registered

    def slow_is_registered(self, slug):
        time.sleep(0.005)
        return original_is_registered(self, slug)

    barrier = threading.Barrier(4)
    registries, errors = [], []

    def first_call():
        barrier.wait()
        try:
            registries.append(get_pattern_registry())
        except Exception as e:
            errors.append(e)

    try:
        with patch.object(PatternRegistry, "is_registered", slow_is_registered):
            threads = [threading.Thread(target=first_call) for _ in range(4)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert errors == []
        assert len(registries) == 4
        assert all(registry is registries[0] for registry in registries)
        assert len(registries[0]) == 9
    finally:
        SingletonRegistry.get_instance().reset(PatternRegistry)
