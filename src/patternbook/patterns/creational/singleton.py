"""Singleton - ensure a class has one instance and a global access point to it."""
import threading
from typing import Any, Dict, Optional

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript
from patternbook.infrastructure.patterns import get_singleton, reset_singleton


class SingletonMeta(type):
    """
    Metaclass that gives each class using it exactly one instance.

    The instance is created lazily on the first call. Creation uses
    double-checked locking, so concurrent first calls still construct (and
    run ``__init__``) once; later calls return the instance and ignore their
    arguments.
    """

    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                if cls not in SingletonMeta._instances:
                    SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]


class Singleton(metaclass=SingletonMeta):
    """Base class for single-instance classes."""

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the current instance; the next call creates a new one."""
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)


class AppSettings(Singleton):
    """Process-wide settings holder."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(defaults or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value


class FeatureFlags:
    """Plain class made single-instance through the singleton registry."""

    def __init__(self) -> None:
        self.enabled: set = set()


@catalog_pattern(
    slug="singleton",
    name="Singleton",
    category=PatternCategory.CREATIONAL,
    intent="Ensure a class has only one instance and provide a global point of access to it.",
    participants=["SingletonMeta", "Singleton", "AppSettings"],
)
def demo(out: Transcript) -> None:
    AppSettings.reset_instance()
    try:
        first = AppSettings({"theme": "light"})
        second = AppSettings({"theme": "ignored"})

        first.set("theme", "dark")
        out.emit(f"settings are the same object: {first is second}")
        out.emit(f"theme read through second reference: {second.get('theme')}")
    finally:
        AppSettings.reset_instance()

    reset_singleton(FeatureFlags)
    try:
        get_singleton(FeatureFlags).enabled.add("beta")
        out.emit(f"registry-held flags: {sorted(get_singleton(FeatureFlags).enabled)}")
    finally:
        reset_singleton(FeatureFlags)
