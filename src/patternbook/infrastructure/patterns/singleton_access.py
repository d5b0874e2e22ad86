"""Standard singleton access functions."""
from typing import Any, Type, TypeVar

from patternbook.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    This function provides a consistent way to access singleton instances
    throughout the application. It uses the SingletonRegistry to ensure
    that only one instance of each singleton class is created and reused.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)


def reset_singleton(singleton_class: Type[Any]) -> None:
    """Drop the instance of ``singleton_class`` so the next access recreates it."""
    SingletonRegistry.get_instance().reset(singleton_class)
