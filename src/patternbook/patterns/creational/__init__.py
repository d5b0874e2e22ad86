"""Creational patterns - concerning object creation."""

# Import order sets catalog order
from patternbook.patterns.creational import singleton  # isort: skip
from patternbook.patterns.creational import factory_method  # isort: skip
from patternbook.patterns.creational import abstract_factory  # isort: skip

__all__ = ["singleton", "factory_method", "abstract_factory"]
