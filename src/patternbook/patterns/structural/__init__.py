"""Structural patterns - concerning object composition."""

# Import order sets catalog order
from patternbook.patterns.structural import adapter  # isort: skip
from patternbook.patterns.structural import decorator  # isort: skip
from patternbook.patterns.structural import facade  # isort: skip

__all__ = ["adapter", "decorator", "facade"]
