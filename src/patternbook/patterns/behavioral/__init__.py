"""Behavioral patterns - concerning object interaction."""

# Import order sets catalog order
from patternbook.patterns.behavioral import strategy  # isort: skip
from patternbook.patterns.behavioral import observer  # isort: skip
from patternbook.patterns.behavioral import command  # isort: skip

__all__ = ["strategy", "observer", "command"]
