"""
Pattern snippets, one self-contained module per pattern.

Importing this package imports every pattern module, which registers each
demonstration with the catalog.
"""

from patternbook.patterns import behavioral, creational, structural

__all__ = ["creational", "structural", "behavioral"]
