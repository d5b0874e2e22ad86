"""patternbook - Root Package.

This package hosts minimal, runnable renditions of the classic object-oriented
design patterns, grouped under the three textbook categories:

    - creational: Singleton, Factory Method, Abstract Factory
    - structural: Adapter, Decorator, Facade
    - behavioral: Strategy, Observer, Command

Key Components:
    - patterns: one self-contained module per pattern, each with a demo
    - domain: catalog types and exceptions
    - application: catalog registration and the catalog service
    - infrastructure: registry, logging and markdown rendering
    - config: configuration schemas and manager
    - cli: the ``patternbook`` command line interface

Usage:
    >>> patternbook patterns list --category behavioral
    >>> patternbook patterns run observer
    >>> patternbook docs render --output PATTERNS.md
"""

from ._package import PACKAGE_NAME
from ._version import __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "__package_name__"]
