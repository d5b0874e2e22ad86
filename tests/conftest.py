import pytest
from unittest.mock import Mock

from patternbook.application.catalog_service import CatalogService
from patternbook.config.schemas import CatalogConfig
from patternbook.domain.catalog import Transcript
from patternbook.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    load_discovered_patterns,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in ("PATTERNBOOK_CONFIG", "PATTERNBOOK_LOG_LEVEL", "PATTERNBOOK_OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def transcript():
    return Transcript("test")


@pytest.fixture
def mock_logger():
    return Mock()


@pytest.fixture
def registry():
    """A fresh registry holding every discovered pattern."""
    registry = PatternRegistry()
    load_discovered_patterns(registry)
    return registry


@pytest.fixture
def catalog_service(registry, mock_logger):
    return CatalogService(registry=registry, logger=mock_logger, config=CatalogConfig())
