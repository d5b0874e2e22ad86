import pytest
from unittest.mock import Mock

from patternbook.application.catalog_service import CatalogService, results_to_dict
from patternbook.config.schemas import CatalogConfig
from patternbook.domain.catalog import PatternCategory, PatternEntry
from patternbook.domain.exceptions import (
    DemoExecutionError,
    PatternNotFoundError,
    RenderingError,
)
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry

ALL_SLUGS = [
    "singleton",
    "factory-method",
    "abstract-factory",
    "adapter",
    "decorator",
    "facade",
    "strategy",
    "observer",
    "command",
]


def failing_demo(out):
    out.emit("before failure")
    raise RuntimeError("boom")


@pytest.fixture
def broken_service(mock_logger):
    registry = PatternRegistry()
    registry.register(
        PatternEntry(slug="broken", name="Broken", category="behavioral", intent="Fails."),
        failing_demo,
    )
    return CatalogService(registry=registry, logger=mock_logger)


class TestCatalogService:
    def test_list_patterns_in_textbook_order(self, catalog_service):
        assert [e.slug for e in catalog_service.list_patterns()] == ALL_SLUGS

    def test_list_patterns_by_category(self, catalog_service):
        entries = catalog_service.list_patterns(PatternCategory.STRUCTURAL)
        assert [e.slug for e in entries] == ["adapter", "decorator", "facade"]

    def test_disabled_categories_are_hidden(self, registry, mock_logger):
        service = CatalogService(
            registry, mock_logger, config=CatalogConfig(categories=["behavioral"])
        )
        assert [e.slug for e in service.list_patterns()] == ["strategy", "observer", "command"]
        assert service.list_patterns(PatternCategory.CREATIONAL) == []

    def test_describe_includes_source(self, catalog_service):
        details = catalog_service.describe("observer")
        assert details["name"] == "Observer"
        assert details["category"] == "behavioral"
        assert "class Subject" in details["source"]
        assert details["module"] == "patternbook.patterns.behavioral.observer"

    def test_describe_unknown_pattern(self, catalog_service):
        with pytest.raises(PatternNotFoundError):
            catalog_service.describe("visitor")

    @pytest.mark.parametrize("slug", ALL_SLUGS)
    def test_every_demo_produces_output(self, catalog_service, slug):
        result = catalog_service.run_demo(slug)
        assert result.succeeded
        assert result.slug == slug
        assert result.lines
        assert result.duration_ms >= 0

    def test_observer_demo_updates_once(self, catalog_service):
        result = catalog_service.run_demo("observer")
        assert "lobby updates received: 1" in result.lines

    def test_run_demo_strict_raises(self, broken_service):
        with pytest.raises(DemoExecutionError) as exc_info:
            broken_service.run_demo("broken")
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_run_demo_lenient_reports_failure(self, broken_service, mock_logger):
        result = broken_service.run_demo("broken", strict=False)
        assert not result.succeeded
        assert result.lines == ["before failure"]
        assert result.error == "RuntimeError: boom"
        mock_logger.error.assert_called_once()

    def test_run_all_never_raises(self, broken_service):
        results = broken_service.run_all()
        assert results_to_dict(results)["failed"] == 1

    def test_run_all_by_category(self, catalog_service):
        results = catalog_service.run_all(PatternCategory.CREATIONAL)
        data = results_to_dict(results)
        assert [r["slug"] for r in data["results"]] == ["singleton", "factory-method", "abstract-factory"]
        assert data["passed"] == 3
        assert data["failed"] == 0

    def test_summary(self, catalog_service):
        assert catalog_service.summary() == {
            "categories": {"creational": 3, "structural": 3, "behavioral": 3},
            "total": 9,
        }

    def test_render_document_uses_renderer(self, registry, mock_logger):
        renderer = Mock()
        renderer.render.return_value = "# doc\n"
        service = CatalogService(registry, mock_logger, renderer=renderer)

        assert service.render_document(include_source=False) == "# doc\n"

        sections = renderer.render.call_args.args[0]
        assert [s.entry.slug for s in sections] == ALL_SLUGS
        assert all(s.source is None for s in sections)
        assert all(s.output for s in sections)

    def test_render_document_fails_on_broken_demo(self, broken_service):
        with pytest.raises(RenderingError):
            broken_service.render_document()
