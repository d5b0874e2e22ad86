"""Factory Method - let subclasses decide which product class to instantiate."""
import csv
import io
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Sequence

from patternbook.application.decorators import catalog_pattern
from patternbook.domain.catalog import PatternCategory, Transcript

Row = Mapping[str, Any]


class ReportWriter(ABC):
    """Product interface."""

    @abstractmethod
    def write(self, rows: Sequence[Row]) -> str:
        """Serialize rows."""


class JsonReportWriter(ReportWriter):
    def write(self, rows: Sequence[Row]) -> str:
        return json.dumps([dict(row) for row in rows], sort_keys=True)


class CsvReportWriter(ReportWriter):
    def write(self, rows: Sequence[Row]) -> str:
        if not rows:
            return ""
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()), lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
        return buffer.getvalue().rstrip("\n")


class ReportExporter(ABC):
    """
    Creator.

    ``export`` is written once against the ``ReportWriter`` interface; the
    concrete writer comes from ``create_writer``, the factory method that
    subclasses override.
    """

    @abstractmethod
    def create_writer(self) -> ReportWriter:
        """Factory method."""

    def export(self, rows: Sequence[Row]) -> str:
        writer = self.create_writer()
        return writer.write(rows)


class JsonReportExporter(ReportExporter):
    def create_writer(self) -> ReportWriter:
        return JsonReportWriter()


class CsvReportExporter(ReportExporter):
    def create_writer(self) -> ReportWriter:
        return CsvReportWriter()


EXPORTERS: Dict[str, type] = {
    "json": JsonReportExporter,
    "csv": CsvReportExporter,
}


def exporter_for(fmt: str) -> ReportExporter:
    """Get the exporter for a format name."""
    try:
        return EXPORTERS[fmt.lower()]()
    except KeyError:
        raise ValueError(f"Unsupported report format '{fmt}'. Supported formats: {sorted(EXPORTERS)}")


@catalog_pattern(
    slug="factory-method",
    name="Factory Method",
    category=PatternCategory.CREATIONAL,
    intent="Define an interface for creating an object, but let subclasses decide which class to instantiate.",
    participants=["ReportWriter", "ReportExporter", "JsonReportExporter", "CsvReportExporter"],
)
def demo(out: Transcript) -> None:
    rows: List[Row] = [
        {"pattern": "singleton", "category": "creational"},
        {"pattern": "observer", "category": "behavioral"},
    ]
    for fmt in ("json", "csv"):
        exporter = exporter_for(fmt)
        out.emit(f"{type(exporter).__name__}:")
        for line in exporter.export(rows).splitlines():
            out.emit(f"  {line}")
