"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for pattern listings and demo results
- List formatting for detailed views
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    elif isinstance(data, dict) and "lines" in data:
        return "\n".join(data["lines"])
    else:
        # Nested or free-form data reads better as a list than a table
        return format_list_output(data)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return "\n\n".join(_format_mapping(p) for p in data["patterns"]) or "No patterns found."
    elif isinstance(data, dict) and "results" in data:
        return "\n\n".join(_format_mapping(r) for r in data["results"]) or "No results."
    elif isinstance(data, dict):
        return _format_mapping(data)
    return str(data)


def _format_mapping(data: Dict[str, Any], indent: int = 0) -> str:
    pad = "  " * indent
    lines = []
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"{pad}{key}:")
            lines.append(_format_mapping(value, indent + 1))
        elif isinstance(value, list):
            lines.append(f"{pad}{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, str) and "\n" in value:
            lines.append(f"{pad}{key}:")
            lines.extend(f"{pad}  {line}" for line in value.splitlines())
        else:
            lines.append(f"{pad}{key}: {value}")
    return "\n".join(lines)


def _render_table(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format catalog entries as a table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Intent")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("slug", "N/A")),
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("intent", "")),
        )
    return _render_table(table)


def format_results_table(results: List[Dict]) -> str:
    """Format demo results as a table."""
    if not results:
        return "No results."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("Lines", justify="right")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Error", style="red")

    for result in results:
        table.add_row(
            str(result.get("slug", "N/A")),
            "ok" if result.get("succeeded") else "FAILED",
            str(len(result.get("lines", []))),
            f"{result.get('duration_ms', 0.0):.2f}",
            str(result.get("error") or ""),
        )
    return _render_table(table)
