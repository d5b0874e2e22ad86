"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the catalog service
"""
import argparse
import os
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional, Tuple

from patternbook._version import __version__
from patternbook.application.catalog_service import results_to_dict
from patternbook.config.schemas import OUTPUT_FORMATS
from patternbook.domain.catalog import PatternCategory
from patternbook.domain.exceptions import DomainException, ValidationError
from patternbook.infrastructure.logging.logger import get_logger
from patternbook.cli.formatters import format_output

CATEGORY_CHOICES = [c.value for c in PatternCategory]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CommandResult:
    """Result of a CLI command: data to format, or pre-rendered text."""

    def __init__(self, data: Any = None, text: Optional[str] = None, exit_code: int = 0):
        self.data = data
        self.text = text
        self.exit_code = exit_code


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "patternbook",
        description="patternbook - runnable catalog of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                          # List all patterns
  %(prog)s patterns list --category structural    # List structural patterns
  %(prog)s patterns show observer                 # Show intent and source
  %(prog)s patterns run command                   # Run one demo
  %(prog)s patterns run --all                     # Run every demo
  %(prog)s docs render --output PATTERNS.md       # Render the catalog document
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Set logging level")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Resource subparsers
    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # Patterns resource
    patterns_parser = subparsers.add_parser("patterns", help="Browse and run patterns")
    patterns_subparsers = patterns_parser.add_subparsers(dest="action", help="Pattern actions")

    patterns_list = patterns_subparsers.add_parser("list", help="List patterns")
    patterns_list.add_argument("--category", choices=CATEGORY_CHOICES, help="Filter by category")

    patterns_show = patterns_subparsers.add_parser("show", help="Show pattern details and source")
    patterns_show.add_argument("slug", help="Pattern slug, e.g. abstract-factory")

    patterns_run = patterns_subparsers.add_parser("run", help="Run pattern demonstrations")
    patterns_run.add_argument("slug", nargs="?", help="Pattern slug to run")
    patterns_run.add_argument("--all", action="store_true", help="Run every enabled pattern")
    patterns_run.add_argument("--category", choices=CATEGORY_CHOICES, help="With --all, limit to a category")

    patterns_subparsers.add_parser("summary", help="Count patterns per category")

    # Docs resource
    docs_parser = subparsers.add_parser("docs", help="Catalog document")
    docs_subparsers = docs_parser.add_subparsers(dest="action", help="Document actions")

    docs_render = docs_subparsers.add_parser("render", help="Render the catalog as markdown")
    docs_render.add_argument("--no-source", action="store_true", help="Omit snippet source")
    docs_render.add_argument("--no-output", action="store_true", help="Omit demo output")

    # Config resource
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="action", help="Config actions")
    config_subparsers.add_parser("show", help="Show resolved configuration")
    config_get = config_subparsers.add_parser("get", help="Get configuration value")
    config_get.add_argument("key", help="Dotted configuration key, e.g. logging.level")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _category(args: argparse.Namespace) -> Optional[PatternCategory]:
    value = getattr(args, "category", None)
    return PatternCategory.parse(value) if value else None


def handle_patterns_list(args, app) -> CommandResult:
    entries = app.catalog_service.list_patterns(_category(args))
    return CommandResult({"patterns": [e.model_dump(mode="json") for e in entries]})


def handle_patterns_show(args, app) -> CommandResult:
    return CommandResult(app.catalog_service.describe(args.slug))


def handle_patterns_run(args, app) -> CommandResult:
    service = app.catalog_service
    if args.all:
        results = service.run_all(_category(args))
        data = results_to_dict(results)
        return CommandResult(data, exit_code=1 if data["failed"] else 0)

    if not args.slug:
        raise ValidationError("Specify a pattern slug or --all")

    result = service.run_demo(args.slug)
    return CommandResult(result.model_dump(mode="json"))


def handle_patterns_summary(args, app) -> CommandResult:
    return CommandResult(app.catalog_service.summary())


def handle_docs_render(args, app) -> CommandResult:
    document = app.catalog_service.render_document(
        include_source=False if args.no_source else None,
        include_output=False if args.no_output else None,
    )
    return CommandResult(text=document)


def handle_config_show(args, app) -> CommandResult:
    return CommandResult(app.config_manager.to_dict())


def handle_config_get(args, app) -> CommandResult:
    missing = object()
    value = app.config_manager.get(args.key, missing)
    if value is missing:
        raise ValidationError(f"Unknown configuration key '{args.key}'", {"key": args.key})
    return CommandResult({args.key: value})


# Command handler mapping
COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace, Any], CommandResult]] = {
    ("patterns", "list"): handle_patterns_list,
    ("patterns", "show"): handle_patterns_show,
    ("patterns", "run"): handle_patterns_run,
    ("patterns", "summary"): handle_patterns_summary,
    ("docs", "render"): handle_docs_render,
    ("config", "show"): handle_config_show,
    ("config", "get"): handle_config_get,
}


def execute_command(args: argparse.Namespace, app) -> CommandResult:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)

    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return COMMAND_HANDLERS[handler_key](args, app)


def write_output(text: str, args: argparse.Namespace) -> None:
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text if text.endswith("\n") else text + "\n")
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            return 1

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            return 1

        logger = get_logger(__name__)

        # Initialize application
        try:
            from patternbook.bootstrap import create_application
            app = create_application(args.config, args.log_level)
        except DomainException as e:
            print(f"Error: {e}")
            return 1
        except Exception as e:
            if args.verbose:
                traceback.print_exc()
            print(f"Failed to initialize application: {e}")
            return 1

        # Execute command
        try:
            result = execute_command(args, app)

            if result.text is not None:
                write_output(result.text, args)
            else:
                output_format = args.format or app.config.output.format
                write_output(format_output(result.data, output_format), args)
            return result.exit_code

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            return 1
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
