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
from typing import Any, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.schemas.logging_schema import VALID_LOG_LEVELS
from pattern_catalog.config.schemas.output_schema import OUTPUT_FORMATS
from pattern_catalog.domain.base.exceptions import DomainException
from pattern_catalog.domain.base.pattern_unit import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.interface.command_handlers import (
    ListPatternsCLIHandler,
    RunPatternCLIHandler,
    ShowConfigCLIHandler,
    ShowPatternCLIHandler,
    ValidateConfigCLIHandler,
)

# Command handler mapping
COMMAND_HANDLERS = {
    ("patterns", "list"): ListPatternsCLIHandler,
    ("patterns", "show"): ShowPatternCLIHandler,
    ("patterns", "run"): RunPatternCLIHandler,
    ("config", "show"): ShowConfigCLIHandler,
    ("config", "validate"): ValidateConfigCLIHandler,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-catalog",
        description="Pattern Catalog - classic object-oriented design patterns with runnable examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                      # List all patterns
  %(prog)s patterns list --category behavioral
  %(prog)s patterns show decorator            # Description and trade-offs
  %(prog)s patterns run strategy              # Run one example
  %(prog)s --format table patterns run --all  # Conformance summary
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=VALID_LOG_LEVELS, help="Set logging level")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Print tracebacks on errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Resource subparsers
    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # Patterns resource
    patterns_parser = subparsers.add_parser("patterns", help="Browse and run pattern units")
    patterns_subparsers = patterns_parser.add_subparsers(dest="action", help="Pattern actions")

    patterns_list = patterns_subparsers.add_parser("list", help="List all patterns")
    patterns_list.add_argument(
        "--category", choices=[c.value for c in PatternCategory], help="Filter by category"
    )

    patterns_show = patterns_subparsers.add_parser("show", help="Show pattern description and trade-offs")
    patterns_show.add_argument("pattern", help="Pattern key, e.g. 'observer'")

    patterns_run = patterns_subparsers.add_parser("run", help="Run a pattern example")
    patterns_run.add_argument("pattern", nargs="?", help="Pattern key, e.g. 'builder'")
    patterns_run.add_argument("--all", action="store_true", help="Run every pattern example")

    # Config resource
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="action", help="Config actions")

    config_subparsers.add_parser("show", help="Show effective configuration")

    config_validate = config_subparsers.add_parser("validate", help="Validate configuration")
    config_validate.add_argument("--file", help="Configuration file to validate")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)

    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    handler_class = COMMAND_HANDLERS[handler_key]
    handler = handler_class(
        catalog_service=app.catalog_service,
        config_manager=app.config_manager,
        logger=get_logger(handler_class.__module__),
    )
    return handler.handle(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        # Initialize application
        try:
            from pattern_catalog.bootstrap import create_application

            app = create_application(args.config, args.log_level)
        except DomainException as e:
            logger.error("Failed to initialize application", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)

            output_config = app.config_manager.get_output_config()
            output_format = args.format or output_config.format
            formatted_output = format_output(
                result,
                output_format,
                show_headers=output_config.show_headers,
                width=output_config.width,
            )

            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(formatted_output)
                    f.write("\n")
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
