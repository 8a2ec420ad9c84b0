"""ddlkit command-line interface.

This module provides the CLI for ddlkit, allowing users to generate DDL
scripts from JSON schema files and to list the available dialects.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import GeneratorConfig
from ..core.error import DdlKitError
from ..core.logging import get_logger, init_logging
from ..ddl.api import generate_database_script, generate_drop_script
from ..ddl.dialects import available_dialects
from ..ddl.loader import load_database_file

logger = get_logger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging for the CLI.

    Args:
        verbose: If True, enable debug logging
    """
    init_logging("DEBUG" if verbose else None)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge command line options over the environment configuration."""
    data = GeneratorConfig.from_env().to_dict()
    if args.dialect:
        data["dialect"] = args.dialect
    if args.schema:
        data["schema_name"] = args.schema
    if args.no_defaults:
        data["ddl_column_defaults"] = False
    if args.quote_all:
        data["quote_all_identifiers"] = True
    if args.skip_unresolved:
        data["on_unresolved"] = "skip"
    return GeneratorConfig.from_dict(data)


def generate_command(args: argparse.Namespace) -> int:
    """Generate a CREATE or DROP script from a schema file.

    Args:
        args: Command line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        config = build_config(args)
        database = load_database_file(args.schema_file)

        if args.drop:
            script = generate_drop_script(database, config.dialect, config)
        else:
            script = generate_database_script(database, config.dialect, config)

        text = script.to_text(config.statement_separator)
        if args.output:
            Path(args.output).write_text(text, encoding="utf-8")
            logger.info(f"Wrote {len(script)} statements to {args.output}")
        else:
            sys.stdout.write(text)
        return 0
    except DdlKitError as e:
        logger.error(f"Failed to generate script: {e}")
        if args.verbose:
            logger.exception("Detailed error")
        return 1


def list_dialects_command(args: argparse.Namespace) -> int:
    """List registered dialects.

    Returns:
        Exit code (always 0)
    """
    print("Available dialects:")
    for name in available_dialects():
        print(f"  {name}")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="ddlkit",
        description="Dialect-aware DDL generation",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        help="Command to execute"
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a DDL script from a JSON schema file"
    )
    generate_parser.add_argument(
        "schema_file",
        help="Path to the JSON schema file"
    )
    generate_parser.add_argument(
        "-d", "--dialect",
        default=None,
        help="Target dialect (default: DDLKIT_DIALECT or postgresql)"
    )
    generate_parser.add_argument(
        "-o", "--output",
        help="Write the script to this file instead of stdout"
    )
    generate_parser.add_argument(
        "--schema",
        default=None,
        help="Schema used to qualify object names"
    )
    generate_parser.add_argument(
        "--drop",
        action="store_true",
        help="Generate the DROP script instead of the CREATE script"
    )
    generate_parser.add_argument(
        "--no-defaults",
        action="store_true",
        help="Do not emit column DEFAULT clauses"
    )
    generate_parser.add_argument(
        "--quote-all",
        action="store_true",
        help="Quote every identifier"
    )
    generate_parser.add_argument(
        "--skip-unresolved",
        action="store_true",
        help="Skip columns whose type the dialect cannot render instead of failing"
    )

    subparsers.add_parser(
        "dialects",
        help="List available dialects"
    )

    args = parser.parse_args(args)

    setup_logging(args.verbose)

    if args.command == "generate":
        return generate_command(args)
    elif args.command == "dialects":
        return list_dialects_command(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
