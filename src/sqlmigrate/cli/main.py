"""CLI entry point for sqlmigrate."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from loguru import logger

from ..core.config import Config
from . import commands

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sqlmigrate",
        description="Apply versioned SQL migrations to a database",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="TOML configuration file (directory, table_name)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    up_parser = subparsers.add_parser("up", help="Apply all pending migrations")
    commands.add_database_arguments(up_parser)

    version_parser = subparsers.add_parser(
        "version", help="Show the current schema version"
    )
    commands.add_database_arguments(version_parser)

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log output to stderr at INFO, or DEBUG when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = Config.from_file(Path(args.config)) if args.config else Config.from_env()

        if args.command == "up":
            commands.handle_up(args, config)
        elif args.command == "version":
            commands.handle_version(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
