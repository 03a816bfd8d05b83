"""Migration commands for the sqlmigrate CLI."""

from __future__ import annotations

import argparse
import os

from ...core.config import Config, with_directory, with_table_name
from ...core.exceptions import ConfigurationError
from ...database import EngineQueryer
from ...drivers import get_driver, supported_drivers
from ...migrations import MigrationRunner
from ...sources import FileSystemSource


def add_database_arguments(parser: argparse.ArgumentParser) -> None:
    """Add database and migration source arguments to a subcommand parser."""
    parser.add_argument(
        "-d",
        "--database-url",
        default=os.environ.get("SQLMIGRATE_DATABASE_URL"),
        help="SQLAlchemy database URL (default: $SQLMIGRATE_DATABASE_URL)",
    )
    parser.add_argument(
        "--driver",
        choices=supported_drivers(),
        help="Version table driver (default: derived from the database URL)",
    )
    parser.add_argument(
        "-s",
        "--source",
        default=".",
        help="fsspec URL or path the migrations directory is relative to (default: .)",
    )
    parser.add_argument(
        "--directory",
        help="Migrations directory inside the source (default: migrations)",
    )
    parser.add_argument(
        "--table-name",
        help="Version table name (default: gomigrate)",
    )


def handle_up(args: argparse.Namespace, config: Config) -> None:
    """Handle the up command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    runner, db = _create_runner(args, config)
    try:
        applied = runner.run()
    finally:
        db.dispose()

    if applied:
        print(f"Applied {applied} migration(s)")
    else:
        print("Database is up to date")


def handle_version(args: argparse.Namespace, config: Config) -> None:
    """Handle the version command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    runner, db = _create_runner(args, config)
    try:
        runner.ensure_version_table()
        version = runner.get_version()
    finally:
        db.dispose()

    print(version)


def _create_runner(
    args: argparse.Namespace, config: Config
) -> tuple[MigrationRunner, EngineQueryer]:
    if not args.database_url:
        raise ConfigurationError(
            "No database URL given. Use --database-url or set SQLMIGRATE_DATABASE_URL"
        )

    options = []
    if args.directory:
        options.append(with_directory(args.directory))
    if args.table_name:
        options.append(with_table_name(args.table_name))
    config = config.apply(*options)

    db = EngineQueryer.from_url(args.database_url)
    try:
        new_driver = get_driver(args.driver or db.dialect_name)
        source = FileSystemSource.from_uri(args.source)
        runner = MigrationRunner(db, new_driver, source, config)
    except Exception:
        db.dispose()
        raise

    return runner, db
