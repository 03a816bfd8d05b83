"""Core types, configuration and exceptions for sqlmigrate."""

from .config import Config, Option, with_directory, with_logger, with_table_name
from .exceptions import (
    CommitError,
    ConfigurationError,
    DatabaseError,
    DuplicateMigrationError,
    InvalidExtensionError,
    InvalidFileNameError,
    InvalidMigrationFileError,
    InvalidVersionError,
    MigrateError,
    MigrationExecutionError,
    MigrationLoadError,
    MigrationReadError,
    NoDatabaseError,
    NoDriverError,
    NoMigrationsError,
    SchemaAheadError,
    SetVersionError,
    SQLMigrateError,
    TransactionBeginError,
    VersionTableError,
)
from .types import Migration

__all__ = [
    "Config",
    "Option",
    "with_directory",
    "with_logger",
    "with_table_name",
    "Migration",
    "SQLMigrateError",
    "ConfigurationError",
    "NoDatabaseError",
    "NoDriverError",
    "MigrationLoadError",
    "InvalidMigrationFileError",
    "InvalidExtensionError",
    "InvalidFileNameError",
    "InvalidVersionError",
    "DuplicateMigrationError",
    "NoMigrationsError",
    "DatabaseError",
    "VersionTableError",
    "SchemaAheadError",
    "MigrateError",
    "MigrationReadError",
    "TransactionBeginError",
    "MigrationExecutionError",
    "SetVersionError",
    "CommitError",
]
