"""Schema migrations from versioned SQL files.

Example:
    import sqlite3

    from sqlmigrate.database import SQLiteQueryer
    from sqlmigrate.drivers import SQLiteDriver
    from sqlmigrate.migrations import migrate
    from sqlmigrate.sources import FileSystemSource

    migrate(SQLiteQueryer(sqlite3.connect("app.db")), SQLiteDriver, FileSystemSource())
"""

from .executor import execute_migration
from .loader import (
    MIGRATION_FILE_EXT,
    load_migrations,
    parse_migration_file_name,
)
from .runner import MigrationRunner, migrate

__all__ = [
    "MIGRATION_FILE_EXT",
    "MigrationRunner",
    "execute_migration",
    "load_migrations",
    "migrate",
    "parse_migration_file_name",
]
