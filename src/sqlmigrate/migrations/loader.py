"""Migration discovery.

Migration files are named ``<version>_<name>[.<driver>].sql``, for example
``01_create_users_table.sql`` or ``02_add_email_to_users.postgres.sql``.
Underscores in the name become spaces. A driver suffix restricts the file to
one driver; files without one apply to every driver.
"""

from __future__ import annotations

import posixpath
import re
from typing import TYPE_CHECKING

from loguru import logger as _default_logger

from ..core.exceptions import (
    DuplicateMigrationError,
    InvalidExtensionError,
    InvalidFileNameError,
    InvalidVersionError,
    MigrationLoadError,
)
from ..core.types import Migration
from ..sources.base import FileSource, SourceError

if TYPE_CHECKING:
    from loguru import Logger

MIGRATION_FILE_EXT = ".sql"
MIGRATION_SEPARATOR = "_"
MIGRATION_DRIVER_SEPARATOR = "."

_VERSION_RE = re.compile(r"[0-9]+")


def parse_migration_file_name(directory: str, file_name: str) -> Migration:
    """Parse a migration file name into a Migration.

    Args:
        directory: Directory the file lives in, used to build the file path.
        file_name: Base name of the file.

    Returns:
        Migration described by the file name.

    Raises:
        InvalidExtensionError: If the name does not end in ``.sql``.
        InvalidFileNameError: If the name has no version/name separator or
            an empty part. An empty driver suffix (``1_x..sql``) counts as
            an empty part, unlike gomigrate, which reads it as universal.
        InvalidVersionError: If the version prefix is not a non-negative integer.
    """
    if not file_name.endswith(MIGRATION_FILE_EXT):
        raise InvalidExtensionError(file_name)
    stem = file_name[: -len(MIGRATION_FILE_EXT)]

    driver = ""
    head, sep, tail = stem.rpartition(MIGRATION_DRIVER_SEPARATOR)
    if sep:
        if not tail:
            raise InvalidFileNameError(file_name)
        stem, driver = head, tail

    version_part, sep, name_part = stem.partition(MIGRATION_SEPARATOR)
    if not sep or not version_part or not name_part:
        raise InvalidFileNameError(file_name)

    if not _VERSION_RE.fullmatch(version_part):
        raise InvalidVersionError(file_name, version_part)

    return Migration(
        version=int(version_part),
        name=name_part.replace(MIGRATION_SEPARATOR, " "),
        driver=driver,
        file_path=posixpath.join(directory, file_name),
    )


def load_migrations(
    source: FileSource,
    directory: str,
    driver: str,
    logger: "Logger | None" = None,
) -> list[Migration]:
    """Load the migrations applicable to a driver, sorted by version.

    Files tagged for other drivers are ignored. When a universal and a
    driver-specific file share a version, the driver-specific one wins.

    Args:
        source: File source to list and read from.
        directory: Directory holding the migration files.
        driver: Name of the active driver.
        logger: Logger for diagnostics (default: global loguru logger).

    Returns:
        Migrations sorted by ascending version, one per version.

    Raises:
        MigrationLoadError: If the directory cannot be listed or the source
            raises an OSError.
        InvalidMigrationFileError: If a ``.sql`` file name is malformed.
        DuplicateMigrationError: If two files share a version and driver.
    """
    log = logger or _default_logger

    try:
        entries = source.list_directory(directory)
    except (SourceError, OSError) as e:
        raise MigrationLoadError(str(e)) from e

    by_version: dict[int, Migration] = {}
    for entry in entries:
        if entry.is_dir:
            continue

        if not entry.name.endswith(MIGRATION_FILE_EXT):
            log.debug(f"Skipping non-migration file: {entry.name}")
            continue

        migration = parse_migration_file_name(directory, entry.name)
        if migration.driver and migration.driver != driver:
            continue

        existing = by_version.get(migration.version)
        if existing is None:
            by_version[migration.version] = migration
            continue

        if existing.driver == migration.driver:
            raise DuplicateMigrationError(
                migration.version, existing.driver, migration.driver
            )

        # Only a later driver-specific file replaces an earlier universal one;
        # a later universal file never displaces a driver-specific one.
        if migration.driver == driver:
            by_version[migration.version] = migration

    migrations = sorted(by_version.values(), key=lambda m: m.version)
    log.debug(f"Loaded {len(migrations)} migration(s) from {directory!r}")
    return migrations
