"""Migration runner.

Brings a database schema up to date with the migration files of a file
source, recording each applied version in a tracking table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.config import Config, Option
from ..core.exceptions import (
    MigrateError,
    MigrationLoadError,
    NoDatabaseError,
    NoDriverError,
    NoMigrationsError,
    SchemaAheadError,
    SQLMigrateError,
    VersionTableError,
)
from ..core.types import Migration
from ..database.base import Queryer
from ..drivers.base import Driver, NewDriver
from ..sources.base import FileSource
from .executor import execute_migration
from .loader import load_migrations

if TYPE_CHECKING:
    from loguru import Logger


class MigrationRunner:
    """Applies pending migrations from a file source to a database.

    Migrations are applied one at a time in version order, each in its own
    transaction. The first failure stops the run; migrations committed
    before it stay applied, so a later run resumes from there.

    Example:
        runner = MigrationRunner(db, SQLiteDriver, source, Config(directory="sql"))
        applied = runner.run()
        print(f"Applied {applied} migrations")
    """

    def __init__(
        self,
        db: Queryer | None,
        new_driver: NewDriver | None,
        source: FileSource,
        config: Config | None = None,
    ):
        """Initialize the runner.

        Args:
            db: Database to migrate.
            new_driver: Constructor for the driver of the database dialect.
            source: File source holding the migrations directory.
            config: Run configuration (default: Config()).

        Raises:
            NoDatabaseError: If db is None.
            NoDriverError: If new_driver is None.
        """
        if db is None:
            raise NoDatabaseError()
        if new_driver is None:
            raise NoDriverError()

        self.db = db
        self.source = source
        self.config = config or Config()
        self.driver: Driver = new_driver(db, self.config.table_name)
        self._migrations: list[Migration] | None = None

    @property
    def logger(self) -> "Logger":
        return self.config.logger

    def get_migrations(self) -> list[Migration]:
        """Get the migrations applicable to the driver, sorted by version.

        Raises:
            MigrationLoadError: If discovery fails. The specific failure
                (unreadable directory, malformed file name, duplicate
                version) is its ``__cause__``.
        """
        if self._migrations is None:
            try:
                self._migrations = load_migrations(
                    self.source,
                    self.config.directory,
                    self.driver.name,
                    logger=self.logger,
                )
            except MigrationLoadError as e:
                raise MigrationLoadError(f"failed to load migrations: {e}") from e
        return self._migrations

    def ensure_version_table(self) -> None:
        """Create the version table if it does not exist.

        Raises:
            VersionTableError: If the table cannot be created.
        """
        try:
            self.driver.create_version_table()
        except Exception as e:
            raise VersionTableError(f"failed to create version table: {e}") from e

    def get_version(self) -> int:
        """Get the current schema version.

        Raises:
            VersionTableError: If the version cannot be read.
        """
        try:
            return self.driver.get_version()
        except Exception as e:
            raise VersionTableError(f"failed to get current version: {e}") from e

    def run(self) -> int:
        """Apply all pending migrations.

        Returns:
            Number of migrations applied.

        Raises:
            MigrationLoadError: If discovery fails or finds no migrations.
            VersionTableError: If the version table cannot be created or read.
            SchemaAheadError: If the database is ahead of the migrations.
            MigrateError: If a migration fails to apply.
        """
        migrations = self.get_migrations()
        if not migrations:
            raise NoMigrationsError(self.config.directory)

        self.ensure_version_table()
        current = self.get_version()
        latest = migrations[-1].version

        if current == latest:
            self.logger.debug(f"Database at version {current}, no migrations to apply")
            return 0

        # Downgrades are not supported.
        if current > latest:
            raise SchemaAheadError(current, latest)

        applied = 0
        for migration in migrations:
            if migration.version <= current:
                continue

            self.logger.info(f"Applying migration {migration.version}: {migration.name}")
            try:
                execute_migration(
                    self.db, self.driver, migration, self.source, logger=self.logger
                )
            except SQLMigrateError as e:
                self.logger.error(f"Migration {migration.version} failed: {e}")
                raise MigrateError(
                    migration.name, migration.file_path, migration.version, str(e)
                ) from e

            applied += 1
            self.logger.debug(f"Migration {migration.version} applied successfully")

        self.logger.info(
            f"Applied {applied} migration(s), database now at version {latest}"
        )
        return applied


def migrate(
    db: Queryer | None,
    new_driver: NewDriver | None,
    source: FileSource,
    *options: Option,
) -> None:
    """Bring the database schema up to date.

    Reads the migrations from ``source``, applies every migration newer than
    the stored schema version and records each applied version. Calling it
    again with no new migration files is a no-op.

    Example:
        migrate(
            SQLiteQueryer(sqlite3.connect("app.db")),
            SQLiteDriver,
            FileSystemSource.from_package("myapp"),
            with_directory("migrations"),
            with_table_name("schema_version"),
        )

    Raises:
        SQLMigrateError: The error that stopped the run.
    """
    if db is None:
        raise NoDatabaseError()
    if new_driver is None:
        raise NoDriverError()

    config = Config().apply(*options)
    MigrationRunner(db, new_driver, source, config).run()
