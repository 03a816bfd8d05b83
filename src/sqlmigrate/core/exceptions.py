"""Custom exceptions for sqlmigrate.

Every failure is a subclass of SQLMigrateError. Wrapping errors are raised
with ``raise ... from err`` so the original cause stays reachable through
``__cause__``.
"""


class SQLMigrateError(Exception):
    """Base exception for all sqlmigrate errors."""

    pass


# =============================================================================
# Preconditions
# =============================================================================


class ConfigurationError(SQLMigrateError):
    """Invalid configuration value."""

    pass


class NoDatabaseError(SQLMigrateError):
    """No database was provided."""

    def __init__(self) -> None:
        super().__init__("no database provided")


class NoDriverError(SQLMigrateError):
    """No driver constructor was provided."""

    def __init__(self) -> None:
        super().__init__("no driver provided")


# =============================================================================
# Discovery
# =============================================================================


class MigrationLoadError(SQLMigrateError):
    """Migrations could not be loaded from the file source."""

    pass


class InvalidMigrationFileError(MigrationLoadError):
    """A migration file name does not follow the naming convention."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        super().__init__(message)


class InvalidExtensionError(InvalidMigrationFileError):
    """Migration file does not end in .sql."""

    def __init__(self, file_name: str):
        super().__init__(file_name, f"invalid migration file extension: {file_name}")


class InvalidFileNameError(InvalidMigrationFileError):
    """Migration file name does not split into version and name."""

    def __init__(self, file_name: str):
        super().__init__(file_name, f"invalid migration file name: {file_name}")


class InvalidVersionError(InvalidMigrationFileError):
    """Migration version prefix is not a non-negative integer."""

    def __init__(self, file_name: str, version: str):
        self.version = version
        super().__init__(
            file_name,
            f"failed to parse migration version: {version!r} in {file_name}",
        )


class DuplicateMigrationError(MigrationLoadError):
    """Two migrations declare the same version for the same driver."""

    def __init__(self, version: int, driver1: str, driver2: str):
        self.version = version
        self.driver1 = driver1
        self.driver2 = driver2
        super().__init__(
            "duplicate migration version and driver: "
            f"version={version}, driver1={driver1}, driver2={driver2}"
        )


class NoMigrationsError(MigrationLoadError):
    """The migrations directory holds no applicable migrations."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"no migrations found in {directory}")


# =============================================================================
# Database state
# =============================================================================


class DatabaseError(SQLMigrateError):
    """Database operation failed."""

    pass


class VersionTableError(DatabaseError):
    """The version tracking table could not be created or read."""

    pass


class SchemaAheadError(SQLMigrateError):
    """Stored schema version is newer than every known migration."""

    def __init__(self, current: int, latest: int):
        self.current = current
        self.latest = latest
        super().__init__(
            f"schema version is ahead of migrations: current={current}, latest={latest}"
        )


# =============================================================================
# Execution
# =============================================================================


class MigrateError(SQLMigrateError):
    """A single migration failed to apply.

    The step that failed is available as ``__cause__``.
    """

    def __init__(self, name: str, file_path: str, version: int, reason: str):
        self.name = name
        self.file_path = file_path
        self.version = version
        self.reason = reason
        super().__init__(f"migration {name} failed: {reason}")


class MigrationReadError(SQLMigrateError):
    """Migration file content could not be read."""

    pass


class TransactionBeginError(DatabaseError):
    """Transaction could not be started."""

    pass


class MigrationExecutionError(DatabaseError):
    """Migration SQL failed to execute."""

    pass


class SetVersionError(DatabaseError):
    """Version record could not be written."""

    pass


class CommitError(DatabaseError):
    """Migration transaction could not be committed."""

    pass
