"""Apply a single migration in its own transaction."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from loguru import logger as _default_logger

from ..core.exceptions import (
    CommitError,
    MigrationExecutionError,
    MigrationReadError,
    SetVersionError,
    SQLMigrateError,
    TransactionBeginError,
)
from ..core.types import Migration
from ..database.base import Queryer, Transaction
from ..drivers.base import Driver
from ..sources.base import FileSource, SourceError

if TYPE_CHECKING:
    from loguru import Logger


def execute_migration(
    db: Queryer,
    driver: Driver,
    migration: Migration,
    source: FileSource,
    logger: "Logger | None" = None,
) -> None:
    """Run a migration and record its version atomically.

    The migration script and the version record are written in one
    transaction: either both become durable or neither does.

    Args:
        db: Database to migrate.
        driver: Driver recording the version.
        migration: Migration to apply.
        source: File source holding the migration script.
        logger: Logger for diagnostics (default: global loguru logger).

    Raises:
        MigrationReadError: If the script cannot be read or decoded,
            including OSErrors raised directly by the source.
        TransactionBeginError: If the transaction cannot be started.
        MigrationExecutionError: If the script fails.
        SetVersionError: If the version record cannot be written.
        CommitError: If the transaction cannot be committed.
    """
    log = logger or _default_logger

    try:
        script = source.read_file(migration.file_path).decode("utf-8")
    except (SourceError, OSError, UnicodeDecodeError) as e:
        raise MigrationReadError(f"failed to read migration file: {e}") from e

    try:
        tx = db.begin()
    except Exception as e:
        raise TransactionBeginError(f"failed to start transaction: {e}") from e

    with _rollback_on_error(tx, log, MigrationExecutionError, "failed to execute migration"):
        tx.execute_script(script)

    with _rollback_on_error(tx, log, SetVersionError, "failed to set version"):
        driver.add_version(tx, migration.version)

    with _rollback_on_error(tx, log, CommitError, "failed to commit migration"):
        tx.commit()


@contextmanager
def _rollback_on_error(
    tx: Transaction,
    log: "Logger",
    error_type: type[SQLMigrateError],
    message: str,
) -> Iterator[None]:
    """Roll back and raise ``error_type`` if the block fails.

    Interrupts roll back too but propagate unchanged.
    """
    try:
        yield
    except Exception as e:
        _rollback(tx, log)
        raise error_type(f"{message}: {e}") from e
    except BaseException:
        _rollback(tx, log)
        raise


def _rollback(tx: Transaction, log: "Logger") -> None:
    try:
        tx.rollback()
    except Exception as e:
        # The error that caused the rollback is the one reported.
        log.debug(f"Rollback failed: {e}")
