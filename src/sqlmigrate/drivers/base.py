"""Driver protocol and the shared version table implementation.

A driver knows how to create, read and write the version tracking table for
one SQL dialect. Drivers are selected by the caller; the runner only talks
to the Driver protocol.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from ..database.base import Queryer, Transaction


@runtime_checkable
class Driver(Protocol):
    """Version table operations for one SQL dialect."""

    @property
    def name(self) -> str:
        """Identifier matched against the driver tag of migration files."""
        ...

    def create_version_table(self) -> None:
        """Create the version table if it does not exist."""
        ...

    def get_version(self) -> int:
        """Return the most recent schema version, or 0 if none is recorded."""
        ...

    def add_version(self, tx: Transaction, version: int) -> None:
        """Record a version inside the caller's transaction.

        Must not commit or roll back ``tx``.
        """
        ...


NewDriver = Callable[[Queryer, str], Driver]


class VersionTableDriver:
    """Driver base storing one row per applied version.

    Subclasses set ``NAME`` and ``CREATE_TABLE_SQL``.
    """

    NAME: str = ""
    CREATE_TABLE_SQL = (
        "CREATE TABLE IF NOT EXISTS {table} ("
        "version INTEGER PRIMARY KEY, "
        "date TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
    )
    GET_VERSION_SQL = "SELECT version FROM {table} ORDER BY version DESC LIMIT 1"
    ADD_VERSION_SQL = "INSERT INTO {table} (version) VALUES (:version)"

    def __init__(self, db: Queryer, table_name: str):
        """Initialize the driver.

        Args:
            db: Database to operate on.
            table_name: Name of the version table, a validated identifier.
        """
        self.db = db
        self.table_name = table_name

    @property
    def name(self) -> str:
        return self.NAME

    def create_version_table(self) -> None:
        self.db.execute(self.CREATE_TABLE_SQL.format(table=self.table_name))

    def get_version(self) -> int:
        rows = self.db.query(self.GET_VERSION_SQL.format(table=self.table_name))
        if not rows:
            return 0
        return int(rows[0][0])

    def add_version(self, tx: Transaction, version: int) -> None:
        tx.execute(self.ADD_VERSION_SQL.format(table=self.table_name), {"version": version})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table_name={self.table_name!r})"
