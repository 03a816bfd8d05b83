"""Adapter for stdlib sqlite3 connections."""

import sqlite3

from ..core.exceptions import DatabaseError
from .base import Params


class SQLiteTransaction:
    """Transaction on a sqlite3 connection under manual transaction control.

    The transaction is opened lazily by the first statement. A script must be
    the first thing run in a transaction: ``executescript`` cannot join a
    transaction opened by an earlier statement, so the script itself starts
    with ``BEGIN``.
    """

    def __init__(self, connection: sqlite3.Connection):
        self._connection = connection
        self._started = False

    def execute(self, sql: str, params: Params | None = None) -> None:
        if not self._started:
            self._connection.execute("BEGIN")
            self._started = True
        self._connection.execute(sql, dict(params or {}))

    def execute_script(self, sql: str) -> None:
        if self._started:
            raise DatabaseError("a script must be the first statement of a SQLite transaction")
        self._started = True
        self._connection.executescript(f"BEGIN;\n{sql}")

    def commit(self) -> None:
        self._connection.commit()

    def rollback(self) -> None:
        self._connection.rollback()


class SQLiteQueryer:
    """Queryer over a sqlite3 connection.

    The connection is switched to manual transaction control
    (``isolation_level = None``) so that statements outside a transaction
    are committed immediately and transactions are delimited explicitly.

    Example:
        db = SQLiteQueryer(sqlite3.connect("app.db"))
        migrate(db, SQLiteDriver, source)
    """

    def __init__(self, connection: sqlite3.Connection):
        """Initialize with a sqlite3 connection.

        Args:
            connection: Open connection; must not have a transaction in progress.

        Raises:
            DatabaseError: If a transaction is already in progress.
        """
        if connection.in_transaction:
            raise DatabaseError("connection has a transaction in progress")
        connection.isolation_level = None
        self.conn = connection

    def query(self, sql: str, params: Params | None = None) -> list[tuple]:
        return [tuple(row) for row in self.conn.execute(sql, dict(params or {})).fetchall()]

    def execute(self, sql: str, params: Params | None = None) -> None:
        self.conn.execute(sql, dict(params or {}))

    def begin(self) -> SQLiteTransaction:
        if self.conn.in_transaction:
            raise DatabaseError("transaction already in progress")
        return SQLiteTransaction(self.conn)
