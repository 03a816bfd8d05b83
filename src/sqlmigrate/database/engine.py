"""Adapter for SQLAlchemy engines.

Any database SQLAlchemy can connect to is usable, provided its DBAPI driver
accepts several statements in one execute call (psycopg2, psycopg, mysql
with multi-statements enabled). SQLite engines run scripts through the
underlying sqlite3 connection instead.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Connection, Engine, create_engine, text

from .base import Params


class EngineTransaction:
    """Transaction on a dedicated connection checked out from an engine.

    The connection returns to the pool on commit or rollback.
    """

    def __init__(self, connection: Connection):
        self._connection = connection
        try:
            self._transaction = connection.begin()
        except Exception:
            connection.close()
            raise

    def execute(self, sql: str, params: Params | None = None) -> None:
        self._connection.execute(text(sql), dict(params or {}))

    def execute_script(self, sql: str) -> None:
        if self._connection.dialect.name == "sqlite":
            # pysqlite runs one statement per execute; executescript needs its
            # own BEGIN because pysqlite has not opened a transaction yet.
            driver_connection = self._connection.connection.driver_connection
            driver_connection.executescript(f"BEGIN;\n{sql}")
        else:
            # Without parameters the DBAPI must not treat % as a placeholder.
            self._connection.exec_driver_sql(
                sql, execution_options={"no_parameters": True}
            )

    def commit(self) -> None:
        try:
            self._transaction.commit()
        finally:
            self._connection.close()

    def rollback(self) -> None:
        try:
            self._transaction.rollback()
        finally:
            self._connection.close()


class EngineQueryer:
    """Queryer over a SQLAlchemy engine.

    Example:
        db = EngineQueryer.from_url("postgresql+psycopg://localhost/app")
        migrate(db, PostgresDriver, source)
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "EngineQueryer":
        """Create a queryer from a SQLAlchemy database URL."""
        return cls(create_engine(url, **kwargs))

    @property
    def dialect_name(self) -> str:
        """SQLAlchemy dialect name of the engine (e.g. sqlite, postgresql)."""
        return self.engine.dialect.name

    def query(self, sql: str, params: Params | None = None) -> list[tuple]:
        with self.engine.connect() as connection:
            result = connection.execute(text(sql), dict(params or {}))
            return [tuple(row) for row in result]

    def execute(self, sql: str, params: Params | None = None) -> None:
        with self.engine.begin() as connection:
            connection.execute(text(sql), dict(params or {}))

    def begin(self) -> EngineTransaction:
        return EngineTransaction(self.engine.connect())

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()
