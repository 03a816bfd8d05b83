"""Protocol definitions for the database boundary.

The migration runner only needs to run queries, statements and scripts, and
to group them in transactions. Adapters wrap a concrete connection type
(stdlib sqlite3, a SQLAlchemy engine) behind these protocols.

SQL passed to ``query`` and ``execute`` uses named parameters (``:version``).
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

Params = Mapping[str, Any]


@runtime_checkable
class Transaction(Protocol):
    """An open database transaction."""

    def execute(self, sql: str, params: Params | None = None) -> None:
        """Execute a single statement inside the transaction."""
        ...

    def execute_script(self, sql: str) -> None:
        """Execute a batch of statements verbatim inside the transaction."""
        ...

    def commit(self) -> None:
        """Commit the transaction."""
        ...

    def rollback(self) -> None:
        """Roll the transaction back."""
        ...


@runtime_checkable
class Queryer(Protocol):
    """Executes SQL queries and starts transactions."""

    def query(self, sql: str, params: Params | None = None) -> list[tuple]:
        """Run a query and return all rows."""
        ...

    def execute(self, sql: str, params: Params | None = None) -> None:
        """Run a statement that returns no rows, outside any transaction."""
        ...

    def begin(self) -> Transaction:
        """Start a transaction with default options."""
        ...
