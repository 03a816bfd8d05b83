"""Tests for the sqlite3 adapter."""

import sqlite3

import pytest

from sqlmigrate.core.exceptions import DatabaseError
from sqlmigrate.database import Queryer, SQLiteQueryer, Transaction


def _tables(conn: sqlite3.Connection) -> set[str]:
    cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
    return {row[0] for row in cursor.fetchall()}


class TestSQLiteQueryer:
    """Tests for SQLiteQueryer."""

    def test_implements_protocols(self, sqlite_db):
        assert isinstance(sqlite_db, Queryer)
        assert isinstance(sqlite_db.begin(), Transaction)

    def test_execute_and_query(self, sqlite_db):
        sqlite_db.execute("CREATE TABLE t (id INTEGER)")
        sqlite_db.execute("INSERT INTO t (id) VALUES (:id)", {"id": 7})

        assert sqlite_db.query("SELECT id FROM t") == [(7,)]

    def test_execute_outside_transaction_is_durable(self, sqlite_db, test_db_path):
        sqlite_db.execute("CREATE TABLE t (id INTEGER)")

        other = sqlite3.connect(str(test_db_path))
        try:
            assert "t" in _tables(other)
        finally:
            other.close()

    def test_rejects_connection_in_transaction(self, sqlite_conn):
        sqlite_conn.execute("CREATE TABLE t (id INTEGER)")
        sqlite_conn.execute("INSERT INTO t VALUES (1)")

        with pytest.raises(DatabaseError, match="in progress"):
            SQLiteQueryer(sqlite_conn)


class TestSQLiteTransaction:
    """Tests for SQLiteTransaction."""

    def test_script_and_statement_commit_together(self, sqlite_db, sqlite_conn):
        sqlite_db.execute("CREATE TABLE versions (version INTEGER)")

        tx = sqlite_db.begin()
        tx.execute_script("CREATE TABLE a (id INTEGER); INSERT INTO a VALUES (1);")
        tx.execute("INSERT INTO versions (version) VALUES (:version)", {"version": 1})
        tx.commit()

        assert sqlite_db.query("SELECT id FROM a") == [(1,)]
        assert sqlite_db.query("SELECT version FROM versions") == [(1,)]
        assert not sqlite_conn.in_transaction

    def test_failed_script_rolls_back_completely(self, sqlite_db):
        """Statements before the failing one are undone by rollback."""
        tx = sqlite_db.begin()
        with pytest.raises(sqlite3.Error):
            tx.execute_script(
                "CREATE TABLE a (id INTEGER); INSERT INTO a VALUES (1); INSERT INTO missing VALUES (1);"
            )
        tx.rollback()

        assert sqlite_db.query("SELECT name FROM sqlite_master WHERE name = 'a'") == []

    def test_rollback_discards_statement(self, sqlite_db):
        sqlite_db.execute("CREATE TABLE t (id INTEGER)")

        tx = sqlite_db.begin()
        tx.execute("INSERT INTO t VALUES (:id)", {"id": 1})
        tx.rollback()

        assert sqlite_db.query("SELECT id FROM t") == []

    def test_script_after_statement_rejected(self, sqlite_db):
        sqlite_db.execute("CREATE TABLE t (id INTEGER)")

        tx = sqlite_db.begin()
        tx.execute("INSERT INTO t VALUES (1)")
        with pytest.raises(DatabaseError, match="first statement"):
            tx.execute_script("INSERT INTO t VALUES (2);")
        tx.rollback()

    def test_begin_while_transaction_open(self, sqlite_db):
        tx = sqlite_db.begin()
        tx.execute_script("CREATE TABLE t (id INTEGER);")

        with pytest.raises(DatabaseError, match="already in progress"):
            sqlite_db.begin()

        tx.rollback()
