"""Tests for the SQLAlchemy engine adapter."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from sqlmigrate.database import EngineQueryer, EngineTransaction, Queryer


@pytest.fixture
def engine_db(test_db_path: Path):
    db = EngineQueryer.from_url(f"sqlite:///{test_db_path}")
    yield db
    db.dispose()


class TestEngineQueryer:
    """Tests for EngineQueryer on a SQLite file database."""

    def test_implements_protocol(self, engine_db):
        assert isinstance(engine_db, Queryer)

    def test_dialect_name(self, engine_db):
        assert engine_db.dialect_name == "sqlite"

    def test_execute_and_query(self, engine_db):
        engine_db.execute("CREATE TABLE t (id INTEGER)")
        engine_db.execute("INSERT INTO t (id) VALUES (:id)", {"id": 3})

        assert engine_db.query("SELECT id FROM t") == [(3,)]

    def test_transaction_commit(self, engine_db):
        engine_db.execute("CREATE TABLE versions (version INTEGER)")

        tx = engine_db.begin()
        tx.execute_script("CREATE TABLE a (id INTEGER); INSERT INTO a VALUES (1);")
        tx.execute("INSERT INTO versions (version) VALUES (:version)", {"version": 1})
        tx.commit()

        assert engine_db.query("SELECT id FROM a") == [(1,)]
        assert engine_db.query("SELECT version FROM versions") == [(1,)]

    def test_transaction_rollback(self, engine_db):
        tx = engine_db.begin()
        with pytest.raises(Exception):
            tx.execute_script("CREATE TABLE a (id INTEGER); INSERT INTO missing VALUES (1);")
        tx.rollback()

        assert engine_db.query("SELECT name FROM sqlite_master WHERE name = 'a'") == []

    def test_query_error_propagates(self, engine_db):
        with pytest.raises(OperationalError):
            engine_db.query("SELECT * FROM missing")


class TestEngineTransaction:
    """Tests for EngineTransaction on non-SQLite dialects."""

    def test_script_sent_without_parameters(self):
        """Scripts reach the DBAPI as-is so literal % signs survive."""
        connection = MagicMock()
        connection.dialect.name = "postgresql"
        script = "UPDATE t SET x = 'a%' WHERE y LIKE 'b%';"

        tx = EngineTransaction(connection)
        tx.execute_script(script)

        connection.begin.assert_called_once_with()
        connection.exec_driver_sql.assert_called_once_with(
            script, execution_options={"no_parameters": True}
        )

    def test_begin_failure_closes_connection(self):
        connection = MagicMock()
        connection.begin.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError):
            EngineTransaction(connection)

        connection.close.assert_called_once_with()
