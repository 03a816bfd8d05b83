"""Pytest configuration and fixtures."""

import sqlite3
from pathlib import Path
from typing import Callable

import fsspec
import pytest

from sqlmigrate.database import SQLiteQueryer
from sqlmigrate.sources import FileSystemSource


@pytest.fixture
def memory_fs():
    """Provide an empty fsspec in-memory filesystem."""
    fs = fsspec.filesystem("memory")
    fs.store.clear()
    fs.pseudo_dirs.clear()
    fs.pseudo_dirs.append("")
    yield fs
    fs.store.clear()
    fs.pseudo_dirs.clear()
    fs.pseudo_dirs.append("")


@pytest.fixture
def memory_source(memory_fs) -> FileSystemSource:
    """Provide a file source rooted at /app with an empty migrations directory."""
    memory_fs.makedirs("/app/migrations", exist_ok=True)
    return FileSystemSource(fs=memory_fs, root="/app")


@pytest.fixture
def add_migration(memory_fs, memory_source) -> Callable[..., str]:
    """Provide a helper writing a migration file into the memory source.

    Returns the path of the file relative to the source root.
    """

    def _add(file_name: str, sql: str = "SELECT 1;", directory: str = "migrations") -> str:
        memory_fs.makedirs(f"/app/{directory}", exist_ok=True)
        memory_fs.pipe_file(f"/app/{directory}/{file_name}", sql.encode("utf-8"))
        return f"{directory}/{file_name}"

    return _add


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def sqlite_conn(test_db_path: Path):
    """Provide a sqlite3 connection to a temporary database."""
    conn = sqlite3.connect(str(test_db_path))
    yield conn
    conn.close()


@pytest.fixture
def sqlite_db(sqlite_conn: sqlite3.Connection) -> SQLiteQueryer:
    """Provide a SQLiteQueryer over the temporary database."""
    return SQLiteQueryer(sqlite_conn)


@pytest.fixture
def migrations_dir(tmp_path: Path) -> Path:
    """Provide an empty migrations directory on disk."""
    path = tmp_path / "project" / "migrations"
    path.mkdir(parents=True)
    return path
