"""SQLite version table driver."""

from .base import VersionTableDriver


class SQLiteDriver(VersionTableDriver):
    """Driver for SQLite databases."""

    NAME = "sqlite"
