"""PostgreSQL version table driver."""

from .base import VersionTableDriver


class PostgresDriver(VersionTableDriver):
    """Driver for PostgreSQL databases."""

    NAME = "postgres"
    CREATE_TABLE_SQL = (
        "CREATE TABLE IF NOT EXISTS {table} ("
        "version INT PRIMARY KEY, "
        "date TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
    )
