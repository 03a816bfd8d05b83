"""Database adapters for sqlmigrate.

Example:
    import sqlite3
    from sqlmigrate.database import SQLiteQueryer

    db = SQLiteQueryer(sqlite3.connect("app.db"))
"""

from .base import Params, Queryer, Transaction
from .engine import EngineQueryer, EngineTransaction
from .sqlite import SQLiteQueryer, SQLiteTransaction

__all__ = [
    "Params",
    "Queryer",
    "Transaction",
    "EngineQueryer",
    "EngineTransaction",
    "SQLiteQueryer",
    "SQLiteTransaction",
]
