"""Version table drivers for supported SQL dialects."""

from .base import Driver, NewDriver, VersionTableDriver
from .postgres import PostgresDriver
from .registry import get_driver, supported_drivers
from .sqlite import SQLiteDriver

__all__ = [
    "Driver",
    "NewDriver",
    "VersionTableDriver",
    "PostgresDriver",
    "SQLiteDriver",
    "get_driver",
    "supported_drivers",
]
