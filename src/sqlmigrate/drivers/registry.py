"""Driver lookup by name."""

from __future__ import annotations

from ..core.exceptions import ConfigurationError
from .base import NewDriver
from .postgres import PostgresDriver
from .sqlite import SQLiteDriver

_DRIVERS: dict[str, NewDriver] = {
    SQLiteDriver.NAME: SQLiteDriver,
    PostgresDriver.NAME: PostgresDriver,
}

# SQLAlchemy dialect names that differ from the driver name.
_DIALECT_ALIASES = {
    "postgresql": PostgresDriver.NAME,
}


def get_driver(name: str) -> NewDriver:
    """Return the driver constructor registered under a name.

    Args:
        name: Driver name or SQLAlchemy dialect name.

    Raises:
        ConfigurationError: If no driver is registered for the name.
    """
    key = name.lower().strip()
    key = _DIALECT_ALIASES.get(key, key)
    try:
        return _DRIVERS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown driver: {name}. Supported drivers: {', '.join(supported_drivers())}"
        ) from None


def supported_drivers() -> list[str]:
    """Names of all registered drivers."""
    return sorted(_DRIVERS)
