"""Command implementations for the sqlmigrate CLI."""

from .migrate import add_database_arguments, handle_up, handle_version

__all__ = [
    "add_database_arguments",
    "handle_up",
    "handle_version",
]
