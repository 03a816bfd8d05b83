"""Base protocol and types for migration file sources.

A file source is a read-only store that lists directories and returns file
bytes. Sources don't need to inherit from a base class, they just implement
the FileSource protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sqlmigrate.core.exceptions import SQLMigrateError


# =============================================================================
# Exceptions
# =============================================================================


class SourceError(SQLMigrateError):
    """Base exception for file source operations."""

    pass


class SourceListError(SourceError):
    """Failed to list a directory."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read migrations directory '{path}': {reason}")


class SourceReadError(SourceError):
    """Failed to read a file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read migration file '{path}': {reason}")


# =============================================================================
# Data Types
# =============================================================================


@dataclass(frozen=True)
class DirEntry:
    """A single entry of a directory listing.

    Attributes:
        name: Base name of the entry.
        is_dir: Whether the entry is a directory.
    """

    name: str
    is_dir: bool = False


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class FileSource(Protocol):
    """Read-only store supplying migration files."""

    def list_directory(self, path: str) -> list[DirEntry]:
        """List the entries of a directory, sorted by name.

        Raises:
            SourceListError: If the directory cannot be listed.
        """
        ...

    def read_file(self, path: str) -> bytes:
        """Return the content of a file.

        Raises:
            SourceReadError: If the file cannot be read.
        """
        ...
