"""Migration file sources.

Example:
    from sqlmigrate.sources import FileSystemSource

    source = FileSystemSource.from_uri("file:///srv/app")
    entries = source.list_directory("migrations")
"""

from .base import DirEntry, FileSource, SourceError, SourceListError, SourceReadError
from .filesystem import FileSystemSource

__all__ = [
    "DirEntry",
    "FileSource",
    "FileSystemSource",
    "SourceError",
    "SourceListError",
    "SourceReadError",
]
