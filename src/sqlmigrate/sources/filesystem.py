"""fsspec-backed file source.

This module provides a file source over any fsspec filesystem: the local
disk, the in-memory filesystem used by tests, archives or remote stores.
"""

from __future__ import annotations

import importlib.resources
import posixpath
from pathlib import Path
from typing import Any

import fsspec
from fsspec.core import url_to_fs
from loguru import logger

from sqlmigrate.core.exceptions import ConfigurationError

from .base import DirEntry, SourceListError, SourceReadError


class FileSystemSource:
    """File source reading from an fsspec filesystem.

    Paths passed to list_directory and read_file are resolved relative to
    ``root``.

    Example:
        source = FileSystemSource.from_uri("memory://app")
        source.fs.pipe_file("/app/migrations/1_initial.sql", b"CREATE TABLE ...")

        for entry in source.list_directory("migrations"):
            print(entry.name)
    """

    def __init__(self, fs: fsspec.AbstractFileSystem | None = None, root: str = ""):
        """Initialize the source.

        Args:
            fs: Filesystem to read from (default: local filesystem).
            root: Base path that relative paths are resolved against.
        """
        self._fs = fs if fs is not None else fsspec.filesystem("file")
        self._root = root

    @classmethod
    def from_uri(cls, uri: str, **storage_options: Any) -> "FileSystemSource":
        """Create a source from an fsspec URL such as ``file:///srv/app``.

        Args:
            uri: fsspec URL or bare local path used as the root.
            **storage_options: Extra options passed to the filesystem.
        """
        fs, root = url_to_fs(uri, **storage_options)
        return cls(fs=fs, root=root)

    @classmethod
    def from_package(cls, package: str) -> "FileSystemSource":
        """Create a source rooted at an installed Python package.

        This lets applications ship their migrations as package data.

        Raises:
            ConfigurationError: If the package is not installed on disk.
        """
        root = importlib.resources.files(package)
        if not isinstance(root, Path):
            raise ConfigurationError(
                f"Package {package!r} is not installed as a directory on disk"
            )
        return cls(fs=fsspec.filesystem("file"), root=str(root))

    @property
    def fs(self) -> fsspec.AbstractFileSystem:
        """The underlying fsspec filesystem."""
        return self._fs

    @property
    def root(self) -> str:
        """Base path of the source."""
        return self._root

    def list_directory(self, path: str) -> list[DirEntry]:
        """List a directory, non-recursively, sorted by name.

        Args:
            path: Directory path relative to the root.

        Raises:
            SourceListError: If the path is missing, not a directory, or unreadable.
        """
        full_path = self._resolve(path)

        try:
            info = self._fs.info(full_path)
            if info["type"] != "directory":
                raise SourceListError(path, "not a directory")
            listing = self._fs.ls(full_path, detail=True)
        except SourceListError:
            raise
        except (OSError, ValueError) as e:
            raise SourceListError(path, str(e) or type(e).__name__) from e

        entries = [
            DirEntry(
                name=posixpath.basename(item["name"].rstrip("/")),
                is_dir=item["type"] == "directory",
            )
            for item in listing
        ]

        logger.debug(f"Listed {len(entries)} entries in {full_path!r}")
        return sorted(entries, key=lambda entry: entry.name)

    def read_file(self, path: str) -> bytes:
        """Read a file's content.

        Args:
            path: File path relative to the root.

        Raises:
            SourceReadError: If the file is missing or unreadable.
        """
        full_path = self._resolve(path)
        try:
            return self._fs.cat_file(full_path)
        except (OSError, ValueError) as e:
            raise SourceReadError(path, str(e) or type(e).__name__) from e

    def _resolve(self, path: str) -> str:
        if not self._root:
            return path
        if not path:
            return self._root
        return posixpath.join(self._root, path)
