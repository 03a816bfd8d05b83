"""Configuration management for sqlmigrate."""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from loguru import logger as _default_logger

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from loguru import Logger

DEFAULT_DIRECTORY = "migrations"
DEFAULT_TABLE_NAME = "gomigrate"

# Table names are interpolated into DDL, so only plain identifiers are allowed.
_TABLE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?")


def _default_logger_factory() -> "Logger":
    return _default_logger


@dataclass(frozen=True)
class Config:
    """Migration run configuration.

    Attributes:
        directory: Directory in the file source holding the migration files.
        table_name: Name of the version tracking table.
        logger: Loguru logger receiving progress diagnostics.
    """

    directory: str = DEFAULT_DIRECTORY
    table_name: str = DEFAULT_TABLE_NAME
    logger: "Logger" = field(default_factory=_default_logger_factory, repr=False)

    def __post_init__(self) -> None:
        if not _TABLE_NAME_RE.fullmatch(self.table_name):
            raise ConfigurationError(f"invalid version table name: {self.table_name!r}")

    def apply(self, *options: "Option") -> "Config":
        """Return a copy with the options applied in order.

        Later options overwrite fields set by earlier ones.
        """
        config = self
        for option in options:
            config = option(config)
        return config

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config":
        """Load configuration from environment variables."""
        config = base or cls()

        if directory := os.environ.get("SQLMIGRATE_DIRECTORY"):
            config = replace(config, directory=directory)

        if table_name := os.environ.get("SQLMIGRATE_TABLE_NAME"):
            config = replace(config, table_name=table_name)

        return config

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to a TOML file with optional ``directory`` and
                ``table_name`` keys.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        try:
            with open(path, "rb") as f:
                data: dict[str, Any] = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to load config file {path}: {e}") from e

        values = {key: data[key] for key in ("directory", "table_name") if key in data}
        return cls.from_env(cls(**values))


Option = Callable[[Config], Config]


def with_directory(directory: str) -> Option:
    """Set the directory the migration files are loaded from."""
    return lambda config: replace(config, directory=directory)


def with_table_name(name: str) -> Option:
    """Set the name of the table where the schema version is stored."""
    return lambda config: replace(config, table_name=name)


def with_logger(logger: "Logger") -> Option:
    """Set the logger used by the migrator."""
    return lambda config: replace(config, logger=logger)
