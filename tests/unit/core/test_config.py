"""Tests for Config defaults, options and env/TOML loading."""

from pathlib import Path

import pytest
from loguru import logger

from sqlmigrate.core.config import Config, with_directory, with_logger, with_table_name
from sqlmigrate.core.exceptions import ConfigurationError


def test_defaults():
    """Defaults match the documented values."""
    config = Config()

    assert config.directory == "migrations"
    assert config.table_name == "gomigrate"
    assert config.logger is logger


def test_options_apply_in_order():
    """Later options overwrite earlier ones."""
    config = Config().apply(
        with_directory("a"),
        with_table_name("first"),
        with_directory("b"),
        with_table_name("second"),
    )

    assert config.directory == "b"
    assert config.table_name == "second"


def test_apply_returns_copy():
    """Applying options leaves the original configuration unchanged."""
    base = Config()
    updated = base.apply(with_directory("sql"))

    assert base.directory == "migrations"
    assert updated.directory == "sql"


def test_config_is_frozen():
    """Configuration can't be mutated after construction."""
    config = Config()

    with pytest.raises(AttributeError):
        config.directory = "other"  # type: ignore[misc]


def test_with_logger():
    """A bound logger can be supplied."""
    bound = logger.bind(component="migrations")

    assert Config().apply(with_logger(bound)).logger is bound


@pytest.mark.parametrize("name", ["schema_version", "_v2", "public.schema_version"])
def test_valid_table_names(name: str):
    assert Config(table_name=name).table_name == name


@pytest.mark.parametrize("name", ["", "1abc", "a-b", "x; DROP TABLE y", "a.b.c"])
def test_invalid_table_names(name: str):
    with pytest.raises(ConfigurationError, match="invalid version table name"):
        Config(table_name=name)


def test_from_env(monkeypatch):
    """Environment variables override the defaults."""
    monkeypatch.setenv("SQLMIGRATE_DIRECTORY", "db/migrations")
    monkeypatch.setenv("SQLMIGRATE_TABLE_NAME", "schema_version")

    config = Config.from_env()

    assert config.directory == "db/migrations"
    assert config.table_name == "schema_version"


def test_from_env_without_variables(monkeypatch):
    monkeypatch.delenv("SQLMIGRATE_DIRECTORY", raising=False)
    monkeypatch.delenv("SQLMIGRATE_TABLE_NAME", raising=False)

    assert Config.from_env() == Config()


def test_from_file_applies_toml_then_env(tmp_path: Path, monkeypatch):
    """Environment variables override TOML values."""
    toml_path = tmp_path / "sqlmigrate.toml"
    toml_path.write_text(
        'directory = "from_toml"\ntable_name = "toml_versions"\n',
        encoding="utf-8",
    )
    monkeypatch.delenv("SQLMIGRATE_DIRECTORY", raising=False)
    monkeypatch.setenv("SQLMIGRATE_TABLE_NAME", "env_versions")

    config = Config.from_file(toml_path)

    assert config.directory == "from_toml"
    assert config.table_name == "env_versions"


def test_from_file_missing(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="Failed to load config file"):
        Config.from_file(tmp_path / "missing.toml")


def test_from_file_invalid_toml(tmp_path: Path):
    toml_path = tmp_path / "bad.toml"
    toml_path.write_text("directory = ", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Config.from_file(toml_path)
