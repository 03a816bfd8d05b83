"""Core data types for sqlmigrate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Migration:
    """A migration discovered in the migrations directory.

    Attributes:
        version: Ordering key, unique per driver scope.
        name: Human-readable label with separators replaced by spaces.
        driver: Driver the migration is restricted to, empty for all drivers.
        file_path: Lookup key of the SQL body in the file source.
    """

    version: int
    name: str
    driver: str
    file_path: str

    @property
    def is_universal(self) -> bool:
        """Whether the migration applies to any driver."""
        return not self.driver

    def __repr__(self) -> str:
        return f"Migration({self.version}, {self.name!r}, driver={self.driver!r})"
