"""Test fakes for testing without a real database.

Example:
    from tests.fakes import FakeDriver, FakeQueryer

    db = FakeQueryer()
    runner = MigrationRunner(db, FakeDriver, source)
    runner.run()
    assert db.versions == [1, 2]
"""

from .database import FakeDriver, FakeQueryer, FakeSQLiteDriver, FakeTransaction

__all__ = [
    "FakeDriver",
    "FakeQueryer",
    "FakeSQLiteDriver",
    "FakeTransaction",
]
