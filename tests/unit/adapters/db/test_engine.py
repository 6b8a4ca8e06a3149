"""Unit tests for the database engine helpers."""

from typing import TYPE_CHECKING

from sqlalchemy.engine import make_url

from hexcalc.adapters.db.engine import is_sqlite

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_is_sqlite_true_for_sqlite_url():
    """is_sqlite() should return True for SQLite URLs."""
    assert is_sqlite("sqlite:///:memory:")
    assert is_sqlite(make_url("sqlite+pysqlite:///file.db"))


def test_is_sqlite_false_for_postgres_url():
    """is_sqlite() should return False for non-SQLite URLs (e.g., Postgres)."""
    assert not is_sqlite("postgresql://u:p@localhost/db")
    assert not is_sqlite(make_url("postgresql+psycopg://u:p@localhost/db"))


def test_make_engine_points_at_file(sqlite_engine_file: "Engine"):
    """The file fixture's engine (built by make_engine) targets test.db."""
    assert sqlite_engine_file.url.database is not None
    assert sqlite_engine_file.url.database.endswith("test.db")


def test_sqlite_pragmas_applied(sqlite_engine_file: "Engine"):
    """SQLite connections get WAL, a busy timeout and NORMAL sync."""
    with sqlite_engine_file.connect() as cxn:
        jm = cxn.exec_driver_sql("PRAGMA journal_mode;").scalar()
        busy = cxn.exec_driver_sql("PRAGMA busy_timeout;").scalar()
        sync = cxn.exec_driver_sql("PRAGMA synchronous;").scalar()
    assert jm.lower() == "wal"
    assert busy == 5000  # pylint: disable=magic-value-comparison
    assert sync == 1  # NORMAL
