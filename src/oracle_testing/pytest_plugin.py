"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Pytest fixtures backed by an Oracle test database.

Load with ``pytest_plugins = ["oracle_testing.pytest_plugin"]`` in a conftest.py.

FIXTURES (choose based on your test needs):

    oracle_database (session)
        The ExternalDatabase in use. Tests depending on it are skipped
        when neither a local install nor Docker can provide one.

    oracle_connection (session)
        Shared connection for the entire test session.

    oracle_pool (session)
        Connection pool for code under test that acquires its own connections.

    oracle_transaction (function)
        Connection with savepoint-based isolation, for DML tests.
        DDL operations (CREATE TABLE) invalidate savepoints.

    oracle_cursor (function)
        Cursor with automatic cleanup. No transaction isolation.

    oracle_clean (function)
        For tests with DDL. Tracks and drops tables after the test.
        Usage: table = oracle_clean.register("MY_TABLE")

Tests using any of these fixtures are automatically marked with 'db' and
'slow', enabling:

    pytest -m "not db"      # Skip database tests
    pytest -m "db"          # Run only database tests
"""

# pylint: disable=redefined-outer-name
# Pytest fixtures use parameter injection where fixture names match parameters

from typing import Generator

import oracledb
import pytest

from oracle_testing.database import ExternalDatabase, create_connection, create_pool
from oracle_testing.logging_config import configure_logging
from oracle_testing.support import database

DB_FIXTURE_NAMES = {
    "oracle_database",
    "oracle_connection",
    "oracle_pool",
    "oracle_transaction",
    "oracle_cursor",
    "oracle_clean",
}

SKIP_REASON = "Oracle database not available (start a local instance or Docker)"


def pytest_addoption(parser):
    """Register command line options."""
    group = parser.getgroup("oracle-testing")
    group.addoption(
        "--oracle-log",
        action="store_true",
        default=False,
        help="Emit oracle_testing log output while locating the database",
    )


def pytest_configure(config):
    """Register markers and optionally configure logging."""
    config.addinivalue_line("markers", "db: marks tests that need an Oracle database")
    config.addinivalue_line("markers", "slow: marks tests as slow running tests")
    if config.getoption("oracle_log", default=False):
        configure_logging()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items):
    """Automatically mark tests using database fixtures with 'db' and 'slow' markers."""
    for item in items:
        try:
            fixture_names = set(item.fixturenames)
        except AttributeError:
            continue

        if fixture_names & DB_FIXTURE_NAMES:
            item.add_marker(pytest.mark.db)
            item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def oracle_database() -> ExternalDatabase:
    """Session-scoped database description; skips when unavailable."""
    found = database()
    if not found.check_validity():
        pytest.skip(SKIP_REASON)
    return found


@pytest.fixture(scope="session")
def oracle_connection(oracle_database) -> Generator[oracledb.Connection, None, None]:
    """Session-scoped real Oracle database connection."""
    conn = create_connection(oracle_database)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def oracle_pool(oracle_database) -> Generator[oracledb.ConnectionPool, None, None]:
    """Session-scoped connection pool."""
    pool = create_pool(oracle_database)
    yield pool
    pool.close(force=True)


@pytest.fixture
def oracle_transaction(oracle_connection) -> Generator[oracledb.Connection, None, None]:
    """Transaction isolation for each test using savepoints.

    Usage:
        def test_something(oracle_transaction):
            cursor = oracle_transaction.cursor()
            cursor.execute("INSERT INTO ...")
            # Changes are automatically rolled back after test
    """
    cursor = oracle_connection.cursor()
    cursor.execute("SAVEPOINT test_savepoint")

    yield oracle_connection

    cursor.execute("ROLLBACK TO SAVEPOINT test_savepoint")
    cursor.close()


@pytest.fixture
def oracle_cursor(oracle_connection) -> Generator[oracledb.Cursor, None, None]:
    """Provides a database cursor with automatic cleanup."""
    cursor = oracle_connection.cursor()
    yield cursor
    cursor.close()


class TableTracker:
    """Track tables created during a test and drop them afterwards."""

    def __init__(self, connection: oracledb.Connection):
        self.connection = connection
        self.tables: list[str] = []

    def register(self, table_name: str) -> str:
        """Register a table for cleanup after test, returning its name."""
        if table_name.upper() not in [t.upper() for t in self.tables]:
            self.tables.append(table_name)
        return table_name

    def cleanup(self) -> None:
        """Drop all registered tables, newest first.

        Tables that no longer exist are ignored.
        """
        cursor = self.connection.cursor()
        for table_name in reversed(self.tables):
            try:
                cursor.execute(f"DROP TABLE {table_name} PURGE")
            except oracledb.DatabaseError:
                pass
        cursor.close()
        self.tables.clear()


@pytest.fixture
def oracle_clean(oracle_connection) -> Generator[TableTracker, None, None]:
    """Fixture for tests that perform DDL operations (CREATE TABLE, etc.).

    Usage:
        def test_create_table(oracle_clean):
            cursor = oracle_clean.connection.cursor()
            table_name = oracle_clean.register("MY_TEST_TABLE")
            cursor.execute(f"CREATE TABLE {table_name} (id NUMBER)")
    """
    tracker = TableTracker(oracle_connection)
    yield tracker
    tracker.cleanup()
