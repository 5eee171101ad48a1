"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Driver-level connection handles for an ExternalDatabase.
"""
# spell-checker: ignore xepdb

import logging
import re
import socket
import time

import oracledb

from .external import ExternalDatabase

LOGGER = logging.getLogger(__name__)

HELLO_QUERY = "SELECT 'Hello, Oracle' FROM sys.dual"

_SID_XE = re.compile(r":xe$", re.IGNORECASE)


def normalize_dsn(url: str) -> str:
    """Rewrite a SID-style ``...:xe`` URL to the XEPDB1 pluggable database service."""
    return _SID_XE.sub("/XEPDB1", url)


def is_port_open(host: str, port: int, timeout: float = 5.0) -> bool:
    """True when a TCP connection to host:port can be opened within ``timeout``."""
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError:
        return False


def connect_params(database: ExternalDatabase) -> dict:
    """Map an ExternalDatabase to python-oracledb connect arguments.

    The connect string is the database URL, so an explicit URL (another
    protocol, a connect descriptor) is honoured as given.
    """
    if not database.check_validity():
        raise ValueError("cannot connect to an unavailable database")
    return {
        "user": database.username,
        "password": database.password,
        "dsn": normalize_dsn(database.url),
    }


def create_connection(database: ExternalDatabase) -> oracledb.Connection:
    """Open a standalone connection."""
    params = connect_params(database)
    LOGGER.debug("Connecting to %s as %s", database.dsn, database.username)
    return oracledb.connect(**params)


def create_pool(
    database: ExternalDatabase, min: int = 1, max: int = 4, increment: int = 1  # pylint: disable=redefined-builtin
) -> oracledb.ConnectionPool:
    """Create a synchronous connection pool (the test "data source")."""
    params = connect_params(database)
    LOGGER.info("Creating connection pool for %s (min=%d, max=%d)", database.dsn, min, max)
    return oracledb.create_pool(**params, min=min, max=max, increment=increment)


def create_pool_async(
    database: ExternalDatabase, min: int = 1, max: int = 4, increment: int = 1  # pylint: disable=redefined-builtin
) -> oracledb.AsyncConnectionPool:
    """Create an asyncio connection pool for non-blocking data access tests."""
    params = connect_params(database)
    LOGGER.info("Creating async connection pool for %s (min=%d, max=%d)", database.dsn, min, max)
    return oracledb.create_pool_async(**params, min=min, max=max, increment=increment)


def wait_until_queryable(
    database: ExternalDatabase,
    query: str = HELLO_QUERY,
    timeout: float = 10,
    interval: float = 0.1,
) -> None:
    """Block until ``query`` runs successfully, ignoring errors while polling.

    Raises:
        TimeoutError: If the query did not succeed before the deadline
    """
    deadline = time.monotonic() + timeout
    attempt = 0
    last_error = None
    while True:
        attempt += 1
        try:
            with create_connection(database) as conn:
                with conn.cursor() as cursor:
                    cursor.execute(query)
                    cursor.fetchall()
            LOGGER.info("Database %s answered on attempt %d", database.dsn, attempt)
            return
        except oracledb.Error as exc:
            last_error = exc
            LOGGER.debug("Attempt %d against %s failed: %s", attempt, database.dsn, exc)

        if time.monotonic() + interval > deadline:
            break
        time.sleep(interval)

    raise TimeoutError(f"Database {database.dsn} not queryable within {timeout}s") from last_error
