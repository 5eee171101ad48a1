"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Providers of candidate test databases: a local install and a Docker container.
"""

import logging
import threading
from typing import Optional

import oracledb
from docker.errors import DockerException

from oracle_testing.config import Settings, get_settings
from oracle_testing.lazy import LazyValue

from . import container as oracle_container
from .connections import is_port_open, wait_until_queryable
from .external import ExternalDatabase

LOGGER = logging.getLogger(__name__)


def local_database(settings: Optional[Settings] = None) -> ExternalDatabase:
    """Return the locally installed database, or unavailable when its listener does not answer."""
    settings = settings or get_settings()
    if not is_port_open(settings.local_host, settings.local_port, settings.connect_timeout):
        LOGGER.info("No local database listening on %s:%d", settings.local_host, settings.local_port)
        return ExternalDatabase.unavailable()
    return ExternalDatabase.provided(
        hostname=settings.local_host,
        port=settings.local_port,
        database=settings.local_database,
        username=settings.local_username,
        password=settings.local_password,
    )


def _start_container_database(settings: Settings) -> ExternalDatabase:
    try:
        container = oracle_container.start_container(settings)
        database = ExternalDatabase.provided(
            hostname="localhost",
            port=oracle_container.container_host_port(container),
            database=settings.container_database,
            username=settings.container_username,
            password=settings.container_password,
        )
        wait_until_queryable(database, timeout=settings.query_timeout, interval=settings.query_interval)
    except DockerException as exc:
        LOGGER.info("Docker not available, skipping container database: %s", exc)
        return ExternalDatabase.unavailable()
    except TimeoutError as exc:
        LOGGER.warning("Container database did not become ready: %s", exc)
        return ExternalDatabase.unavailable()
    except oracledb.Error as exc:
        LOGGER.warning("Container database not reachable: %s", exc)
        return ExternalDatabase.unavailable()

    return database


class _ContainerDatabase:
    """Process-wide holder for the container-backed database."""

    def __init__(self) -> None:
        self._settings: Optional[Settings] = None
        self._lock = threading.Lock()
        self._lazy: LazyValue[ExternalDatabase] = LazyValue(self._create)

    def _create(self) -> ExternalDatabase:
        return _start_container_database(self._settings or get_settings())

    def get(self, settings: Optional[Settings] = None) -> ExternalDatabase:
        """Settings only take effect on the call that starts the container."""
        if self._lazy.is_initialized():
            return self._lazy.get()
        with self._lock:
            if settings is not None and not self._lazy.is_initialized():
                self._settings = settings
            return self._lazy.get()

    def reset(self) -> None:
        """Forget the remembered database."""
        with self._lock:
            self._lazy.reset()
            self._settings = None


_CONTAINER_DATABASE = _ContainerDatabase()


def container_database(settings: Optional[Settings] = None) -> ExternalDatabase:
    """Return the Docker-provided database, starting the container at most once per process."""
    return _CONTAINER_DATABASE.get(settings)


def reset_container_database() -> None:
    """Forget the remembered container database so the next call starts over."""
    _CONTAINER_DATABASE.reset()
