"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Entry point returning the Oracle database integration tests should run against.
"""

import importlib.util
import logging
import platform
from functools import partial
from typing import Optional

from oracle_testing.config import Settings, get_settings
from oracle_testing.database import (
    ExternalDatabase,
    container_database,
    local_database,
    select_first_available,
)

LOGGER = logging.getLogger(__name__)

ARM64_MACHINES = {"aarch64", "arm64"}
DRIVER_MODULE = "oracledb"


def is_supported_architecture(allow_arm64: bool = False) -> bool:
    """Oracle images are not published for ARM64 hosts unless explicitly allowed."""
    return allow_arm64 or platform.machine().lower() not in ARM64_MACHINES


def is_driver_present(module: str = DRIVER_MODULE) -> bool:
    """True when the Oracle driver can be imported."""
    return importlib.util.find_spec(module) is not None


def database(settings: Optional[Settings] = None) -> ExternalDatabase:
    """Return a database either hosted locally or running inside Docker.

    The result is never None: when no database can be used the unavailable
    sentinel is returned and callers are expected to skip.
    """
    settings = settings or get_settings()

    if not is_supported_architecture(settings.allow_arm64):
        LOGGER.info("Oracle database disabled on %s", platform.machine())
        return ExternalDatabase.unavailable()

    if not is_driver_present():
        LOGGER.info("Oracle driver %s not installed", DRIVER_MODULE)
        return ExternalDatabase.unavailable()

    local = partial(local_database, settings)
    container = partial(container_database, settings)
    if settings.prefer_local_database:
        return select_first_available([local, container])
    return select_first_available([container, local])
