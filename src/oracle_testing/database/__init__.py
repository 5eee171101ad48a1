"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Locating, provisioning and connecting to Oracle test databases.
"""

from .connections import (
    connect_params,
    create_connection,
    create_pool,
    create_pool_async,
    is_port_open,
    normalize_dsn,
    wait_until_queryable,
)
from .external import ExternalDatabase
from .locator import select_first_available
from .providers import container_database, local_database, reset_container_database

__all__ = [
    "ExternalDatabase",
    "connect_params",
    "container_database",
    "create_connection",
    "create_pool",
    "create_pool_async",
    "is_port_open",
    "local_database",
    "normalize_dsn",
    "reset_container_database",
    "select_first_available",
    "wait_until_queryable",
]
