"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Pick the first working database out of an ordered list of providers.
"""

import logging
from functools import partial
from typing import Callable, Iterable

from .external import ExternalDatabase

LOGGER = logging.getLogger(__name__)

Provider = Callable[[], ExternalDatabase]


def _provider_name(provider: Provider) -> str:
    # partial arguments carry credentials and must not be logged
    while isinstance(provider, partial):
        provider = provider.func
    return getattr(provider, "__qualname__", None) or type(provider).__name__


def select_first_available(providers: Iterable[Provider]) -> ExternalDatabase:
    """Return the first valid database produced by ``providers``.

    Providers are called in order and only until one of them yields a valid
    database; later providers are never invoked. A provider that raises is
    treated as unavailable. When nothing qualifies the unavailable sentinel
    is returned.
    """
    for provider in providers:
        name = _provider_name(provider)
        try:
            candidate = provider()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            LOGGER.warning("Database provider %s failed: %s", name, exc)
            continue

        if not isinstance(candidate, ExternalDatabase):
            LOGGER.warning("Database provider %s returned %r, ignoring", name, type(candidate).__name__)
            continue
        if candidate.check_validity():
            LOGGER.info("Using database from %s at %s", name, candidate.dsn)
            return candidate
        LOGGER.debug("Database provider %s reported unavailable", name)

    LOGGER.info("No database provider produced a usable database")
    return ExternalDatabase.unavailable()
