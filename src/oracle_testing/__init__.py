"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Oracle database provisioning for integration tests.
"""

from oracle_testing._version import __version__
from oracle_testing.database import ExternalDatabase, select_first_available
from oracle_testing.support import database

__all__ = ["ExternalDatabase", "__version__", "database", "select_first_available"]
