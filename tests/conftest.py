"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Root pytest configuration for the test suite.

pytest_plugins loads the oracle_testing fixtures (oracle_database,
oracle_connection, ...) for every test. Tests using them are skipped when
no Oracle database can be found.

Note: The 'tests' directory is added to pythonpath in pyproject.toml, enabling
direct imports like 'from shared_fixtures import X'.
"""

pytest_plugins = [
    "shared_fixtures",
    "oracle_testing.pytest_plugin",
    "pytester",
]
