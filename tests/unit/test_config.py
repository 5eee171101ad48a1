"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Unit tests for oracle_testing/config.py
"""

import pytest
from pydantic import ValidationError

from oracle_testing.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, make_settings):
        """Defaults describe a local XE install and a gvenzl Free container."""
        settings = make_settings()

        assert settings.prefer_local_database is False
        assert settings.local_port == 1521
        assert settings.local_database == "XEPDB1"
        assert settings.container_image == "gvenzl/oracle-free:23.3-slim"
        assert settings.container_port is None
        assert settings.startup_timeout == 200

    def test_env_prefix(self, clean_env, monkeypatch):
        """ORACLE_TEST_* variables populate the fields."""
        del clean_env
        monkeypatch.setenv("ORACLE_TEST_PREFER_LOCAL_DATABASE", "1")
        monkeypatch.setenv("ORACLE_TEST_CONTAINER_PORT", "1525")
        monkeypatch.setenv("ORACLE_TEST_LOCAL_PASSWORD", "manager")

        settings = Settings(_env_file=None)

        assert settings.prefer_local_database is True
        assert settings.container_port == 1525
        assert settings.local_password == "manager"

    def test_unknown_variables_ignored(self, clean_env, monkeypatch):
        """Unrelated variables with the prefix are ignored."""
        del clean_env
        monkeypatch.setenv("ORACLE_TEST_SOMETHING_ELSE", "x")

        Settings(_env_file=None)

    @pytest.mark.parametrize("field", ["startup_timeout", "query_timeout", "query_interval", "connect_timeout"])
    def test_positive_timeouts(self, make_settings, field):
        """Timeouts and intervals must be positive."""
        with pytest.raises(ValidationError):
            make_settings(**{field: 0})

    def test_get_settings_fresh(self, clean_env, monkeypatch):
        """get_settings reflects the environment at call time."""
        del clean_env
        monkeypatch.setenv("ORACLE_TEST_LOCAL_HOST", "first")
        assert get_settings().local_host == "first"
        monkeypatch.setenv("ORACLE_TEST_LOCAL_HOST", "second")
        assert get_settings().local_host == "second"
