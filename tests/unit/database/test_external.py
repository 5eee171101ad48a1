"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Unit tests for oracle_testing/database/external.py
"""

import pytest
from pydantic import ValidationError

from oracle_testing.database.external import ExternalDatabase


class TestProvided:
    """Tests for ExternalDatabase.provided."""

    def test_fields_and_validity(self, make_database):
        """A provided database carries its endpoint and is valid."""
        db = make_database()

        assert db.hostname == "localhost"
        assert db.port == 1521
        assert db.database == "XEPDB1"
        assert db.username == "system"
        assert db.password == "oracle"
        assert db.check_validity() is True

    def test_url_defaults_to_easy_connect(self, make_database):
        """Without an explicit url an Easy Connect URL is computed."""
        db = make_database()
        assert db.url == "tcp://localhost:1521/XEPDB1"
        assert db.dsn == "localhost:1521/XEPDB1"

    def test_explicit_url_kept(self, make_database):
        """An explicit url is stored verbatim."""
        db = make_database(url="tcps://db.example.com:2484/ORCLPDB1")
        assert db.url == "tcps://db.example.com:2484/ORCLPDB1"

    @pytest.mark.parametrize("field", ["hostname", "database", "username"])
    def test_missing_required_field(self, make_database, field):
        """Empty identifying fields are rejected."""
        with pytest.raises(ValueError):
            make_database(**{field: ""})

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_port_out_of_range(self, make_database, port):
        """Ports outside 1..65535 are rejected."""
        with pytest.raises(ValueError):
            make_database(port=port)

    def test_immutable(self, make_database):
        """Assigning to a field fails."""
        db = make_database()
        with pytest.raises(ValidationError):
            db.port = 1522

    def test_password_not_in_repr(self, make_database):
        """The password is kept out of repr output."""
        db = make_database(password="s3cr3t")
        assert "s3cr3t" not in repr(db)


class TestUnavailable:
    """Tests for the unavailable sentinel."""

    def test_invalid(self):
        """The sentinel reports itself invalid."""
        assert ExternalDatabase.unavailable().check_validity() is False

    def test_shared_instance(self):
        """Every call returns the same sentinel."""
        assert ExternalDatabase.unavailable() is ExternalDatabase.unavailable()

    def test_fields_empty(self):
        """The sentinel carries no endpoint."""
        sentinel = ExternalDatabase.unavailable()
        assert sentinel.hostname == ""
        assert sentinel.port == 0
        assert sentinel.url == ""

    def test_not_equal_to_provided(self, make_database):
        """A provided database never equals the sentinel."""
        assert make_database() != ExternalDatabase.unavailable()
