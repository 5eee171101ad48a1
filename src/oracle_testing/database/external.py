"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Value object describing a database endpoint usable by tests.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExternalDatabase(BaseModel):
    """A reachable database endpoint and its credentials, or the unavailable sentinel.

    Instances are immutable. Use ``provided()`` to describe an endpoint and
    ``unavailable()`` to signal that no usable database was found.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = ""
    port: int = Field(default=0, ge=0, le=65535)
    database: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)
    url: str = ""
    valid: bool = False

    @classmethod
    def provided(
        cls,
        hostname: str,
        port: int,
        database: str,
        username: str,
        password: str,
        url: Optional[str] = None,
    ) -> "ExternalDatabase":
        """Describe an endpoint; ``url`` defaults to an Easy Connect URL."""
        if not all([hostname, database, username]):
            raise ValueError("hostname, database and username are required")
        if not 0 < port <= 65535:
            raise ValueError(f"port {port} out of range")
        return cls(
            hostname=hostname,
            port=port,
            database=database,
            username=username,
            password=password,
            url=url or f"tcp://{hostname}:{port}/{database}",
            valid=True,
        )

    @classmethod
    def unavailable(cls) -> "ExternalDatabase":
        """Return the shared sentinel meaning "no usable database"."""
        return _UNAVAILABLE

    def check_validity(self) -> bool:
        """True when this describes a usable endpoint."""
        return self.valid

    @property
    def dsn(self) -> str:
        """Easy Connect string host:port/service."""
        return f"{self.hostname}:{self.port}/{self.database}"


_UNAVAILABLE = ExternalDatabase()
