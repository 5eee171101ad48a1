"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Settings loaded from environment variables and .env file.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Where to look for an Oracle test database, populated from ORACLE_TEST_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORACLE_TEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Lookup policy
    prefer_local_database: bool = False
    allow_arm64: bool = False
    log_level: str = "INFO"

    # Locally installed database
    local_host: str = "localhost"
    local_port: int = 1521
    local_database: str = "XEPDB1"
    local_username: str = "system"
    local_password: str = "oracle"
    connect_timeout: float = Field(default=5, gt=0)

    # Docker managed database
    container_image: str = "gvenzl/oracle-free:23.3-slim"
    container_name: str = "oracle-testing-db"
    container_reuse: bool = True
    container_port: Optional[int] = None
    container_database: str = "FREEPDB1"
    container_username: str = "test"
    container_password: str = "test"
    startup_timeout: int = Field(default=200, gt=0)  # the image takes well over a minute on first boot

    # Readiness polling once the container reports ready
    query_timeout: float = Field(default=10, gt=0)
    query_interval: float = Field(default=0.1, gt=0)


def get_settings() -> Settings:
    """Return a settings instance reflecting the current environment."""
    return Settings()
