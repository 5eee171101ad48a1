"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Default Logging Configuration
"""
# spell-checker:ignore levelname urllib oracledb

import logging
from logging.config import dictConfig
from typing import Optional

from oracle_testing._version import __version__
from oracle_testing.config import get_settings


class VersionFilter(logging.Filter):
    """Logging filter that injects the current library version into log"""

    def filter(self, record):
        record.__version__ = __version__
        return True


# Standard formatter
FORMATTER = {
    "format": "%(asctime)s (v%(__version__)s) - %(levelname)-8s - (%(name)s): %(message)s",
    "datefmt": "%Y-%b-%d %H:%M:%S",
}


def build_logging_config(level: Optional[str] = None) -> dict:
    """Return the dictConfig mapping for the given level, defaulting to the configured one."""
    level = (level or get_settings().log_level).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": FORMATTER,
        },
        "filters": {
            "version_filter": {
                "()": VersionFilter,
            },
        },
        "handlers": {
            "default": {
                "level": level,
                "formatter": "standard",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.__stderr__",
                "filters": ["version_filter"],
            },
        },
        "loggers": {
            "oracle_testing": {"level": level, "handlers": ["default"], "propagate": False},
            "docker": {"level": "WARNING", "handlers": ["default"], "propagate": False},
            "urllib3": {"level": "WARNING", "handlers": ["default"], "propagate": False},
            "oracledb": {"level": level, "handlers": ["default"], "propagate": False},
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the default logging configuration."""
    dictConfig(build_logging_config(level))
