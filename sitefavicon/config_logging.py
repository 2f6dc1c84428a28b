"""Logging setup for the favicon resolver"""

import logging
import sys
from logging.config import dictConfig

from dockerflow import logging as dockerflow_logging

from sitefavicon.configs import settings

# `logging.format` setting -> handler name in the dictConfig below
_HANDLERS = {
    "mozlog": "console-mozlog",
    "pretty": "console-pretty",
}


def configure_logging() -> None:
    """Attach the console handler named by `logging.format` to the sitefavicon logger.

    Raises:
        ValueError: for an unknown format, or a non-JSON format in production.
    """
    log_format = settings.logging.format
    if log_format not in _HANDLERS:
        raise ValueError(f"Unknown log format {log_format!r}, expected one of {sorted(_HANDLERS)}")
    if settings.current_env.lower() == "production" and log_format != "mozlog":
        raise ValueError("Production runs must log in the 'mozlog' format")

    level = settings.logging.level
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": GCPCompatibleJSONFormatter,
                    "logger_name": "sitefavicon",
                },
            },
            "handlers": {
                "console-mozlog": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
                "console-pretty": {
                    "level": level,
                    "class": "rich.logging.RichHandler",
                },
            },
            "loggers": {
                "sitefavicon": {
                    "handlers": [_HANDLERS[log_format]],
                    "level": level,
                    "propagate": settings.logging.can_propagate,
                },
            },
        }
    )


class GCPCompatibleJSONFormatter(dockerflow_logging.JsonLogFormatter):
    """MozLog JSON records that also carry the numeric `severity` Cloud Logging reads."""

    SEVERITY_BY_LEVEL = {
        logging.CRITICAL: 600,
        logging.ERROR: 500,
        logging.WARNING: 400,
        logging.INFO: 200,
        logging.DEBUG: 100,
        logging.NOTSET: 0,
    }

    def convert_record(self, record):
        out = super().convert_record(record)
        out["severity"] = self.SEVERITY_BY_LEVEL.get(record.levelno, 0)
        return out
