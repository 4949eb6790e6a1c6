# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Uvicorn logging configuration emitting the same JSON lines as StdoutLogger."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
    """Format stdlib log records as single-line JSON."""

    def __init__(self, logger_name: str = "uvicorn"):
        super().__init__()
        self.logger_name = logger_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": self.logger_name,
            "message": record.getMessage(),
        }

        extra = getattr(record, "extra", None)
        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, default=str)


def create_uvicorn_log_config(service_name: str, log_level: str = "INFO") -> Dict[str, Any]:
    """Create a ``logging.config.dictConfig`` mapping for Uvicorn.

    Access logs are emitted at DEBUG so the per-request line logged by the
    gateway itself is the one visible at INFO.

    Args:
        service_name: Value of the ``logger`` field in every line
        log_level: Level for the uvicorn and uvicorn.error loggers

    Returns:
        Dictionary suitable for Uvicorn's ``log_config`` parameter

    Example:
        >>> import uvicorn
        >>> uvicorn.run(app, log_config=create_uvicorn_log_config("gateway", "INFO"))
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JSONFormatter,
                "logger_name": service_name,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": {
                "handlers": ["console"],
                "level": log_level.upper(),
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console"],
                "level": log_level.upper(),
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "DEBUG",
                "propagate": False,
            },
        },
    }
