# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Structured logging for the steamgate packages.

Example:
    >>> from steamgate_logging import create_logger
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="gateway")
    >>> logger.info("Service started", port=8080)
"""

__version__ = "0.1.0"

from .factory import create_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger
from .uvicorn_config import JSONFormatter, create_uvicorn_log_config

__all__ = [
    "__version__",
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "JSONFormatter",
    "create_logger",
    "create_uvicorn_log_config",
]
