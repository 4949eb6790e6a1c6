# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Silent logger implementation for testing."""

from typing import Any

from .logger import Logger


class SilentLogger(Logger):
    """Logger that keeps records in memory and prints nothing.

    Records are not filtered by level so tests can assert on any of them.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or "steamgate"
        self.logs: list[dict[str, Any]] = []

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        log_entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            log_entry["extra"] = kwargs
        self.logs.append(log_entry)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def clear_logs(self) -> None:
        """Drop all captured records."""
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Return captured records, optionally only those of ``level``."""
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] == level.upper()]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether any captured message contains ``message``.

        Args:
            message: Substring to look for
            level: Optional level to restrict the search to

        Returns:
            True if a matching record exists
        """
        return any(message in log["message"] for log in self.get_logs(level))
