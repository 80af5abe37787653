# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""In-memory logger for tests."""

from typing import Any

from .logger import Logger
from .redaction import redact


class SilentLogger(Logger):
    """Logger that records messages in memory and prints nothing.

    No level filtering is applied; every call is captured so tests can
    assert on exactly what a component logged. Credentials are masked the
    same way StdoutLogger masks them.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or "proxy_auth"
        self.logs: list[dict[str, Any]] = []

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            entry["extra"] = redact(kwargs)
        self.logs.append(entry)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def clear_logs(self) -> None:
        """Drop all captured records."""
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Return captured records, optionally only those at ``level``."""
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether any captured message contains ``message``."""
        return any(message in log["message"] for log in self.get_logs(level))
