# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Stdout logger emitting one JSON object per line."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger
from .redaction import redact

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StdoutLogger(Logger):
    """Logger that writes structured JSON records to stdout.

    Credential fields (access tokens, Authorization headers, client
    secrets) are masked before anything is written. Each record is also
    forwarded to the stdlib logger of the same name so that handlers and
    pytest's ``caplog`` see it.
    """

    def __init__(self, level: str = "INFO", name: str = "proxy_auth"):
        """Initialize stdout logger.

        Args:
            level: Minimum level written to stdout (DEBUG, INFO, WARNING, ERROR)
            name: Logger name, also used for the stdlib logger

        Raises:
            ValueError: If level is not one of the supported levels
        """
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(LEVELS)}")

        self.level = level
        self.name = name
        self._threshold = LEVELS[level]
        self._stdlib_logger = logging.getLogger(name)

    def _render(self, level: str, message: str, fields: dict[str, Any]) -> str:
        record: dict[str, Any] = {
            "timestamp": _utc_timestamp(),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if fields:
            record["extra"] = fields
        return json.dumps(record, default=str)

    def _log(self, level: str, message: str, exc_info: Any = None, **kwargs: Any) -> None:
        levelno = LEVELS[level]
        fields = redact(kwargs)

        if levelno >= self._threshold:
            sys.stdout.write(self._render(level, message, fields) + "\n")
            sys.stdout.flush()

        self._stdlib_logger.log(
            levelno,
            message,
            exc_info=exc_info,
            extra={"extra": fields} if fields else None,
        )

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)
