# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Factory function for creating logger instances.

Provider modules create one module-level logger each, so the process
environment decides output for all of them at import time:

    LOG_TYPE   stdout | silent        (default: stdout)
    LOG_LEVEL  DEBUG | INFO | ...     (default: INFO)
    LOG_NAME   logger name            (default: proxy_auth)
"""

import os

from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

LOGGER_CLASSES: dict[str, type[Logger]] = {
    "stdout": StdoutLogger,
    "silent": SilentLogger,
}


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Create a logger, falling back to LOG_* variables for unset arguments.

    Raises:
        ValueError: If logger_type or level is not recognized
    """
    logger_type = (logger_type or os.getenv("LOG_TYPE") or "stdout").lower()
    try:
        logger_class = LOGGER_CLASSES[logger_type]
    except KeyError:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. Must be one of: {', '.join(LOGGER_CLASSES)}"
        ) from None

    return logger_class(
        level=(level or os.getenv("LOG_LEVEL") or "INFO").upper(),
        name=name or os.getenv("LOG_NAME") or "proxy_auth",
    )
