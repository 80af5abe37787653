# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Structured logging for the proxy-auth provider adapters.

Example:
    >>> from proxy_logging import create_logger
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="proxy_auth")
    >>> logger.error("failed making request", url="https://ku.org/api/v3/user")
    >>>
    >>> # In tests, keep records in memory instead of printing them
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.info("captured")
"""

__version__ = "0.1.0"

from .factory import create_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "__version__",
    "Logger",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
]
