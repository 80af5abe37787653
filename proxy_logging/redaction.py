# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Masking of credential values in structured log fields."""

from typing import Any

REDACTED = "[REDACTED]"

# Compared case-insensitively against field and header names
SENSITIVE_KEYS = frozenset({
    "access_token",
    "refresh_token",
    "id_token",
    "token",
    "authorization",
    "client_secret",
})


def redact(value: Any) -> Any:
    """Return ``value`` with credentials under sensitive keys masked.

    Dictionaries are walked recursively so request headers passed as a
    field are covered too. The input is never modified.
    """
    if isinstance(value, dict):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS and item else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value
