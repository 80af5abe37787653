# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Environment-backed provider configuration."""

import os
from typing import Any, Mapping, Optional

from proxy_logging import create_logger

from .provider_data import ProviderData

logger = create_logger(logger_type="stdout", level="INFO", name="proxy_auth.config")

# Environment variable suffix -> ProviderData field
ENV_FIELDS = {
    "PROVIDER_NAME": "provider_name",
    "CLIENT_ID": "client_id",
    "CLIENT_SECRET": "client_secret",
    "LOGIN_URL": "login_url",
    "REDEEM_URL": "redeem_url",
    "PROFILE_URL": "profile_url",
    "VALIDATE_URL": "validate_url",
    "SCOPE": "scope",
}


class EnvConfigProvider:
    """Configuration provider that reads from environment variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Read a boolean flag; unrecognized values fall back to ``default``."""
        value = self._environ.get(key)
        if value is None:
            return default

        value = value.strip().lower()
        if value in ("true", "1", "yes", "on"):
            return True
        if value in ("false", "0", "no", "off"):
            return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._environ.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default


def load_provider_data(
    env_provider: Optional[EnvConfigProvider] = None,
    prefix: str = "KU_",
) -> ProviderData:
    """Build provider configuration from ``<prefix>*`` environment variables.

    Variables that are absent or blank leave the field unset, so the
    adapter's own defaults apply when it is constructed.

    Args:
        env_provider: Source of variables (default: process environment)
        prefix: Variable name prefix, e.g. "KU_" for KU_VALIDATE_URL

    Returns:
        ProviderData with the configured fields set

    Raises:
        ValueError: If a configured URL is not an absolute http(s) URL
    """
    env_provider = env_provider or EnvConfigProvider()

    values = {}
    for suffix, field_name in ENV_FIELDS.items():
        value = env_provider.get(f"{prefix}{suffix}")
        if value and value.strip():
            values[field_name] = value.strip()

    provider_data = ProviderData(**values)
    logger.info("Provider configuration loaded", prefix=prefix, configured=sorted(values))
    return provider_data
