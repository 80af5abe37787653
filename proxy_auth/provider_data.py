# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Provider configuration and per-provider defaults."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, field_validator

URL_FIELDS = ("login_url", "redeem_url", "profile_url", "validate_url")


@dataclass(frozen=True)
class ProviderDefaults:
    """Canonical endpoints and scope an adapter falls back to."""
    name: str
    login_url: Optional[str] = None
    redeem_url: Optional[str] = None
    profile_url: Optional[str] = None
    validate_url: Optional[str] = None
    scope: str = ""


class ProviderData(BaseModel):
    """Endpoint and client configuration for one identity provider.

    Owned by the host and handed to an adapter at construction time. URL
    fields are unset when None or empty; anything else must be an absolute
    http(s) URL.
    """

    model_config = ConfigDict(validate_assignment=True)

    provider_name: str = ""
    client_id: str = ""
    client_secret: str = ""
    login_url: Optional[str] = None
    redeem_url: Optional[str] = None
    profile_url: Optional[str] = None
    validate_url: Optional[str] = None
    scope: str = ""

    @field_validator(*URL_FIELDS)
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"must be an absolute http(s) URL, got {value!r}")
        return value

    def set_provider_defaults(self, defaults: ProviderDefaults) -> None:
        """Fill every unset field from ``defaults``.

        Fields that already hold a non-empty value are left alone. A default
        that is itself unset (such as a provider with no profile URL) leaves
        the field unset.
        """
        if not self.provider_name:
            self.provider_name = defaults.name
        for name in URL_FIELDS:
            default = getattr(defaults, name)
            if not getattr(self, name) and default:
                setattr(self, name, default)
        if not self.scope:
            self.scope = defaults.scope
