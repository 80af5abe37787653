# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Provider adapters for an OAuth2 authenticating reverse proxy.

Adapters validate access tokens and enrich proxy sessions with identity
details from one specific identity provider. Currently ships the Ku
adapter.
"""

__version__ = "0.1.0"

from .config import EnvConfigProvider, load_provider_data
from .ku_provider import KU_DEFAULTS, KuProvider
from .models import SessionState
from .provider import (
    DecodeError,
    EmptyIdentityError,
    Provider,
    ProviderError,
    TransportError,
)
from .provider_data import ProviderData, ProviderDefaults
from .userinfo import extract_identity, normalize_identity
from .validation import make_authorization_header, make_oidc_header, validate_token

__all__ = [
    # Version
    "__version__",
    # Models
    "SessionState",
    "ProviderData",
    "ProviderDefaults",
    # Providers
    "Provider",
    "KuProvider",
    "KU_DEFAULTS",
    # Configuration
    "EnvConfigProvider",
    "load_provider_data",
    # Userinfo decoding
    "extract_identity",
    "normalize_identity",
    # Validation
    "validate_token",
    "make_authorization_header",
    "make_oidc_header",
    # Exceptions
    "ProviderError",
    "TransportError",
    "DecodeError",
    "EmptyIdentityError",
]
