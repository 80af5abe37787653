# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Provider adapter interface and the errors adapters report.

A provider adapter is handed a mutable session by the host proxy. It may
validate the session's access token and fill in identity fields, but it
never owns the OAuth2 flow, token refresh or session storage.
"""

from abc import ABC, abstractmethod

import httpx

from .models import SessionState
from .provider_data import ProviderData

# Same value httpx applies when no timeout is passed
DEFAULT_TIMEOUT = httpx.Timeout(5.0)

TimeoutType = httpx.Timeout | float | None


class Provider(ABC):
    """Abstract base class for identity provider adapters."""

    @abstractmethod
    def data(self) -> ProviderData:
        """Return the configuration this adapter is bound to."""
        pass

    @abstractmethod
    def enrich_session(self, session: SessionState, timeout: TimeoutType = DEFAULT_TIMEOUT) -> None:
        """Populate identity fields of ``session`` from the provider.

        Args:
            session: Session holding a current access token
            timeout: Caller deadline, passed unchanged to the HTTP request

        Raises:
            ProviderError: If the identity could not be retrieved; the
                session is left unmodified
        """
        pass

    @abstractmethod
    def validate_session(self, session: SessionState, timeout: TimeoutType = DEFAULT_TIMEOUT) -> bool:
        """Report whether the session's access token is still accepted.

        Never raises for transport or endpoint problems; those yield False.
        """
        pass


class ProviderError(Exception):
    """Raised when a provider adapter fails to enrich a session."""
    pass


class TransportError(ProviderError):
    """Raised when the identity endpoint cannot be reached or rejects the request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ProviderError):
    """Raised when the identity payload is not JSON or lacks the expected field."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class EmptyIdentityError(ProviderError):
    """Raised when the provider returns a present but empty identity."""
    pass
