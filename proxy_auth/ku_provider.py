# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Ku OAuth2 identity provider adapter.

Ku exposes the authenticated account at ``/api/v3/user``, which doubles as
the token validation endpoint. The account identifier found there is used
as the session identity.
"""

from typing import Callable, Optional

import httpx

from proxy_logging import create_logger

from .config import EnvConfigProvider, load_provider_data
from .models import SessionState
from .provider import DEFAULT_TIMEOUT, DecodeError, Provider, ProviderError, TimeoutType, TransportError
from .provider_data import ProviderData, ProviderDefaults
from .userinfo import extract_identity
from .validation import TOKEN_TYPE_BEARER, make_authorization_header, make_oidc_header, validate_token

logger = create_logger(logger_type="stdout", level="INFO", name="proxy_auth.ku_provider")

KU_PROVIDER_NAME = "Ku"
KU_DEFAULT_SCOPE = "*"
KU_DEFAULT_LOGIN_URL = "https://ku.org/oauth/authorize"
KU_DEFAULT_REDEEM_URL = "https://ku.org/oauth/token"
KU_DEFAULT_VALIDATE_URL = "https://ku.org/api/v3/user"

KU_DEFAULTS = ProviderDefaults(
    name=KU_PROVIDER_NAME,
    login_url=KU_DEFAULT_LOGIN_URL,
    redeem_url=KU_DEFAULT_REDEEM_URL,
    profile_url=None,
    validate_url=KU_DEFAULT_VALIDATE_URL,
    scope=KU_DEFAULT_SCOPE,
)

TokenValidator = Callable[..., bool]


class KuProvider(Provider):
    """Ku identity provider adapter.

    Holds the host's provider configuration and the host's shared token
    validation routine. Keeps no other state, so one instance can serve
    concurrent requests.

    Attributes:
        validator: Shared token validation routine, called as
            ``validator(provider_data, access_token, headers, timeout=...)``
    """

    def __init__(self, provider_data: ProviderData, validator: TokenValidator = validate_token):
        """Apply Ku defaults to ``provider_data`` and bind to it.

        Fields the operator already set are kept; only unset fields receive
        the Ku endpoints and scope.

        Args:
            provider_data: Host configuration, updated in place
            validator: Shared token validation routine
        """
        provider_data.set_provider_defaults(KU_DEFAULTS)
        self._data = provider_data
        self.validator = validator

    @classmethod
    def from_config(
        cls,
        env_provider: Optional[EnvConfigProvider] = None,
        prefix: str = "KU_",
    ) -> "KuProvider":
        """Create a KuProvider from ``KU_*`` environment variables.

        Raises:
            ValueError: If a configured URL is malformed
        """
        return cls(load_provider_data(env_provider, prefix=prefix))

    def data(self) -> ProviderData:
        return self._data

    def identity_url(self) -> str:
        """Return the endpoint queried for the user's identity.

        Falls back to the validation URL when no profile URL is configured.
        """
        if self._data.profile_url:
            return self._data.profile_url
        return self._data.validate_url or ""

    def enrich_session(self, session: SessionState, timeout: TimeoutType = DEFAULT_TIMEOUT) -> None:
        """Set ``session.email`` to the Ku account id.

        Args:
            session: Session holding a current access token
            timeout: Caller deadline, passed unchanged to the HTTP request

        Raises:
            TransportError: If the identity endpoint is unreachable or
                answers with a non-success status
            DecodeError: If the body is not JSON or lacks ``data.id``
            EmptyIdentityError: If ``data.id`` is empty
        """
        url = self.identity_url()

        try:
            response = httpx.get(
                url,
                headers=make_authorization_header(TOKEN_TYPE_BEARER, session.access_token),
                timeout=timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error("failed making request", url=url, status_code=status_code)
            raise TransportError(
                f"Identity request to {url} failed with status {status_code}",
                status_code=status_code,
            ) from e
        except (httpx.HTTPError, UnicodeEncodeError) as e:
            # non-ASCII tokens fail while httpx encodes the header
            logger.error("failed making request", url=url, error=str(e))
            raise TransportError(f"Identity endpoint {url} unavailable: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("failed making request", url=url, error=f"invalid JSON body: {e}")
            raise DecodeError(f"Identity endpoint {url} returned invalid JSON: {e}") from e

        try:
            identity = extract_identity(payload)
        except ProviderError as e:
            logger.error("unable to extract id from userinfo endpoint", url=url, error=str(e))
            raise

        session.email = identity

    def validate_session(self, session: SessionState, timeout: TimeoutType = DEFAULT_TIMEOUT) -> bool:
        """Check the session's access token via the shared validation routine."""
        try:
            return bool(
                self.validator(
                    self._data,
                    session.access_token,
                    make_oidc_header(session.access_token),
                    timeout=timeout,
                )
            )
        except (httpx.HTTPError, ProviderError, ValueError) as e:
            logger.error("token validation failed", provider=self._data.provider_name, error=str(e))
            return False
