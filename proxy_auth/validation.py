# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Shared token validation used by provider adapters.

Adapters pick the header form their provider expects and hand it to
``validate_token``, which issues the request against the configured
validation URL and turns the outcome into a plain boolean.
"""

from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from proxy_logging import create_logger

from .provider import DEFAULT_TIMEOUT, TimeoutType
from .provider_data import ProviderData

logger = create_logger(logger_type="stdout", level="INFO", name="proxy_auth.validation")

TOKEN_TYPE_BEARER = "Bearer"


def make_authorization_header(
    token_type: str,
    token: str,
    extra_headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """Build request headers carrying ``Authorization: <token_type> <token>``."""
    headers = {"Authorization": f"{token_type} {token}"}
    if extra_headers:
        headers.update(extra_headers)
    return headers


def make_oidc_header(access_token: str) -> Dict[str, str]:
    """Build the bearer header OIDC-style providers expect, asking for JSON."""
    return make_authorization_header(
        TOKEN_TYPE_BEARER,
        access_token,
        {"Accept": "application/json"},
    )


def strip_token(endpoint: str) -> str:
    """Mask the ``access_token`` query value so the URL can be logged."""
    parts = urlsplit(endpoint)
    if not parts.query:
        return endpoint
    params = [
        (key, value[:3] + "..." if key == "access_token" and value else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(params)))


def validate_token(
    provider_data: ProviderData,
    access_token: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: TimeoutType = DEFAULT_TIMEOUT,
) -> bool:
    """Check an access token against the provider's validation URL.

    When no headers are supplied the token is sent as an ``access_token``
    query parameter instead.

    Args:
        provider_data: Configuration holding the validation URL
        access_token: Token to check
        headers: Authentication headers for the request
        timeout: Caller deadline, passed unchanged to httpx

    Returns:
        True only if the endpoint answered 200 OK
    """
    if not access_token or not provider_data.validate_url:
        return False

    endpoint = provider_data.validate_url
    if not headers:
        params = urlencode({"access_token": access_token})
        separator = "&" if urlsplit(endpoint).query else "?"
        endpoint = f"{endpoint}{separator}{params}"

    try:
        response = httpx.get(endpoint, headers=headers, timeout=timeout)
    except (httpx.HTTPError, UnicodeEncodeError) as e:
        logger.error("token validation request failed", url=strip_token(endpoint), error=str(e))
        return False

    if response.status_code == 200:
        logger.debug("token validation succeeded", url=strip_token(endpoint))
        return True

    logger.error(
        "token validation request failed",
        url=strip_token(endpoint),
        status_code=response.status_code,
        body=response.text,
    )
    return False
