# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Shared fixtures for proxy_auth tests."""

from typing import Any

import httpx
import pytest


def build_response(
    status_code: int = 200,
    json: Any = None,
    text: str | None = None,
    url: str = "https://ku.org/api/v3/user",
) -> httpx.Response:
    """Build an httpx.Response bound to a GET request for ``url``."""
    request = httpx.Request("GET", url)
    if json is not None:
        return httpx.Response(status_code, json=json, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


@pytest.fixture
def make_response():
    """Factory fixture for canned httpx responses."""
    return build_response
