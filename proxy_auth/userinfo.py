# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Decoding of the Ku userinfo payload.

Ku returns the account identifier at ``data.id``. Depending on the API
version it is a JSON string or a JSON integer; both decode to the
``IdentityValue`` union and are normalized to a string.
"""

from typing import Any, Union

from pydantic import BaseModel, StrictInt, StrictStr, ValidationError

from .provider import DecodeError, EmptyIdentityError

IDENTITY_PATH = ("data", "id")

IdentityValue = Union[StrictStr, StrictInt]


class KuUserData(BaseModel):
    id: IdentityValue


class KuUserInfo(BaseModel):
    """Userinfo response; fields other than ``data.id`` are ignored."""
    data: KuUserData


def normalize_identity(value: IdentityValue) -> str:
    """Render an identity value as a string."""
    if isinstance(value, int):
        return str(value)
    return value


def _error_field(error: dict) -> str:
    parts = []
    for part, expected in zip(error["loc"], IDENTITY_PATH):
        if part != expected:
            break
        parts.append(part)
    return ".".join(parts) or "<root>"


def extract_identity(payload: Any) -> str:
    """Pull the normalized identity out of a decoded userinfo payload.

    Args:
        payload: JSON-decoded response body

    Returns:
        Non-empty identity string

    Raises:
        DecodeError: If ``data.id`` is missing or not a string/integer
        EmptyIdentityError: If the identity is the empty string
    """
    try:
        info = KuUserInfo.model_validate(payload)
    except ValidationError as e:
        field = _error_field(e.errors()[0])
        raise DecodeError(
            f"unable to extract id from userinfo endpoint: invalid or missing field '{field}'",
            field=field,
        ) from e

    identity = normalize_identity(info.data.id)
    if identity == "":
        raise EmptyIdentityError("empty id received")
    return identity
