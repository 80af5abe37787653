# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Session model shared between the host proxy and provider adapters.

The host creates and persists sessions. Adapters receive a session by
reference and write only the identity fields they are responsible for.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional


@dataclass
class SessionState:
    """Represents an authenticated proxy session.

    Attributes:
        access_token: OAuth access token issued by the provider
        id_token: OIDC ID token, if the provider issued one
        refresh_token: OAuth refresh token, if any
        created_at: When the session was created
        expires_on: When the access token expires
        email: Identity string filled in by the provider adapter
        user: Username, if known
        preferred_username: Display username, if known
        groups: Group memberships, if the adapter extracts them
    """
    access_token: str = ""
    id_token: str = ""
    refresh_token: str = ""
    created_at: Optional[datetime] = None
    expires_on: Optional[datetime] = None
    email: str = ""
    user: str = ""
    preferred_username: str = ""
    groups: List[str] = field(default_factory=list)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the access token has passed its expiry.

        Sessions without an expiry never expire.
        """
        if self.expires_on is None:
            return False
        return self.expires_on < (now or datetime.now(timezone.utc))

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """Return how long ago the session was created (zero if unknown)."""
        if self.created_at is None:
            return timedelta(0)
        return (now or datetime.now(timezone.utc)) - self.created_at

    def to_dict(self) -> dict:
        """Convert the session to a dictionary, omitting tokens.

        Returns:
            Dictionary with identity and timing fields only
        """
        return {
            "email": self.email,
            "user": self.user,
            "preferred_username": self.preferred_username,
            "groups": list(self.groups),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "expires_on": self.expires_on.isoformat() if self.expires_on else None,
        }
