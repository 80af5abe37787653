# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Example: validate a Ku access token and enrich a proxy session.

Usage:
    KU_ACCESS_TOKEN=... python examples/ku_example.py

Endpoints can be overridden with KU_LOGIN_URL, KU_REDEEM_URL,
KU_PROFILE_URL and KU_VALIDATE_URL.
"""

import os
import sys

from proxy_auth import KuProvider, ProviderError, SessionState
from proxy_logging import create_logger

logger = create_logger(logger_type="stdout", level="INFO", name="ku_example")


def main() -> int:
    access_token = os.getenv("KU_ACCESS_TOKEN", "")
    if not access_token:
        logger.error("KU_ACCESS_TOKEN is not set")
        return 2

    provider = KuProvider.from_config()
    session = SessionState(access_token=access_token)

    if not provider.validate_session(session, timeout=10.0):
        logger.warning("Access token rejected", provider=provider.data().provider_name)
        return 1

    try:
        provider.enrich_session(session, timeout=10.0)
    except ProviderError as e:
        logger.error("Could not resolve identity", error=str(e), error_type=type(e).__name__)
        return 1

    logger.info("Session enriched", session=session.to_dict())
    return 0


if __name__ == "__main__":
    sys.exit(main())
