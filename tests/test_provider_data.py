# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Tests for provider configuration."""

import pytest
from pydantic import ValidationError

from proxy_auth import ProviderData, ProviderDefaults

DEFAULTS = ProviderDefaults(
    name="Example",
    login_url="https://example.com/authorize",
    redeem_url="https://example.com/token",
    profile_url="https://example.com/me",
    validate_url="https://example.com/validate",
    scope="openid",
)


class TestProviderData:
    """Tests for ProviderData validation."""

    def test_urls_default_to_unset(self):
        data = ProviderData()

        assert data.login_url is None
        assert data.profile_url is None
        assert data.scope == ""

    @pytest.mark.parametrize("url", ["ku.org/oauth", "/api/v3/user", "ftp://ku.org/file"])
    def test_rejects_non_http_urls(self, url):
        with pytest.raises(ValidationError):
            ProviderData(validate_url=url)

    def test_rejects_bad_url_on_assignment(self):
        """Test validation also runs when a field is set later."""
        data = ProviderData()

        with pytest.raises(ValidationError):
            data.login_url = "not a url"

    def test_empty_string_url_allowed(self):
        assert ProviderData(profile_url="").profile_url == ""


class TestSetProviderDefaults:
    """Tests for ProviderData.set_provider_defaults."""

    def test_fills_all_unset_fields(self):
        data = ProviderData()

        data.set_provider_defaults(DEFAULTS)

        assert data.provider_name == "Example"
        assert data.login_url == DEFAULTS.login_url
        assert data.redeem_url == DEFAULTS.redeem_url
        assert data.profile_url == DEFAULTS.profile_url
        assert data.validate_url == DEFAULTS.validate_url
        assert data.scope == "openid"

    def test_keeps_existing_values(self):
        data = ProviderData(redeem_url="https://other.example.com/token", scope="email")

        data.set_provider_defaults(DEFAULTS)

        assert data.redeem_url == "https://other.example.com/token"
        assert data.scope == "email"
        assert data.login_url == DEFAULTS.login_url

    def test_unset_default_leaves_field_unset(self):
        """Test a provider without a profile default does not invent one."""
        data = ProviderData()

        data.set_provider_defaults(ProviderDefaults(name="Bare"))

        assert data.profile_url is None
        assert data.validate_url is None
        assert data.provider_name == "Bare"

    def test_client_credentials_untouched(self):
        data = ProviderData(client_id="id", client_secret="secret")

        data.set_provider_defaults(DEFAULTS)

        assert data.client_id == "id"
        assert data.client_secret == "secret"
