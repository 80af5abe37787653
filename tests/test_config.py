# SPDX-License-Identifier: MIT
# Copyright (c) 2025 proxy-auth contributors

"""Tests for environment-backed configuration."""

import pytest

from proxy_auth import EnvConfigProvider, load_provider_data


class TestEnvConfigProvider:
    """Tests for EnvConfigProvider."""

    def test_reads_injected_mapping(self):
        env = EnvConfigProvider({"KU_SCOPE": "read"})

        assert env.get("KU_SCOPE") == "read"
        assert env.get("MISSING") is None
        assert env.get("MISSING", "fallback") == "fallback"

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("KU_CLIENT_ID", "from-env")

        assert EnvConfigProvider().get("KU_CLIENT_ID") == "from-env"

    @pytest.mark.parametrize("value", ["true", "1", "YES", " on "])
    def test_get_bool_true_values(self, value):
        assert EnvConfigProvider({"FLAG": value}).get_bool("FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "No", "off"])
    def test_get_bool_false_values(self, value):
        assert EnvConfigProvider({"FLAG": value}).get_bool("FLAG", default=True) is False

    def test_get_bool_missing_or_unrecognized_uses_default(self):
        env = EnvConfigProvider({"FLAG": "maybe"})

        assert env.get_bool("FLAG", default=True) is True
        assert env.get_bool("MISSING") is False

    def test_get_int(self):
        env = EnvConfigProvider({"KU_TIMEOUT": "30", "KU_BAD": "thirty"})

        assert env.get_int("KU_TIMEOUT") == 30
        assert env.get_int("KU_BAD", default=5) == 5
        assert env.get_int("MISSING", default=7) == 7


class TestLoadProviderData:
    """Tests for load_provider_data."""

    def test_loads_all_fields(self):
        env = EnvConfigProvider({
            "KU_PROVIDER_NAME": "Ku EU",
            "KU_CLIENT_ID": "client",
            "KU_CLIENT_SECRET": "secret",
            "KU_LOGIN_URL": "https://eu.ku.org/oauth/authorize",
            "KU_REDEEM_URL": "https://eu.ku.org/oauth/token",
            "KU_PROFILE_URL": "https://eu.ku.org/api/v3/me",
            "KU_VALIDATE_URL": "https://eu.ku.org/api/v3/user",
            "KU_SCOPE": "read write",
        })

        data = load_provider_data(env)

        assert data.provider_name == "Ku EU"
        assert data.client_id == "client"
        assert data.client_secret == "secret"
        assert data.login_url == "https://eu.ku.org/oauth/authorize"
        assert data.redeem_url == "https://eu.ku.org/oauth/token"
        assert data.profile_url == "https://eu.ku.org/api/v3/me"
        assert data.validate_url == "https://eu.ku.org/api/v3/user"
        assert data.scope == "read write"

    def test_absent_and_blank_variables_stay_unset(self):
        env = EnvConfigProvider({"KU_PROFILE_URL": "   ", "KU_SCOPE": ""})

        data = load_provider_data(env)

        assert data.profile_url is None
        assert data.scope == ""

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("OAUTH_KU_CLIENT_ID", "prefixed")

        data = load_provider_data(prefix="OAUTH_KU_")

        assert data.client_id == "prefixed"

    def test_malformed_url_raises_value_error(self):
        env = EnvConfigProvider({"KU_LOGIN_URL": "ku.org/oauth/authorize"})

        with pytest.raises(ValueError, match="login_url"):
            load_provider_data(env)
