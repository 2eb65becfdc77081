"""Unit tests for configuration structures."""

from __future__ import annotations

import dataclasses

import pytest

from cosmosrest.core import ClientOptions, ConfigurationError, Credentials


class TestCredentials:
    def test_strips_trailing_slash(self):
        """Test host trailing slash is stripped."""
        creds = Credentials(host="https://acct.example.com/", private_key="a2V5")
        assert creds.host == "https://acct.example.com"

    def test_immutable(self):
        """Test credentials are frozen."""
        creds = Credentials(host="https://acct.example.com", private_key="a2V5")
        with pytest.raises(dataclasses.FrozenInstanceError):
            creds.host = "https://other"

    def test_key_not_in_repr(self):
        """Test the master key stays out of repr."""
        creds = Credentials(host="https://acct.example.com", private_key="c2VjcmV0")
        assert "c2VjcmV0" not in repr(creds)

    def test_from_env(self):
        """Test credentials load from the environment."""
        creds = Credentials.from_env(
            {"COSMOS_HOST": "https://acct.example.com", "COSMOS_KEY": "a2V5"}
        )
        assert creds.private_key == "a2V5"

    def test_from_env_missing(self):
        """Test missing environment variables raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Credentials.from_env({"COSMOS_HOST": "https://acct.example.com"})

    @pytest.mark.parametrize("host, key", [("", "a2V5"), ("https://acct", "")])
    def test_empty_values_rejected(self, host, key):
        """Test empty host or key is rejected."""
        with pytest.raises(ConfigurationError):
            Credentials(host=host, private_key=key)


class TestClientOptions:
    def test_defaults(self):
        """Test option defaults."""
        options = ClientOptions()
        assert options.timeout == 30.0
        assert options.max_throttle_retries == 9
        assert options.throttle_buffer == 0.05

    def test_merged_returns_new_instance(self):
        """Test merged returns a new instance and keeps the original."""
        base = ClientOptions(timeout=10.0)
        merged = base.merged({"timeout": 5.0})

        assert merged.timeout == 5.0
        assert base.timeout == 10.0
        assert merged is not base

    def test_merged_without_overrides_is_same(self):
        """Test merged without overrides returns self."""
        base = ClientOptions()
        assert base.merged(None) is base

    def test_merged_extra_headers_combine(self):
        """Test merged combines extra headers."""
        base = ClientOptions(extra_headers={"a": "1", "b": "2"})
        merged = base.merged(extra_headers={"b": "3"})

        assert dict(merged.extra_headers) == {"a": "1", "b": "3"}
        assert dict(base.extra_headers) == {"a": "1", "b": "2"}

    def test_merged_extra_headers_none_keeps_existing(self):
        """Test extra_headers=None leaves the configured headers untouched."""
        base = ClientOptions(extra_headers={"a": "1"})

        assert base.merged(extra_headers=None) is base
        merged = base.merged({"extra_headers": None, "timeout": 7.0})
        assert merged.timeout == 7.0
        assert dict(merged.extra_headers) == {"a": "1"}

    def test_extra_headers_read_only(self):
        """Test extra headers cannot be mutated."""
        options = ClientOptions(extra_headers={"a": "1"})
        with pytest.raises(TypeError):
            options.extra_headers["a"] = "2"

    def test_unknown_override_rejected(self):
        """Test unknown override keys raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="verify"):
            ClientOptions().merged({"verify": False})

    @pytest.mark.parametrize(
        "kwargs",
        [{"timeout": 0}, {"max_throttle_retries": -1}, {"max_throttle_wait": -0.1}],
    )
    def test_invalid_values(self, kwargs):
        """Test out-of-range option values are rejected."""
        with pytest.raises(ConfigurationError):
            ClientOptions(**kwargs)
