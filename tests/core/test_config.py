"""Tests for walletid.core.config - WalletSettings and global config management.

Tests cover:
- Settings loading with defaults
- Environment variable overrides
- Validation of key derivation parameters
- Singleton behavior (get_config / clear_config_cache)
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from walletid.core.config import (
    WalletSettings,
    clear_config_cache,
    get_config,
)

# ============================================================================
# WalletSettings - Default Values
# ============================================================================


class TestWalletSettingsDefaults:
    """Test that WalletSettings loads with correct default values."""

    def test_key_derivation_defaults(self, clean_env):
        settings = WalletSettings()

        assert settings.pbkdf2_iterations == 100_000
        assert settings.pbkdf2_hash == "sha256"
        assert settings.mnemonic_language == "english"

    def test_identity_defaults(self, clean_env):
        settings = WalletSettings()

        assert settings.did_encoding == "base58btc"
        assert settings.default_grant_ttl_seconds == 3600
        assert settings.jwt_default_ttl_seconds == 3600

    def test_logging_defaults(self, clean_env):
        settings = WalletSettings()

        assert settings.log_level == "INFO"
        assert settings.log_format == ""
        assert settings.log_file is None

    def test_storage_gateway_default(self, clean_env):
        settings = WalletSettings()
        assert settings.storage_gateway_url.startswith("https://")


# ============================================================================
# WalletSettings - Environment Overrides
# ============================================================================


class TestWalletSettingsEnvOverrides:
    def test_pbkdf2_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_PBKDF2_ITERATIONS", "2000")
        monkeypatch.setenv("WALLETID_PBKDF2_HASH", "SHA-512")

        settings = WalletSettings()

        assert settings.pbkdf2_iterations == 2000
        assert settings.pbkdf2_hash == "sha512"

    def test_did_encoding_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_DID_ENCODING", "hex")
        assert WalletSettings().did_encoding == "hex"

    def test_ttls_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_GRANT_TTL", "60")
        monkeypatch.setenv("WALLETID_JWT_TTL", "120")

        settings = WalletSettings()

        assert settings.default_grant_ttl_seconds == 60
        assert settings.jwt_default_ttl_seconds == 120

    def test_logging_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("WALLETID_LOG_FORMAT", "json")
        monkeypatch.setenv("WALLETID_LOG_FILE", "/tmp/walletid.log")

        settings = WalletSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.log_file == "/tmp/walletid.log"


# ============================================================================
# WalletSettings - Validation
# ============================================================================


class TestWalletSettingsValidation:
    def test_unsupported_hash_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_PBKDF2_HASH", "md5")
        with pytest.raises(ValidationError):
            WalletSettings()

    def test_zero_iterations_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_PBKDF2_ITERATIONS", "0")
        with pytest.raises(ValidationError):
            WalletSettings()

    def test_unknown_did_encoding_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv("WALLETID_DID_ENCODING", "base64")
        with pytest.raises(ValidationError):
            WalletSettings()

    @pytest.mark.parametrize("language", ["japanese", "spanish", "klingon"])
    def test_non_english_wordlist_rejected(self, clean_env, monkeypatch, language):
        monkeypatch.setenv("WALLETID_MNEMONIC_LANGUAGE", language)
        with pytest.raises(ValidationError):
            WalletSettings()


# ============================================================================
# Singleton
# ============================================================================


class TestGetConfig:
    def test_returns_same_instance(self, clean_env):
        assert get_config() is get_config()

    def test_clear_cache_reloads(self, clean_env, monkeypatch):
        first = get_config()
        monkeypatch.setenv("WALLETID_PBKDF2_ITERATIONS", "5000")

        assert get_config().pbkdf2_iterations == first.pbkdf2_iterations

        clear_config_cache()
        second = get_config()

        assert second is not first
        assert second.pbkdf2_iterations == 5000
