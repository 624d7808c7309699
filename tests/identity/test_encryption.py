"""Tests for vault key derivation."""

from __future__ import annotations

import pytest

from walletid.core.config import clear_config_cache
from walletid.core.exceptions import CryptoOperationFailure
from walletid.identity.encryption import VAULT_KEY_LENGTH, derive_encryption_key

# PBKDF2-HMAC-SHA256, 100000 iterations, salt = SHA-256(private key)
VAULT_KEY_HEX = "7470743dffa608a6e33341deb76ea41062e023faf72200277e82bbb41577a0b8"


class TestDeriveEncryptionKey:
    def test_known_answer(self, clean_env, vectors):
        key = derive_encryption_key(vectors.private_key, vectors.passwords["simple"])

        assert len(key) == VAULT_KEY_LENGTH
        assert key.hex() == VAULT_KEY_HEX

    def test_deterministic(self, fast_kdf, test_keys):
        a = derive_encryption_key(test_keys.private_key, "pw")
        b = derive_encryption_key(test_keys.private_key, "pw")
        assert a == b

    @pytest.mark.parametrize("name", ["simple", "complex", "unicode"])
    def test_passwords_differ(self, fast_kdf, vectors, name):
        other = derive_encryption_key(vectors.private_key, vectors.passwords[name] + "x")
        assert derive_encryption_key(vectors.private_key, vectors.passwords[name]) != other

    def test_empty_password_allowed(self, fast_kdf, test_keys):
        assert len(derive_encryption_key(test_keys.private_key, "")) == VAULT_KEY_LENGTH

    def test_different_keys_differ(self, fast_kdf, test_keys, alt_keys):
        assert derive_encryption_key(test_keys.private_key, "pw") != derive_encryption_key(
            alt_keys.private_key, "pw"
        )

    def test_iterations_change_output(self, fast_kdf, monkeypatch, test_keys):
        low = derive_encryption_key(test_keys.private_key, "pw")
        monkeypatch.setenv("WALLETID_PBKDF2_ITERATIONS", "1001")
        clear_config_cache()

        assert derive_encryption_key(test_keys.private_key, "pw") != low

    def test_hash_from_config(self, fast_kdf, monkeypatch, test_keys):
        sha256_key = derive_encryption_key(test_keys.private_key, "pw")
        monkeypatch.setenv("WALLETID_PBKDF2_HASH", "sha512")
        clear_config_cache()

        assert derive_encryption_key(test_keys.private_key, "pw") != sha256_key

    def test_bad_private_key(self, fast_kdf):
        with pytest.raises(ValueError):
            derive_encryption_key(b"\x00" * 8, "pw")

    def test_unsupported_hash_is_crypto_failure(self, fast_kdf, test_keys):
        from walletid.core.config import get_config

        get_config().pbkdf2_hash = "whirlpool"

        with pytest.raises(CryptoOperationFailure):
            derive_encryption_key(test_keys.private_key, "pw")
