"""Global test fixtures for the walletid test suite."""

from __future__ import annotations

import os
from types import SimpleNamespace

import pytest

from walletid.core.config import clear_config_cache
from walletid.identity.keys import KeyPair, derive_keys_from_mnemonic
from walletid.identity.session import reset_session

# ============================================================================
# Known-answer vectors
# ============================================================================
# Standard BIP-39 test phrase (entropy of all zero bytes) and the values every
# implementation must derive from it.

TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
)
ALT_MNEMONIC = "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong"
EXTENDED_MNEMONIC = " ".join(["abandon"] * 23 + ["art"])

TEST_SEED_HEX = (
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)
TEST_PRIVATE_KEY_HEX = "62a772f85e4be6226108b56c0b1cf935c2490e434adec864fe47b189f1ed517d"
TEST_PUBLIC_KEY_HEX = "58032e75cd5ee0bbcacbed1e38c3da4bf0f162aba2d7513d2d2fba2184327bd3"
TEST_DID = "did:key:z6MkkNpjgBvjBJvXucK24zCYcGceaXSaovQnRBDqbsNDvs1c"
TEST_LEGACY_DID = "did:key:zed01" + TEST_PUBLIC_KEY_HEX

TEST_PASSWORDS = {
    "simple": "password123",
    "complex": "C0mpl3x!P@ssw0rd#2024",
    "unicode": "пароль🔑密码",
}


@pytest.fixture
def vectors() -> SimpleNamespace:
    """Known-answer values for the standard test phrase."""
    return SimpleNamespace(
        mnemonic=TEST_MNEMONIC,
        alt_mnemonic=ALT_MNEMONIC,
        extended_mnemonic=EXTENDED_MNEMONIC,
        seed=bytes.fromhex(TEST_SEED_HEX),
        private_key=bytes.fromhex(TEST_PRIVATE_KEY_HEX),
        public_key_hex=TEST_PUBLIC_KEY_HEX,
        did=TEST_DID,
        legacy_did=TEST_LEGACY_DID,
        passwords=TEST_PASSWORDS,
    )


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_walletid_state():
    """Start every test with a fresh config and no process session."""
    clear_config_cache()
    reset_session()
    yield
    reset_session()
    clear_config_cache()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all WALLETID_ environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith("WALLETID_"):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()


@pytest.fixture
def fast_kdf(monkeypatch):
    """Cheap PBKDF2 settings for tests that do not check known answers."""
    monkeypatch.setenv("WALLETID_PBKDF2_ITERATIONS", "1000")
    clear_config_cache()


# ============================================================================
# Keys
# ============================================================================


@pytest.fixture
def test_mnemonic() -> str:
    return TEST_MNEMONIC


@pytest.fixture
def test_keys() -> KeyPair:
    """Key pair derived from the standard test phrase."""
    keys = derive_keys_from_mnemonic(TEST_MNEMONIC)
    yield keys
    keys.wipe()


@pytest.fixture
def alt_keys() -> KeyPair:
    keys = derive_keys_from_mnemonic(ALT_MNEMONIC)
    yield keys
    keys.wipe()
