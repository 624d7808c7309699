"""Tests for deterministic key derivation."""

from __future__ import annotations

import pytest

from walletid.core.exceptions import InvalidMnemonicError, SessionStateError
from walletid.identity.keys import (
    KEY_DERIVATION_PATHS,
    KEY_LENGTH,
    KeyPair,
    KeyPurpose,
    derive_jwt_signing_key,
    derive_keys_from_mnemonic,
    derive_purpose_key,
    derive_seed,
    key_pair_from_private,
    public_key_from_private,
)

# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------


class TestDeriveKeys:
    def test_known_answer(self, vectors):
        keys = derive_keys_from_mnemonic(vectors.mnemonic)

        assert keys.private_key == vectors.private_key
        assert keys.public_key_hex == vectors.public_key_hex

    def test_lengths(self, test_keys):
        assert len(test_keys.private_key) == KEY_LENGTH
        assert len(test_keys.public_key) == KEY_LENGTH

    def test_deterministic(self, vectors):
        first = derive_keys_from_mnemonic(vectors.mnemonic)
        second = derive_keys_from_mnemonic(vectors.mnemonic)
        assert first == second

    def test_different_phrases_differ(self, test_keys, alt_keys):
        assert test_keys.public_key != alt_keys.public_key
        assert test_keys != alt_keys

    def test_twenty_four_words(self, vectors):
        keys = derive_keys_from_mnemonic(vectors.extended_mnemonic)
        assert keys.public_key != bytes.fromhex(vectors.public_key_hex)

    @pytest.mark.parametrize(
        "phrase",
        [
            "",
            "abandon",
            " ".join(["abandon"] * 12),
            "not a valid mnemonic phrase at all but has twelve words total here",
        ],
    )
    def test_invalid_phrase_raises(self, phrase):
        with pytest.raises(InvalidMnemonicError):
            derive_keys_from_mnemonic(phrase)

    def test_invalid_phrase_reports_word_count(self):
        with pytest.raises(InvalidMnemonicError) as exc_info:
            derive_seed("abandon abandon")
        assert exc_info.value.word_count == 2

    def test_public_key_from_private(self, vectors):
        assert public_key_from_private(vectors.private_key).hex() == vectors.public_key_hex

    def test_public_key_from_private_bad_length(self):
        with pytest.raises(ValueError):
            public_key_from_private(b"\x01" * 31)


# ---------------------------------------------------------------------------
# KeyPair
# ---------------------------------------------------------------------------


class TestKeyPair:
    def test_wipe_zeroes_and_blocks_access(self, vectors):
        keys = key_pair_from_private(vectors.private_key)
        buffer = keys._private

        keys.wipe()

        assert keys.is_wiped
        assert buffer == bytearray(KEY_LENGTH)
        with pytest.raises(SessionStateError):
            _ = keys.private_key

    def test_wipe_is_idempotent(self, test_keys):
        test_keys.wipe()
        test_keys.wipe()
        assert test_keys.is_wiped

    def test_public_key_survives_wipe(self, vectors):
        keys = key_pair_from_private(vectors.private_key)
        keys.wipe()
        assert keys.public_key_hex == vectors.public_key_hex

    def test_repr_hides_private_key(self, vectors, test_keys):
        text = repr(test_keys)

        assert vectors.private_key.hex() not in text
        assert vectors.public_key_hex in text
        assert "<live>" in text

    def test_wiped_pairs_never_equal(self, vectors):
        a = key_pair_from_private(vectors.private_key)
        b = key_pair_from_private(vectors.private_key)
        a.wipe()
        assert a != b

    def test_unhashable(self, test_keys):
        with pytest.raises(TypeError):
            hash(test_keys)

    def test_rejects_wrong_lengths(self):
        with pytest.raises(ValueError):
            KeyPair(b"\x00" * 31, b"\x00" * 32)
        with pytest.raises(ValueError):
            KeyPair(b"\x00" * 32, b"\x00" * 33)

    def test_signing_key_matches(self, test_keys):
        signature = test_keys.signing_key().sign(b"msg")
        assert len(signature) == 64


# ---------------------------------------------------------------------------
# Purpose keys
# ---------------------------------------------------------------------------


class TestPurposeKeys:
    def test_derivation_paths(self):
        assert KEY_DERIVATION_PATHS == {"ENCRYPTION": 0, "JWT_SIGNING": 1, "RECOVERY": 2}

    def test_purposes_are_isolated(self, vectors):
        keys = {derive_purpose_key(vectors.seed, purpose) for purpose in KeyPurpose}
        assert len(keys) == len(KeyPurpose)

    def test_purpose_key_is_deterministic(self, vectors):
        a = derive_purpose_key(vectors.seed, KeyPurpose.RECOVERY)
        b = derive_purpose_key(vectors.seed, KeyPurpose.RECOVERY)
        assert a == b

    def test_jwt_key_differs_from_identity_key(self, vectors):
        jwt_keys = derive_jwt_signing_key(vectors.mnemonic)

        assert jwt_keys.public_key_hex != vectors.public_key_hex
        assert jwt_keys == derive_jwt_signing_key(vectors.mnemonic)

    def test_jwt_key_requires_valid_phrase(self):
        with pytest.raises(InvalidMnemonicError):
            derive_jwt_signing_key("abandon")
